"""
API Routes

This package contains Flask blueprints for:
- auth: Registration and login
- documents: Document upload, retrieval and deletion
- agents: Analysis endpoints
"""
