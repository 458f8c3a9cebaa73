"""
Utility Functions

This package contains helper functions for:
- file_handler: File upload and text extraction
- auth_middleware: Bearer token handling and request validation
- sample_contract: Bundled sample agreement for new accounts
"""
