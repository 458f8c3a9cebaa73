"""
Data Models

This package contains the model classes for:
- User: Registration and credential checks
- Document: Uploaded document metadata and extracted text
- Clause: Extracted legal clause stubs
- analysis: Analysis, explanation and chat result types
"""
