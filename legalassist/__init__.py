"""
LegalAssist AI backend

Upload legal documents, extract their text and request analysis of selected
passages through a JSON API.
"""

__version__ = '1.0.0'
