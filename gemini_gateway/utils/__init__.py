"""Utility helpers package for uploads, text extraction, IDs, and I/O.

Modules here provide PDF/DOCX/plain-text extraction, the temp-file
lifecycle for multipart uploads, ID generation, and small file helpers.
"""
