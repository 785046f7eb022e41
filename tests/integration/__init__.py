"""Integration tests for the API working as a system.

Upload, extract, summarize and ask run through the real FastAPI app,
real pypdf extraction and a temporary upload directory. Only the chat
backend is faked, and OCR is patched for scanned documents.
"""
