"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Digital extraction, OCR fallback threshold, OCR glue
    - agent/: Configuration, backends, summaries and citations
    - pipeline/ and storage/: Orchestration and file lookup

External services (Agno models, pdf2image, Tesseract) are patched.
"""
