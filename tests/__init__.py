"""Test package for PDF Insight.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP workflow tests through the FastAPI app

PDFs are generated in memory by tests/helpers.py, so no binary fixtures
are checked in. The language-model backend is always a recording fake or a
patched Agno model; no test needs network access or a Tesseract install.
"""
