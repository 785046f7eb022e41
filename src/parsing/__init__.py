"""PDF parsing utilities for document processing.

Turns uploaded PDF bytes into page-attributed text.

Responsibilities:
    - PDF text extraction with pypdf
    - OCR fallback with pdf2image and Tesseract for scanned documents
    - Per-page provenance for citation-aware answering

A document whose text layer yields fewer than MIN_TEXT_LENGTH characters
is treated as scanned and run through OCR instead.
"""

from src.parsing.config import MIN_TEXT_LENGTH, ExtractionConfig, get_extraction_config
from src.parsing.extractor import extract_text
from src.parsing.pdf_parser import (
    ExtractionMethod,
    ExtractionResult,
    PageText,
    parse_pdf_pages,
    validate_pdf_bytes,
)

__all__ = [
    "MIN_TEXT_LENGTH",
    "ExtractionConfig",
    "ExtractionMethod",
    "ExtractionResult",
    "PageText",
    "extract_text",
    "get_extraction_config",
    "parse_pdf_pages",
    "validate_pdf_bytes",
]
