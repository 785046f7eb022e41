"""Extraction engine: digital text layer first, OCR when it yields too little."""

import logging

from src.parsing.config import ExtractionConfig
from src.parsing.ocr import ocr_pdf
from src.parsing.pdf_parser import (
    ExtractionMethod,
    ExtractionResult,
    PageText,
    parse_pdf_pages,
    validate_pdf_bytes,
)

logger = logging.getLogger(__name__)


def extract_text(
    file_content: bytes,
    config: ExtractionConfig | None = None,
) -> ExtractionResult:
    """Extract text from a PDF, falling back to OCR for scanned documents.

    Only a short digital yield triggers the fallback. Exceptions from
    either path propagate unchanged.

    Args:
        file_content: Raw bytes of the PDF file.
        config: Optional extraction configuration.
                Loads from environment if not provided.

    Returns:
        ExtractionResult tagged with the method that produced the text.

    Raises:
        UnreadableDocument: If the file is invalid, too large or corrupt.
    """
    config = config or ExtractionConfig()
    validate_pdf_bytes(file_content, config.max_file_size)

    pages = parse_pdf_pages(file_content)
    full_text = "\n\n".join(page.text for page in pages)
    char_count = len(full_text.strip())

    if char_count >= config.min_text_length:
        logger.info(f"Digital parse recovered {char_count} characters from {len(pages)} pages")
        return ExtractionResult(
            full_text=full_text,
            method=ExtractionMethod.DIGITAL_PARSE,
            pages=pages,
        )

    logger.info(
        f"Digital parse recovered {char_count} characters "
        f"(< {config.min_text_length}), falling back to OCR"
    )
    ocr_text = ocr_pdf(
        file_content,
        language=config.ocr_language,
        dpi=config.ocr_dpi,
    ).strip()

    # OCR has no reliable page boundaries; the whole blob becomes page 1.
    ocr_pages = [PageText(page_number=1, text=ocr_text)] if ocr_text else []
    logger.info(f"OCR recovered {len(ocr_text)} characters")

    return ExtractionResult(
        full_text=ocr_text,
        method=ExtractionMethod.OCR,
        pages=ocr_pages,
    )
