"""Tesseract OCR over rasterized PDF pages."""

import logging

import pytesseract
from pdf2image import convert_from_bytes, pdfinfo_from_bytes
from pdf2image.exceptions import PDFPageCountError, PDFSyntaxError

from src.errors import UnreadableDocument

logger = logging.getLogger(__name__)


def ocr_pdf(file_content: bytes, language: str = "eng", dpi: int = 200) -> str:
    """Recognize the text of every page in a PDF.

    Pages are rasterized one at a time and each image is recognized before
    the next page is rendered, so only a single page bitmap is held at once.

    Args:
        file_content: Raw bytes of the PDF file.
        language: Tesseract language code.
        dpi: Rasterization resolution.

    Returns:
        Text of all pages joined by newlines, untrimmed.

    Raises:
        UnreadableDocument: If the PDF cannot be rasterized.
    """
    texts: list[str] = []
    try:
        page_count = int(pdfinfo_from_bytes(file_content)["Pages"])
        for page_number in range(1, page_count + 1):
            images = convert_from_bytes(
                file_content, dpi=dpi, first_page=page_number, last_page=page_number
            )
            texts.extend(pytesseract.image_to_string(image, lang=language) for image in images)
    except (PDFPageCountError, PDFSyntaxError) as e:
        raise UnreadableDocument(f"Failed to rasterize PDF for OCR: {e}") from e

    logger.debug(f"OCR processed {page_count} pages")
    return "\n".join(texts)
