"""PDF parsing module using pypdf.

Defines the page-text model and recovers per-page text from a PDF's
embedded text layer.
"""

import io
import logging
from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from src.errors import UnreadableDocument
from src.parsing.config import MAX_FILE_SIZE

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"


class ExtractionMethod(str, Enum):
    """Which path produced the extracted text."""

    DIGITAL_PARSE = "pdf-parse"
    OCR = "ocr"


class PageText(BaseModel):
    """Text recovered from a single page.

    Attributes:
        page_number: 1-based physical page number.
        text: Trimmed page text, never empty.
    """

    page_number: int = Field(ge=1)
    text: str


class ExtractionResult(BaseModel):
    """Extracted content of one document.

    Attributes:
        full_text: All recovered text.
        method: Digital parse or OCR.
        pages: Non-empty pages in ascending page order.
    """

    full_text: str
    method: ExtractionMethod
    pages: list[PageText] = Field(default_factory=list)

    @field_validator("pages")
    @classmethod
    def validate_page_order(cls, v: list[PageText]) -> list[PageText]:
        """Require unique page numbers in ascending order."""
        numbers = [page.page_number for page in v]
        if any(a >= b for a, b in zip(numbers, numbers[1:])):
            raise ValueError(f"Page numbers must be strictly increasing, got {numbers}")
        return v


def validate_pdf_bytes(file_content: bytes, max_file_size: int = MAX_FILE_SIZE) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.
        max_file_size: Size limit in bytes.

    Raises:
        UnreadableDocument: If validation fails.
    """
    if not file_content:
        raise UnreadableDocument("Empty file provided")

    if len(file_content) > max_file_size:
        size_mb = len(file_content) / (1024 * 1024)
        limit_mb = max_file_size / (1024 * 1024)
        raise UnreadableDocument(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)"
        )

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise UnreadableDocument("Invalid PDF: file does not start with PDF header")


def parse_pdf_pages(file_content: bytes) -> list[PageText]:
    """Extract text from each page of a PDF.

    Pages whose text is empty after trimming are dropped; the remaining
    pages keep their physical 1-based numbers.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        Non-empty pages in ascending page order.

    Raises:
        UnreadableDocument: If the PDF is corrupt or has no pages.
    """
    try:
        reader = PdfReader(io.BytesIO(file_content))
        page_count = len(reader.pages)
    except PdfReadError as e:
        raise UnreadableDocument(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise UnreadableDocument(f"Failed to read PDF: {e}") from e

    if page_count == 0:
        raise UnreadableDocument("PDF contains no pages")

    pages: list[PageText] = []
    for number, page in enumerate(reader.pages, start=1):
        try:
            page_text = page.extract_text() or ""
        except Exception as e:
            raise UnreadableDocument(f"Failed to extract text from page {number}: {e}") from e

        page_text = page_text.strip()
        if page_text:
            pages.append(PageText(page_number=number, text=page_text))

    logger.debug(f"Digital parse found text on {len(pages)} of {page_count} pages")
    return pages
