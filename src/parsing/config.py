"""Extraction configuration with environment variable loading."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

# Minimum trimmed length of digitally extracted text before we trust it.
# Scanned PDFs yield close to zero characters from the text layer.
MIN_TEXT_LENGTH = 80

MAX_FILE_SIZE = 25 * 1024 * 1024  # 25MB


class ExtractionConfig(BaseModel):
    """Configuration for the extraction engine.

    Attributes:
        min_text_length: Digital text shorter than this falls back to OCR.
        max_file_size: Largest accepted document in bytes.
        ocr_language: Tesseract language code.
        ocr_dpi: Resolution used when rasterizing pages for OCR.
    """

    model_config = ConfigDict(validate_default=True)

    min_text_length: int = Field(
        default_factory=lambda: os.getenv("MIN_TEXT_LENGTH", str(MIN_TEXT_LENGTH)),
        ge=0,
        description="Minimum trimmed digital text length before OCR fallback",
    )
    max_file_size: int = Field(
        default_factory=lambda: os.getenv("MAX_FILE_SIZE", str(MAX_FILE_SIZE)),
        ge=1,
        description="Maximum document size in bytes",
    )
    ocr_language: str = Field(
        default_factory=lambda: os.getenv("OCR_LANGUAGE", "eng"),
        min_length=1,
        description="Tesseract language code",
    )
    ocr_dpi: int = Field(
        default_factory=lambda: os.getenv("OCR_DPI", "200"),
        ge=50,
        le=600,
        description="Rasterization DPI for OCR",
    )


def get_extraction_config() -> ExtractionConfig:
    """Create extraction configuration from environment."""
    return ExtractionConfig()
