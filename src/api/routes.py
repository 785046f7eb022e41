"""PDF upload endpoint.

Handles file upload, validation, and storage under an opaque identifier.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from src.api.dependencies import get_pipeline
from src.errors import UnreadableDocument
from src.models.schemas import UploadResponse
from src.parsing.pdf_parser import validate_pdf_bytes
from src.pipeline.service import DocumentPipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])

PDF_CONTENT_TYPE = "application/pdf"


def _validate_file_type(filename: str | None, content_type: str | None) -> str:
    """Validate that the upload is a PDF by extension and declared type.

    Args:
        filename: The uploaded filename.
        content_type: The declared media type, if any.

    Returns:
        The validated filename.

    Raises:
        HTTPException: 400 if the filename is missing or not a PDF.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not filename.lower().endswith(".pdf") or (
        content_type and content_type != PDF_CONTENT_TYPE
    ):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    return filename


async def _read_and_validate_size(file: UploadFile, max_size: int) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.
        max_size: Size limit in bytes.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > max_size:
        size_mb = len(content) / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)",
        )

    return content


@router.post("", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_pdf(
    file: UploadFile,
    pipeline: Annotated[DocumentPipeline, Depends(get_pipeline)],
) -> UploadResponse:
    """Upload a PDF document for later extraction.

    Args:
        file: The uploaded PDF file (multipart/form-data).

    Returns:
        UploadResponse with the identifier to pass to /extract, /summarize and /ask.

    Raises:
        400: Invalid file (not PDF, empty, no PDF header).
        413: File exceeds the size limit.
    """
    filename = _validate_file_type(file.filename, file.content_type)
    content = await _read_and_validate_size(file, pipeline.extraction_config.max_file_size)

    try:
        validate_pdf_bytes(content, pipeline.extraction_config.max_file_size)
    except UnreadableDocument as e:
        logger.warning(f"Rejected upload {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    file_id = pipeline.store.save(content)

    return UploadResponse(
        id=file_id,
        original_name=filename,
        size=len(content),
        content_type=file.content_type,
    )
