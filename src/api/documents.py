"""Extraction, summary and question-answering endpoints.

Pipeline errors raised here are turned into HTTP responses by the
exception handlers registered in create_app().
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_pipeline
from src.models.schemas import (
    AnswerResponse,
    AskRequest,
    DocumentRequest,
    ExtractResponse,
    SummaryResponse,
)
from src.pipeline.service import DocumentPipeline

router = APIRouter(tags=["documents"])

PipelineDep = Annotated[DocumentPipeline, Depends(get_pipeline)]


@router.post("/extract", response_model=ExtractResponse)
async def extract_document(request: DocumentRequest, pipeline: PipelineDep) -> ExtractResponse:
    """Extract the text of an uploaded PDF, using OCR for scanned documents."""
    result = await pipeline.extract(request.id)
    return ExtractResponse(text=result.full_text, method=result.method, pages=result.pages)


@router.post("/summarize", response_model=SummaryResponse)
async def summarize_document(request: DocumentRequest, pipeline: PipelineDep) -> SummaryResponse:
    """Summarize an uploaded PDF in 5-8 bullet points."""
    return await pipeline.summarize(request.id)


@router.post("/ask", response_model=AnswerResponse)
async def ask_document(request: AskRequest, pipeline: PipelineDep) -> AnswerResponse:
    """Answer a question about an uploaded PDF with [p.N] page citations.

    Citations are parsed from the answer text and may name pages the
    model did not see unless RESTRICT_CITATIONS is enabled.
    """
    return await pipeline.ask(request.id, request.question)
