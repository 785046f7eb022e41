"""FastAPI dependencies resolving per-app collaborators from app.state."""

from fastapi import Request

from src.pipeline.service import DocumentPipeline


def get_pipeline(request: Request) -> DocumentPipeline:
    """Return the pipeline attached by create_app()."""
    return request.app.state.pipeline
