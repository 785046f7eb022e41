"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
error mapping, and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.documents import router as documents_router
from src.api.routes import router as upload_router
from src.errors import (
    BackendUnavailable,
    NotFound,
    PipelineError,
    UnreadableDocument,
    UpstreamFailure,
)
from src.pipeline.service import DocumentPipeline, create_pipeline

logger = logging.getLogger(__name__)

# Each error kind keeps its own status so configuration problems (503)
# are distinguishable from provider errors (502) and from bugs (500).
ERROR_STATUS_CODES: dict[type[PipelineError], int] = {
    UnreadableDocument: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    BackendUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
    UpstreamFailure: status.HTTP_502_BAD_GATEWAY,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting PDF Insight API...")
    logger.info(f"Uploads stored in {app.state.pipeline.store.upload_dir}")
    yield
    logger.info("Shutting down PDF Insight API...")


async def pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    """Render a pipeline error with the status code of its kind."""
    status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc}")
    else:
        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app(pipeline: DocumentPipeline | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        pipeline: Optional pipeline; built from environment if not provided.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="PDF Insight API",
        description=(
            "Upload PDFs, extract their text (with OCR fallback for scanned "
            "documents), and get bullet-point summaries and answers that cite "
            "the pages they draw on."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.pipeline = pipeline or create_pipeline()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    for error_cls in ERROR_STATUS_CODES:
        application.add_exception_handler(error_cls, pipeline_error_handler)

    application.include_router(upload_router)
    application.include_router(documents_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "pdf-insight"}

    return application
