"""FastAPI endpoints for PDF Insight.

Endpoints:
    - GET /health: Service health status
    - POST /upload: Store a PDF and return its identifier
    - POST /extract: Extracted text with method and pages
    - POST /summarize: Bullet-point summary
    - POST /ask: Answer with [p.N] page citations
"""

from src.api.app import create_app

__all__ = ["create_app"]
