"""PDF Insight - text extraction, summaries and page-cited answers for PDFs.

Combines FastAPI for HTTP, pypdf and Tesseract for extraction,
Agno for language-model access, and Pydantic for data validation.

Components:
    - api: HTTP endpoints
    - agent: Backend selection, summarization and cited Q&A
    - parsing: Digital PDF extraction with OCR fallback
    - pipeline: Per-request orchestration of the stages
    - storage: Uploaded file storage
    - models: Request/response schemas
"""

__version__ = "0.1.0"
