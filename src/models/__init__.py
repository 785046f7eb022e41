"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - ChatMessage: Message sent to the language-model backend
    - DocumentRequest / AskRequest: Incoming request payloads
    - UploadResponse: Stored upload details
    - ExtractResponse / SummaryResponse / AnswerResponse: Pipeline results
"""

from src.models.schemas import (
    AnswerResponse,
    AskRequest,
    ChatMessage,
    DocumentRequest,
    ExtractResponse,
    SummaryResponse,
    UploadResponse,
)

__all__ = [
    "AnswerResponse",
    "AskRequest",
    "ChatMessage",
    "DocumentRequest",
    "ExtractResponse",
    "SummaryResponse",
    "UploadResponse",
]
