from pydantic import BaseModel, Field, field_validator

from src.parsing.pdf_parser import ExtractionMethod, PageText


class ChatMessage(BaseModel):
    """A single message sent to the language-model backend.

    Attributes:
        role: The speaker identifier (user, assistant, or system).
        content: The message text.
    """

    role: str = Field(..., description="Message role: 'user', 'assistant', or 'system'")
    content: str = Field(..., description="The message content")


class DocumentRequest(BaseModel):
    """Request payload naming a previously uploaded document.

    Attributes:
        id: File identifier returned by the upload endpoint.
    """

    id: str = Field(..., min_length=1)

    @field_validator("id", mode="before")
    @classmethod
    def strip_id(cls, v: str) -> str:
        """Strip whitespace from id before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class AskRequest(DocumentRequest):
    """Request payload for the question-answering endpoint.

    Attributes:
        question: The user's question about the document.
    """

    question: str = Field(..., min_length=1)

    @field_validator("question", mode="before")
    @classmethod
    def strip_question(cls, v: str) -> str:
        """Strip whitespace from question before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class UploadResponse(BaseModel):
    """Response after a PDF has been stored.

    Attributes:
        id: Opaque identifier for later extract/summarize/ask calls.
        original_name: Filename as uploaded.
        size: Size in bytes.
        content_type: Declared media type.
    """

    id: str
    original_name: str
    size: int = Field(ge=0)
    content_type: str | None = None


class ExtractResponse(BaseModel):
    """Extracted text of a document."""

    text: str
    method: ExtractionMethod
    pages: list[PageText] = Field(default_factory=list)


class SummaryResponse(BaseModel):
    """Bullet-point summary of a document."""

    summary: str
    method: ExtractionMethod


class AnswerResponse(BaseModel):
    """Answer to a question with the pages it cites.

    Attributes:
        answer: The model's answer including inline [p.N] markers.
        citations: Distinct page numbers cited, ascending.
        method: How the document text was extracted.
    """

    answer: str
    citations: list[int] = Field(default_factory=list)
    method: ExtractionMethod
