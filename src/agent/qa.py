"""Question answering with inline page citations.

The model is told to tag every claim with a [p.N] marker. After the
answer comes back, the markers are pulled out with a regular expression.
No check is made that a cited page exists unless restrict_to_context is
enabled, because the model can cite a page that was never in its context.
"""

import logging
import re
from collections.abc import Iterable

from pydantic import BaseModel, Field

from src.agent.backends import ChatBackend
from src.agent.config import PAGE_CONTEXT_MAX_CHARS
from src.models.schemas import ChatMessage
from src.parsing.pdf_parser import PageText

logger = logging.getLogger(__name__)

# Wire format shared with SYSTEM_PROMPT: literal "[p.N]".
CITATION_PATTERN = re.compile(r"\[p\.(\d+)\]")

SYSTEM_PROMPT = (
    "You answer questions about a document using only the context provided. "
    "Cite every factual claim with the page it came from using the exact form [p.N], "
    "where N is a page number that appears in the context, for example [p.3]. "
    "If the answer is not in the document, say that you could not find it "
    "instead of guessing."
)


class QAResult(BaseModel):
    """Answer text and the distinct pages it cites."""

    answer: str
    citations: set[int] = Field(default_factory=set)


def build_context(pages: Iterable[PageText], max_chars_per_page: int = PAGE_CONTEXT_MAX_CHARS) -> str:
    """Render pages as "Page N:" blocks, each cut to max_chars_per_page."""
    blocks = [
        f"Page {page.page_number}:\n{page.text[:max_chars_per_page]}"
        for page in sorted(pages, key=lambda p: p.page_number)
    ]
    return "\n\n".join(blocks)


def build_qa_messages(question: str, context: str) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=f"Question: {question}\n\nDocument:\n{context}"),
    ]


def extract_citations(text: str) -> set[int]:
    """Collect page numbers from [p.N] markers in text.

    Args:
        text: Free-form model output.

    Returns:
        Distinct positive page numbers; empty if there are no markers.
    """
    numbers = {int(match) for match in CITATION_PATTERN.findall(text)}
    numbers.discard(0)
    return numbers


class CitationQA:
    """Answers questions over page-attributed text with a chat backend."""

    def __init__(
        self,
        backend: ChatBackend,
        max_chars_per_page: int = PAGE_CONTEXT_MAX_CHARS,
        restrict_to_context: bool = False,
    ) -> None:
        """Initialize the adapter.

        Args:
            backend: Chat backend to query.
            max_chars_per_page: Per-page context budget.
            restrict_to_context: Drop citations of pages not in the context.
        """
        self._backend = backend
        self._max_chars_per_page = max_chars_per_page
        self._restrict_to_context = restrict_to_context

    async def answer(self, question: str, pages: list[PageText]) -> QAResult:
        """Answer a question from the given pages.

        Args:
            question: The user's question.
            pages: Extracted pages to use as context.

        Returns:
            QAResult with the trimmed answer and cited page numbers.
        """
        context = build_context(pages, self._max_chars_per_page)
        response = await self._backend.chat(build_qa_messages(question, context))
        answer = response.strip()

        citations = extract_citations(answer)
        if self._restrict_to_context:
            known_pages = {page.page_number for page in pages}
            dropped = citations - known_pages
            if dropped:
                logger.warning(f"Dropping citations of pages not in context: {sorted(dropped)}")
            citations &= known_pages

        return QAResult(answer=answer, citations=citations)
