"""Bullet-point document summaries."""

import logging

from src.agent.backends import ChatBackend
from src.agent.config import SUMMARY_MAX_CHARS
from src.models.schemas import ChatMessage

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are an assistant that summarizes documents accurately and concisely."

USER_PROMPT = (
    "Summarize the following document in 5-8 bullet points. "
    "Focus on key facts, decisions, and action items."
)


def build_summary_messages(full_text: str, max_chars: int = SUMMARY_MAX_CHARS) -> list[ChatMessage]:
    """Build the summarization prompt.

    The document is cut to its first max_chars characters to bound
    cost and latency.
    """
    document = full_text[:max_chars]
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=f"{USER_PROMPT}\n\n{document}"),
    ]


class Summarizer:
    """Summarizes extracted document text with a chat backend."""

    def __init__(self, backend: ChatBackend, max_chars: int = SUMMARY_MAX_CHARS) -> None:
        self._backend = backend
        self._max_chars = max_chars

    async def summarize(self, full_text: str) -> str:
        """Summarize a document.

        Args:
            full_text: Extracted document text.

        Returns:
            Trimmed summary, or an empty string if the backend returned nothing.
        """
        if len(full_text) > self._max_chars:
            logger.info(f"Truncating document from {len(full_text)} to {self._max_chars} characters")

        response = await self._backend.chat(build_summary_messages(full_text, self._max_chars))
        return response.strip()
