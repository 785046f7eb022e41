"""Document pipeline: storage -> extraction -> summary or cited answer.

Each operation reads the stored bytes and extracts them again; nothing is
cached between calls. Extraction is blocking (pypdf, Tesseract), so it
runs in a worker thread while backend calls are awaited directly.
"""

import asyncio
import logging

from src.agent.backends import ChatBackend, create_backend
from src.agent.config import AgentConfig, get_agent_config
from src.agent.qa import CitationQA
from src.agent.summarizer import Summarizer
from src.models.schemas import AnswerResponse, SummaryResponse
from src.parsing.config import ExtractionConfig, get_extraction_config
from src.parsing.extractor import extract_text
from src.parsing.pdf_parser import ExtractionResult
from src.storage.store import DocumentStore

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Runs the extract, summarize and ask operations for stored documents."""

    def __init__(
        self,
        store: DocumentStore,
        backend: ChatBackend,
        extraction_config: ExtractionConfig | None = None,
        agent_config: AgentConfig | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            store: Where uploaded documents live.
            backend: Chat backend for summaries and answers.
            extraction_config: Optional extraction configuration.
            agent_config: Optional agent configuration for prompt budgets.
        """
        self._store = store
        self._extraction_config = extraction_config or get_extraction_config()
        agent_config = agent_config or get_agent_config()
        self._summarizer = Summarizer(backend, max_chars=agent_config.summary_max_chars)
        self._qa = CitationQA(
            backend,
            max_chars_per_page=agent_config.page_context_max_chars,
            restrict_to_context=agent_config.restrict_citations_to_context,
        )

    @property
    def store(self) -> DocumentStore:
        return self._store

    @property
    def extraction_config(self) -> ExtractionConfig:
        return self._extraction_config

    async def extract(self, file_id: str) -> ExtractionResult:
        """Extract text from a stored document.

        Raises:
            NotFound: Unknown file identifier.
            UnreadableDocument: The file is not a readable PDF.
        """
        content = self._store.read_bytes(file_id)
        result = await asyncio.to_thread(extract_text, content, self._extraction_config)
        logger.info(f"Extracted {file_id} via {result.method.value} ({len(result.pages)} pages)")
        return result

    async def summarize(self, file_id: str) -> SummaryResponse:
        """Summarize a stored document.

        Raises:
            NotFound, UnreadableDocument, BackendUnavailable, UpstreamFailure
        """
        extraction = await self.extract(file_id)
        summary = await self._summarizer.summarize(extraction.full_text)
        logger.info(f"Summarized {file_id} ({len(summary)} characters)")
        return SummaryResponse(summary=summary, method=extraction.method)

    async def ask(self, file_id: str, question: str) -> AnswerResponse:
        """Answer a question about a stored document with page citations.

        Raises:
            NotFound, UnreadableDocument, BackendUnavailable, UpstreamFailure
        """
        extraction = await self.extract(file_id)
        result = await self._qa.answer(question, extraction.pages)
        logger.info(f"Answered question on {file_id} with {len(result.citations)} citations")
        return AnswerResponse(
            answer=result.answer,
            citations=sorted(result.citations),
            method=extraction.method,
        )


def create_pipeline(
    store: DocumentStore | None = None,
    backend: ChatBackend | None = None,
) -> DocumentPipeline:
    """Build a pipeline from environment configuration.

    Args:
        store: Optional store; defaults to UPLOAD_DIR.
        backend: Optional backend; defaults to the one selected by LLM_BACKEND.

    Returns:
        Configured DocumentPipeline.
    """
    agent_config = get_agent_config()
    return DocumentPipeline(
        store=store or DocumentStore(),
        backend=backend or create_backend(agent_config),
        extraction_config=get_extraction_config(),
        agent_config=agent_config,
    )
