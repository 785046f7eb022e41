"""Pytest fixtures and shared test configuration.

Fixtures:
    - text_pdf: PDF with a text layer on pages 1 and 3, page 2 blank
    - scanned_pdf: PDF with no text layer at all
    - extraction_config / agent_config: Explicit configs independent of the environment
    - fake_backend: Recording chat backend
    - store: DocumentStore in a temporary directory
    - pipeline: DocumentPipeline wired to the fixtures above
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from src.agent.config import AgentConfig
from src.api.app import create_app
from src.parsing.config import MAX_FILE_SIZE, ExtractionConfig
from src.pipeline.service import DocumentPipeline
from src.storage.store import DocumentStore
from tests.helpers import PAGE_ONE_TEXT, PAGE_THREE_TEXT, FakeBackend, build_pdf


@pytest.fixture
def text_pdf() -> bytes:
    """Return a three-page PDF whose middle page has no text."""
    return build_pdf([PAGE_ONE_TEXT, "", PAGE_THREE_TEXT])


@pytest.fixture
def scanned_pdf() -> bytes:
    """Return a two-page PDF with no embedded text layer."""
    return build_pdf(["", ""])


@pytest.fixture
def extraction_config() -> ExtractionConfig:
    return ExtractionConfig(
        min_text_length=80,
        max_file_size=MAX_FILE_SIZE,
        ocr_language="eng",
        ocr_dpi=200,
    )


@pytest.fixture
def agent_config() -> AgentConfig:
    return AgentConfig(
        backend="openai",
        api_key="sk-test-key",
        summary_max_chars=20000,
        page_context_max_chars=2000,
        restrict_citations_to_context=False,
    )


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend(response="- Revenue grew [p.1]")


@pytest.fixture
def store(tmp_path: Path) -> DocumentStore:
    return DocumentStore(tmp_path / "uploads")


@pytest.fixture
def pipeline(
    store: DocumentStore,
    fake_backend: FakeBackend,
    extraction_config: ExtractionConfig,
    agent_config: AgentConfig,
) -> DocumentPipeline:
    return DocumentPipeline(
        store=store,
        backend=fake_backend,
        extraction_config=extraction_config,
        agent_config=agent_config,
    )


@pytest.fixture
async def async_client(pipeline: DocumentPipeline) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app(pipeline=pipeline))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
