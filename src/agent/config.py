"""Agent configuration with environment variable loading.

Pydantic-based configuration for the language-model backend.
Supports OpenAI (and OpenAI-compatible APIs via custom base URL)
and a locally hosted Ollama server.
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

SUMMARY_MAX_CHARS = 20000
PAGE_CONTEXT_MAX_CHARS = 2000

BackendName = Literal["openai", "ollama"]


class AgentConfig(BaseModel):
    """Configuration for the language-model backend.

    Attributes:
        backend: Which backend to use ("openai" or "ollama").
        api_key: API key for OpenAI access. May be empty; the OpenAI backend
                 reports it as unavailable when invoked without one.
        base_url: API base URL (None for OpenAI default).
        openai_model: OpenAI model identifier.
        ollama_host: Base URL of the Ollama server.
        ollama_model: Ollama model identifier.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
        summary_max_chars: Summarizer input is cut to this many characters.
        page_context_max_chars: Each page in Q&A context is cut to this many characters.
        restrict_citations_to_context: Drop cited pages missing from the context.
    """

    model_config = ConfigDict(validate_default=True)

    backend: BackendName = Field(
        default_factory=lambda: os.getenv("LLM_BACKEND", "openai").strip().lower(),
        description="Language-model backend",
    )
    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", "")),
        description="API key for the OpenAI backend",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    openai_model: str = Field(
        default_factory=lambda: os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        description="OpenAI model to use",
    )
    ollama_host: str = Field(
        default_factory=lambda: os.getenv("OLLAMA_HOST", "http://localhost:11434"),
        description="Ollama server URL",
    )
    ollama_model: str = Field(
        default_factory=lambda: os.getenv("OLLAMA_MODEL", "llama3.1"),
        description="Ollama model to use",
    )
    temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default=1024,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )
    summary_max_chars: int = Field(
        default_factory=lambda: os.getenv("SUMMARY_MAX_CHARS", str(SUMMARY_MAX_CHARS)),
        ge=1,
        description="Maximum characters of document text sent for summarization",
    )
    page_context_max_chars: int = Field(
        default_factory=lambda: os.getenv("PAGE_CONTEXT_MAX_CHARS", str(PAGE_CONTEXT_MAX_CHARS)),
        ge=1,
        description="Maximum characters per page in question-answering context",
    )
    restrict_citations_to_context: bool = Field(
        default_factory=lambda: os.getenv("RESTRICT_CITATIONS", "false"),
        description="Only return citations for pages present in the context",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip whitespace around the API key."""
        return v.strip()

    @property
    def model_name(self) -> str:
        """Model identifier for the selected backend."""
        return self.ollama_model if self.backend == "ollama" else self.openai_model


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.

    Raises:
        ValidationError: If LLM_BACKEND names an unknown backend.
    """
    return AgentConfig()
