"""Language-model backends behind a single chat interface.

Prompt construction lives in the summarizer and Q&A adapters; a backend
only turns a list of messages into response text. Two implementations
wrap Agno's model classes:

- OpenAIBackend: OpenAI or any OpenAI-compatible API (OpenAIChat)
- OllamaBackend: a locally hosted Ollama server (Ollama)

The backend is chosen once at startup by create_backend(), so callers
never branch on provider.

Provider exceptions are translated into two kinds:

- BackendUnavailable: missing credentials, rejected credentials, or the
  server could not be reached
- UpstreamFailure: the server answered with an error or returned content
  we cannot use
"""

import logging
from typing import Protocol

import httpx
from agno.exceptions import ModelProviderError
from agno.models.base import Model
from agno.models.message import Message
from agno.models.ollama import Ollama
from agno.models.openai import OpenAIChat
from openai import APIConnectionError

from src.agent.config import AgentConfig, get_agent_config
from src.errors import BackendUnavailable, UpstreamFailure
from src.models.schemas import ChatMessage

logger = logging.getLogger(__name__)

_CONNECTION_ERRORS = (APIConnectionError, httpx.ConnectError, ConnectionError)
_CREDENTIAL_STATUS_CODES = (401, 403)


class ChatBackend(Protocol):
    """Anything that can answer a list of chat messages with text."""

    async def chat(self, messages: list[ChatMessage]) -> str: ...


def _is_connection_error(exc: BaseException | None) -> bool:
    """Check an exception and its cause chain for a connection failure."""
    while exc is not None:
        if isinstance(exc, _CONNECTION_ERRORS):
            return True
        exc = exc.__cause__
    return False


class AgnoBackend:
    """Base backend wrapping an Agno model.

    Subclasses build the concrete model; the model is created on first
    use so a misconfigured backend does not prevent startup.
    """

    name = "agno"

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the backend.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._model: Model | None = None

    def _create_model(self) -> Model:
        raise NotImplementedError

    def _check_configuration(self) -> None:
        """Raise BackendUnavailable if the backend cannot be used as configured."""

    def _get_model(self) -> Model:
        if self._model is None:
            self._model = self._create_model()
        return self._model

    async def chat(self, messages: list[ChatMessage]) -> str:
        """Send messages to the model and return its text.

        Args:
            messages: Conversation to send, system message first.

        Returns:
            Response text, or an empty string if the model returned nothing.

        Raises:
            BackendUnavailable: Backend misconfigured or unreachable.
            UpstreamFailure: Backend returned an error or malformed content.
        """
        self._check_configuration()
        model = self._get_model()
        agno_messages = [Message(role=m.role, content=m.content) for m in messages]

        try:
            response = await model.aresponse(messages=agno_messages)
        except ModelProviderError as e:
            logger.error(f"{self.name} backend error (status {e.status_code}): {e}")
            if e.status_code in _CREDENTIAL_STATUS_CODES or _is_connection_error(e):
                raise BackendUnavailable(f"{self.name} backend unavailable: {e}") from e
            raise UpstreamFailure(f"{self.name} backend error: {e}") from e
        except _CONNECTION_ERRORS as e:
            logger.error(f"{self.name} backend unreachable: {e}")
            raise BackendUnavailable(f"{self.name} backend unreachable: {e}") from e
        except Exception as e:
            logger.error(f"{self.name} backend failed: {e}")
            raise UpstreamFailure(f"{self.name} backend failed: {e}") from e

        content = response.content
        if content is None:
            return ""
        if not isinstance(content, str):
            raise UpstreamFailure(
                f"{self.name} backend returned {type(content).__name__} instead of text"
            )
        return content


class OpenAIBackend(AgnoBackend):
    """OpenAI chat completions via Agno's OpenAIChat."""

    name = "openai"

    def _check_configuration(self) -> None:
        if not self._config.api_key:
            raise BackendUnavailable(
                "OpenAI API key is not configured. Set LLM_API_KEY or OPENAI_API_KEY in .env"
            )

    def _create_model(self) -> Model:
        return OpenAIChat(
            id=self._config.openai_model,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
            max_retries=0,
        )


class OllamaBackend(AgnoBackend):
    """Local Ollama server via Agno's Ollama model."""

    name = "ollama"

    def _create_model(self) -> Model:
        return Ollama(
            id=self._config.ollama_model,
            host=self._config.ollama_host,
            options={
                "temperature": self._config.temperature,
                "num_predict": self._config.max_tokens,
            },
        )


_BACKENDS: dict[str, type[AgnoBackend]] = {
    OpenAIBackend.name: OpenAIBackend,
    OllamaBackend.name: OllamaBackend,
}


def create_backend(config: AgentConfig | None = None) -> ChatBackend:
    """Create the backend selected by configuration.

    Args:
        config: Optional agent configuration.
                Loads from environment if not provided.

    Returns:
        The configured backend.
    """
    config = config or get_agent_config()
    backend_cls = _BACKENDS[config.backend]
    logger.info(f"Using {config.backend} backend with model {config.model_name}")
    return backend_cls(config)
