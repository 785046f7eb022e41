"""Language-model adapters for summaries and cited answers.

Responsibilities:
    - Backend selection between OpenAI and a local Ollama server
    - Summarization prompts over truncated document text
    - Question answering with [p.N] page citations

Prompt construction is backend-agnostic; backends only carry messages
to a model and map provider failures onto pipeline error kinds.
"""

from src.agent.backends import ChatBackend, OllamaBackend, OpenAIBackend, create_backend
from src.agent.config import AgentConfig, get_agent_config
from src.agent.qa import CitationQA, QAResult, build_context, extract_citations
from src.agent.summarizer import Summarizer

__all__ = [
    "AgentConfig",
    "ChatBackend",
    "CitationQA",
    "OllamaBackend",
    "OpenAIBackend",
    "QAResult",
    "Summarizer",
    "build_context",
    "create_backend",
    "extract_citations",
    "get_agent_config",
]
