"""Error kinds raised by the extraction and answering pipeline.

Each kind maps to a distinct HTTP status in the API layer so operators can
tell bad input, missing documents, backend misconfiguration and backend
failures apart.
"""


class PipelineError(Exception):
    """Base exception for pipeline errors."""

    pass


class UnreadableDocument(PipelineError):
    """Raised when the bytes cannot be read as a PDF."""

    pass


class NotFound(PipelineError):
    """Raised when a file identifier is unknown."""

    pass


class BackendUnavailable(PipelineError):
    """Raised when the language-model backend is unreachable or misconfigured."""

    pass


class UpstreamFailure(PipelineError):
    """Raised when the backend was reached but failed or returned malformed output."""

    pass
