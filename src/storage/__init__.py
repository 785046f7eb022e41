"""Upload storage for PDFs referenced by opaque file identifiers."""

from src.storage.store import DocumentStore, get_upload_dir

__all__ = ["DocumentStore", "get_upload_dir"]
