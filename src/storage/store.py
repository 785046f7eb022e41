"""Local directory storage for uploaded PDFs."""

import logging
import os
import re
import uuid
from pathlib import Path

from src.errors import NotFound

logger = logging.getLogger(__name__)

# Stored names are "<uuid4>.pdf"; anything else is rejected before touching the filesystem.
_FILE_ID_PATTERN = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\.pdf")


def get_upload_dir() -> Path:
    """Return the upload directory from UPLOAD_DIR (default ./uploads)."""
    return Path(os.getenv("UPLOAD_DIR", "uploads")).resolve()


class DocumentStore:
    """Stores uploaded documents under opaque identifiers."""

    def __init__(self, upload_dir: Path | str | None = None) -> None:
        self._upload_dir = Path(upload_dir) if upload_dir else get_upload_dir()

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def _path_for(self, file_id: str) -> Path:
        if not _FILE_ID_PATTERN.fullmatch(file_id):
            raise NotFound(f"File not found: {file_id}")
        return self._upload_dir / file_id

    def save(self, content: bytes) -> str:
        """Write content under a new identifier.

        Args:
            content: Raw document bytes.

        Returns:
            The new file identifier.
        """
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        file_id = f"{uuid.uuid4()}.pdf"
        (self._upload_dir / file_id).write_bytes(content)
        logger.info(f"Stored upload {file_id} ({len(content)} bytes)")
        return file_id

    def exists(self, file_id: str) -> bool:
        try:
            return self._path_for(file_id).is_file()
        except NotFound:
            return False

    def read_bytes(self, file_id: str) -> bytes:
        """Read a stored document.

        Raises:
            NotFound: If the identifier is malformed or unknown.
        """
        path = self._path_for(file_id)
        if not path.is_file():
            raise NotFound(f"File not found: {file_id}")
        return path.read_bytes()
