"""IO utilities for upload temp files.

Provides:
- ``ensure_dir(path)``: create directories if missing (no error if exists).
- ``read_bytes(path)``: read a whole file, wrapping OS failures.
- ``remove_file(path)``: idempotent delete; an already-missing file is fine.
"""

from __future__ import annotations

import logging
import os

from gemini_gateway.errors import FileSystemError

logger = logging.getLogger(__name__)


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def read_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileSystemError(f"Could not read uploaded file: {e.strerror or e}") from e


def remove_file(path: str) -> bool:
    """Delete ``path`` if present. Returns True when a file was removed."""
    try:
        os.remove(path)
        return True
    except FileNotFoundError:
        logger.warning("Temp file already gone: %s", path)
        return False
    except OSError:
        # Cleanup runs in finally blocks; never mask the request's own outcome
        logger.exception("Failed to remove temp file %s", path)
        return False
