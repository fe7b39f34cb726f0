"""Temp-file lifecycle for multipart uploads.

``uploaded_file`` is the single owner of an upload's storage path: it
checks the part is present, writes it under the uploads directory with a
generated name, yields the metadata, and deletes the file when the block
exits, whether the request succeeded or failed.
"""

from __future__ import annotations

import logging
import os
import uuid
from contextlib import contextmanager
from typing import Iterator, Mapping

from werkzeug.datastructures import FileStorage

from gemini_gateway.errors import FileSystemError, ValidationError
from gemini_gateway.schemas import UploadedFile
from gemini_gateway.utils.io_utils import ensure_dir, remove_file

logger = logging.getLogger(__name__)

DEFAULT_MIME = "application/octet-stream"


def storage_name() -> str:
    """Random, collision-free file name for one upload."""
    return uuid.uuid4().hex


def _require_part(files: Mapping[str, FileStorage], field: str) -> FileStorage:
    storage = files.get(field)
    if storage is None:
        raise ValidationError(f"No '{field}' file part in the request.")
    if not storage.filename:
        raise ValidationError(f"No file selected for '{field}'.")
    return storage


@contextmanager
def uploaded_file(files: Mapping[str, FileStorage], field: str, upload_dir: str) -> Iterator[UploadedFile]:
    storage = _require_part(files, field)
    ensure_dir(upload_dir)
    path = os.path.join(upload_dir, storage_name())
    try:
        try:
            storage.save(path)
        except OSError as e:
            raise FileSystemError(f"Could not store uploaded file: {e.strerror or e}") from e
        logger.info("Stored upload field=%s size=%d path=%s", field, os.path.getsize(path), path)
        yield UploadedFile(
            storage_path=path,
            mime_type=storage.mimetype or DEFAULT_MIME,
            original_name=storage.filename,
        )
    finally:
        if remove_file(path):
            logger.info("Removed upload %s", path)
