"""Upload staging: persist one multipart file for the span of a request.

Provides:
- ``stage_upload(f, upload_dir)``: save the upload under a generated name.
- ``release(staged)``: delete the staged file (safe to call on a missing file).
- ``staged_upload(f, upload_dir)``: context manager pairing the two, so the
  file is released exactly once on every exit path.
- ``read_part(staged)``: load the staged bytes as a ``Part`` for the model.
"""

from __future__ import annotations

import logging
import mimetypes
import os
from contextlib import contextmanager
from typing import Iterator

from werkzeug.datastructures import FileStorage

from gemini_gateway.errors import InternalError
from gemini_gateway.schemas import Part, StagedUpload
from gemini_gateway.utils.ids import scratch_name

logger = logging.getLogger(__name__)

DEFAULT_MIME = "application/octet-stream"


def _resolve_mime(f: FileStorage) -> str:
    if f.mimetype:
        return f.mimetype
    guessed, _ = mimetypes.guess_type(f.filename or "")
    return guessed or DEFAULT_MIME


def stage_upload(f: FileStorage, upload_dir: str) -> StagedUpload:
    orig_name = f.filename or ""
    staged = StagedUpload(
        path=os.path.join(upload_dir, scratch_name("upload", orig_name)),
        mime_type=_resolve_mime(f),
        filename=orig_name,
    )
    try:
        os.makedirs(upload_dir, exist_ok=True)
        f.save(staged.path)
    except OSError as e:
        # a partial write must not outlive the request
        release(staged)
        raise InternalError(f"Failed to stage upload: {e}") from e
    logger.debug("Staged %s -> %s", orig_name, staged.path)
    return staged


def release(staged: StagedUpload) -> None:
    try:
        os.remove(staged.path)
        logger.debug("Released %s", staged.path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not delete staged upload %s: %s", staged.path, e)


@contextmanager
def staged_upload(f: FileStorage, upload_dir: str) -> Iterator[StagedUpload]:
    staged = stage_upload(f, upload_dir)
    try:
        yield staged
    finally:
        release(staged)


def read_part(staged: StagedUpload) -> Part:
    try:
        with open(staged.path, "rb") as fh:
            data = fh.read()
    except OSError as e:
        raise InternalError(f"Failed to read staged upload: {e}") from e
    return Part(data=data, mime_type=staged.mime_type)
