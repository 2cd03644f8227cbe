"""Request-scoped data shapes shared by routes and services.

Nothing here is persisted: a ``GenerationRequest`` is built from the
incoming HTTP request and a ``StagedUpload`` lives only until the
handler's cleanup step deletes its file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Part:
    """Binary content attached to a generation request."""

    data: bytes
    mime_type: str


@dataclass
class GenerationRequest:
    prompt: str
    parts: List[Part] = field(default_factory=list)


@dataclass(frozen=True)
class StagedUpload:
    """A temporary file on local disk holding one uploaded file."""

    path: str
    mime_type: str
    filename: str
