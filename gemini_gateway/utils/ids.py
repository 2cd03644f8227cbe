"""ID helpers for scratch files.

Provides ``scratch_name(prefix, filename)``: a time-sortable, collision
resistant file name (``{prefix}_{millis}-{uuid16}{ext}``) that keeps the
original extension so the staged file stays recognizable on disk.
"""

from __future__ import annotations

import os
import time
import uuid
from typing import Optional

from werkzeug.utils import secure_filename


def new_id(prefix: str) -> str:
    """Generate a time-sortable unique ID with the given prefix."""
    millis = int(time.time() * 1000)
    rand = uuid.uuid4().hex[:16]
    return f"{prefix}_{millis:013d}-{rand}"


def scratch_name(prefix: str, filename: Optional[str] = None) -> str:
    """Unique scratch file name carrying the sanitized extension of ``filename``."""
    ext = os.path.splitext(secure_filename(filename or ""))[1].lower()
    return new_id(prefix) + ext
