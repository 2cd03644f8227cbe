"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the provider credential, server
binding, model defaults, and the scratch directory used for uploads.
This keeps the rest of the codebase decoupled from direct env access.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # picks up a local .env before the class body reads os.environ


class Config:
    # Provider credential; GOOGLE_API_KEY is what langchain-google-genai reads by default
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or ""

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = os.getenv("PORT") or "3000"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Model defaults (can override via env)
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    TEMPERATURE = os.getenv("TEMPERATURE") or "0.2"

    # Uploads are staged here for the lifetime of a single request
    UPLOAD_DIR = os.getenv(
        "UPLOAD_DIR", os.path.join(tempfile.gettempdir(), "gemini-gateway-uploads")
    )
    MAX_UPLOAD_MB = os.getenv("MAX_UPLOAD_MB") or "20"


@dataclass(frozen=True)
class ConfigCheck:
    ok: bool
    error: Optional[str] = None


def check_config(cfg: type[Config] = Config) -> ConfigCheck:
    """Validate settings needed before the server may bind a listener."""
    if not (cfg.GEMINI_API_KEY or "").strip():
        return ConfigCheck(False, "GEMINI_API_KEY is not set (checked GEMINI_API_KEY and GOOGLE_API_KEY)")
    try:
        port = int(cfg.PORT)
    except (TypeError, ValueError):
        return ConfigCheck(False, f"PORT must be an integer, got {cfg.PORT!r}")
    if not 0 < port < 65536:
        return ConfigCheck(False, f"PORT out of range: {port}")
    try:
        float(cfg.TEMPERATURE)
    except (TypeError, ValueError):
        return ConfigCheck(False, f"TEMPERATURE must be a number, got {cfg.TEMPERATURE!r}")
    try:
        max_mb = int(cfg.MAX_UPLOAD_MB)
    except (TypeError, ValueError):
        return ConfigCheck(False, f"MAX_UPLOAD_MB must be an integer, got {cfg.MAX_UPLOAD_MB!r}")
    if max_mb <= 0:
        return ConfigCheck(False, f"MAX_UPLOAD_MB must be positive: {max_mb}")
    return ConfigCheck(True)


def ensure_upload_dir(cfg: type[Config] = Config) -> str:
    """Ensure the scratch directory exists and return its path."""
    os.makedirs(cfg.UPLOAD_DIR, exist_ok=True)
    return cfg.UPLOAD_DIR
