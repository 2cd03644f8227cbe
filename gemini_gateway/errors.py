"""Error taxonomy and its mapping onto HTTP responses.

Three variants cover every failure a handler can hit:
- ``ClientInputError``: missing prompt or file (400).
- ``ProviderError``: the Gemini API answered with a structured failure;
  its status, reason phrase and detail payload are passed through.
- ``InternalError``: staging, filesystem or unexpected failures (500).
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from flask import Response, jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(GatewayError):
    status = 400


class ProviderError(GatewayError):
    def __init__(self, status: int, status_text: str, detail: Optional[Any] = None):
        super().__init__(status_text)
        self.status = status
        self.status_text = status_text
        self.detail = detail


class InternalError(GatewayError):
    status = 500


def as_gateway_error(exc: BaseException) -> GatewayError:
    if isinstance(exc, GatewayError):
        return exc
    return InternalError(str(exc) or "Unknown error")


def error_response(exc: BaseException) -> Tuple[Response, int]:
    """Build the JSON error body and status for any failure."""
    if isinstance(exc, HTTPException):
        # werkzeug-raised, e.g. 413 while parsing an oversized multipart body
        logger.info("HTTP %s: %s", exc.code, exc.description)
        return jsonify({"error": exc.description or exc.name}), exc.code or 500
    err = as_gateway_error(exc)
    if isinstance(err, ProviderError):
        logger.warning("Provider error %s: %s", err.status, err.status_text)
        body = {"error": err.status_text}
        if err.detail is not None:
            body["details"] = err.detail
        return jsonify(body), err.status
    if isinstance(err, ClientInputError):
        logger.warning("Rejected request: %s", err.message)
        return jsonify({"error": err.message}), err.status
    if isinstance(err, InternalError):
        # always called from an except block, so the active traceback is the one to log
        logger.exception("Request failed: %s", err.message)
        return jsonify({"error": err.message}), err.status
    raise TypeError(f"Unhandled error variant: {type(err).__name__}")
