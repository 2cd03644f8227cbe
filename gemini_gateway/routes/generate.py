"""Generate routes: POST /generate-text, POST /generate-from-image

Text: JSON { prompt } → { output }.
Image: multipart `image` file plus optional `prompt` form field → { output }.
The uploaded image is staged to the scratch dir, sent inline to Gemini,
and deleted before the response leaves the handler.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from gemini_gateway.errors import ClientInputError, error_response
from gemini_gateway.schemas import GenerationRequest
from gemini_gateway.services.upload_service import read_part, staged_upload

logger = logging.getLogger(__name__)

generate_bp = Blueprint("generate", __name__)

DEFAULT_IMAGE_PROMPT = "Describe this image"


def _invoke(req: GenerationRequest) -> str:
    llm = current_app.extensions["llm_service"]
    return llm.generate(current_app.config["GEMINI_MODEL"], req.prompt, req.parts)


def require_file(field: str):
    f = request.files.get(field)
    if f is None or not f.filename:
        raise ClientInputError(f"{field.capitalize()} file is required")
    return f


@generate_bp.route("/generate-text", methods=["POST"])
def generate_text():
    try:
        payload: Dict[str, Any] = request.get_json(silent=True) or {}
        prompt = payload.get("prompt") if isinstance(payload, dict) else None
        if not isinstance(prompt, str) or not prompt.strip():
            raise ClientInputError("Prompt is required")

        text = _invoke(GenerationRequest(prompt=prompt))
        logger.info("generate-text ok (%d chars)", len(text))
        return jsonify({"output": text})
    except Exception as e:
        return error_response(e)


@generate_bp.route("/generate-from-image", methods=["POST"])
def generate_from_image():
    try:
        f = require_file("image")
        prompt = (request.form.get("prompt") or "").strip() or DEFAULT_IMAGE_PROMPT
        with staged_upload(f, current_app.config["UPLOAD_DIR"]) as staged:
            req = GenerationRequest(prompt=prompt, parts=[read_part(staged)])
            text = _invoke(req)
        logger.info("generate-from-image ok for %s (%d chars)", staged.filename, len(text))
        return jsonify({"output": text})
    except Exception as e:
        return error_response(e)
