"""Media routes: POST /generate-from-audio, POST /generate-from-video

Gemini is not called for these; the upload is staged and released like
any other, and the caller gets an advisory telling them how to
pre-process the media and resubmit through the text or image routes.
Response JSON: { message, file }.
"""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify

from gemini_gateway.errors import error_response
from gemini_gateway.routes.generate import require_file
from gemini_gateway.services.upload_service import staged_upload

logger = logging.getLogger(__name__)

media_bp = Blueprint("media", __name__)

AUDIO_ADVISORY = (
    "Audio processing is not supported directly. "
    "Convert the speech to text first, then send it to /generate-text."
)
VIDEO_ADVISORY = (
    "Video processing is not supported directly. "
    "Extract frames from the video first, then send them to /generate-from-image."
)


def _advise(field: str, message: str):
    try:
        f = require_file(field)
        with staged_upload(f, current_app.config["UPLOAD_DIR"]) as staged:
            logger.info("%s upload %s received; returning advisory", field, staged.filename)
            return jsonify({"message": message, "file": staged.filename})
    except Exception as e:
        return error_response(e)


@media_bp.route("/generate-from-audio", methods=["POST"])
def generate_from_audio():
    return _advise("audio", AUDIO_ADVISORY)


@media_bp.route("/generate-from-video", methods=["POST"])
def generate_from_video():
    return _advise("video", VIDEO_ADVISORY)
