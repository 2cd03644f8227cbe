"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
enable CORS, attach the Gemini adapter, and register route blueprints.
"""

from __future__ import annotations

from typing import Any, Optional

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from gemini_gateway.config import Config, ensure_upload_dir
from gemini_gateway.errors import GatewayError, error_response
from gemini_gateway.routes.generate import generate_bp
from gemini_gateway.routes.media import media_bp
from gemini_gateway.services.llm_service import LLMService


def create_app(cfg: type[Config] = Config, llm: Optional[Any] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(cfg)
    app.config["MAX_CONTENT_LENGTH"] = int(cfg.MAX_UPLOAD_MB) * 1024 * 1024
    ensure_upload_dir(cfg)
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        supports_credentials=False,
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "OPTIONS"],
    )

    # Anything exposing generate(model_id, prompt, parts) -> str works here
    app.extensions["llm_service"] = llm if llm is not None else LLMService(cfg)

    app.register_blueprint(generate_bp)
    app.register_blueprint(media_bp)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e)

    @app.errorhandler(GatewayError)
    def handle_gateway_error(e: GatewayError):
        return error_response(e)

    @app.get("/")
    def index():
        return "Gemini API server is running"

    @app.get("/health")
    def health():
        return {"status": "ok", "model": app.config["GEMINI_MODEL"]}

    return app
