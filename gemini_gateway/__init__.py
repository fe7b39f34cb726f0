"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
build the shared Gemini client, enable CORS, register route blueprints,
and map gateway errors to JSON replies.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from langchain_core.language_models import BaseChatModel
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from gemini_gateway.config import Config, ensure_upload_dir
from gemini_gateway.errors import GatewayError
from gemini_gateway.routes.docs import docs_bp
from gemini_gateway.routes.generate import generate_bp
from gemini_gateway.services.llm_service import LLMService

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(GatewayError)
    def handle_gateway_error(e: GatewayError):
        logger.warning("%s: %s", type(e).__name__, e.message)
        return jsonify({"error": e.message}), e.status

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(e: RequestEntityTooLarge):
        limit = app.config.get("MAX_UPLOAD_MB")
        return jsonify({"error": f"File too large; max {limit} MB."}), 413

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return jsonify({"error": str(e)}), 500


def create_app(cfg=Config, llm: BaseChatModel | None = None) -> Flask:
    app = Flask(__name__)
    # Basic config
    app.config.from_object(cfg)
    ensure_upload_dir(cfg)
    # One client per process, shared by all requests
    app.extensions["llm_service"] = LLMService(cfg, llm=llm)
    # Allow all origins for local development, including preflight for file upload
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        supports_credentials=False,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "OPTIONS"],
    )

    # Blueprints
    app.register_blueprint(generate_bp)
    app.register_blueprint(docs_bp)
    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"status": "ok", "model": cfg.LLM_MODEL}

    return app
