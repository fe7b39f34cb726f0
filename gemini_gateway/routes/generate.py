"""Generation routes: one endpoint per input modality.

- POST /generate-text           JSON {prompt}
- POST /generate-from-image     multipart image=file, prompt?
- POST /generate-from-document  multipart document=file, prompt?
- POST /generate-from-audio     multipart audio=file, prompt?

Success: 200 {output}. Failures are raised as ``GatewayError`` subclasses
and rendered as {error} by the app's error handlers. Uploaded files are
deleted when the handler exits, on every path.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from gemini_gateway.errors import ValidationError
from gemini_gateway.schemas import Modality, ModelReply
from gemini_gateway.services.content_adapter import (
    build_content,
    build_document_content,
    inline_part,
)
from gemini_gateway.services.llm_service import LLMService
from gemini_gateway.utils.text_extract import extract_text
from gemini_gateway.utils.uploads import uploaded_file

logger = logging.getLogger(__name__)

generate_bp = Blueprint("generate", __name__)

DEFAULT_PROMPTS = {
    Modality.IMAGE: "Describe this image",
    Modality.DOCUMENT: "Analyze this document",
    Modality.AUDIO: "Transcribe this audio",
}


def _llm() -> LLMService:
    return current_app.extensions["llm_service"]


def _upload_dir() -> str:
    return current_app.config["UPLOAD_DIR"]


def _form_prompt(modality: Modality) -> str:
    prompt = request.form.get("prompt", "")
    return prompt if prompt.strip() else DEFAULT_PROMPTS[modality]


def _reply(reply: ModelReply):
    return jsonify({"output": reply.text})


@generate_bp.route("/generate-text", methods=["POST"])
def generate_text():
    payload: Any = request.get_json(silent=True) or {}
    prompt = payload.get("prompt") if isinstance(payload, dict) else None
    if not isinstance(prompt, str) or not prompt.strip():
        raise ValidationError("Missing prompt in request body.")
    logger.info("generate-text prompt_chars=%d", len(prompt))
    return _reply(_llm().generate_text(prompt))


def _generate_from_inline(modality: Modality):
    field = modality.value
    prompt = _form_prompt(modality)
    with uploaded_file(request.files, field, _upload_dir()) as upload:
        part = inline_part(upload)
        logger.info("generate-from-%s mime=%s bytes=%d", field, upload.mime_type, len(part.data))
        reply = _llm().generate(build_content(prompt, [part]))
    return _reply(reply)


@generate_bp.route("/generate-from-image", methods=["POST"])
def generate_from_image():
    return _generate_from_inline(Modality.IMAGE)


@generate_bp.route("/generate-from-audio", methods=["POST"])
def generate_from_audio():
    return _generate_from_inline(Modality.AUDIO)


@generate_bp.route("/generate-from-document", methods=["POST"])
def generate_from_document():
    prompt = _form_prompt(Modality.DOCUMENT)
    with uploaded_file(request.files, Modality.DOCUMENT.value, _upload_dir()) as upload:
        text = extract_text(upload.storage_path, upload.mime_type)
        logger.info("generate-from-document mime=%s text_chars=%d", upload.mime_type, len(text))
        reply = _llm().generate(build_document_content(prompt, text))
    return _reply(reply)
