"""LLMService: the single shared Gemini chat model and its reply reader.

The model is built once per app (``create_app``) with a per-call timeout
and bounded retries, then reused by every request. All call failures are
re-raised as ``RemoteServiceError`` carrying the original message.

``read_reply`` is the one place model output is turned into text for the
JSON reply: it takes the first non-empty text segment of the response,
or the ``NO_RESPONSE`` sentinel when there is none.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Sequence, Union

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from gemini_gateway.config import Config
from gemini_gateway.errors import RemoteServiceError
from gemini_gateway.schemas import ContentPart, ModelReply
from gemini_gateway.services.content_adapter import to_message_content

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response"


def _first_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        for part in content:
            if isinstance(part, str) and part:
                return part
            if isinstance(part, dict) and part.get("type") == "text" and part.get("text"):
                return part["text"]
    return ""


def read_reply(response: Any) -> ModelReply:
    """Extract the reply text from an ``AIMessage`` (or bare content)."""
    text = _first_text(getattr(response, "content", response))
    if not text:
        logger.warning("Model returned no text content")
        return ModelReply(text=NO_RESPONSE, empty=True)
    return ModelReply(text=text)


def build_chat_model(cfg=Config) -> ChatGoogleGenerativeAI:
    kwargs: Dict[str, Any] = {
        "model": cfg.LLM_MODEL,
        "timeout": cfg.LLM_TIMEOUT,
        "max_retries": cfg.LLM_MAX_RETRIES,
    }
    if cfg.GEMINI_API_KEY:
        kwargs["google_api_key"] = cfg.GEMINI_API_KEY
    if cfg.LLM_TEMPERATURE is not None:
        kwargs["temperature"] = cfg.LLM_TEMPERATURE
    return ChatGoogleGenerativeAI(**kwargs)


class LLMService:
    def __init__(self, cfg=Config, llm: BaseChatModel | None = None):
        self.cfg = cfg
        self.model_name = cfg.LLM_MODEL
        self.llm = llm if llm is not None else build_chat_model(cfg)

    def _invoke(self, payload: Union[str, list]) -> ModelReply:
        try:
            response = self.llm.invoke(payload)
        except Exception as e:
            logger.exception("Model call to %s failed", self.model_name)
            raise RemoteServiceError(str(e)) from e
        return read_reply(response)

    def generate_text(self, prompt: str) -> ModelReply:
        """Send ``prompt`` as a bare string, without content parts."""
        return self._invoke(prompt)

    def generate(self, parts: Sequence[ContentPart]) -> ModelReply:
        """Send the parts as one user-role message."""
        message = HumanMessage(content=to_message_content(parts))
        return self._invoke([message])
