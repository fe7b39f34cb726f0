from __future__ import annotations

import io

import pytest
from langchain_core.messages import AIMessage

from gemini_gateway import create_app
from gemini_gateway.config import Config


class StubChatModel:
    """Stands in for the Gemini chat model; records every payload it gets."""

    def __init__(self, reply="hi"):
        self.reply = reply
        self.error = None
        self.calls = []

    def invoke(self, payload):
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        if isinstance(self.reply, AIMessage):
            return self.reply
        return AIMessage(content=self.reply)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def stub_llm():
    return StubChatModel()


@pytest.fixture
def make_app(upload_dir, stub_llm):
    def _make(**overrides):
        attrs = {"UPLOAD_DIR": str(upload_dir), "TESTING": True}
        attrs.update(overrides)
        cfg = type("TestConfig", (Config,), attrs)
        return create_app(cfg, llm=stub_llm)

    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


def file_part(data: bytes, filename: str, mime_type: str):
    return (io.BytesIO(data), filename, mime_type)
