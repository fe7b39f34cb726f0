"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the model settings, upload
directory and request limits. This keeps the rest of the codebase
decoupled from direct env access.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

# Load .env for local dev before any attribute below reads the environment
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return float(raw)


class Config:
    # Base
    GATEWAY_ENV = os.getenv("GATEWAY_ENV", "dev")
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "3000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Gemini via langchain-google-genai
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    LLM_MODEL = os.getenv("LLM_MODEL", "gemini-2.5-flash")
    LLM_TEMPERATURE = _optional_float("LLM_TEMPERATURE")
    # Deadline per remote call (seconds) and bounded retries for transient failures
    LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))
    LLM_MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "2"))

    # Uploads
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.abspath(os.path.join(os.getcwd(), "uploads")))
    MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "20"))
    MAX_CONTENT_LENGTH = MAX_UPLOAD_MB * 1024 * 1024


def ensure_upload_dir(cfg=Config) -> str:
    """Ensure the uploads directory exists and return its path."""
    os.makedirs(cfg.UPLOAD_DIR, exist_ok=True)
    return cfg.UPLOAD_DIR
