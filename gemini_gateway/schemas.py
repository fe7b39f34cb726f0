"""Request-scoped data shapes passed between routes and services.

Content parts are immutable; a request body for the model is an ordered
list of them. Nothing here outlives a single HTTP call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Modality(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    DOCUMENT = "document"
    AUDIO = "audio"


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class InlineBinaryPart:
    mime_type: str
    data: bytes


ContentPart = Union[TextPart, InlineBinaryPart]


@dataclass(frozen=True)
class UploadedFile:
    storage_path: str
    mime_type: str
    original_name: str


@dataclass(frozen=True)
class ModelReply:
    text: str
    empty: bool = False
