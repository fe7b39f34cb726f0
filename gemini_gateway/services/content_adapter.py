"""ContentAdapter: builds the ordered content parts sent to the model.

- Image/audio: ``[InlineBinary(attachment), Text(prompt)]``; the
  attachment always precedes the prompt.
- Document: a single ``Text("prompt\\n\\nextracted")`` part; documents are
  inlined as text, never as binary.
- No attachment: ``[Text(prompt)]``.

``to_message_content`` renders parts as LangChain content blocks. MIME
types are passed through to the model as declared.
"""

from __future__ import annotations

import base64
from typing import Any, Dict, List, Optional, Sequence

from gemini_gateway.schemas import ContentPart, InlineBinaryPart, TextPart, UploadedFile
from gemini_gateway.utils.io_utils import read_bytes


def build_content(prompt: str, attachments: Optional[Sequence[ContentPart]] = None) -> List[ContentPart]:
    if not attachments:
        return [TextPart(prompt)]
    return [*attachments, TextPart(prompt)]


def build_document_content(prompt: str, document_text: str) -> List[ContentPart]:
    return [TextPart(f"{prompt}\n\n{document_text}")]


def inline_part(upload: UploadedFile) -> InlineBinaryPart:
    """Read an uploaded file into an inline binary part."""
    return InlineBinaryPart(mime_type=upload.mime_type, data=read_bytes(upload.storage_path))


def _block_type(mime_type: str) -> str:
    major = mime_type.split("/", 1)[0]
    if major in ("image", "audio"):
        return major
    return "file"


def _to_block(part: ContentPart) -> Dict[str, Any]:
    if isinstance(part, TextPart):
        return {"type": "text", "text": part.text}
    return {
        "type": _block_type(part.mime_type),
        "source_type": "base64",
        "data": base64.b64encode(part.data).decode("ascii"),
        "mime_type": part.mime_type,
    }


def to_message_content(parts: Sequence[ContentPart]) -> List[Dict[str, Any]]:
    return [_to_block(p) for p in parts]
