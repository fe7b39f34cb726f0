"""Error taxonomy for the gateway.

Every error carries the HTTP status it maps to; the app factory turns
them into ``{"error": message}`` JSON replies.
"""

from __future__ import annotations


class GatewayError(Exception):
    status = 500

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class ValidationError(GatewayError):
    """A required field or upload is missing from the request."""

    status = 400


class UnsupportedFormat(GatewayError):
    """Document MIME type has no text extractor."""

    status = 500

    def __init__(self, mime_type: str):
        super().__init__(f"Unsupported file type: {mime_type}")
        self.mime_type = mime_type


class RemoteServiceError(GatewayError):
    """The generative model call failed (network, auth, quota, bad request)."""

    status = 500


class FileSystemError(GatewayError):
    status = 500
