"""Errors raised by services and translated to JSON responses by the app."""

from __future__ import annotations

from starlette.exceptions import HTTPException


class StoreError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class InvalidPayloadError(StoreError):
    """Raised when a request body lacks a required field or has the wrong shape."""

    def __init__(self, message: str):
        super().__init__(message, "invalid", 400)


class RecordNotFoundError(StoreError):
    """Raised when no record matches the requested code."""

    def __init__(self, message: str):
        super().__init__(message, "not_found", 404)


class PayloadTooLargeError(HTTPException):
    """Raised while reading a request body that grows past the configured limit."""

    def __init__(self, max_body_bytes: int):
        super().__init__(status_code=413, detail="Requisição muito grande")
        self.message = f"Limite de {max_body_bytes} bytes"
