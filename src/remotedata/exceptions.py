"""Exceptions carried in ``Failed`` by the response and capture bridges."""

from __future__ import annotations


class RemoteDataError(Exception):
    """Base exception for all errors created by remotedata."""


class ResponseError(RemoteDataError):
    """An HTTP response came back with an error status (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class ResponseDecodeError(RemoteDataError):
    """The response body is not valid JSON."""


class ResponseValidationError(RemoteDataError):
    """The response body failed model validation."""
