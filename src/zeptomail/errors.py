"""
Error taxonomy raised by every client operation.

Four kinds, flat under ZeptoMailError:
- ZeptoMailApiError: the service answered with an error envelope
- NetworkError: no well-formed HTTP response was obtained
- SerializationError: a request or response body could not be (de)coded
- UnexpectedResponseError: a well-formed response broke an assumed invariant
"""

from __future__ import annotations

from zeptomail.models.responses import ApiError


class ZeptoMailError(Exception):
    """Base exception for ZeptoMail client errors."""

    prefix = "ZeptoMail Error"

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class ZeptoMailApiError(ZeptoMailError):
    """The service rejected the request."""

    prefix = "API Error"

    def __init__(self, error: ApiError, status_code: int | None = None) -> None:
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def request_id(self) -> str | None:
        return self.error.request_id


class NetworkError(ZeptoMailError):
    """Transport failure: DNS, connect, TLS, timeout or reset."""

    prefix = "Network Error"


class SerializationError(ZeptoMailError):
    """Body could not be encoded or decoded into its expected shape."""

    prefix = "Serialization Error"

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message, original_error=original_error)
        self.status_code = status_code
        self.body = body


class UnexpectedResponseError(ZeptoMailError):
    """Well-formed response that violates an assumed invariant."""

    prefix = "Unexpected Response"
