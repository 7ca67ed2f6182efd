"""
Error Classification

Every failure of a GMGN call raises a subclass of ``GmgnError``. The
``category`` attribute tells callers which stage of the call failed; none of
these are retried by the library.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(str, Enum):
    """Stage of a call that produced the error."""

    PARAMS = "params"             # Parameters could not be serialized
    REQUEST = "request"           # HTTP request could not be built
    NETWORK = "network"           # Connection/transport failure
    TIMEOUT = "timeout"           # Overall request timeout hit
    HTTP_STATUS = "http_status"   # Transport answered with a non-200 status
    DECODE = "decode"             # Body was not a valid envelope
    API = "api"                   # Envelope carried a nonzero code


class GmgnError(Exception):
    """Base class for all GMGN client failures."""

    category: ErrorCategory = ErrorCategory.REQUEST

    def __init__(
        self,
        message: str,
        *,
        category: Optional[ErrorCategory] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if category is not None:
            self.category = category
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


class ParamsEncodingError(GmgnError):
    """Request parameters could not be turned into a query string or JSON body."""

    category = ErrorCategory.PARAMS


class RequestBuildError(GmgnError):
    """The HTTP request itself could not be constructed (bad URL, bad method)."""

    category = ErrorCategory.REQUEST


class TransportError(GmgnError):
    """Network-level failure while sending the request or reading the body."""

    category = ErrorCategory.NETWORK


class GmgnTimeoutError(TransportError):
    """The request did not complete within the configured timeout."""

    category = ErrorCategory.TIMEOUT

    def __init__(self, message: str = "Request timed out", *, timeout_s: Optional[float] = None):
        super().__init__(message, details={"timeout_s": timeout_s})
        self.timeout_s = timeout_s


class HTTPStatusError(GmgnError):
    """The server answered with something other than HTTP 200."""

    category = ErrorCategory.HTTP_STATUS

    def __init__(self, status_code: int, body: str, *, url: Optional[str] = None):
        super().__init__(
            f"gmgn: API request failed with status {status_code}: {body}",
            details={"status_code": status_code, "url": url},
        )
        self.status_code = status_code
        self.body = body
        self.url = url


class DecodeError(GmgnError):
    """The response body could not be decoded into the expected envelope."""

    category = ErrorCategory.DECODE

    def __init__(self, message: str, *, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class APIError(GmgnError):
    """The envelope reported a business failure (``code != 0``)."""

    category = ErrorCategory.API

    def __init__(self, code: int, msg: str):
        super().__init__(
            f"gmgn: API request failed with code {code}: {msg}",
            details={"code": code, "msg": msg},
        )
        self.code = code
        self.msg = msg


__all__ = [
    "ErrorCategory",
    "GmgnError",
    "ParamsEncodingError",
    "RequestBuildError",
    "TransportError",
    "GmgnTimeoutError",
    "HTTPStatusError",
    "DecodeError",
    "APIError",
]
