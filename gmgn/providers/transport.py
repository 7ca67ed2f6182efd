"""
Request/response plumbing shared by every GMGN endpoint.

A call is one HTTP round trip: the parameters are encoded (query string for
GET, JSON body for POST), the request is sent through a client created for
that call alone, and the body is unwrapped from the ``{code, msg, data}``
envelope. Every failure surfaces as a ``GmgnError`` subclass.
"""

from __future__ import annotations

import asyncio
import json
import time
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union

import httpx
import structlog
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from ..config import settings
from ..errors import (
    APIError,
    DecodeError,
    GmgnError,
    GmgnTimeoutError,
    HTTPStatusError,
    ParamsEncodingError,
    RequestBuildError,
    TransportError,
)
from ..types.envelope import Envelope, RawEnvelope

logger = structlog.stdlib.get_logger("gmgn.transport")

T = TypeVar("T")

Params = Union[BaseModel, Mapping[str, Any], None]

READ_METHODS = ("GET",)
WRITE_METHODS = ("POST",)


def _params_to_dict(params: Params) -> Dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        try:
            return params.model_dump(mode="json")
        except PydanticSerializationError as exc:
            raise ParamsEncodingError(f"gmgn: failed to serialize params: {exc}") from exc
    if isinstance(params, Mapping):
        bad_keys = [key for key in params if not isinstance(key, str)]
        if bad_keys:
            raise ParamsEncodingError(
                f"gmgn: parameter names must be strings, got {bad_keys!r}",
                details={"keys": [repr(key) for key in bad_keys]},
            )
        return dict(params)
    raise ParamsEncodingError(
        f"gmgn: params must be a model or a mapping, got {type(params).__name__}"
    )


def _query_value(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, dict)):
        raise ParamsEncodingError(
            f"gmgn: query parameter {key!r} must be a scalar, got {type(value).__name__}",
            details={"key": key},
        )
    return str(value)


def encode_query(params: Params) -> List[Tuple[str, str]]:
    """Flatten params into sorted query pairs, skipping ``None`` values."""
    values = _params_to_dict(params)
    return [
        (key, _query_value(key, value))
        for key, value in sorted(values.items())
        if value is not None
    ]


def encode_body(params: Params) -> bytes:
    """Serialize params to a JSON object body. ``None`` fields are kept as null."""
    if params is None:
        return b""
    values = _params_to_dict(params)
    try:
        return json.dumps(values, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise ParamsEncodingError(f"gmgn: failed to marshal params: {exc}") from exc


def join_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def build_request(
    method: str,
    path: str,
    params: Params = None,
    *,
    base_url: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Request:
    """Build the ``httpx.Request`` for a call without sending it."""

    method = method.upper()
    url = join_url(base_url or settings.normalized_base_url, path)
    merged_headers = {
        "Accept": "application/json",
        "User-Agent": settings.user_agent,
        **(headers or {}),
    }

    if method in READ_METHODS:
        query = encode_query(params)
        request_kwargs: Dict[str, Any] = {"params": query or None}
    elif method in WRITE_METHODS:
        merged_headers["Content-Type"] = "application/json"
        request_kwargs = {"content": encode_body(params)}
    else:
        raise RequestBuildError(f"gmgn: unsupported HTTP method {method!r}", details={"method": method})

    try:
        return httpx.Request(method, url, headers=merged_headers, **request_kwargs)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise RequestBuildError(f"gmgn: failed to create request: {exc}", details={"url": url}) from exc


def decode_response(
    status_code: int,
    content: bytes,
    response_model: Optional[Type[T]] = None,
    *,
    url: Optional[str] = None,
) -> Any:
    """Check the status, unwrap the envelope and decode ``data``.

    Business errors are detected before ``data`` is validated, so a failing
    envelope is always reported as ``APIError`` whatever its payload looks like.
    """

    if status_code != 200:
        raise HTTPStatusError(status_code, content.decode("utf-8", errors="replace"), url=url)

    try:
        raw = RawEnvelope.model_validate_json(content)
    except ValidationError as exc:
        raise DecodeError(
            f"gmgn: failed to unmarshal response: {exc}",
            body=content.decode("utf-8", errors="replace"),
        ) from exc

    if not raw.ok:
        raise APIError(raw.code, raw.msg)

    if response_model is None:
        return raw.data
    if raw.data is None:
        raise DecodeError("gmgn: response envelope has no data", body=content.decode("utf-8", errors="replace"))

    try:
        envelope = Envelope[response_model].model_validate(
            {"code": raw.code, "msg": raw.msg, "data": raw.data}
        )
    except ValidationError as exc:
        raise DecodeError(
            f"gmgn: failed to decode {getattr(response_model, '__name__', response_model)} payload: {exc}",
            body=content.decode("utf-8", errors="replace"),
        ) from exc
    return envelope.data


def _transport_error(exc: httpx.RequestError, timeout_s: float) -> TransportError:
    if isinstance(exc, httpx.TimeoutException):
        return GmgnTimeoutError(f"gmgn: request timed out after {timeout_s}s: {exc}", timeout_s=timeout_s)
    return TransportError(f"gmgn: failed to make request: {exc}", details={"exception": type(exc).__name__})


def _deadline_exceeded(timeout_s: float) -> GmgnTimeoutError:
    return GmgnTimeoutError(f"gmgn: request exceeded overall timeout of {timeout_s}s", timeout_s=timeout_s)


def _log_failure(method: str, url: str, exc: GmgnError, start: float) -> None:
    logger.warning(
        "gmgn_request_failed",
        method=method,
        url=url,
        category=exc.category.value,
        error=exc.message,
        duration_ms=round((time.perf_counter() - start) * 1000, 1),
    )


def _log_success(request: httpx.Request, start: float) -> None:
    logger.debug(
        "gmgn_response",
        method=request.method,
        url=str(request.url),
        duration_ms=round((time.perf_counter() - start) * 1000, 1),
    )


def _read_within_deadline(
    client: httpx.Client,
    request: httpx.Request,
    deadline: float,
    timeout_s: float,
) -> Tuple[int, bytes]:
    # Per-operation httpx timeouts restart on every chunk, so the body is
    # streamed and the overall deadline is checked between reads.
    response = client.send(request, stream=True)
    try:
        chunks: List[bytes] = []
        for chunk in response.iter_bytes():
            if time.monotonic() > deadline:
                raise _deadline_exceeded(timeout_s)
            chunks.append(chunk)
        if time.monotonic() > deadline:
            raise _deadline_exceeded(timeout_s)
    finally:
        response.close()
    return response.status_code, b"".join(chunks)


def send(
    method: str,
    path: str,
    params: Params = None,
    response_model: Optional[Type[T]] = None,
    *,
    base_url: Optional[str] = None,
    timeout_s: Optional[float] = None,
    transport: Optional[httpx.BaseTransport] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Any:
    """Perform one blocking GMGN call and return the decoded payload.

    ``timeout_s`` bounds the whole call, body download included.
    """

    timeout = timeout_s or settings.request_timeout_seconds
    start = time.perf_counter()
    deadline = time.monotonic() + timeout
    url = join_url(base_url or settings.normalized_base_url, path)

    try:
        request = build_request(method, path, params, base_url=base_url, headers=headers)
        url = str(request.url)
        logger.debug("gmgn_request", method=request.method, url=url)
        with httpx.Client(timeout=timeout, transport=transport) as client:
            try:
                status_code, content = _read_within_deadline(client, request, deadline, timeout)
            except httpx.RequestError as exc:
                raise _transport_error(exc, timeout) from exc
        payload = decode_response(status_code, content, response_model, url=url)
    except GmgnError as exc:
        _log_failure(method.upper(), url, exc, start)
        raise

    _log_success(request, start)
    return payload


async def _fetch_async(
    request: httpx.Request,
    timeout_s: float,
    transport: Optional[httpx.AsyncBaseTransport],
) -> httpx.Response:
    async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
        try:
            return await client.send(request)
        except httpx.RequestError as exc:
            raise _transport_error(exc, timeout_s) from exc


async def send_async(
    method: str,
    path: str,
    params: Params = None,
    response_model: Optional[Type[T]] = None,
    *,
    base_url: Optional[str] = None,
    timeout_s: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Any:
    """Async counterpart of ``send`` backed by ``httpx.AsyncClient``."""

    timeout = timeout_s or settings.request_timeout_seconds
    start = time.perf_counter()
    url = join_url(base_url or settings.normalized_base_url, path)

    try:
        request = build_request(method, path, params, base_url=base_url, headers=headers)
        url = str(request.url)
        logger.debug("gmgn_request", method=request.method, url=url)
        try:
            response = await asyncio.wait_for(_fetch_async(request, timeout, transport), timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise _deadline_exceeded(timeout) from exc
        payload = decode_response(response.status_code, response.content, response_model, url=url)
    except GmgnError as exc:
        _log_failure(method.upper(), url, exc, start)
        raise

    _log_success(request, start)
    return payload


__all__ = [
    "Params",
    "build_request",
    "decode_response",
    "encode_body",
    "encode_query",
    "join_url",
    "send",
    "send_async",
]
