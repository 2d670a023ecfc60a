"""JSON-over-HTTPS POST used by every provider adapter.

One request per call: no retries, no streaming. The transport turns every
failure into a :class:`ProviderError` with a specific code:

- ``timeout``: no reply within ``timeout_ms``.
- ``network``: connection-level failure.
- ``malformed_body``: empty body, or a body that is not JSON.
- ``upstream_http``: JSON body with a non-2xx status.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx

from ...config.defaults import ERROR_BODY_PREVIEW_CHARS
from ..errors import ErrorCode, ProviderError
from .client import get_httpx_client


class Transport(Protocol):
    """Callable performing one JSON POST and returning the decoded reply."""

    def __call__(
        self,
        url: str,
        payload: Mapping[str, Any],
        headers: Mapping[str, str],
        timeout_ms: int,
    ) -> Dict[str, Any]:  # pragma: no cover - protocol
        ...


def _upstream_message(parsed: Any, body: str) -> str:
    if isinstance(parsed, Mapping):
        error = parsed.get("error")
        if isinstance(error, Mapping) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        if parsed.get("message"):
            return str(parsed["message"])
    return body[:ERROR_BODY_PREVIEW_CHARS]


def decode_response(status: int, body: str) -> Dict[str, Any]:
    """Decode a raw reply or raise the matching :class:`ProviderError`."""
    if not body or not body.strip():
        raise ProviderError(
            code=ErrorCode.MALFORMED_BODY,
            message=f"Empty response from API (status: {status})",
            status=status,
        )
    try:
        parsed = json.loads(body)
    except ValueError as e:
        raise ProviderError(
            code=ErrorCode.MALFORMED_BODY,
            message=(
                f"Failed to parse JSON response. Status: {status}, "
                f"Body: {body[:ERROR_BODY_PREVIEW_CHARS]}..."
            ),
            status=status,
            raw=e,
        ) from e
    if not 200 <= status < 300:
        raise ProviderError(
            code=ErrorCode.UPSTREAM_HTTP,
            message=f"API Error [{status}]: {_upstream_message(parsed, body)}",
            status=status,
        )
    if not isinstance(parsed, dict):
        raise ProviderError(
            code=ErrorCode.MALFORMED_BODY,
            message=f"Expected a JSON object from API, got {type(parsed).__name__}",
            status=status,
        )
    return parsed


class HttpxTransport:
    """Default transport backed by a pooled ``httpx.Client``.

    Parameters:
        client: Optional explicit client; defaults to the shared "chat" pool.
    """

    def __init__(self, client: Optional[httpx.Client] = None) -> None:
        self._client = client

    @property
    def client(self) -> httpx.Client:
        return self._client or get_httpx_client("chat")

    def __call__(
        self,
        url: str,
        payload: Mapping[str, Any],
        headers: Mapping[str, str],
        timeout_ms: int,
    ) -> Dict[str, Any]:
        merged = {"Content-Type": "application/json", **headers}
        try:
            resp = self.client.post(url, json=dict(payload), headers=merged, timeout=timeout_ms / 1000.0)
        except httpx.TimeoutException as e:
            raise ProviderError(
                code=ErrorCode.TIMEOUT,
                message=f"Request timeout after {timeout_ms}ms",
                raw=e,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(
                code=ErrorCode.NETWORK,
                message=f"Network error: {e}",
                raw=e,
            ) from e
        return decode_response(resp.status_code, resp.text)


def post_json(
    url: str,
    payload: Mapping[str, Any],
    headers: Mapping[str, str],
    timeout_ms: int,
) -> Dict[str, Any]:
    """POST ``payload`` as JSON through the shared pool and decode the reply."""
    return HttpxTransport()(url, payload, headers, timeout_ms)


__all__ = ["Transport", "HttpxTransport", "decode_response", "post_json"]
