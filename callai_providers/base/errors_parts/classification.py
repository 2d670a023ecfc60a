"""
Post-hoc translation of call failures into human-actionable messages.

Status-carrying upstream failures are mapped to specific guidance (auth,
rate limit, billing) and provider-specific credential hints are layered on
top. Everything else is wrapped with the provider id while preserving the
original message verbatim.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


_STATUS_GUIDANCE: Dict[int, Callable[[str], str]] = {
    401: lambda p: f"Authentication failed for {p}. Check your API key.",
    429: lambda p: f"Rate limit exceeded for {p}. Try again later.",
    402: lambda p: f"Payment required for {p}. Check account balance.",
}

# (provider, marker in upstream message) -> hint
_CREDENTIAL_HINTS: Dict[tuple, str] = {
    ("anthropic", "invalid_api_key"): "Invalid Anthropic API key. Check if it starts with sk-ant-api03-",
}

# Failures raised before any upstream contact keep their own message.
_PREFLIGHT_CODES = frozenset(
    {
        ErrorCode.UNKNOWN_MODEL,
        ErrorCode.PROVIDER_RESOLUTION,
        ErrorCode.MISSING_CREDENTIAL,
        ErrorCode.UNSUPPORTED,
        ErrorCode.VALIDATION,
    }
)


def humanize_error(err: ProviderError, provider: str) -> ProviderError:
    """Return a new :class:`ProviderError` with an actionable message.

    Precedence:
        1. Pre-flight failures are returned unchanged.
        2. HTTP 401 / 429 / 402 guidance naming the provider.
        3. Provider-specific credential hints matched on the upstream text.
        4. ``"<provider> API call failed: <original message>"``.

    The code, status and model are preserved; ``raw`` points at the original
    error so the caller can chain it.
    """
    if err.code in _PREFLIGHT_CODES:
        return err
    status = err.status
    message: Optional[str] = None
    if status in _STATUS_GUIDANCE:
        message = _STATUS_GUIDANCE[status](provider)
    else:
        for (hint_provider, marker), hint in _CREDENTIAL_HINTS.items():
            if hint_provider == provider and marker in err.message:
                message = hint
                break
    if message is None:
        message = f"{provider} API call failed: {err.message}"
    return ProviderError(
        code=err.code,
        message=message,
        provider=provider,
        model=err.model,
        status=err.status,
        raw=err,
    )


__all__ = ["humanize_error"]
