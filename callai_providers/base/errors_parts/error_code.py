"""
Normalized call error codes (taxonomy).

Defines the `ErrorCode` enumeration used across provider adapters, the
transport and the entry point. Values are lowercase snake_case and are
considered a stable public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    UNKNOWN_MODEL = "unknown_model"
    PROVIDER_RESOLUTION = "provider_resolution"
    MISSING_CREDENTIAL = "missing_credential"
    UNSUPPORTED = "unsupported"
    TIMEOUT = "timeout"
    NETWORK = "network"
    UPSTREAM_HTTP = "upstream_http"
    MALFORMED_BODY = "malformed_body"
    RESPONSE_SHAPE = "response_shape"
    VALIDATION = "validation"


__all__ = ["ErrorCode"]
