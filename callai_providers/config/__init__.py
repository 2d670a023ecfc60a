"""Unified configuration layer for callai_providers.

Goals
-----
* Load a ``.env`` file once so credentials can live next to the project.
* Expose process settings read from the environment through a single call
  site: ``get_settings()``.

Environment Variables
---------------------
``DOTENV_FILE``        path of the dotenv file (default ``.env``)
``CALLAI_TIMEOUT_MS``  default request timeout in milliseconds
``CALLAI_MODELS_FILE`` custom model table (``.py``, ``.json``, ``.yaml``) or
                       dotted module name exporting ``MODELS``
``CALLAI_LOG_LEVEL``   log level name for the shared ``callai`` logger

Public API
----------
* load_dotenv_once() -> None
* get_settings() -> Settings
"""
from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from typing import Optional

from .defaults import DEFAULT_TIMEOUT_MS
from .env import is_placeholder

_DOTENV_LOADED = False
_DOTENV_LOCK = threading.Lock()
_SETTINGS: Optional["Settings"] = None


@dataclass(frozen=True)
class Settings:
    """Process-level settings derived from the environment.

    Attributes:
        timeout_ms: Default transport timeout used when a call sets none.
        models_file: Optional location of the custom model table.
        log_level: Optional log level name for the shared logger.
    """

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    models_file: Optional[str] = None
    log_level: Optional[str] = None


def load_dotenv_once() -> None:
    """Lightweight .env loader (no external dependency).

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Overrides existing environment variables only if their
    current values appear to be placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    with _DOTENV_LOCK:
        if _DOTENV_LOADED:
            return
        path = os.getenv("DOTENV_FILE", ".env")
        try:
            if os.path.isfile(path):
                with open(path, "r", encoding="utf-8") as fh:
                    for line in fh:
                        line = line.strip()
                        if not line or line.startswith("#") or "=" not in line:
                            continue
                        k, v = line.split("=", 1)
                        k = k.strip()
                        v = v.strip().strip('"').strip("'")
                        if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                            os.environ[k] = v
        finally:
            _DOTENV_LOADED = True


def _parse_positive_int(raw: Optional[str], default: int) -> int:
    if not raw:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_settings(refresh: bool = False) -> Settings:
    """Return the process-cached :class:`Settings` instance.

    The dotenv file is loaded first so its values participate. Pass
    ``refresh=True`` to re-read the environment (used by tests).
    """
    global _SETTINGS
    if _SETTINGS is not None and not refresh:
        return _SETTINGS
    load_dotenv_once()
    _SETTINGS = Settings(
        timeout_ms=_parse_positive_int(os.getenv("CALLAI_TIMEOUT_MS"), DEFAULT_TIMEOUT_MS),
        models_file=os.getenv("CALLAI_MODELS_FILE") or None,
        log_level=os.getenv("CALLAI_LOG_LEVEL") or None,
    )
    return _SETTINGS


__all__ = ["Settings", "load_dotenv_once", "get_settings"]
