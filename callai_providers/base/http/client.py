"""Pooled ``httpx.Client`` instances keyed by purpose.

Provider calls reuse one client per purpose (``"chat"`` by default) so
connections are kept alive between calls. Clients carry no default timeout;
each request passes its own (see :mod:`callai_providers.base.http.transport`).

Clients are closed at interpreter exit, or earlier through
:func:`close_all_clients`. A purpose first requested with a custom
``transport`` keeps that transport until it is closed.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional

import httpx

_CLIENTS: Dict[str, httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(purpose: str = "chat", transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for ``purpose``.

    Parameters:
        purpose: A short string discriminating separate pools. Keep stable to
            maximize reuse.
        transport: Optional ``httpx`` transport used when the client is first
            created (``httpx.MockTransport`` in tests). Ignored for an
            existing pooled client.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant
        lock.
    """
    client = _CLIENTS.get(purpose)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(purpose)
        if client is not None:
            return client
        client = httpx.Client(timeout=None, transport=transport)
        _CLIENTS[purpose] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            with contextlib.suppress(OSError, httpx.HTTPError):
                c.close()
        _CLIENTS.clear()


def _cleanup_at_exit() -> None:
    """atexit hook to ensure clients are closed on interpreter exit."""
    close_all_clients()


atexit.register(_cleanup_at_exit)

__all__ = ["get_httpx_client", "close_all_clients"]
