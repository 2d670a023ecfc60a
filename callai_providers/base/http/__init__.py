"""HTTP client pool and JSON transport."""

from .client import close_all_clients, get_httpx_client
from .transport import HttpxTransport, Transport, decode_response, post_json

__all__ = [
    "close_all_clients",
    "get_httpx_client",
    "HttpxTransport",
    "Transport",
    "decode_response",
    "post_json",
]
