"""
Abstract provider adapter.

An adapter owns everything provider-specific about one chat completion:
the model table, the endpoint, authentication headers, the request payload
and the reply envelope. Both translation methods are pure; the caller owns
I/O.

Subclasses implement:
    - ``format_payload``: canonical messages and options to the wire body.
    - ``extract_response``: reply envelope to generated text.

and may override ``build_url``, ``build_headers`` and ``extract_usage``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Mapping, Optional

from ..capabilities import ThinkingConfig
from ..dto import CallOptions
from ..errors import ErrorCode, ProviderError
from ..models import Message, ModelEntry
from .provider_id import ProviderId


class ProviderAdapter(ABC):
    """Base class for the per-provider wire translation.

    Class attributes:
        provider_id: The provider this adapter speaks for.
        endpoint: Chat completion endpoint URL.
        models: Built-in alias table (alias → :class:`ModelEntry`).
    """

    provider_id: ClassVar[ProviderId]
    endpoint: ClassVar[str]
    models: ClassVar[Mapping[str, ModelEntry]] = {}

    @property
    def name(self) -> str:
        return self.provider_id.value

    def build_url(self, wire_model: str, api_key: str) -> str:
        return self.endpoint

    def build_headers(self, api_key: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {api_key}"}

    @abstractmethod
    def format_payload(
        self,
        messages: List[Message],
        wire_model: str,
        max_tokens: int,
        options: CallOptions,
        thinking: Optional[ThinkingConfig] = None,
    ) -> Dict[str, Any]:
        """Translate canonical messages into the provider request body.

        Parameters:
            messages: Normalized messages (system turns included).
            wire_model: Provider-side model name.
            max_tokens: Effective completion token limit.
            options: Validated call options (temperature etc.).
            thinking: Resolved thinking knob, or ``None`` to omit it.
        """

    @abstractmethod
    def extract_response(self, data: Mapping[str, Any]) -> str:
        """Return the generated text from the provider reply."""

    def extract_usage(self, data: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
        """Return the provider usage block, or ``None`` when absent."""
        usage = data.get("usage")
        return usage if isinstance(usage, Mapping) else None

    def shape_error(self, detail: str) -> ProviderError:
        return ProviderError(
            code=ErrorCode.RESPONSE_SHAPE,
            message=f"Invalid {self.name} response structure: {detail}",
            provider=self.name,
        )


__all__ = ["ProviderAdapter"]
