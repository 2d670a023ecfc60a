"""callai_providers package

One calling convention for chat completions across OpenAI, Anthropic,
Mistral, xAI Grok, Google Gemini and Together AI.

Public API (re-exported):
    - Entry point: :func:`call_ai`, :class:`ChatCaller`
    - Request/response types: :class:`ChatRequest`, :class:`CallOptions`,
      :class:`CallResult`, :class:`Usage`, :class:`Cost`
    - Errors: :class:`ProviderError`, :class:`ErrorCode`
    - Registry: :func:`get_registry`, :class:`ModelRegistry` and the model
      listing helpers

Example::

    from callai_providers import call_ai

    result = call_ai("mistral-small", [{"role": "user", "content": "hi"}])
    print(result.text, result.usage.total_tokens, result.cost.total)
"""

from .api import (
    ChatCaller,
    available_models,
    available_thinking_models,
    available_vision_models,
    call_ai,
    thinking_models,
    unique_models,
    vision_models,
)
from .base.dto import CallOptions, ChatRequest
from .base.errors import ErrorCode, ProviderError
from .base.models import CallResult, Cost, Usage
from .base.registry import ModelRegistry, get_registry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "call_ai",
    "ChatCaller",
    "ChatRequest",
    "CallOptions",
    "CallResult",
    "Usage",
    "Cost",
    "ProviderError",
    "ErrorCode",
    "ModelRegistry",
    "get_registry",
    "unique_models",
    "vision_models",
    "thinking_models",
    "available_models",
    "available_vision_models",
    "available_thinking_models",
]
