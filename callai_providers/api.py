"""Entry point: one uniform call over every provider.

``call_ai`` accepts four positional shapes::

    call_ai(model, messages)
    call_ai(model, messages, options)
    call_ai(provider, model, messages)
    call_ai(provider, model, messages, options)

``options`` may be a mapping, a :class:`CallOptions` or keyword arguments
(``max_tokens``/``maxTokens``, ``temperature``, ``think``, ``timeout``).
The shapes are folded into one :class:`ChatRequest` and handed to
:class:`ChatCaller`, which runs the call::

    resolve provider -> normalize messages -> vision gate -> credential
    -> thinking knob -> payload -> transport -> text -> usage -> cost

Every failure surfaces as :class:`ProviderError`; no partial result is
ever returned.
"""

from __future__ import annotations

import logging
import time
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from .base.capabilities import resolve_thinking
from .base.dto import CallOptions, ChatRequest
from .base.errors import ErrorCode, ProviderError, humanize_error
from .base.factory import parse_provider
from .base.http import HttpxTransport, Transport
from .base.logging import LogContext, get_logger, normalized_log_event
from .base.models import CallResult, Message
from .base.registry import ModelRegistry, get_registry
from .base.tokens import compute_cost, normalize_usage
from .base.utils.messages import has_image, normalize_messages
from .config import get_settings
from .config.defaults import DEFAULT_MODEL

_logger = get_logger("callai.call")

OptionsInput = Union[CallOptions, Mapping[str, Any], None]

_USAGE_HINT = (
    "Invalid arguments. Use: call_ai(model, messages, options?) "
    "or call_ai(provider, model, messages, options?)"
)


def _validation_error(exc: ValidationError) -> ProviderError:
    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(p) for p in first.get("loc", ())) or "request"
    return ProviderError(
        code=ErrorCode.VALIDATION,
        message=f"Invalid {where}: {first.get('msg', str(exc))}",
        raw=exc,
    )


def build_options(options: OptionsInput = None, **fields: Any) -> CallOptions:
    """Merge an options object/mapping with keyword fields into :class:`CallOptions`.

    Keyword fields win over the mapping.

    Raises:
        ProviderError: ``validation`` for unknown keys or out-of-range values.
        TypeError: when ``options`` is neither a mapping nor ``CallOptions``.
    """
    if isinstance(options, CallOptions):
        base = options.model_dump(exclude_none=True)
    elif options is None:
        base = {}
    elif isinstance(options, Mapping):
        base = dict(options)
    else:
        raise TypeError(f"options must be a mapping or CallOptions, not {type(options).__name__}")
    base.update(fields)
    try:
        return CallOptions.model_validate(base)
    except ValidationError as exc:
        raise _validation_error(exc) from exc


def build_request(*args: Any, **kwargs: Any) -> ChatRequest:
    """Fold the flexible positional call shapes into a :class:`ChatRequest`.

    Raises:
        TypeError: for an unsupported number or arrangement of arguments.
        ProviderError: ``validation`` when the request content is invalid.
    """
    provider: Optional[str] = kwargs.pop("provider", None)
    options: OptionsInput = kwargs.pop("options", None)
    if len(args) == 4:
        provider, model, messages, options = args
    elif len(args) == 3:
        if isinstance(args[0], str) and isinstance(args[1], (list, tuple)):
            model, messages, options = args
        else:
            provider, model, messages = args
    elif len(args) == 2:
        model, messages = args
    else:
        raise TypeError(_USAGE_HINT)
    if not isinstance(messages, (list, tuple)):
        raise TypeError(f"messages must be a list, not {type(messages).__name__}. {_USAGE_HINT}")

    call_options = build_options(options, **kwargs)
    try:
        return ChatRequest(
            model=model or DEFAULT_MODEL,
            messages=list(messages),
            provider=provider or None,
            options=call_options,
        )
    except ValidationError as exc:
        raise _validation_error(exc) from exc


class ChatCaller:
    """Runs chat requests against the registry through a transport.

    Parameters:
        registry: Model registry; defaults to the process-wide one.
        transport: Callable ``(url, payload, headers, timeout_ms) -> dict``;
            defaults to the pooled ``httpx`` transport.
    """

    def __init__(self, registry: Optional[ModelRegistry] = None, transport: Optional[Transport] = None) -> None:
        self._registry = registry
        self._transport: Transport = transport or HttpxTransport()

    @property
    def registry(self) -> ModelRegistry:
        return self._registry or get_registry()

    def resolve_provider(self, request: ChatRequest) -> str:
        if request.provider:
            return parse_provider(request.provider).value
        registry = self.registry
        provider = registry.resolve(request.model)
        if provider is None:
            raise ProviderError(
                code=ErrorCode.UNKNOWN_MODEL,
                message=f"Unknown model: {request.model}. Available: {', '.join(registry.all_aliases())}",
                model=request.model,
            )
        return provider

    def call(self, request: ChatRequest) -> CallResult:
        """Execute one request and return the canonical result.

        Raises:
            ProviderError: on any failure, with an actionable message.
        """
        provider = self.resolve_provider(request)
        ctx = LogContext(provider=provider, model=request.model)
        normalized_log_event(_logger, "call.start", ctx, phase="start", messages=len(request.messages))
        started = time.perf_counter()
        try:
            result = self._run(provider, request)
        except ProviderError as err:
            if err.provider is None:
                err.provider = provider
            if err.model is None:
                err.model = request.model
            final = humanize_error(err, provider)
            normalized_log_event(
                _logger,
                "call.error",
                ctx,
                phase="error",
                error_code=final.code.value,
                level=logging.WARNING,
                status=final.status,
                message=final.message,
                latency_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            if final is err:
                raise
            raise final from err
        normalized_log_event(
            _logger,
            "call.end",
            ctx,
            phase="end",
            tokens=result.usage,
            cost=result.cost.to_dict(),
            latency_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return result

    def _run(self, provider: str, request: ChatRequest) -> CallResult:
        registry = self.registry
        slot = registry.slot(provider)
        entry = registry.entry(provider, request.model)
        adapter = slot.adapter
        messages: List[Message] = normalize_messages(request.messages)

        if has_image(messages) and not registry.supports_vision(provider, request.model):
            raise ProviderError(
                code=ErrorCode.UNSUPPORTED,
                message=(
                    f"Model {request.model} doesn't support images. "
                    f"Use one of: {', '.join(registry.vision_aliases())}"
                ),
            )
        if not slot.api_key:
            raise ProviderError(
                code=ErrorCode.MISSING_CREDENTIAL,
                message=f"Missing API key for {provider}. Set {slot.env_var} in the environment or .env",
            )

        options = request.options
        thinking = resolve_thinking(
            provider, options.think, supported=registry.supports_thinking(provider, request.model)
        )
        try:
            payload = adapter.format_payload(
                messages, entry.wire_name, options.effective_max_tokens(), options, thinking
            )
        except ValueError as exc:
            raise ProviderError(code=ErrorCode.VALIDATION, message=f"Invalid image content: {exc}", raw=exc) from exc

        try:
            data = self._transport(
                adapter.build_url(entry.wire_name, slot.api_key),
                payload,
                adapter.build_headers(slot.api_key),
                options.timeout or get_settings().timeout_ms,
            )
        except ProviderError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise ProviderError(code=ErrorCode.NETWORK, message=f"Transport failed: {exc}", raw=exc) from exc
        text = adapter.extract_response(data)
        usage = normalize_usage(provider, adapter.extract_usage(data), messages, text)
        return CallResult(
            text=text,
            usage=usage,
            model=request.model,
            cost=compute_cost(usage, entry.cost),
            provider=provider,
        )


_DEFAULT_CALLER = ChatCaller()


def call_ai(*args: Any, **kwargs: Any) -> CallResult:
    """Issue one chat completion; see the module docstring for call shapes."""
    return _DEFAULT_CALLER.call(build_request(*args, **kwargs))


# ----- listing helpers over the process-wide registry -----
def unique_models() -> List[str]:
    return get_registry().unique_models()


def vision_models() -> List[str]:
    return get_registry().vision_models()


def thinking_models() -> List[str]:
    return get_registry().thinking_models()


def available_models() -> List[str]:
    return get_registry().available_models()


def available_vision_models() -> List[str]:
    return get_registry().available_vision_models()


def available_thinking_models() -> List[str]:
    return get_registry().available_thinking_models()


__all__ = [
    "ChatCaller",
    "build_options",
    "build_request",
    "call_ai",
    "unique_models",
    "vision_models",
    "thinking_models",
    "available_models",
    "available_vision_models",
    "available_thinking_models",
]
