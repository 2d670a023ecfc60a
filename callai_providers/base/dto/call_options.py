"""
Pydantic DTO for per-call options.

Purpose
-------
Validate the options accepted by a call before anything else happens:
numeric bounds for ``max_tokens``, ``temperature`` and ``timeout`` and the
closed set of shapes accepted by ``think``. Unset values resolve to the
documented defaults through the ``effective_*`` helpers.

Both snake_case and camelCase keys are accepted (``max_tokens`` /
``maxTokens``).

Failure modes
-------------
Raises ``pydantic.ValidationError`` on unknown keys or out-of-range values.
The entry point converts it to ``ProviderError(code=validation)``.
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from ...config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE

ThinkLevel = Literal["low", "medium", "high"]
ThinkValue = Union[StrictBool, StrictInt, ThinkLevel]


class CallOptions(BaseModel):
    """Validated call options.

    Attributes:
        max_tokens: Completion token limit (positive).
        temperature: Sampling temperature within [0.0, 2.0].
        think: ``False``/``0`` (off), ``True``, ``"low"|"medium"|"high"`` or a
            token budget.
        timeout: Transport timeout in milliseconds (positive).
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    max_tokens: Optional[int] = Field(default=None, gt=0, alias="maxTokens")
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    think: Optional[ThinkValue] = None
    timeout: Optional[int] = Field(default=None, gt=0)

    def effective_max_tokens(self) -> int:
        return self.max_tokens if self.max_tokens is not None else DEFAULT_MAX_TOKENS

    def effective_temperature(self) -> float:
        return self.temperature if self.temperature is not None else DEFAULT_TEMPERATURE


__all__ = ["CallOptions", "ThinkLevel", "ThinkValue"]
