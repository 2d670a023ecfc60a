"""Thinking / reasoning budget policy.

Translates the generic ``think`` dial into each provider's native knob.
The policy is pure: no I/O, no shared state.

Rules
-----
* ``None``, ``False`` and ``0`` switch thinking off.
* Models without declared thinking support ignore the dial silently.
* Effort-style providers accept symbolic levels only. ``True`` selects the
  provider's default level; a numeric value is rejected.
* Budget-style providers take a token budget. Symbolic levels map to fixed
  budgets (``True`` behaves as ``"medium"``) and the result is clamped to
  the provider's valid range. A non-positive budget omits the knob.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from ...config.defaults import THINK_BUDGET_RANGES, THINK_LEVEL_BUDGETS
from ..errors import ErrorCode, ProviderError


@dataclass(frozen=True)
class EffortPolicy:
    """Allowed effort levels, the level used for ``True`` and level remaps."""

    allowed: Tuple[str, ...]
    default: str
    aliases: Tuple[Tuple[str, str], ...] = ()


@dataclass(frozen=True)
class ThinkingConfig:
    """Resolved provider knob: exactly one of ``effort`` / ``budget`` is set."""

    effort: Optional[str] = None
    budget: Optional[int] = None


EFFORT_POLICIES: Dict[str, EffortPolicy] = {
    "openai": EffortPolicy(allowed=("low", "medium", "high"), default="medium"),
    # Grok exposes two levels only; "medium" runs as "low".
    "grok": EffortPolicy(allowed=("low", "high"), default="low", aliases=(("medium", "low"),)),
}

ThinkInput = Union[bool, int, str, None]


def is_off(think: ThinkInput) -> bool:
    return think is None or think is False or (isinstance(think, int) and not isinstance(think, bool) and think == 0)


def clamp_budget(provider: str, budget: int) -> int:
    """Clamp ``budget`` into the provider's inclusive ``[floor, ceiling]`` range."""
    floor, ceiling = THINK_BUDGET_RANGES[provider]
    return max(floor, min(ceiling, budget))


def _effort(provider: str, policy: EffortPolicy, think: ThinkInput) -> ThinkingConfig:
    if think is True:
        return ThinkingConfig(effort=policy.default)
    if isinstance(think, str):
        level = dict(policy.aliases).get(think, think)
        if level in policy.allowed:
            return ThinkingConfig(effort=level)
    accepted = [*policy.allowed, *(a for a, _ in policy.aliases)]
    raise ProviderError(
        code=ErrorCode.UNSUPPORTED,
        message=(
            f"{provider} models only support think: {', '.join(repr(v) for v in accepted)} "
            f"or True, not {think!r}"
        ),
        provider=provider,
    )


def _budget(think: ThinkInput) -> int:
    if think is True:
        return THINK_LEVEL_BUDGETS["medium"]
    if isinstance(think, str):
        return THINK_LEVEL_BUDGETS.get(think, 0)
    return int(think or 0)


def resolve_thinking(provider: str, think: ThinkInput, *, supported: bool) -> Optional[ThinkingConfig]:
    """Return the provider knob for ``think`` or ``None`` to omit it.

    Parameters:
        provider: Provider id.
        think: Generic thinking dial value.
        supported: Whether the target model is declared thinking-capable.

    Raises:
        ProviderError: ``unsupported`` when an effort-style provider receives
            a value outside its level set.
    """
    if is_off(think) or not supported:
        return None
    policy = EFFORT_POLICIES.get(provider)
    if policy is not None:
        return _effort(provider, policy, think)
    if provider not in THINK_BUDGET_RANGES:
        return None
    budget = _budget(think)
    if budget <= 0:
        return None
    return ThinkingConfig(budget=clamp_budget(provider, budget))


__all__ = [
    "EffortPolicy",
    "ThinkingConfig",
    "EFFORT_POLICIES",
    "is_off",
    "clamp_budget",
    "resolve_thinking",
]
