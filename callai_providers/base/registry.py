"""Process-wide provider and model registry.

Built once per process by :func:`get_registry`:

1. Base tables: every adapter's built-in alias table.
2. Credentials: one environment variable per provider (``config.env``).
3. Custom overrides from ``CALLAI_MODELS_FILE``, merged additively; a
   same-alias entry of the same provider is overwritten.
4. Freeze: tables are exposed through read-only mappings.

Every alias belongs to exactly one provider; the builder rejects a build
whose base tables violate that and skips custom entries that would.

Concurrency
-----------
Initialization is guarded by a lock with a double-checked flag, so
concurrent first calls build the registry exactly once.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from ..config import get_settings
from ..config.env import get_env_var_name, resolve_provider_key
from .adapters import ProviderAdapter, ProviderId
from .capabilities import THINKING, VISION, CapabilityTable
from .custom_models import load_custom_models, validate_custom_models
from .errors import ErrorCode, ProviderError
from .factory import create_adapter, parse_provider
from .logging import get_logger, log_event
from .models import ModelEntry

_logger = get_logger("callai.registry")


@dataclass(frozen=True)
class ProviderSlot:
    """Adapter, frozen alias table and credential of one provider."""

    adapter: ProviderAdapter
    models: Mapping[str, ModelEntry]
    api_key: Optional[str]
    env_var: str


class ModelRegistry:
    """Read-only view over the provider slots.

    Construct through :meth:`build` (or :func:`get_registry` for the process
    default). Providers appear in :class:`ProviderId` order.
    """

    def __init__(self, slots: Mapping[ProviderId, ProviderSlot]) -> None:
        self._slots = MappingProxyType(dict(slots))
        owners: Dict[str, str] = {}
        for pid, slot in self._slots.items():
            for alias in slot.models:
                if alias in owners:
                    raise ValueError(f"Alias '{alias}' is defined by both {owners[alias]} and {pid.value}")
                owners[alias] = pid.value
        self._owners = MappingProxyType(owners)

    # ----- construction -----
    @classmethod
    def build(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        models_file: Optional[str] = None,
    ) -> "ModelRegistry":
        """Build a registry from the base tables, credentials and overrides.

        Parameters:
            environ: Environment used for credential lookup (default
                ``os.environ``).
            models_file: Custom model source; ``None`` means no overrides.
        """
        tables: Dict[ProviderId, Dict[str, ModelEntry]] = {}
        adapters: Dict[ProviderId, ProviderAdapter] = {}
        for pid in ProviderId:
            adapter = create_adapter(pid)
            adapters[pid] = adapter
            tables[pid] = dict(adapter.models)

        if models_file:
            cls._apply_custom_models(tables, models_file)

        slots: Dict[ProviderId, ProviderSlot] = {}
        for pid, adapter in adapters.items():
            key, _ = resolve_provider_key(pid.value, environ)
            slots[pid] = ProviderSlot(
                adapter=adapter,
                models=MappingProxyType(tables[pid]),
                api_key=key,
                env_var=get_env_var_name(pid.value) or "",
            )
        return cls(slots)

    @staticmethod
    def _apply_custom_models(tables: Dict[ProviderId, Dict[str, ModelEntry]], source: str) -> None:
        owners = {alias: pid.value for pid, table in tables.items() for alias in table}
        try:
            raw = load_custom_models(source)
        except Exception as exc:  # user code runs here; any failure leaves the base tables in place
            log_event(
                _logger,
                "registry.custom_models",
                level=logging.WARNING,
                status="failed",
                source=source,
                error=f"{type(exc).__name__}: {exc}",
            )
            return
        accepted, skipped = validate_custom_models(raw, (p.value for p in ProviderId), owners)
        for provider, entries in accepted.items():
            tables[ProviderId(provider)].update(entries)
        log_event(
            _logger,
            "registry.custom_models",
            status="loaded",
            source=source,
            added=sum(len(e) for e in accepted.values()),
            skipped=len(skipped),
        )

    # ----- lookup -----
    def providers(self) -> List[str]:
        return [pid.value for pid in self._slots]

    def slot(self, provider: str) -> ProviderSlot:
        pid = parse_provider(provider)
        return self._slots[pid]

    def adapter(self, provider: str) -> ProviderAdapter:
        return self.slot(provider).adapter

    def models(self, provider: str) -> Mapping[str, ModelEntry]:
        return self.slot(provider).models

    def resolve(self, alias: str) -> Optional[str]:
        """Return the provider owning ``alias`` (exact match) or ``None``."""
        return self._owners.get(alias)

    def entry(self, provider: str, alias: str) -> ModelEntry:
        """Return the model entry for ``alias`` of ``provider``.

        Raises:
            ProviderError: ``unknown_model`` when the provider has no such alias.
        """
        models = self.models(provider)
        try:
            return models[alias]
        except KeyError:
            raise ProviderError(
                code=ErrorCode.UNKNOWN_MODEL,
                message=f"Unknown model: {alias} for provider: {provider}. Available: {', '.join(models)}",
                provider=provider,
                model=alias,
            ) from None

    def has_credential(self, provider: str) -> bool:
        return bool(self.slot(provider).api_key)

    # ----- capabilities -----
    def _covers(self, table: CapabilityTable, provider: str, alias: str) -> bool:
        models = self.models(provider)
        entry = models.get(alias)
        return entry is not None and table.covers(provider, entry, models)

    def supports_vision(self, provider: str, alias: str) -> bool:
        return self._covers(VISION, provider, alias)

    def supports_thinking(self, provider: str, alias: str) -> bool:
        return self._covers(THINKING, provider, alias)

    # ----- listings -----
    def all_aliases(self) -> List[str]:
        """Every alias across providers, in table order."""
        return list(self._owners)

    def _unique(self, table: Optional[CapabilityTable] = None) -> List[str]:
        seen = set()
        result: List[str] = []
        for pid, slot in self._slots.items():
            for alias, entry in slot.models.items():
                if table is not None and not table.covers(pid.value, entry, slot.models):
                    continue
                if entry.wire_name in seen:
                    continue
                seen.add(entry.wire_name)
                result.append(alias)
        return result

    def unique_models(self) -> List[str]:
        """One alias per distinct wire model, in table order."""
        return self._unique()

    def vision_models(self) -> List[str]:
        return self._unique(VISION)

    def thinking_models(self) -> List[str]:
        return self._unique(THINKING)

    def vision_aliases(self) -> List[str]:
        """Every vision-capable alias (no deduplication)."""
        return [a for a, p in self._owners.items() if self.supports_vision(p, a)]

    def _available(self, aliases: Iterable[str]) -> List[str]:
        return [a for a in aliases if self.has_credential(self._owners[a])]

    def available_models(self) -> List[str]:
        """:meth:`unique_models` limited to providers with a credential."""
        return self._available(self.unique_models())

    def available_vision_models(self) -> List[str]:
        return self._available(self.vision_models())

    def available_thinking_models(self) -> List[str]:
        return self._available(self.thinking_models())


_REGISTRY: Optional[ModelRegistry] = None
_REGISTRY_LOCK = threading.Lock()


def get_registry() -> ModelRegistry:
    """Return the process-wide registry, building it on first use."""
    global _REGISTRY
    if _REGISTRY is not None:
        return _REGISTRY
    with _REGISTRY_LOCK:
        if _REGISTRY is None:
            settings = get_settings()
            _REGISTRY = ModelRegistry.build(models_file=settings.models_file)
        return _REGISTRY


def reset_registry() -> None:
    """Drop the process-wide registry so the next call rebuilds it (tests)."""
    global _REGISTRY
    with _REGISTRY_LOCK:
        _REGISTRY = None


__all__ = ["ProviderSlot", "ModelRegistry", "get_registry", "reset_registry"]
