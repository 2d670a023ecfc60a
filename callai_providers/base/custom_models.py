"""Loading of user-supplied model tables.

A custom table has the shape::

    {provider: {alias: {"name": wire_name, "cost": {"in": float, "out": float}}}}

and can come from a ``.py`` file exporting ``MODELS``, a ``.json`` file, a
``.yaml``/``.yml`` file or an importable dotted module name exporting
``MODELS``. Loading only reads the source; validation and merging happen
in :func:`validate_custom_models`.
"""

from __future__ import annotations

import importlib
import importlib.util
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Tuple

import yaml
from pydantic import ValidationError

from .dto import ModelEntryDTO
from .logging import get_logger, log_event
from .models import ModelEntry

_logger = get_logger("callai.registry")

CUSTOM_MODELS_ATTR = "MODELS"
_MODULE_NAME = "callai_custom_models"


def _load_py_file(path: Path) -> Any:
    spec = importlib.util.spec_from_file_location(_MODULE_NAME, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return getattr(module, CUSTOM_MODELS_ATTR)


def load_custom_models(source: str) -> Mapping[str, Any]:
    """Read the raw custom table from ``source``.

    Parameters:
        source: File path (``.py``, ``.json``, ``.yaml``, ``.yml``) or a
            dotted module name.

    Raises:
        OSError / ImportError / AttributeError / ValueError / yaml.YAMLError:
            when the source cannot be read or has the wrong top-level shape.
    """
    path = Path(source).expanduser()
    suffix = path.suffix.lower()
    if suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
    elif suffix in (".yaml", ".yml"):
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    elif suffix == ".py":
        data = _load_py_file(path)
    else:
        data = getattr(importlib.import_module(source), CUSTOM_MODELS_ATTR)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"custom models must be a mapping of provider -> aliases, got {type(data).__name__}")
    return data


def validate_custom_models(
    raw: Mapping[str, Any],
    providers: Iterable[str],
    owners: Mapping[str, str],
) -> Tuple[Dict[str, Dict[str, ModelEntry]], List[str]]:
    """Validate a raw custom table.

    Parameters:
        raw: Table as returned by :func:`load_custom_models`.
        providers: Supported provider names.
        owners: Current alias → provider ownership.

    Returns:
        ``(entries, skipped)``: accepted entries per provider and a list of
        human-readable reasons for every skipped item. Unknown providers,
        invalid entries and aliases owned by another provider are skipped.
    """
    known = set(providers)
    owners = dict(owners)
    accepted: Dict[str, Dict[str, ModelEntry]] = {}
    skipped: List[str] = []
    for provider, aliases in raw.items():
        if provider not in known:
            skipped.append(f"unknown provider '{provider}'")
            continue
        if not isinstance(aliases, Mapping):
            skipped.append(f"{provider}: expected a mapping of aliases")
            continue
        for alias, entry in aliases.items():
            alias = str(alias)
            owner = owners.get(alias)
            if owner is not None and owner != provider:
                skipped.append(f"{provider}/{alias}: alias already belongs to {owner}")
                continue
            try:
                dto = ModelEntryDTO.model_validate(entry)
            except ValidationError as exc:
                skipped.append(f"{provider}/{alias}: {exc.errors()[0].get('msg', 'invalid entry')}")
                continue
            accepted.setdefault(provider, {})[alias] = dto.to_entry(alias)
            owners[alias] = provider
    for reason in skipped:
        log_event(_logger, "registry.custom_models", level=logging.WARNING, status="skipped", reason=reason)
    return accepted, skipped


__all__ = ["CUSTOM_MODELS_ATTR", "load_custom_models", "validate_custom_models"]
