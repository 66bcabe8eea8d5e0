"""Deep merge for rule options."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def _copy_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return deep_merge({}, value)
    return copy.deepcopy(value)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge override onto base, recursing into nested mappings.

    Non-mapping values (including lists) in override replace those in base.
    Neither input is modified; the result shares no mutable state with them.
    """
    merged = {key: _copy_value(value) for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = _copy_value(value)
    return merged
