"""Merging of configuration layers.

Mappings merge key by key. Lists are replaced by the higher layer unless the
higher layer's list opens with a marker:

``["+", a, b]``
    extend the lower list with ``a`` and ``b`` (duplicates skipped)
``["=", a, b]``
    replace the lower list, spelled out explicitly
"""
from __future__ import annotations

from typing import Any, Dict, List

APPEND_MARKER = "+"
REPLACE_MARKER = "="


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    if override and override[0] == APPEND_MARKER:
        merged = list(base)
        merged.extend(item for item in override[1:] if item not in base)
        return merged
    if override and override[0] == REPLACE_MARKER:
        return list(override[1:])
    return list(override)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` overlaid with ``override``; neither input is mutated.

    >>> deep_merge({"workflow": {"remote": "origin"}}, {"workflow": {"stash_label": "wip"}})
    {'workflow': {'remote': 'origin', 'stash_label': 'wip'}}
    """
    merged: Dict[str, Any] = dict(base)
    for key, incoming in (override or {}).items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(incoming, dict):
            merged[key] = deep_merge(current, incoming)
        elif isinstance(current, list) and isinstance(incoming, list):
            merged[key] = merge_arrays(current, incoming)
        else:
            merged[key] = incoming
    return merged


__all__ = ["deep_merge", "merge_arrays", "APPEND_MARKER", "REPLACE_MARKER"]
