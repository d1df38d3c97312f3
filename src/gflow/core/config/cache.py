"""Centralized configuration caching.

All domain configs read through :func:`get_cached_config` so one CLI
invocation parses the YAML layers once.
"""
from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Any, Dict, Optional

_config_cache: Dict[str, Dict[str, Any]] = {}


def _cache_key(repo_root: Optional[Path]) -> str:
    """Build a cache key from repo_root, GFLOW_* env vars and config file mtimes.

    Tests and long-running processes may mutate env vars or rewrite config
    files after a first load; both must invalidate the cached entry.
    """
    from .manager import ConfigManager

    base = str(Path(repo_root).expanduser().resolve()) if repo_root is not None else "__none__"

    env_items = sorted((k, v) for k, v in os.environ.items() if k.startswith("GFLOW_") or k == "XDG_CONFIG_HOME")
    files = []
    for path in ConfigManager(repo_root).config_files():
        try:
            st = path.stat()
            files.append((str(path), st.st_mtime_ns, st.st_size))
        except OSError:
            files.append((str(path), 0, 0))

    fp = hashlib.sha256(repr((env_items, files)).encode("utf-8")).hexdigest()[:16]
    return f"{base}:{fp}"


def get_cached_config(repo_root: Optional[Path] = None) -> Dict[str, Any]:
    """Return the merged, validated config for ``repo_root`` (cached)."""
    from .manager import ConfigManager

    key = _cache_key(repo_root)
    cached = _config_cache.get(key)
    if cached is None:
        cached = ConfigManager(repo_root).load_config(validate=True)
        _config_cache[key] = cached
    return cached


def clear_all_caches() -> None:
    """Drop every cached configuration."""
    _config_cache.clear()


__all__ = ["get_cached_config", "clear_all_caches"]
