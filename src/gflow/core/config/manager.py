"""
gflow configuration management (layered YAML + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from gflow.core.exceptions import ConfigError
from gflow.core.utils.io import iter_yaml_files, read_yaml
from gflow.core.utils.merge import deep_merge
from gflow.core.utils.paths import get_project_config_dir, get_user_config_dir
from gflow.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "GFLOW_"
ENV_SEPARATOR = "__"

_INT_RE = re.compile(r"[-+]?\d+")
_FLOAT_RE = re.compile(r"[-+]?(\d+\.\d*|\d*\.\d+)")


class _Append:
    """Path segment meaning "append to the list at this position"."""

    def __repr__(self) -> str:
        return "APPEND"


APPEND = _Append()

Segment = Union[str, int, _Append]


def coerce_env_value(raw: str) -> Any:
    """Turn an environment string into the YAML type it most likely means.

    ``true``/``false`` become booleans, integer and decimal literals become
    numbers, and text wrapped in ``[]`` or ``{}`` is parsed as JSON when it
    is valid JSON. Anything else is the stripped string.
    """
    text = raw.strip()
    lowered = text.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if _INT_RE.fullmatch(text):
        return int(text)
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    if text[:1] + text[-1:] in ("[]", "{}"):
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            pass
    return text


def parse_env_path(raw: str) -> List[Segment]:
    """Split ``WORKFLOW__PROTECTED_BRANCHES__APPEND`` into config path segments.

    Names are lower-cased, all-digit segments become list indexes and
    ``APPEND`` becomes :data:`APPEND`.

    Raises:
        ConfigError: On an empty segment (e.g. ``A____B``).
    """
    segments: List[Segment] = []
    for part in raw.split(ENV_SEPARATOR):
        if not part:
            raise ConfigError(
                f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
                context={"key": ENV_PREFIX + raw},
            )
        if part.isdigit():
            segments.append(int(part))
        elif part.upper() == "APPEND":
            segments.append(APPEND)
        else:
            segments.append(part.lower())
    return segments


def _assign(root: Dict[str, Any], path: List[Segment], value: Any) -> None:
    """Write ``value`` at ``path``, creating intermediate containers."""
    node: Any = root
    for depth, part in enumerate(path[:-1]):
        if not isinstance(part, str):
            raise ConfigError("Invalid override path: list index/APPEND may only appear at leaf")
        if not isinstance(node, dict):
            raise ConfigError("Invalid override path: traverses a non-mapping value")
        if part not in node:
            node[part] = {} if isinstance(path[depth + 1], str) else []
        node = node[part]

    leaf = path[-1]
    if isinstance(leaf, str):
        if not isinstance(node, dict):
            raise ConfigError("Key override requires a mapping value")
        node[leaf] = value
        return
    if not isinstance(node, list):
        raise ConfigError(f"{leaf!r} override requires a list value")
    if leaf is APPEND:
        node.append(value)
        return
    node.extend([None] * (leaf + 1 - len(node)))
    node[leaf] = value


class ConfigManager:
    """Load, merge, and validate gflow configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: GFLOW_<SECTION>__<KEY>
    2. Project-local config: <repo>/.gflow/config.local.yaml (uncommitted)
    3. Project config: <repo>/.gflow/config.yaml
    4. User config: <user-config-dir>/config.yaml
    5. Bundled defaults: gflow.data/config/*.yaml (alphabetical order)

    Only environment keys containing ``__`` are treated as overrides, so
    plain settings such as ``GFLOW_CONFIG_HOME`` are left alone.
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root).resolve() if repo_root is not None else None
        self.core_config_dir = get_data_path("config")
        self.user_config_file = get_user_config_dir() / "config.yaml"
        self.project_config_file: Optional[Path] = None
        self.project_local_config_file: Optional[Path] = None
        if self.repo_root is not None:
            gflow_dir = get_project_config_dir(self.repo_root)
            self.project_config_file = gflow_dir / "config.yaml"
            self.project_local_config_file = gflow_dir / "config.local.yaml"

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        return deep_merge(base, override)

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        """Read one layer. A missing file is an empty layer; a broken one is an error."""
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except FileNotFoundError:
            return {}
        except Exception as exc:
            raise ConfigError(f"Could not read config file {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping", context={"path": str(path)})
        return data

    def config_files(self) -> List[Path]:
        """Return every config file that contributes, lowest priority first."""
        files: List[Path] = list(iter_yaml_files(self.core_config_dir))
        for layer in (self.user_config_file, self.project_config_file, self.project_local_config_file):
            if layer is not None and layer.is_file():
                files.append(layer)
        return files

    def env_overrides(self) -> Iterator[Tuple[List[Segment], Any]]:
        """Yield ``(path, value)`` for each ``GFLOW_*__*`` variable, sorted by name."""
        for name in sorted(os.environ):
            if not name.startswith(ENV_PREFIX):
                continue
            raw = name[len(ENV_PREFIX):]
            if ENV_SEPARATOR not in raw:
                continue
            yield parse_env_path(raw), coerce_env_value(os.environ[name])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self.env_overrides():
            logger.debug("env override %s", path)
            _assign(cfg, path, value)

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load the merged configuration.

        Args:
            validate: Validate the merged result against the bundled schema.

        Raises:
            ConfigError: On unreadable YAML, malformed overrides or schema violations.
        """
        cfg: Dict[str, Any] = {}
        for path in self.config_files():
            logger.debug("loading config %s", path)
            cfg = self.deep_merge(cfg, self.load_yaml(path))

        self.apply_env_overrides(cfg)

        if validate:
            from gflow.core.schemas.validation import validate_payload

            validate_payload(cfg, "config")
        return cfg


__all__ = ["ConfigManager", "ENV_PREFIX", "coerce_env_value", "parse_env_path"]
