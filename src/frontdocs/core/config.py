#!/usr/bin/env python3
"""
frontdocs configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final

from frontdocs.core.constants import DEFAULT_FILE_PATTERN, DEFAULT_METADATA, DEFAULT_MULTI_VALUED
from frontdocs.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "articles_path": "./articles",
    "file_pattern": DEFAULT_FILE_PATTERN,
    "metadata": {
        "defaults": {k: list(v) if isinstance(v, tuple) else v for k, v in DEFAULT_METADATA.items()},
        "multi_valued": sorted(DEFAULT_MULTI_VALUED),
    },
    "logging": {"level": "INFO"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "frontdocs" / "config.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load frontdocs configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/frontdocs/config.json)
        3. Project config (./frontdocs.json)
        4. Environment overrides:
           - FRONTDOCS_ARTICLES_PATH
           - FRONTDOCS_FILE_PATTERN
           - FRONTDOCS_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, _normalize_metadata_keys(load_json_file(GLOBAL_CONFIG_PATH), GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / "frontdocs.json"
    config = merge_dicts(config, _normalize_metadata_keys(load_json_file(project_path), project_path))

    # 4) environment overrides
    articles_path_env = os.getenv("FRONTDOCS_ARTICLES_PATH")
    if articles_path_env:
        config["articles_path"] = str(Path(articles_path_env.strip()).expanduser())

    file_pattern_env = os.getenv("FRONTDOCS_FILE_PATTERN")
    if file_pattern_env:
        config["file_pattern"] = file_pattern_env

    log_level_env = os.getenv("FRONTDOCS_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    return config


# --- Internals --- #

def _normalize_metadata_keys(layer: Dict[str, Any], source: Path) -> Dict[str, Any]:
    """
    Lower-case `metadata.defaults` keys and `metadata.multi_valued` names of one
    config layer so a later layer's ``From`` overrides an earlier ``from``.

    Raises:
        ValueError: if two default keys in the same layer differ only by case.
    """
    metadata = layer.get("metadata")
    if not isinstance(metadata, dict):
        return layer

    metadata = dict(metadata)
    defaults = metadata.get("defaults")
    if isinstance(defaults, dict):
        lowered: Dict[str, Any] = {}
        for key, value in defaults.items():
            name = key.strip().lower() if isinstance(key, str) else key
            if name in lowered:
                raise ValueError(f"Duplicate metadata default {name!r} (case-insensitive) in {str(source)!r}")
            lowered[name] = value
        metadata["defaults"] = lowered

    multi_valued = metadata.get("multi_valued")
    if isinstance(multi_valued, list):
        metadata["multi_valued"] = [n.strip().lower() if isinstance(n, str) else n for n in multi_valued]

    return {**layer, "metadata": metadata}
