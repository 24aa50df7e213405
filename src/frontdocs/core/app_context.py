#!/usr/bin/env python3
"""
Purpose:
    Wires together the frontdocs application context from the merged
    configuration: metadata defaults, file filter and the article collection.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from frontdocs.core.collection import Collection
from frontdocs.core.config import load_config
from frontdocs.core.constants import DEFAULT_FILE_PATTERN
from frontdocs.core.metadata_config import MetadataConfig


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and the article collection."""
    config: Dict[str, Any]
    collection: Collection


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    articles_path: Optional[Union[str, Path]] = None,
    preload: bool = True,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        articles_path:
            Optional override for the article directory. Defaults to `config['articles_path']`.
        preload:
            If True, eagerly loads the collection; otherwise it loads on first access.
            The article directory is only created once the collection loads.

    Returns:
        AppContext: immutable bundle of config and collection.
    """
    cfg = config or load_config()

    path = Path(articles_path or cfg.get("articles_path", "./articles"))
    collection = Collection(
        path,
        config=MetadataConfig.from_config(cfg.get("metadata")),
        file_filter=cfg.get("file_pattern", DEFAULT_FILE_PATTERN),
        preload=preload,
        create_directory=False,
    )
    return AppContext(config=cfg, collection=collection)
