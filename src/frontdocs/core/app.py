#!/usr/bin/env python3
"""
Purpose:
    Provides a module-level accessor for the frontdocs AppContext, with optional
    reload and overrides for configuration and the article directory.
"""
from typing import Optional, Dict, Any, Union
from pathlib import Path

from frontdocs.core.app_context import AppContext, build_context

# --- Module state --- #

_CTX: Optional[AppContext] = None


# --- Public API --- #

def get_context(
    *,
    force_reload: bool = False,
    config_override: Optional[Dict[str, Any]] = None,
    articles_path_override: Optional[Union[str, Path]] = None,
) -> AppContext:
    """
    Return the process-wide `AppContext`.

    Args:
        force_reload:
            If True, rebuilds the context even if one is already cached.
        config_override:
            Optional configuration dict to use instead of `load_config()`.
        articles_path_override:
            Optional directory used instead of `config['articles_path']`.

    Returns:
        An `AppContext` whose collection loads on first access.
    """
    global _CTX
    if _CTX is None or force_reload or config_override or articles_path_override:
        _CTX = build_context(
            config=config_override,
            articles_path=articles_path_override,
            preload=False,
        )
    return _CTX
