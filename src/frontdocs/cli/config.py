#!/usr/bin/env python3
from __future__ import annotations

import json
from typing import Any, Dict

from frontdocs.core.app_context import AppContext


def effective_config(ctx: AppContext) -> Dict[str, Any]:
    """
    Merged configuration as the collection sees it: metadata keys lower-cased,
    defaults normalized, article directory resolved.
    """
    collection = ctx.collection
    metadata = collection.config.model_dump(mode="json")
    metadata["multi_valued"] = sorted(collection.config.multi_valued)
    return {
        **ctx.config,
        "articles_path": str(collection.path.resolve()),
        "metadata": metadata,
    }


def show_config(args, ctx: AppContext) -> int:
    print(json.dumps(effective_config(ctx), indent=2))
    return 0


def show_path(args, ctx: AppContext) -> int:
    print(ctx.collection.path.resolve())
    return 0


def register(subparsers):
    sp = subparsers.add_parser("config", help="Config utilities")
    sps = sp.add_subparsers(dest="config_cmd")

    showp = sps.add_parser("show", help="Show effective config (normalized metadata, resolved paths)")
    showp.set_defaults(func=show_config)

    pathp = sps.add_parser("path", help="Print the resolved article directory")
    pathp.set_defaults(func=show_path)
