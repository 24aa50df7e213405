#!/usr/bin/env python3

import argparse
from typing import List, Optional

from frontdocs.core.app import get_context
from frontdocs.core.config import load_config
from frontdocs.core.formatting import format_pydantic_errors_simple
from frontdocs.core.logging_setup import configure_logging
from frontdocs.cli import config, listing, show


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="frontdocs", description="frontdocs CLI Toolkit")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they should accept ctx)
    listing.register(subparsers)
    show.register(subparsers)
    config.register(subparsers)

    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        cfg = load_config()
        configure_logging(cfg)
        ctx = get_context(config_override=cfg)  # built once
    except ValueError as e:
        print("Invalid configuration:")
        for msg in format_pydantic_errors_simple(e):
            print(f"  - {msg}")
        return 1
    return args.func(args, ctx)


if __name__ == "__main__":
    raise SystemExit(main())
