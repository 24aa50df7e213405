#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

import yaml

from frontdocs.core.app_context import AppContext
from frontdocs.core.document.parser import parse_file


def show_document(args, ctx: AppContext) -> int:
    """Print the parsed front matter as YAML, then the body."""
    path = Path(args.file)
    try:
        doc = parse_file(path, ctx.collection.config)
    except (OSError, UnicodeDecodeError) as e:
        print(f"{path}: {e}")
        return 1

    print(yaml.safe_dump(doc.metadata, sort_keys=False, allow_unicode=True).rstrip())
    print()
    print(doc.body)
    return 0


def register(subparser):
    parser = subparser.add_parser("show", help="Show a file's parsed metadata and body.")
    parser.add_argument("file", help="Text file to parse.")
    parser.set_defaults(func=show_document)
