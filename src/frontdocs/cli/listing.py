#!/usr/bin/env python3
from __future__ import annotations

from typing import List

from frontdocs.core.app_context import AppContext, build_context
from frontdocs.core.collection import Collection
from frontdocs.core.document.document import Document
from frontdocs.core.formatting import format_document_line


def _collection_for_run(args, ctx: AppContext) -> Collection:
    """
    Prefer a CLI-provided directory for this run; otherwise, use the context's collection.
    When overriding, we build a temporary context so we don't mutate global state.
    """
    if getattr(args, "path", None):
        return build_context(config=ctx.config, articles_path=args.path, preload=False).collection
    return ctx.collection


def _has_tag(doc: Document, tag: str) -> bool:
    tags = doc.get("tags")
    if isinstance(tags, list):
        return tag in tags
    return tags == tag


def select_documents(docs: List[Document], *, tag: str | None = None, sort: str | None = None,
                     reverse: bool = False) -> List[Document]:
    """Filter by tag and order by a metadata field (compared as text)."""
    selected = [d for d in docs if tag is None or _has_tag(d, tag)]
    if sort:
        selected = sorted(selected, key=lambda d: str(d.get(sort, "")), reverse=reverse)
    elif reverse:
        selected = list(reversed(selected))
    return selected


def list_documents(args, ctx: AppContext) -> int:
    collection = _collection_for_run(args, ctx)
    docs = select_documents(collection.load(), tag=args.tag, sort=args.sort, reverse=args.reverse)
    if not docs:
        print(f"No published documents found in {collection.path}.")
        return 0

    for doc in docs:
        print(format_document_line(doc))
    print(f"\n{len(docs)} document(s).")
    return 0


def register(subparser):
    parser = subparser.add_parser("list", help="List published documents.")
    parser.add_argument("--path", "-p", default=None, help="Override the article directory just for this run.")
    parser.add_argument("--tag", "-t", default=None, help="Only show documents carrying this tag.")
    parser.add_argument("--sort", "-s", default=None, help="Metadata field to sort by (e.g. subject, modified_on).")
    parser.add_argument("--reverse", "-r", action="store_true", help="Reverse the order.")
    parser.set_defaults(func=list_documents)
