#!/usr/bin/env python3
"""
Formatting helpers for frontdocs.

- Stable, minimal one-line formatting for Pydantic v2 `ValidationError`.
- One-line summaries of loaded documents.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from frontdocs.core.document.document import Document


# --- Public API --- #

def format_pydantic_errors_simple(exc: Exception) -> List[str]:
    """
    Return stable one-line messages from a Pydantic v2 ValidationError.

    Example:
        defaults: Value error, Default for field 'from' must be a string, got int

    Falls back to the first line of str(exc) if `exc.errors()` isn't available.
    """
    errors: Sequence[dict[str, Any]] | None = None

    if hasattr(exc, "errors") and callable(getattr(exc, "errors")):
        try:
            errors = exc.errors()  # type: ignore[assignment]
        except Exception:
            errors = None

    if not errors:
        return [str(exc).splitlines()[0]]

    msgs: List[str] = []
    for err in errors:
        loc = err.get("loc", ())
        msg = err.get("msg", "Validation error")
        msgs.append(f"{_format_error_loc(loc)}: {msg}")
    return msgs


def format_document_line(doc: Document) -> str:
    """
    Summarize a document as ``name | subject | from | tags``.

    List values are comma-joined; missing fields render as ``-``.
    """
    name = doc.path.name if doc.path is not None else "<text>"
    cols = [name] + [_format_value(doc.get(field)) for field in ("subject", "from", "tags")]
    return " | ".join(cols)


# --- Internals --- #

def _format_value(value: Any) -> str:
    if value is None or value == "" or value == []:
        return "-"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value)


def _format_error_loc(loc: Iterable[Any]) -> str:
    """
    Convert a Pydantic error `loc` tuple into a dotted path with index suffixes.

    Examples:
        ('defaults', 'tags', 1) -> "defaults.tags[1]"
        ()                      -> "<root>"
    """
    parts: List[str] = []
    for seg in loc:
        if isinstance(seg, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{seg}]"
            else:
                parts.append(f"[{seg}]")
        else:
            parts.append(str(seg))
    return ".".join(parts) if parts else "<root>"
