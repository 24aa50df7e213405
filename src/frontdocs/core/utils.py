#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions for frontdocs: comma-separated value
    handling, file filter compilation, dictionary merge and JSON file I/O.
"""

import json
import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Pattern, Union

from frontdocs.core.constants import DEFAULT_TEXT_ENCODING, VALUE_JOIN_SEPARATOR

FileFilter = Union[str, Pattern[str], Callable[[str], bool]]


# --- Value Helpers --- #

def split_values(raw: str) -> List[str]:
    """
    Split a comma-separated value into trimmed pieces.

    Empty pieces are kept, so an empty value yields ``[""]``.
    """
    return [piece.strip() for piece in raw.split(",")]


def join_values(values: List[str]) -> str:
    """Re-join pieces into a single string using the canonical ``", "`` separator."""
    return VALUE_JOIN_SEPARATOR.join(values)


# --- File Filter --- #

def compile_file_filter(file_filter: FileFilter) -> Callable[[str], bool]:
    """
    Normalize a file filter into a predicate over entry names.

    Accepts a regex string, a compiled pattern (both matched with ``search``),
    or a callable returning a truthy value for names to keep.

    Raises:
        ValueError: if a regex string does not compile, or the filter type is unsupported.
    """
    if callable(file_filter):
        return lambda name: bool(file_filter(name))
    if isinstance(file_filter, str):
        try:
            file_filter = re.compile(file_filter)
        except re.error as e:
            raise ValueError(f"Invalid file filter pattern {file_filter!r}: {e}") from e
    if isinstance(file_filter, re.Pattern):
        pattern = file_filter
        return lambda name: pattern.search(name) is not None
    raise ValueError(f"Unsupported file filter of type {type(file_filter).__name__}")


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
