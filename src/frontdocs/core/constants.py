#!/usr/bin/env python3
"""
Core constants used across frontdocs.

- Metadata: built-in default fields, multi-valued fields and the publication flag.
- File handling: default article filter and text encoding.
- Regular expressions: compiled patterns used by the front-matter parser.
"""

import re
from typing import Final, Mapping, Union

# --- Metadata constants --- #

# Value a document's `status` must hold to be kept by a collection
PUBLISHED_STATUS: Final[str] = "published"

# Reserved metadata field carrying the publication flag
STATUS_FIELD: Final[str] = "status"

# Metadata fields injected from the filesystem stat of each article
MODIFIED_ON_FIELD: Final[str] = "modified_on"
ACCESSED_ON_FIELD: Final[str] = "accessed_on"

# Built-in metadata defaults (copied per document, never shared)
DEFAULT_METADATA: Final[Mapping[str, Union[str, tuple]]] = {
    "from": "Unknown author",
    "subject": "Unknown subject",
    STATUS_FIELD: PUBLISHED_STATUS,
    "tags": (),
}

# Fields whose value is a list of strings rather than a single string
DEFAULT_MULTI_VALUED: Final[frozenset[str]] = frozenset({"tags"})

# Separator used when a comma-separated value is re-joined into one string
VALUE_JOIN_SEPARATOR: Final[str] = ", "


# --- File handling --- #

# Articles are the directory entries whose name matches this pattern
DEFAULT_FILE_PATTERN: Final[str] = r"\.txt$"

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Regular Expressions --- #

# Matches a front-matter line: optional indent, key, colon, rest of line as value
META_LINE_RE: re.Pattern[str] = re.compile(r"^\s*([A-Za-z0-9_\-]+)\s*:\s*(.*)$")
