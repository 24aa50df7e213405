#!/usr/bin/env python3
"""
Purpose:
    Front-matter parser. Splits a raw text blob into an email-like header of
    ``key: value`` lines and a body, separated by the first empty line.

Format:
    from: orion
    subject: hello world!
    tags: foo, bar, baz

    # Hello
    world!

Header lines that do not look like ``key: value`` are dropped. A file with no
header must start with an empty line. Commas and colons cannot be escaped.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from frontdocs.core.document.document import Document
from frontdocs.core.filesystem import FileSystem, LocalFileSystem
from frontdocs.core.metadata_config import MetadataConfig
from frontdocs.core.constants import META_LINE_RE
from frontdocs.core.utils import join_values, split_values

logger = logging.getLogger(__name__)


# --- Public API --- #

def parse(raw: str, config: MetadataConfig) -> Document:
    """
    Parse ``raw`` into a Document whose metadata starts from a copy of
    ``config.defaults``. Header keys are lower-cased; later duplicates win.
    """
    metadata = config.fresh_metadata()
    body: List[str] = []
    in_body = False

    for lineno, line in enumerate(raw.split("\n"), start=1):
        if in_body:
            body.append(line)
            continue
        if line == "":
            in_body = True
            continue

        match = META_LINE_RE.match(line)
        if not match:
            logger.debug("Dropping malformed header line %d: %r", lineno, line)
            continue

        key = match.group(1).lower()
        values = split_values(match.group(2))
        metadata[key] = values if config.is_multi_valued(key) else join_values(values)

    return Document(metadata=metadata, body="\n".join(body))


def parse_file(
    path: Union[str, Path],
    config: MetadataConfig,
    *,
    filesystem: Optional[FileSystem] = None,
) -> Document:
    """
    Read and parse a single file. Stat timestamps are not attached here;
    that is the collection's job.

    Raises:
        FileNotFoundError: if the file does not exist
    """
    fs = filesystem or LocalFileSystem()
    p = Path(path)
    if not fs.exists(p):
        raise FileNotFoundError(f"The file {str(p)!r} does not exist")
    doc = parse(fs.read_text(p), config)
    doc.path = p
    return doc
