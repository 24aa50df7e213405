#!/usr/bin/env python3
"""
Purpose:
    Filesystem provider used by collections: directory listing, text reads,
    stat timestamps and directory creation. `LocalFileSystem` is the on-disk
    implementation; tests and callers may inject any object with the same shape.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Protocol, Union

from frontdocs.core.constants import DEFAULT_TEXT_ENCODING

PathLike = Union[str, Path]


# --- Data model --- #

@dataclass(frozen=True)
class FileTimes:
    """Timestamps attached to every loaded document."""
    modified_on: datetime
    accessed_on: datetime


class FileSystem(Protocol):
    """Operations a collection needs from its storage."""

    def exists(self, path: PathLike) -> bool: ...

    def mkdir(self, path: PathLike) -> None: ...

    def list_dir(self, path: PathLike) -> List[str]: ...

    def read_text(self, path: PathLike) -> str: ...

    def stat(self, path: PathLike) -> FileTimes: ...


# --- Local disk --- #

class LocalFileSystem:
    """`FileSystem` backed by the local disk."""

    def __init__(self, encoding: str = DEFAULT_TEXT_ENCODING):
        self.encoding = encoding

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def mkdir(self, path: PathLike) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def list_dir(self, path: PathLike) -> List[str]:
        """Entry names in the order the OS returns them (unspecified)."""
        return os.listdir(path)

    def read_text(self, path: PathLike) -> str:
        # Universal newlines: CRLF files parse like LF files.
        return Path(path).read_text(encoding=self.encoding)

    def stat(self, path: PathLike) -> FileTimes:
        st = Path(path).stat()
        return FileTimes(
            modified_on=datetime.fromtimestamp(st.st_mtime),
            accessed_on=datetime.fromtimestamp(st.st_atime),
        )
