#!/usr/bin/env python3
"""
Purpose:
    Implements the Collection for frontdocs, which scans a directory for
    article files, parses each into a Document, runs a caller hook, keeps the
    published ones, sorts them, and caches the result until invalidated.
"""
from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional, Union

from frontdocs.core.constants import (
    ACCESSED_ON_FIELD,
    DEFAULT_FILE_PATTERN,
    MODIFIED_ON_FIELD,
    PUBLISHED_STATUS,
    STATUS_FIELD,
)
from frontdocs.core.document.document import Document
from frontdocs.core.document.parser import parse
from frontdocs.core.filesystem import FileSystem, LocalFileSystem
from frontdocs.core.metadata_config import MetadataConfig
from frontdocs.core.utils import FileFilter, compile_file_filter

logger = logging.getLogger(__name__)

DocumentHook = Callable[[Document], Any]
Comparator = Callable[[Document, Document], int]
SortKey = Callable[[Document], Any]


class Collection:
    """
    Lazily loaded, cached list of published documents from one directory.

    Every parsed document is marked ``status: published`` regardless of its
    header; only ``on_document`` can revoke that by setting another status.

    The directory is created at construction unless ``create_directory`` is
    False; `load()` always creates it when missing.

    Typical use:
        >>> blog = Collection(
        ...     "/path/to/articles",
        ...     file_filter=r"\\.md$",
        ...     on_document=lambda d: d.metadata.update(words=len(d.body.split())),
        ...     sort_key=lambda d: d.metadata["modified_on"],
        ...     reverse=True,
        ... )
        >>> articles = blog.load()
    """

    def __init__(
        self,
        path: Union[str, Path],
        *,
        config: Optional[MetadataConfig] = None,
        file_filter: FileFilter = DEFAULT_FILE_PATTERN,
        on_document: Optional[DocumentHook] = None,
        compare: Optional[Comparator] = None,
        sort_key: Optional[SortKey] = None,
        reverse: bool = False,
        filesystem: Optional[FileSystem] = None,
        preload: bool = False,
        create_directory: bool = True,
    ):
        if compare is not None and sort_key is not None:
            raise ValueError("Pass either 'compare' or 'sort_key', not both")

        self._path = Path(path)
        self._config = config or MetadataConfig()
        self._accepts = compile_file_filter(file_filter)
        self._on_document = on_document
        self._sort_key = functools.cmp_to_key(compare) if compare is not None else sort_key
        self._reverse = reverse
        self._fs = filesystem or LocalFileSystem()
        self._documents: Optional[List[Document]] = None

        logger.info("Starting collection at %s", self._path)
        if create_directory:
            self._ensure_directory()
        if preload:
            self.load()

    # --- Loading --- #

    def load(self) -> List[Document]:
        """
        Return the cached documents, scanning the directory on first call.

        The returned list is the cache itself; changes made to it or to its
        documents persist until `invalidate()`.

        Raises:
            OSError: if an entry cannot be read or stat'ed (nothing is cached)
        """
        if self._documents is not None:
            return self._documents

        self._ensure_directory()
        names = self._fs.list_dir(self._path)

        documents: List[Document] = []
        for name in names:
            if not self._accepts(name):
                logger.debug("Skipping %s: does not match file filter", name)
                continue
            doc = self._build_document(self._path / name)
            if doc.metadata.get(STATUS_FIELD) == PUBLISHED_STATUS:
                documents.append(doc)
            else:
                logger.debug("Dropping %s: status is %r", name, doc.metadata.get(STATUS_FIELD))

        if self._sort_key is not None:
            documents = sorted(documents, key=self._sort_key, reverse=self._reverse)

        logger.info("Loaded %d document(s) from %s (%d entries listed)", len(documents), self._path, len(names))
        self._documents = documents
        return documents

    def invalidate(self) -> None:
        """Drop the cache; the next `load()` re-scans the directory."""
        self._documents = None

    def reload(self) -> List[Document]:
        """Invalidate and load again."""
        self.invalidate()
        return self.load()

    # --- Query API --- #

    @property
    def loaded(self) -> bool:
        """True if a cached result is available."""
        return self._documents is not None

    @property
    def path(self) -> Path:
        """Directory scanned by this collection."""
        return self._path

    @property
    def config(self) -> MetadataConfig:
        """Metadata configuration handed to the parser."""
        return self._config

    def __len__(self) -> int:
        return len(self.load())

    def __iter__(self) -> Iterator[Document]:
        return iter(self.load())

    # --- Loading Helpers --- #

    def _ensure_directory(self) -> None:
        if not self._fs.exists(self._path):
            logger.debug("Creating missing directory %s", self._path)
            self._fs.mkdir(self._path)

    def _build_document(self, file_path: Path) -> Document:
        raw = self._fs.read_text(file_path)
        times = self._fs.stat(file_path)

        doc = parse(raw, self._config)
        doc.path = file_path
        doc.metadata[MODIFIED_ON_FIELD] = times.modified_on
        doc.metadata[ACCESSED_ON_FIELD] = times.accessed_on
        doc.metadata[STATUS_FIELD] = PUBLISHED_STATUS

        if self._on_document is not None:
            self._on_document(doc)
        return doc
