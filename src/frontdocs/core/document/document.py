#!/usr/bin/env python3
"""
Purpose:
    Represents one parsed text file: a mutable metadata mapping (front matter)
    and the body text that follows the first blank line.
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from frontdocs.core.constants import PUBLISHED_STATUS, STATUS_FIELD

if TYPE_CHECKING:
    from frontdocs.core.filesystem import FileSystem
    from frontdocs.core.metadata_config import MetadataConfig


class Document(BaseModel):
    """
    A parsed front-matter document.

    Typical use:
        >>> doc = Document.from_text("subject: Hi\\n\\nHello", MetadataConfig())
        >>> doc.metadata["subject"], doc.body
        ('Hi', 'Hello')
    """

    model_config = ConfigDict(extra="forbid")

    metadata: Dict[str, Any] = Field(default_factory=dict, description="Lower-cased field name -> value.")
    body: str = Field(default="", description="Text after the front-matter separator.")
    path: Optional[Path] = Field(default=None, description="Source file, if parsed from disk.")

    # --- IO --- #

    @classmethod
    def from_text(cls, raw: str, config: "MetadataConfig") -> "Document":
        """Parse a raw text blob."""
        from frontdocs.core.document.parser import parse
        return parse(raw, config)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        config: "MetadataConfig",
        filesystem: Optional["FileSystem"] = None,
    ) -> "Document":
        """
        Parse a text file.

        Raises:
            FileNotFoundError: if the file does not exist
        """
        from frontdocs.core.document.parser import parse_file
        return parse_file(path, config, filesystem=filesystem)

    # --- Convenience --- #

    def get(self, key: str, default: Any = None) -> Any:
        """Case-insensitive metadata lookup."""
        return self.metadata.get(key.lower(), default)

    @property
    def status(self) -> Optional[str]:
        """Current publication flag, if any."""
        return self.metadata.get(STATUS_FIELD)

    @property
    def is_published(self) -> bool:
        """True if the publication flag is exactly ``"published"``."""
        return self.status == PUBLISHED_STATUS
