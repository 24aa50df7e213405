#!/usr/bin/env python3
from frontdocs.core.document.document import Document
from frontdocs.core.document.parser import parse, parse_file

__all__ = ["Document", "parse", "parse_file"]
