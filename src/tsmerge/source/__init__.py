"""Source file parsing and serialization."""
from __future__ import annotations

from tsmerge.source.document import SourceDocument
from tsmerge.source.parser import Diagnostic, SourceParser, parse
from tsmerge.source.serializer import render_statement, serialize, sort_statements

__all__ = [
    "Diagnostic",
    "SourceDocument",
    "SourceParser",
    "parse",
    "render_statement",
    "serialize",
    "sort_statements",
]
