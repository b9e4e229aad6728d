"""Exceptions raised by the merge engine.

The parser, registry and serializer raise these directly. The file-level
targets catch them and hand them back inside an ``ErrorResult``.
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tsmerge.source.parser import Diagnostic


class ParseError(ValueError):
    """Source text could not be parsed.

    Attributes
    ----------
    path : Path | None
        File the content was read from, if the caller supplied one.
    diagnostic : Diagnostic
        The parser diagnostic (message and 1-based position).
    line : str
        The trimmed source line at the reported position, or the whole
        content when no line number is available.
    """

    def __init__(self, path: Path | None, diagnostic: Diagnostic, line: str) -> None:
        self.path = path
        self.diagnostic = diagnostic
        self.line = line
        super().__init__(
            f'An error occurred while parsing file content "{path or ""}": '
            f'{diagnostic.to_json()} => "{line}"'
        )


class InvariantViolation(ValueError):
    """A specifier or legacy binding does not describe a valid import."""
