"""In-memory model of one parsed source file."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from tsmerge.imports.registry import ImportRegistry
from tsmerge.imports.specifiers import ImportSpecifier
from tsmerge.imports.statement import ImportStatement


@dataclass
class SourceDocument:
    """Imports hoisted into a registry, everything else kept as text.

    A document is built once by ``tsmerge.source.parser.parse``, mutated with
    the ``add_*``/``remove_*``/``set_imports`` methods, then turned back into
    text with ``to_code``.

    Attributes
    ----------
    imports : ImportRegistry
        One statement per imported package.
    body_spans : list[str]
        Verbatim text of every other top-level statement, in source order.
    path : Path | None
        File the content came from, if known.
    hashbang : str | None
        A leading ``#!`` line. It must stay on line 1, so it is written
        before the import block.
    """

    imports: ImportRegistry = field(default_factory=ImportRegistry)
    body_spans: list[str] = field(default_factory=list)
    path: Path | None = None
    hashbang: str | None = None

    def add_imports(self, statements: Iterable[ImportStatement]) -> SourceDocument:
        for statement in statements:
            self.imports.add(statement.package_name, statement)
        return self

    def remove_imports(self, statements: Iterable[ImportStatement]) -> SourceDocument:
        for statement in statements:
            self.imports.remove(statement.package_name, statement)
        return self

    def set_imports(
        self,
        to_add: Iterable[ImportStatement] = (),
        to_remove: Iterable[ImportStatement] = (),
    ) -> SourceDocument:
        """Apply additions, then removals.

        Parameters
        ----------
        to_add : Iterable[ImportStatement]
            Statements whose specifiers are merged in.
        to_remove : Iterable[ImportStatement]
            Statements whose specifier keys are removed afterwards.

        Returns
        -------
        SourceDocument
            ``self``, for chaining.
        """
        self.add_imports(to_add)
        self.remove_imports(to_remove)
        return self

    def add_import(self, package_name: str, *specifiers: ImportSpecifier) -> SourceDocument:
        self.imports.add(package_name, specifiers)
        return self

    def remove_import(self, package_name: str, *specifiers: ImportSpecifier) -> SourceDocument:
        self.imports.remove(package_name, specifiers)
        return self

    def import_map(self) -> dict[str, dict[str, str]]:
        """``{package_name: legacy binding map}``; emptied packages are left out."""
        return self.imports.as_bindings()

    def to_code(self, newline: str = os.linesep) -> str:
        from tsmerge.source.serializer import serialize

        return serialize(self, newline=newline)
