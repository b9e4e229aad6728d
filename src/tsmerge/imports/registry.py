"""Per-file registry of import statements, keyed by package name."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator

from tsmerge.imports.specifiers import ImportSpecifier
from tsmerge.imports.statement import ImportStatement

logger = logging.getLogger(__name__)


class ImportRegistry:
    """Ordered mapping of package name to its single ``ImportStatement``.

    Whatever sequence of ``add``/``remove`` calls is applied, there is never
    more than one statement per package. Statements keep the order in which
    their package was first seen; emptied statements are kept (they render
    to nothing) so re-adding a package does not move it.
    """

    def __init__(self, statements: Iterable[ImportStatement] = ()) -> None:
        self._statements: dict[str, ImportStatement] = {}
        for statement in statements:
            self.add(statement.package_name, statement)

    def __repr__(self) -> str:
        return f"ImportRegistry({list(self._statements)})"

    def __contains__(self, package_name: object) -> bool:
        return package_name in self._statements

    def __iter__(self) -> Iterator[ImportStatement]:
        return iter(self._statements.values())

    def __len__(self) -> int:
        return len(self._statements)

    def get(self, package_name: str) -> ImportStatement | None:
        return self._statements.get(package_name)

    def statements(self) -> list[ImportStatement]:
        """Statements in arrival order, including emptied ones."""
        return list(self._statements.values())

    def add(self, package_name: str, specifiers: Iterable[ImportSpecifier]) -> ImportStatement:
        """Merge specifiers into the statement for ``package_name``.

        Parameters
        ----------
        package_name : str
            Package to import from.
        specifiers : Iterable[ImportSpecifier]
            Specifiers to merge; on key collision the new one wins.

        Returns
        -------
        ImportStatement
            The (possibly new) statement for the package.
        """
        statement = self._statements.get(package_name)
        if statement is None:
            statement = ImportStatement(package_name)
            self._statements[package_name] = statement
            logger.debug("New import statement for %r", package_name)
        statement.add(specifiers)
        return statement

    def remove(self, package_name: str, specifiers: Iterable[ImportSpecifier]) -> None:
        """Remove specifier keys from ``package_name``. Unknown packages are a no-op."""
        statement = self._statements.get(package_name)
        if statement is None:
            return
        statement.remove(specifiers)

    def as_bindings(self) -> dict[str, dict[str, str]]:
        """``{package_name: legacy binding map}`` for non-empty statements."""
        return {s.package_name: s.bindings for s in self if not s.is_empty}
