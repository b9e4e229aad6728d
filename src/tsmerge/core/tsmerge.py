"""Main entry point: configuration shared by every file operation."""
from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from tsmerge.core.diff import ConfirmOverwrite
from tsmerge.core.results import BatchResult
from tsmerge.source.parser import SourceParser

if TYPE_CHECKING:
    from tsmerge.imports.statement import ImportStatement
    from tsmerge.targets.base import TargetList
    from tsmerge.targets.file import TypescriptFileTarget


class TsMerge:
    """
    Merge imports into TypeScript/JavaScript files under a root directory.

    Parameters
    ----------
    path : str | Path
        Root directory. When a file is given, its parent directory is used.
    dry_run : bool
        If True, compute the new content and diffs but never write.
    newline : str
        Line terminator used when files are serialized.
    dialect : str
        Grammar used by the parser: ``"tsx"`` (accepts JSX) or
        ``"typescript"``.
    confirm_overwrite : ConfirmOverwrite | None
        Called with ``(path, diff)`` before an existing file is overwritten
        with different content. Returning False keeps the original file.

    Examples
    --------
    Add a default import to ``src/App.tsx``, then preview a removal::

        tm = TsMerge("src/")
        tm.file("App.tsx").add_import("react", DefaultImport("React"))

        preview = TsMerge("src/", dry_run=True)
        print(preview.file("App.tsx").remove_import("lodash", NamedImport("map")).diff)
    """

    def __init__(
        self,
        path: str | Path = ".",
        dry_run: bool = False,
        newline: str = os.linesep,
        dialect: str = "tsx",
        confirm_overwrite: ConfirmOverwrite | None = None,
    ) -> None:
        self.path = Path(path) if isinstance(path, str) else path
        self.dry_run = dry_run
        self.newline = newline
        self.dialect = dialect
        self.confirm_overwrite = confirm_overwrite
        self._root_path: Path | None = None
        self._parser: SourceParser | None = None

    def __repr__(self) -> str:
        return f"TsMerge({self.path}, dry_run={self.dry_run})"

    @property
    def root(self) -> Path:
        """Resolved directory used as the base for relative paths."""
        if self._root_path is None:
            if self.path.is_file():
                self._root_path = self.path.parent.resolve()
            else:
                self._root_path = self.path.resolve()
        return self._root_path

    @property
    def parser(self) -> SourceParser:
        if self._parser is None:
            self._parser = SourceParser(self.dialect)
        return self._parser

    def _resolve_path(self, path: str | Path) -> Path:
        """Resolve a path relative to root, or return absolute paths unchanged."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self.root / p

    def file(self, path: str | Path) -> TypescriptFileTarget:
        """Target for a single source file (which may not exist yet)."""
        from tsmerge.targets.file import TypescriptFileTarget

        return TypescriptFileTarget(self, self._resolve_path(path))

    def files(self, paths: Iterable[str | Path]) -> TargetList[TypescriptFileTarget]:
        """Targets for several files, for batch operations."""
        from tsmerge.targets.base import TargetList

        return TargetList(self, [self.file(p) for p in paths])

    def set_imports(
        self,
        paths: Iterable[str | Path],
        to_add: Iterable[ImportStatement] = (),
        to_remove: Iterable[ImportStatement] = (),
    ) -> BatchResult:
        """Apply the same additions and removals to every file in ``paths``.

        Each file is handled independently; a file that fails to parse shows
        up in ``BatchResult.failed`` without affecting the others.
        """
        to_add = list(to_add)
        to_remove = list(to_remove)
        return self.files(paths).set_imports(to_add, to_remove)
