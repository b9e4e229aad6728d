"""TypescriptFileTarget: parse, merge imports, write back."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from tsmerge.errors import InvariantViolation, ParseError
from tsmerge.imports.specifiers import ImportSpecifier
from tsmerge.imports.statement import ImportStatement
from tsmerge.source.document import SourceDocument
from tsmerge.targets.base import Result, Target

if TYPE_CHECKING:
    from tsmerge.core.tsmerge import TsMerge


class TypescriptFileTarget(Target):
    """Target for a TypeScript/JavaScript source file.

    The file does not need to exist: merging imports into a missing file
    creates it.

    Parameters
    ----------
    tsmerge : TsMerge
        The parent TsMerge instance.
    path : str | Path
        Path to the file.

    Examples
    --------
    Given ``tm = TsMerge("src/")`` and no existing ``components/List.tsx``::

        target = tm.file("components/List.tsx")
        target.add_import("react", DefaultImport("React"), NamedImport("useState"))
        target.get_imports().data
        # {'react': {'React': '<default>', 'useState': ''}}
    """

    def __init__(self, tsmerge: TsMerge, path: str | Path) -> None:
        super().__init__(tsmerge)
        self.path = Path(path) if isinstance(path, str) else path

    @property
    def file_path(self) -> Path:
        return self.path

    def __repr__(self) -> str:
        return f"TypescriptFileTarget({self.path})"

    def exists(self) -> bool:
        return self.path.exists() and self.path.is_file()

    def get_content(self) -> Result:
        """Read the file. ``data`` holds the text."""
        if not self.exists():
            return self._operation_failed("get_content", f"File not found: {self.path}")
        try:
            return Result(success=True, message="OK", path=self.path, data=self.path.read_text())
        except OSError as e:
            return self._operation_failed("get_content", f"Failed to read file: {e}", e)

    def _read(self) -> Result:
        """Like ``get_content``, but a missing file yields ``data=None``."""
        if not self.exists():
            return Result(success=True, message="OK", path=self.path, data=None)
        return self.get_content()

    def _parse(self, content: str | None) -> SourceDocument:
        if content is None:
            return SourceDocument(path=self.path)
        return self._tsmerge.parser.parse(content, self.path)

    def parse(self) -> Result:
        """Parse the file. ``data`` holds the ``SourceDocument``.

        A missing file parses to an empty document.
        """
        content = self._read()
        if content.is_error():
            return content
        try:
            document = self._parse(content.data)
        except ParseError as e:
            return self._operation_failed("parse", str(e), e)
        return Result(success=True, message="OK", path=self.path, data=document)

    def get_imports(self) -> Result:
        """``data`` holds ``{package_name: legacy binding map}``."""
        parsed = self.parse()
        if parsed.is_error():
            return parsed
        return Result(success=True, message="OK", path=self.path, data=parsed.data.import_map())

    def _merge(
        self,
        content: str | None,
        to_add: Iterable[ImportStatement],
        to_remove: Iterable[ImportStatement],
    ) -> Result:
        try:
            document = self._parse(content)
            new_content = document.set_imports(to_add, to_remove).to_code(self._tsmerge.newline)
        except ParseError as e:
            return self._operation_failed("parse", str(e), e)
        except InvariantViolation as e:
            return self._operation_failed("merge", f"Invalid import: {e}", e)
        return Result(success=True, message="OK", path=self.path, data=new_content)

    def render(
        self,
        to_add: Iterable[ImportStatement] = (),
        to_remove: Iterable[ImportStatement] = (),
    ) -> Result:
        """Compute the merged file text without writing it."""
        content = self._read()
        if content.is_error():
            return content
        return self._merge(content.data, to_add, to_remove)

    def set_imports(
        self,
        to_add: Iterable[ImportStatement] = (),
        to_remove: Iterable[ImportStatement] = (),
    ) -> Result:
        """Merge ``to_add``, then remove ``to_remove``, and write the file.

        Parameters
        ----------
        to_add : Iterable[ImportStatement]
            Imports to merge into the file.
        to_remove : Iterable[ImportStatement]
            Imports whose specifier keys are removed.

        Returns
        -------
        Result
            Result with the unified diff. Parse failures and invalid
            specifiers come back as ``ErrorResult``.
        """
        content = self._read()
        if content.is_error():
            return content

        merged = self._merge(content.data, to_add, to_remove)
        if merged.is_error():
            return merged

        return self._write_with_diff(self.path, content.data, merged.data, f"merge imports in {self.path}")

    def add_import(self, package_name: str, *specifiers: ImportSpecifier) -> Result:
        """Merge specifiers from ``package_name`` into the file."""
        return self.set_imports(to_add=[ImportStatement(package_name, specifiers)])

    def remove_import(self, package_name: str, *specifiers: ImportSpecifier) -> Result:
        """Remove specifier keys of ``package_name`` from the file."""
        return self.set_imports(to_remove=[ImportStatement(package_name, specifiers)])

    def normalize(self) -> Result:
        """Rewrite the file with its imports merged and sorted."""
        return self.set_imports()
