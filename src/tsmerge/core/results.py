"""Per-file outcomes of merge operations.

- Result - what happened to one source file
- ErrorResult - a file that could not be read, parsed, merged or written
- BatchResult - the results of one merge applied to several files
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterator

from tsmerge.errors import ParseError

if TYPE_CHECKING:
    from tsmerge.source.parser import Diagnostic


@dataclass
class Result:
    """Outcome of an operation on one file.

    File targets never raise for parse or I/O failures. They return a
    Result (or ``ErrorResult``) describing what happened instead.

    Attributes
    ----------
    success : bool
        Whether the operation succeeded.
    message : str
        Human-readable description of what happened.
    path : Path | None
        The file the operation was applied to.
    changed : bool
        True if the file was written, or would be in dry-run mode.
    data : Any
        Payload: file text, a ``SourceDocument`` or an import map.
    diff : str | None
        Unified diff between the old and new file text.
    """

    success: bool
    message: str
    path: Path | None = None
    changed: bool = False
    data: Any = None
    diff: str | None = None

    def __bool__(self) -> bool:
        return self.success

    def is_error(self) -> bool:
        return not self.success

    @property
    def files_changed(self) -> list[Path]:
        if self.changed and self.path is not None:
            return [self.path]
        return []


@dataclass
class ErrorResult(Result):
    """A failed file operation.

    For parse failures the parser diagnostic is exposed directly, so callers
    can report ``path:line_number`` without unpacking the exception.

    Attributes
    ----------
    exception : Exception | None
        The error that was caught (``ParseError``, ``InvariantViolation``,
        ``OSError``), if any.
    operation : str
        ``"get_content"``, ``"parse"``, ``"merge"`` or the write description.
    """

    success: bool = field(default=False, init=False)
    exception: Exception | None = None
    operation: str = ""

    @classmethod
    def from_exception(
        cls,
        operation: str,
        exception: Exception,
        path: Path | None = None,
        message: str | None = None,
    ) -> ErrorResult:
        """Wrap a caught exception; a ``ParseError`` also supplies the path."""
        if path is None and isinstance(exception, ParseError):
            path = exception.path
        return cls(
            message=message if message is not None else str(exception),
            path=path,
            exception=exception,
            operation=operation,
        )

    @property
    def diagnostic(self) -> Diagnostic | None:
        if isinstance(self.exception, ParseError):
            return self.exception.diagnostic
        return None

    @property
    def line_number(self) -> int | None:
        diagnostic = self.diagnostic
        return diagnostic.line_number if diagnostic is not None else None

    @property
    def source_line(self) -> str | None:
        """The offending source line of a parse failure."""
        if isinstance(self.exception, ParseError):
            return self.exception.line
        return None

    def raise_if_error(self) -> None:
        """Re-raise the caught exception."""
        if self.exception:
            raise self.exception
        raise RuntimeError(self.message)


@dataclass
class BatchResult:
    """Results of one merge applied to several files.

    Each file is processed on its own, so one failing file does not stop the
    others.
    """

    results: list[Result] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(r.success for r in self.results)

    @property
    def partial_success(self) -> bool:
        return any(r.success for r in self.results)

    @property
    def succeeded(self) -> list[Result]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[Result]:
        return [r for r in self.results if not r.success]

    @property
    def files_changed(self) -> list[Path]:
        """Changed files in processing order, without repeats."""
        files: list[Path] = []
        for r in self.results:
            files.extend(f for f in r.files_changed if f not in files)
        return files

    @property
    def diffs(self) -> dict[Path, str]:
        return {r.path: r.diff for r in self.results if r.path is not None and r.diff}

    @property
    def diff(self) -> str | None:
        """All per-file diffs, ordered by path."""
        from tsmerge.core.diff import combine_diffs

        all_diffs = self.diffs
        if not all_diffs:
            return None
        return combine_diffs(all_diffs)

    def __bool__(self) -> bool:
        return self.success

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[Result]:
        return iter(self.results)
