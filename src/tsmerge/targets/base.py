"""Base classes for file targets.

- Target - something operations are performed on
- TargetList - batch operations over several targets
"""
from __future__ import annotations

import logging
from abc import ABC
from pathlib import Path
from typing import TYPE_CHECKING, Generic, Iterable, Iterator, TypeVar

from tsmerge.core.diff import generate_diff, should_overwrite
from tsmerge.core.results import BatchResult, ErrorResult, Result

if TYPE_CHECKING:
    from tsmerge.core.tsmerge import TsMerge
    from tsmerge.imports.statement import ImportStatement

logger = logging.getLogger(__name__)

__all__ = [
    "Target",
    "TargetList",
]


T = TypeVar("T", bound="Target")


class Target(ABC):
    """Base class for all targets.

    Targets never raise for failed operations. They return an
    ``ErrorResult`` with the exception attached instead.
    """

    def __init__(self, tsmerge: TsMerge) -> None:
        self._tsmerge = tsmerge

    @property
    def tsmerge(self) -> TsMerge:
        return self._tsmerge

    @property
    def dry_run(self) -> bool:
        return self._tsmerge.dry_run

    def exists(self) -> bool:
        raise NotImplementedError

    def _operation_failed(
        self,
        operation: str,
        message: str,
        exception: Exception | None = None,
    ) -> ErrorResult:
        """Return ErrorResult for operations that failed during execution."""
        logger.debug("%s failed on %r: %s", operation, self, message)
        path = getattr(self, "path", None)
        if exception is not None:
            return ErrorResult.from_exception(operation, exception, path, message)
        return ErrorResult(message=message, path=path, operation=operation)

    def _write_with_diff(
        self,
        path: Path,
        original: str | None,
        new_content: str,
        operation: str,
    ) -> Result:
        """Write ``new_content`` to ``path`` unless nothing changed.

        Parameters
        ----------
        path : Path
            File to write.
        original : str | None
            Current content, or None if the file does not exist yet.
        new_content : str
            Content to write.
        operation : str
            Description of the operation (for messages).

        Returns
        -------
        Result
            Result of the operation with diff included. ``data`` holds the
            new content.
        """
        current = original or ""
        if original is not None and new_content == original:
            return Result(success=True, message=f"No changes needed for {operation}", path=path, data=new_content)

        diff = generate_diff(current, new_content, path)

        if self.dry_run:
            return Result(
                success=True,
                message=f"[DRY RUN] Would {operation}",
                path=path,
                changed=True,
                data=new_content,
                diff=diff,
            )

        if original is not None and not should_overwrite(
            original, new_content, self._tsmerge.confirm_overwrite, path
        ):
            logger.warning("Kept original %s", path)
            return Result(
                success=True,
                message=f"Kept original {path}",
                path=path,
                data=new_content,
                diff=diff,
            )

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(new_content)
        except OSError as e:
            return self._operation_failed(operation, f"Write failed: {e}", e)

        logger.info("Wrote %s", path)
        return Result(
            success=True,
            message=f"Completed {operation}",
            path=path,
            changed=True,
            data=new_content,
            diff=diff,
        )


class TargetList(Generic[T]):
    """A list of targets that can be operated on uniformly.

    Example:
        files = tm.files(["a.ts", "b.ts"])
        results = files.set_imports([ImportStatement("react", [DefaultImport("React")])])
        if results.partial_success:
            print(f"Updated {len(results.succeeded)} files")
    """

    def __init__(self, tsmerge: TsMerge, targets: list[T]) -> None:
        self._tsmerge = tsmerge
        self._targets = targets

    def __iter__(self) -> Iterator[T]:
        return iter(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def __bool__(self) -> bool:
        return len(self._targets) > 0

    def __getitem__(self, index: int) -> T:
        return self._targets[index]

    def __repr__(self) -> str:
        return f"TargetList({len(self._targets)} targets)"

    def set_imports(
        self,
        to_add: Iterable[ImportStatement] = (),
        to_remove: Iterable[ImportStatement] = (),
    ) -> BatchResult:
        """Apply the same import changes to all targets."""
        to_add = list(to_add)
        to_remove = list(to_remove)
        return BatchResult([t.set_imports(to_add, to_remove) for t in self._targets])
