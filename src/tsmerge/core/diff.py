"""Diff generation and the overwrite decision.

Before a merged file replaces existing content, callers compare the two
texts. Identical content needs no write; otherwise an optional
confirmation callback (an interactive prompt, typically) gets the unified
diff and decides.
"""
from __future__ import annotations

import difflib
from pathlib import Path
from typing import Callable, Optional

ConfirmOverwrite = Callable[[Optional[Path], str], bool]


def generate_diff(
    original: str,
    modified: str,
    path: Path,
    context_lines: int = 3,
) -> str:
    """Generate unified diff between original and modified content.

    Parameters
    ----------
    original : str
        Original file content.
    modified : str
        Modified file content.
    path : Path
        Path to the file (used in diff header).
    context_lines : int
        Number of context lines to include around changes.

    Returns
    -------
    str
        Unified diff string, or empty string if no changes.

    Examples
    --------
    >>> print(generate_diff('import "a";\\n', 'import "b";\\n', Path("index.ts")), end="")
    --- a/index.ts
    +++ b/index.ts
    @@ -1 +1 @@
    -import "a";
    +import "b";
    """
    if original == modified:
        return ""

    original_lines = original.splitlines(keepends=True)
    modified_lines = modified.splitlines(keepends=True)

    # unified_diff needs terminated lines to keep hunks apart
    if original_lines and not original_lines[-1].endswith("\n"):
        original_lines[-1] += "\n"
    if modified_lines and not modified_lines[-1].endswith("\n"):
        modified_lines[-1] += "\n"

    diff = difflib.unified_diff(
        original_lines,
        modified_lines,
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
        n=context_lines,
    )
    return "".join(diff)


def combine_diffs(diffs: dict[Path, str]) -> str:
    """Combine per-file diffs into one string, ordered by path."""
    non_empty = {p: d for p, d in diffs.items() if d}
    if not non_empty:
        return ""

    sorted_diffs = sorted(non_empty.items(), key=lambda x: str(x[0]))
    return "\n".join(d for _, d in sorted_diffs)


def should_overwrite(
    existing: str,
    new: str,
    confirm: ConfirmOverwrite | None = None,
    path: Path | None = None,
) -> bool:
    """Decide whether ``new`` should replace ``existing``.

    Parameters
    ----------
    existing : str
        Current file content.
    new : str
        Content that would be written.
    confirm : ConfirmOverwrite | None
        Called with ``(path, diff)`` when the contents differ. Its answer is
        returned. Without a callback, differing content is overwritten.
    path : Path | None
        File being written, passed to ``confirm`` and used in the diff header.

    Returns
    -------
    bool
        False when the contents are identical (``confirm`` is not called).
    """
    if existing == new:
        return False
    if confirm is None:
        return True
    return bool(confirm(path, generate_diff(existing, new, path or Path("file"))))
