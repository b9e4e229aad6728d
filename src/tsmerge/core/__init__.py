"""
Core module.

Example
-------
Merge ``import { map } from "lodash"`` into ``src/api.ts``::

    from tsmerge import TsMerge, NamedImport

    tm = TsMerge("src/")
    tm.file("api.ts").add_import("lodash", NamedImport("map"))
"""
from __future__ import annotations

from .diff import combine_diffs, generate_diff, should_overwrite
from .results import BatchResult, ErrorResult, Result
from .tsmerge import TsMerge

__all__ = [
    "TsMerge",
    "Result",
    "ErrorResult",
    "BatchResult",
    "combine_diffs",
    "generate_diff",
    "should_overwrite",
]
