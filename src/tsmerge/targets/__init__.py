"""File targets."""
from __future__ import annotations

from tsmerge.targets.base import Target, TargetList
from tsmerge.targets.file import TypescriptFileTarget

__all__ = [
    "Target",
    "TargetList",
    "TypescriptFileTarget",
]
