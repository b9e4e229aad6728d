"""
The ``>>>`` examples in module and class docstrings must stay runnable.
"""
from __future__ import annotations

import doctest
import importlib

import pytest


MODULES_WITH_EXAMPLES = [
    "tsmerge",
    "tsmerge.core.diff",
    "tsmerge.imports.specifiers",
    "tsmerge.imports.statement",
    "tsmerge.source.parser",
]


@pytest.mark.parametrize("module_name", MODULES_WITH_EXAMPLES)
def test_docstring_examples_run(module_name: str):
    module = importlib.import_module(module_name)

    failures, attempted = doctest.testmod(module, verbose=False)

    assert attempted > 0
    assert failures == 0
