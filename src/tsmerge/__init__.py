"""
tsmerge - import-aware merging for TypeScript/JavaScript source files.

Parses a file's ``import`` declarations into one merged statement per
package, lets callers add or remove imports, and writes back a sorted,
de-duplicated import block followed by the untouched rest of the file.

Example
-------
>>> from tsmerge import DefaultImport, NamedImport, parse
>>>
>>> doc = parse('import { useState } from "react";\\nconst x = 1;')
>>> print(doc.add_import("react", DefaultImport("React")).to_code("\\n"))
import React, { useState } from "react";
<BLANKLINE>
const x = 1;

Working on files under a directory, with diffs and dry-run support::

    from tsmerge import TsMerge

    tm = TsMerge("src/", dry_run=True)
    result = tm.file("App.tsx").add_import("lodash", NamedImport("map"))
    print(result.diff)

Classes
-------
TsMerge
    Entry point for file operations; holds configuration.

SourceDocument
    Parsed file: an ``ImportRegistry`` plus verbatim body spans.

ImportStatement
    All specifiers imported from one package.

DefaultImport, NamespaceImport, NamedImport, SideEffectImport
    The four kinds of import specifier.

Result, ErrorResult, BatchResult
    Outcomes of file operations. File operations never raise.

ParseError, InvariantViolation
    Raised by the parser and serializer.
"""
from __future__ import annotations

from tsmerge.core import (
    BatchResult,
    ErrorResult,
    Result,
    TsMerge,
    generate_diff,
    should_overwrite,
)
from tsmerge.errors import InvariantViolation, ParseError
from tsmerge.imports import (
    DEFAULT,
    GLOB,
    DefaultImport,
    ImportRegistry,
    ImportSpecifier,
    ImportStatement,
    NamedImport,
    NamespaceImport,
    SideEffectImport,
    specifier_from_binding,
)
from tsmerge.source import Diagnostic, SourceDocument, SourceParser, parse, serialize
from tsmerge.targets import TargetList, TypescriptFileTarget

__version__ = "0.1.0"

__all__ = [
    "TsMerge",
    "Result",
    "ErrorResult",
    "BatchResult",
    "generate_diff",
    "should_overwrite",
    "ParseError",
    "InvariantViolation",
    "DEFAULT",
    "GLOB",
    "DefaultImport",
    "ImportRegistry",
    "ImportSpecifier",
    "ImportStatement",
    "NamedImport",
    "NamespaceImport",
    "SideEffectImport",
    "specifier_from_binding",
    "Diagnostic",
    "SourceDocument",
    "SourceParser",
    "parse",
    "serialize",
    "TargetList",
    "TypescriptFileTarget",
]
