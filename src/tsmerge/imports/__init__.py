"""Import model for ES-module source files.

Provides:
- Tagged import specifiers (default, namespace, named, side-effect)
- One merged ``ImportStatement`` per package
- ``ImportRegistry`` holding the statements of a single file
"""
from __future__ import annotations

from tsmerge.imports.registry import ImportRegistry
from tsmerge.imports.specifiers import (
    DEFAULT,
    GLOB,
    DefaultImport,
    ImportSpecifier,
    NamedImport,
    NamespaceImport,
    SideEffectImport,
    bindings_from_specifiers,
    specifier_from_binding,
    specifiers_from_bindings,
)
from tsmerge.imports.statement import ImportStatement

__all__ = [
    "DEFAULT",
    "GLOB",
    "DefaultImport",
    "ImportRegistry",
    "ImportSpecifier",
    "ImportStatement",
    "NamedImport",
    "NamespaceImport",
    "SideEffectImport",
    "bindings_from_specifiers",
    "specifier_from_binding",
    "specifiers_from_bindings",
]
