"""
Shared pytest fixtures for the tsmerge test suite.

This module provides:
- Sample TypeScript/TSX sources
- Temporary project directories with source files
- Pre-configured TsMerge instances (normal and dry-run modes)

Fixture Naming Convention:
- tmp_* : Fixtures that create temporary directories/files
- sample_* : Fixtures that provide sample content strings
- tsmerge_* : Fixtures that provide configured TsMerge instances
"""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from tsmerge import TsMerge


# =============================================================================
# Sample Source Fixtures
# =============================================================================

@pytest.fixture
def sample_component_code() -> str:
    """
    A React component with a mix of import forms.

    Contains:
    - Default and named imports from the same package in two declarations
    - A side-effect CSS import
    - A relative namespace import
    - A comment, a function with JSX, and an oddly spaced statement
    """
    return textwrap.dedent('''\
        import React from "react";
        import "./List.css";
        import { useState } from "react";
        import * as api from "../api";
        import { map as lodashMap } from "lodash";

        // Renders the list of items.
        export default function List() {
          const [items] = useState(api.load());
          return <ul className="list">{lodashMap(items, (i) => <li>{i}</li>)}</ul>;
        }

        const   spaced    =   1 ;
    ''')


@pytest.fixture
def sample_plain_code() -> str:
    """A file with no imports at all."""
    return "const a = 1;\nexport function f() {\n  return a;\n}"


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================

@pytest.fixture
def tmp_project(tmp_path: Path, sample_component_code: str) -> Path:
    """
    A temporary project with:
    - src/List.tsx (the sample component)
    - src/empty.ts (no imports)
    - src/broken.ts (syntax error)
    """
    src = tmp_path / "src"
    src.mkdir()
    (src / "List.tsx").write_text(sample_component_code)
    (src / "empty.ts").write_text("export const x = 1;")
    (src / "broken.ts").write_text('import a from "a";\nconst = ;\n')
    return tmp_path


@pytest.fixture
def tsmerge_instance(tmp_project: Path) -> TsMerge:
    return TsMerge(tmp_project / "src", newline="\n")


@pytest.fixture
def tsmerge_dry_run(tmp_project: Path) -> TsMerge:
    return TsMerge(tmp_project / "src", dry_run=True, newline="\n")
