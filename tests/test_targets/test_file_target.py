"""
Tests for tsmerge.targets.file module.

This module tests TypescriptFileTarget, the read, merge, confirm, write
cycle for a single file:
- Reading and parsing
- Merging imports with diffs
- Dry-run mode
- Overwrite confirmation
- Error results for unparseable files
"""
from __future__ import annotations

from pathlib import Path

import pytest

from tsmerge import TsMerge
from tsmerge.core.results import ErrorResult
from tsmerge.errors import InvariantViolation, ParseError
from tsmerge.imports import DEFAULT, GLOB, DefaultImport, ImportStatement, NamedImport
from tsmerge.targets.file import TypescriptFileTarget


# =============================================================================
# Reading Tests
# =============================================================================

class TestReading:
    """Tests for get_content, parse and get_imports."""

    def test_repr_and_path(self, tsmerge_instance: TsMerge, tmp_project: Path):
        target = tsmerge_instance.file("List.tsx")

        assert isinstance(target, TypescriptFileTarget)
        assert target.file_path == tmp_project.resolve() / "src" / "List.tsx"
        assert "List.tsx" in repr(target)

    def test_get_imports(self, tsmerge_instance: TsMerge):
        result = tsmerge_instance.file("List.tsx").get_imports()

        assert result.success
        assert result.data == {
            "react": {"React": DEFAULT, "useState": ""},
            "./List.css": {DEFAULT: DEFAULT},
            "../api": {GLOB: "api"},
            "lodash": {"map": "lodashMap"},
        }

    def test_get_content_missing_file(self, tsmerge_instance: TsMerge):
        result = tsmerge_instance.file("missing.ts").get_content()

        assert isinstance(result, ErrorResult)
        assert "File not found" in result.message

    def test_parse_missing_file_is_empty(self, tsmerge_instance: TsMerge):
        result = tsmerge_instance.file("missing.ts").parse()

        assert result.success
        assert result.data.import_map() == {}

    def test_parse_error_result(self, tsmerge_instance: TsMerge):
        result = tsmerge_instance.file("broken.ts").parse()

        assert isinstance(result, ErrorResult)
        assert result.operation == "parse"
        assert isinstance(result.exception, ParseError)
        assert result.exception.line == "const = ;"
        assert result.path == tsmerge_instance.root / "broken.ts"
        assert result.line_number == 2
        assert result.source_line == "const = ;"
        with pytest.raises(ParseError):
            result.raise_if_error()


# =============================================================================
# Merge Tests
# =============================================================================

class TestSetImports:
    """Tests for merging and writing."""

    def test_add_import_writes_sorted_block(self, tsmerge_instance: TsMerge, tmp_project: Path):
        path = tmp_project / "src" / "empty.ts"

        result = tsmerge_instance.file(path).add_import("./util", DefaultImport("util"))
        result2 = tsmerge_instance.file(path).add_import("axios", DefaultImport("axios"))

        assert result.success and result2.success
        assert path.read_text() == (
            'import axios from "axios";\nimport util from "./util";\n\nexport const x = 1;'
        )
        assert result2.files_changed == [path]
        assert '+import axios from "axios";' in result2.diff

    def test_remove_import(self, tsmerge_instance: TsMerge, tmp_project: Path):
        path = tmp_project / "src" / "List.tsx"

        result = tsmerge_instance.file(path).remove_import("react", NamedImport("useState", "ignored"))

        assert result.success
        content = path.read_text()
        assert 'import React from "react";' in content
        assert "import { useState }" not in content
        # Body is untouched
        assert "const [items] = useState(api.load());" in content

    def test_no_change_needed(self, tsmerge_instance: TsMerge, tmp_project: Path):
        target = tsmerge_instance.file("List.tsx")
        target.normalize()
        before = (tmp_project / "src" / "List.tsx").read_text()

        result = target.add_import("react", DefaultImport("React"))

        assert result.success
        assert result.message.startswith("No changes needed")
        assert result.files_changed == []
        assert (tmp_project / "src" / "List.tsx").read_text() == before

    def test_creates_missing_file(self, tsmerge_instance: TsMerge, tmp_project: Path):
        result = tsmerge_instance.file("new/index.ts").add_import("react", DefaultImport("React"))

        assert result.success
        assert (tmp_project / "src" / "new" / "index.ts").read_text() == 'import React from "react";\n'

    def test_parse_error_leaves_file_untouched(self, tsmerge_instance: TsMerge, tmp_project: Path):
        path = tmp_project / "src" / "broken.ts"
        before = path.read_text()

        result = tsmerge_instance.file(path).add_import("x", NamedImport("y"))

        assert result.is_error()
        assert path.read_text() == before

    def test_invalid_specifier_is_error_result(self, tsmerge_instance: TsMerge, tmp_project: Path):
        path = tmp_project / "src" / "empty.ts"

        result = tsmerge_instance.file(path).add_import("x", DefaultImport("not valid"))

        assert result.is_error()
        assert isinstance(result.exception, InvariantViolation)
        assert path.read_text() == "export const x = 1;"

    def test_render_does_not_write(self, tsmerge_instance: TsMerge, tmp_project: Path):
        path = tmp_project / "src" / "empty.ts"

        result = tsmerge_instance.file(path).render([ImportStatement("a", [NamedImport("b")])])

        assert result.data == 'import { b } from "a";\n\nexport const x = 1;'
        assert path.read_text() == "export const x = 1;"


# =============================================================================
# Dry Run and Confirmation Tests
# =============================================================================

class TestDryRunAndConfirm:
    def test_dry_run_does_not_write(self, tsmerge_dry_run: TsMerge, tmp_project: Path):
        path = tmp_project / "src" / "empty.ts"

        result = tsmerge_dry_run.file(path).add_import("a", NamedImport("b"))

        assert result.success
        assert result.message.startswith("[DRY RUN]")
        assert result.files_changed == [path]
        assert '+import { b } from "a";' in result.diff
        assert path.read_text() == "export const x = 1;"

    def test_declined_overwrite_keeps_file(self, tmp_project: Path):
        prompts = []

        def decline(path, diff):
            prompts.append((path, diff))
            return False

        tm = TsMerge(tmp_project / "src", newline="\n", confirm_overwrite=decline)
        path = tmp_project / "src" / "empty.ts"

        result = tm.file(path).add_import("a", NamedImport("b"))

        assert result.success
        assert result.message.startswith("Kept original")
        assert result.files_changed == []
        assert path.read_text() == "export const x = 1;"
        assert prompts[0][0] == path
        assert '+import { b } from "a";' in prompts[0][1]

    def test_confirm_not_asked_for_new_file(self, tmp_project: Path):
        def fail(path, diff):
            raise AssertionError("should not prompt")

        tm = TsMerge(tmp_project / "src", newline="\n", confirm_overwrite=fail)

        result = tm.file("fresh.ts").add_import("a", NamedImport("b"))

        assert result.success
        assert (tmp_project / "src" / "fresh.ts").exists()

    def test_confirm_not_asked_when_identical(self, tmp_project: Path):
        def fail(path, diff):
            raise AssertionError("should not prompt")

        tm = TsMerge(tmp_project / "src", newline="\n", confirm_overwrite=fail)

        result = tm.file("empty.ts").normalize()

        assert result.success
        assert result.message.startswith("No changes needed")
