"""
Tests for tsmerge.core.tsmerge module: configuration and batch operations.
"""
from __future__ import annotations

import os
from pathlib import Path

from tsmerge import TsMerge
from tsmerge.imports import DefaultImport, ImportStatement, NamedImport


class TestConfiguration:
    """Tests for TsMerge construction."""

    def test_defaults(self, tmp_path: Path):
        tm = TsMerge(tmp_path)

        assert tm.dry_run is False
        assert tm.newline == os.linesep
        assert tm.dialect == "tsx"
        assert tm.confirm_overwrite is None
        assert tm.root == tmp_path.resolve()

    def test_string_path(self, tmp_path: Path):
        assert TsMerge(str(tmp_path)).root == tmp_path.resolve()

    def test_file_path_uses_parent_as_root(self, tmp_path: Path):
        f = tmp_path / "a.ts"
        f.write_text("")

        assert TsMerge(f).root == tmp_path.resolve()

    def test_relative_and_absolute_paths(self, tmp_path: Path):
        tm = TsMerge(tmp_path)

        assert tm.file("x/y.ts").path == tmp_path.resolve() / "x" / "y.ts"
        assert tm.file(tmp_path / "z.ts").path == tmp_path / "z.ts"

    def test_parser_cached(self, tmp_path: Path):
        tm = TsMerge(tmp_path, dialect="typescript")

        assert tm.parser is tm.parser
        assert tm.parser.dialect == "typescript"


class TestBatch:
    """Each file is processed independently."""

    def test_set_imports_over_files(self, tsmerge_instance: TsMerge, tmp_project: Path):
        result = tsmerge_instance.set_imports(
            ["List.tsx", "empty.ts", "broken.ts"],
            to_add=[ImportStatement("react", [DefaultImport("React")])],
            to_remove=[ImportStatement("lodash", [NamedImport("map")])],
        )

        assert len(result) == 3
        assert result.partial_success
        assert not result.success
        assert len(result.failed) == 1
        assert "broken.ts" in result.failed[0].message

        src = tmp_project / "src"
        assert (src / "empty.ts").read_text() == 'import React from "react";\n\nexport const x = 1;'
        assert 'from "lodash"' not in (src / "List.tsx").read_text()
        assert set(result.files_changed) == {src / "List.tsx", src / "empty.ts"}
        assert result.diff is not None

    def test_files_target_list(self, tsmerge_instance: TsMerge):
        files = tsmerge_instance.files(["a.ts", "b.ts"])

        assert len(files) == 2
        assert files[0].path.name == "a.ts"
