"""Split TypeScript/JavaScript source into import statements and body spans.

Parsing uses tree-sitter with the TSX grammar, so JSX is accepted in
``.ts``/``.js`` content as well. Only top-level nodes are inspected:

- ``import`` declarations are decomposed into specifiers and merged into the
  document's ``ImportRegistry``;
- every other top-level node (statements, comments) is copied
  verbatim, using its byte range, into ``SourceDocument.body_spans``.

Declarations the import model cannot express without losing meaning
(``import type ...``, ``import { type X }``, ``import x = require("y")``,
import attributes such as ``with { type: "json" }``) are treated as body
spans and left exactly as written. A leading ``#!`` line is kept apart so it
stays on line 1.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterator

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from tsmerge.errors import ParseError
from tsmerge.imports.specifiers import (
    DefaultImport,
    ImportSpecifier,
    NamedImport,
    NamespaceImport,
    SideEffectImport,
)
from tsmerge.source.document import SourceDocument

logger = logging.getLogger(__name__)

_TYPE_ONLY_TOKENS = ("type", "typeof")

# Children of an import declaration the specifier model cannot carry.
_VERBATIM_CHILDREN = ("import_require_clause", "import_attribute", "with", "assert")

_LANGUAGES: dict[str, Language] = {}


def _get_language(dialect: str) -> Language:
    if dialect not in _LANGUAGES:
        if dialect == "tsx":
            _LANGUAGES[dialect] = Language(tree_sitter_typescript.language_tsx())
        elif dialect == "typescript":
            _LANGUAGES[dialect] = Language(tree_sitter_typescript.language_typescript())
        else:
            raise ValueError(f"Unknown dialect: {dialect!r}")
    return _LANGUAGES[dialect]


@dataclass(frozen=True)
class Diagnostic:
    """A syntax error reported by the parser.

    Attributes
    ----------
    message : str
        Description of the problem.
    line_number : int | None
        1-based line of the error.
    column : int | None
        1-based column of the error.
    """

    message: str
    line_number: int | None = None
    column: int | None = None

    def to_json(self) -> str:
        return json.dumps(asdict(self))


class SourceParser:
    """Parse source text into a ``SourceDocument``.

    Parameters
    ----------
    dialect : str
        ``"tsx"`` (default, accepts JSX) or ``"typescript"``.

    Examples
    --------
    >>> doc = SourceParser().parse('import React from "react";\\nconst x = 1;')
    >>> doc.import_map()
    {'react': {'React': '<default>'}}
    >>> doc.body_spans
    ['const x = 1;']
    """

    def __init__(self, dialect: str = "tsx") -> None:
        self.dialect = dialect
        self._parser = Parser(_get_language(dialect))

    def parse(self, content: str, path: Path | None = None) -> SourceDocument:
        """Parse ``content``.

        Parameters
        ----------
        content : str
            Full text of the file.
        path : Path | None
            File the content came from, used in error messages.

        Returns
        -------
        SourceDocument
            Document with imports hoisted and other statements preserved.

        Raises
        ------
        ParseError
            If the content is not syntactically valid.
        """
        source = content.encode("utf-8")
        tree = self._parser.parse(source)
        root = tree.root_node

        if root.has_error:
            diagnostic = _diagnose(root, source)
            raise ParseError(path, diagnostic, _offending_line(content, diagnostic))

        document = SourceDocument(path=path)
        for node in root.named_children:
            if node.type == "hash_bang_line":
                document.hashbang = _text(node, source)
                continue
            decomposed = _decompose_import(node, source) if node.type == "import_statement" else None
            if decomposed is None:
                document.body_spans.append(_text(node, source))
                continue
            package_name, specifiers = decomposed
            document.imports.add(package_name, specifiers)

        logger.debug(
            "Parsed %s: %d package(s) imported, %d body span(s)",
            path or "<memory>",
            len(document.imports),
            len(document.body_spans),
        )
        return document


def parse(content: str, path: Path | None = None, dialect: str = "tsx") -> SourceDocument:
    """Parse ``content`` with a fresh ``SourceParser``."""
    return SourceParser(dialect).parse(content, path)


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8")


def _string_value(node: Node, source: bytes) -> str:
    return _text(node, source)[1:-1]


def _decompose_import(node: Node, source: bytes) -> tuple[str, list[ImportSpecifier]] | None:
    """Return ``(package_name, specifiers)``, or None to keep the node verbatim."""
    for child in node.children:
        if child.type in _TYPE_ONLY_TOKENS or child.type in _VERBATIM_CHILDREN:
            return None

    source_node = node.child_by_field_name("source")
    if source_node is None:
        return None
    package_name = _string_value(source_node, source)

    clause = next((c for c in node.named_children if c.type == "import_clause"), None)
    specifiers: list[ImportSpecifier] = []
    if clause is not None:
        for child in clause.named_children:
            if child.type == "identifier":
                specifiers.append(DefaultImport(_text(child, source)))
            elif child.type == "namespace_import":
                ident = next(c for c in child.named_children if c.type == "identifier")
                specifiers.append(NamespaceImport(_text(ident, source)))
            elif child.type == "named_imports":
                for spec in child.named_children:
                    if spec.type != "import_specifier":
                        continue
                    if any(c.type in _TYPE_ONLY_TOKENS for c in spec.children):
                        return None
                    name = spec.child_by_field_name("name")
                    alias = spec.child_by_field_name("alias")
                    specifiers.append(
                        NamedImport(
                            _text(name, source),
                            _text(alias, source) if alias is not None else None,
                        )
                    )

    if not specifiers:
        specifiers.append(SideEffectImport())
    return package_name, specifiers


def _walk_errors(node: Node) -> Iterator[Node]:
    if node.type == "ERROR" or node.is_missing:
        yield node
        return
    for child in node.children:
        if child.has_error or child.is_missing:
            yield from _walk_errors(child)


def _diagnose(root: Node, source: bytes) -> Diagnostic:
    node = next(_walk_errors(root), None)
    if node is None:
        return Diagnostic("Invalid syntax")
    row, column = node.start_point
    if node.is_missing:
        message = f"Missing {node.type!r}"
    else:
        snippet = _text(node, source).strip().splitlines()
        message = f"Unexpected syntax {snippet[0]!r}" if snippet else "Unexpected end of input"
    return Diagnostic(message, row + 1, column + 1)


def _offending_line(content: str, diagnostic: Diagnostic) -> str:
    if diagnostic.line_number is None:
        return content.strip()
    lines = content.split("\n")
    if diagnostic.line_number > len(lines):
        return ""
    return lines[diagnostic.line_number - 1].strip()
