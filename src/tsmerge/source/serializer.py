"""Render a ``SourceDocument`` back into source text.

Import statements are sorted (packages first, relative paths last) and
rendered from their specifiers; body spans follow untouched.
"""
from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Iterable

from tsmerge.errors import InvariantViolation
from tsmerge.imports.specifiers import (
    DefaultImport,
    NamedImport,
    NamespaceImport,
    SideEffectImport,
)
from tsmerge.imports.statement import ImportStatement

if TYPE_CHECKING:
    from tsmerge.source.document import SourceDocument

logger = logging.getLogger(__name__)

_KNOWN_SPECIFIERS = (SideEffectImport, DefaultImport, NamespaceImport, NamedImport)


def sort_statements(statements: Iterable[ImportStatement]) -> list[ImportStatement]:
    """Order statements for output.

    Non-relative packages come first, compared case-insensitively with ties
    broken by the exact name, so ``axios`` sorts before ``JSONStream`` whatever
    the process locale. Relative packages follow in the order they were given.
    """
    statements = list(statements)
    packages = [s for s in statements if not s.is_relative]
    relative = [s for s in statements if s.is_relative]
    packages.sort(key=_collation_key)
    return packages + relative


def _collation_key(statement: ImportStatement) -> tuple[str, str]:
    return statement.package_name.casefold(), statement.package_name


def _quote(package_name: str) -> str:
    escaped = package_name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_statement(statement: ImportStatement) -> str:
    """Render one statement as one or more import declarations.

    Returns an empty string when the statement has no specifiers left.

    Raises
    ------
    InvariantViolation
        If a specifier is not one of the known kinds or carries an
        unusable name.
    """
    for spec in statement:
        if not isinstance(spec, _KNOWN_SPECIFIERS):
            raise InvariantViolation(
                f"Unknown specifier {spec!r} for package {statement.package_name!r}"
            )

    source = _quote(statement.package_name)
    defaults = statement.defaults
    namespace = statement.namespace
    named = statement.named

    if not (defaults or namespace or named):
        if statement.side_effect is not None:
            return f"import {source};"
        return ""

    clauses: list[str] = []
    head: list[str] = []
    if defaults:
        head.append(defaults[0].render())
    if namespace is not None:
        head.append(namespace.render())
        clauses.append(", ".join(head))
        if named:
            # A namespace import cannot share a declaration with named imports.
            clauses.append(_named_clause(named))
    else:
        if named:
            head.append(_named_clause(named))
        clauses.append(", ".join(head))
    clauses.extend(d.render() for d in defaults[1:])

    return "\n".join(f"import {clause} from {source};" for clause in clauses)


def _named_clause(named: list[NamedImport]) -> str:
    return "{ " + ", ".join(n.render() for n in named) + " }"


def render_imports(statements: Iterable[ImportStatement]) -> list[str]:
    """Sorted, non-empty import lines."""
    lines: list[str] = []
    for statement in sort_statements(statements):
        rendered = render_statement(statement)
        if rendered:
            lines.extend(rendered.split("\n"))
    return lines


def serialize(document: SourceDocument, newline: str = os.linesep) -> str:
    """Produce the final file text.

    Parameters
    ----------
    document : SourceDocument
        Parsed (and possibly modified) document.
    newline : str
        Line terminator joining the import lines, the blank separator line
        and the body spans.

    Returns
    -------
    str
        Hashbang line (if any), import block, one blank line, then the body
        spans. The blank line is left out when there are no imports to render.
    """
    import_lines = render_imports(document.imports)
    logger.debug(
        "Serializing %s: %d import line(s), %d body span(s)",
        document.path or "<memory>",
        len(import_lines),
        len(document.body_spans),
    )
    preamble = [document.hashbang] if document.hashbang is not None else []
    if not import_lines:
        return newline.join([*preamble, *document.body_spans])
    return newline.join([*preamble, *import_lines, "", *document.body_spans])
