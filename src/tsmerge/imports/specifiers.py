"""Import specifier value types.

One import declaration binds zero or more names from a package. Each
binding is described by exactly one of these variants:

- ``SideEffectImport``  : ``import "pkg"``
- ``DefaultImport``     : ``import Foo from "pkg"``
- ``NamespaceImport``   : ``import * as Foo from "pkg"``
- ``NamedImport``       : ``import { Bar } from "pkg"`` / ``import { Bar as Baz } from "pkg"``

Specifiers are merged by ``merge_key``. Default and named specifiers share
the identifier slot, so ``import Foo from "x"`` and ``import { Foo } from "x"``
replace each other; the side-effect entry and the namespace entry each own
a dedicated slot.

Collaborators that still speak the sentinel-keyed binding map
(``{"Foo": DEFAULT, GLOB: "ns", "Bar": ""}``) can convert with
``specifier_from_binding`` and ``ImportSpecifier.to_binding``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Union

from tsmerge.errors import InvariantViolation

__all__ = [
    "DEFAULT",
    "GLOB",
    "SideEffectImport",
    "DefaultImport",
    "NamespaceImport",
    "NamedImport",
    "ImportSpecifier",
    "MergeKey",
    "specifier_from_binding",
    "specifiers_from_bindings",
    "bindings_from_specifiers",
]


# Sentinels of the legacy binding map. Neither is a legal identifier.
DEFAULT = "<default>"
GLOB = "*"

MergeKey = tuple[str, ...]

_SIDE_EFFECT_SLOT: MergeKey = ("side-effect",)
_NAMESPACE_SLOT: MergeKey = ("namespace",)

# Loose check: identifiers, `default`, and quoted module export names.
_NAME_RE = re.compile(r"""^(?:[^\s'"{}(),;*]+|"[^"]*"|'[^']*')$""")


def _require_name(name: str | None, what: str) -> str:
    if not name or not _NAME_RE.match(name):
        raise InvariantViolation(f"Invalid {what}: {name!r}")
    return name


@dataclass(frozen=True)
class SideEffectImport:
    """``import "pkg"``: the module is loaded, nothing is bound."""

    @property
    def merge_key(self) -> MergeKey:
        return _SIDE_EFFECT_SLOT

    def to_binding(self) -> tuple[str, str]:
        return DEFAULT, DEFAULT


@dataclass(frozen=True)
class DefaultImport:
    """``import <local_name> from "pkg"``."""

    local_name: str

    @property
    def merge_key(self) -> MergeKey:
        return ("binding", self.local_name)

    def to_binding(self) -> tuple[str, str]:
        return self.local_name, DEFAULT

    def render(self) -> str:
        return _require_name(self.local_name, "default import name")


@dataclass(frozen=True)
class NamespaceImport:
    """``import * as <local_name> from "pkg"``."""

    local_name: str

    @property
    def merge_key(self) -> MergeKey:
        return _NAMESPACE_SLOT

    def to_binding(self) -> tuple[str, str]:
        return GLOB, self.local_name

    def render(self) -> str:
        return f"* as {_require_name(self.local_name, 'namespace import name')}"


@dataclass(frozen=True)
class NamedImport:
    """``import { <exported_name> [as <alias>] } from "pkg"``.

    An alias equal to the exported name is dropped, matching how the
    declaration would have been written without one.
    """

    exported_name: str
    alias: str | None = None

    def __post_init__(self) -> None:
        if self.alias == "" or self.alias == self.exported_name:
            object.__setattr__(self, "alias", None)

    @property
    def merge_key(self) -> MergeKey:
        return ("binding", self.exported_name)

    @property
    def local_name(self) -> str:
        return self.alias or self.exported_name

    def to_binding(self) -> tuple[str, str]:
        return self.exported_name, self.alias or ""

    def render(self) -> str:
        name = _require_name(self.exported_name, "imported name")
        if self.alias:
            return f"{name} as {_require_name(self.alias, 'import alias')}"
        return name


ImportSpecifier = Union[SideEffectImport, DefaultImport, NamespaceImport, NamedImport]


def specifier_from_binding(key: str, value: str) -> ImportSpecifier:
    """Decode one entry of a legacy sentinel-keyed binding map.

    Parameters
    ----------
    key : str
        Module-reference key: ``DEFAULT``, ``GLOB``, or an identifier.
    value : str
        Local-binding descriptor: ``DEFAULT``, ``""`` or an identifier.

    Returns
    -------
    ImportSpecifier
        The equivalent tagged specifier.

    Raises
    ------
    InvariantViolation
        If the pair matches none of the encoding rules.

    Examples
    --------
    >>> specifier_from_binding("React", DEFAULT)
    DefaultImport(local_name='React')
    >>> specifier_from_binding(GLOB, "path")
    NamespaceImport(local_name='path')
    """
    if key == DEFAULT:
        if value == DEFAULT:
            return SideEffectImport()
        raise InvariantViolation(f"Side-effect binding must map {DEFAULT!r} to itself, got {value!r}")
    if key == GLOB:
        if value in (DEFAULT, GLOB, ""):
            raise InvariantViolation(f"Namespace binding needs a local name, got {value!r}")
        return NamespaceImport(_require_name(value, "namespace import name"))
    _require_name(key, "binding key")
    if value == DEFAULT:
        return DefaultImport(key)
    if value == GLOB:
        raise InvariantViolation(f"Binding {key!r} cannot be aliased to {GLOB!r}")
    if value:
        _require_name(value, "import alias")
    return NamedImport(key, value or None)


def specifiers_from_bindings(bindings: Mapping[str, str]) -> list[ImportSpecifier]:
    """Decode a whole legacy binding map, preserving its order."""
    return [specifier_from_binding(key, value) for key, value in bindings.items()]


def bindings_from_specifiers(specifiers: Iterable[ImportSpecifier]) -> dict[str, str]:
    """Encode specifiers back into a legacy binding map."""
    return dict(spec.to_binding() for spec in specifiers)
