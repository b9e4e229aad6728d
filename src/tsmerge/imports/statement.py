"""One import statement per package: the merge unit of the registry."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

from tsmerge.imports.specifiers import (
    DefaultImport,
    ImportSpecifier,
    MergeKey,
    NamedImport,
    NamespaceImport,
    SideEffectImport,
    bindings_from_specifiers,
    specifiers_from_bindings,
)


@dataclass
class ImportStatement:
    """All specifiers imported from a single package.

    Specifiers are held in insertion order, keyed by their merge key.
    Adding a specifier whose key is already present replaces the old one in
    place (last write wins). Removal is keyed: the value of the specifier
    passed to ``remove`` is ignored.

    Attributes
    ----------
    package_name : str
        Module specifier as written in the source, without quotes.
    specifiers : dict[MergeKey, ImportSpecifier]
        Current specifiers.

    Examples
    --------
    >>> stmt = ImportStatement("react", [DefaultImport("React")])
    >>> stmt.add([NamedImport("useState")])
    >>> stmt.bindings
    {'React': '<default>', 'useState': ''}
    """

    package_name: str
    specifiers: dict[MergeKey, ImportSpecifier] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Accept any iterable of specifiers at construction time.
        if not isinstance(self.specifiers, dict):
            initial = list(self.specifiers)
            self.specifiers = {}
            self.add(initial)

    @classmethod
    def from_bindings(cls, package_name: str, bindings: Mapping[str, str]) -> ImportStatement:
        """Build a statement from a legacy sentinel-keyed binding map."""
        return cls(package_name, specifiers_from_bindings(bindings))

    @property
    def is_relative(self) -> bool:
        """True for path-relative packages (``./x``, ``../x``)."""
        return self.package_name.startswith(".")

    @property
    def is_empty(self) -> bool:
        return not self.specifiers

    @property
    def bindings(self) -> dict[str, str]:
        """Legacy ``{module-reference key: local-binding}`` view."""
        return bindings_from_specifiers(self.specifiers.values())

    def __iter__(self) -> Iterator[ImportSpecifier]:
        return iter(self.specifiers.values())

    def __len__(self) -> int:
        return len(self.specifiers)

    def add(self, specifiers: Iterable[ImportSpecifier]) -> None:
        """Merge specifiers in, overwriting on key collision."""
        for spec in specifiers:
            self.specifiers[spec.merge_key] = spec

    def remove(self, specifiers: Iterable[ImportSpecifier]) -> None:
        """Delete the keys of the given specifiers. Missing keys are ignored."""
        for spec in specifiers:
            self.specifiers.pop(spec.merge_key, None)

    @property
    def side_effect(self) -> SideEffectImport | None:
        for spec in self.specifiers.values():
            if isinstance(spec, SideEffectImport):
                return spec
        return None

    @property
    def defaults(self) -> list[DefaultImport]:
        return [s for s in self.specifiers.values() if isinstance(s, DefaultImport)]

    @property
    def namespace(self) -> NamespaceImport | None:
        for spec in self.specifiers.values():
            if isinstance(spec, NamespaceImport):
                return spec
        return None

    @property
    def named(self) -> list[NamedImport]:
        return [s for s in self.specifiers.values() if isinstance(s, NamedImport)]
