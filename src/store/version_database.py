"""Queryable Go API version database.

This module aggregates parsed declarations across releases. The
builder is the only writer and runs during a single load pass;
``build`` returns an immutable database answering exact lookups
and leaf-name searches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.errors import UnknownPackageError, UnknownSymbolError
from core.logging_config import get_logger
from core.types import ApiDeclaration, SearchEntry, SymbolVersion
from core.version_tags import version_sort_key

_LOGGER = get_logger(__name__)

PACKAGE_SYMBOL = ""


@dataclass(frozen=True)
class VersionDatabase:
    """Read-only release data of every known package and symbol.

    Attributes:
        packages: Package path to lowercased symbol to version data.
            The ``""`` symbol holds the package's own introduction.
        search_index: Lowercased leaf name to entries in insertion order.
        versions: Loaded release tags in ascending order.
    """

    packages: dict[str, dict[str, SymbolVersion]]
    search_index: dict[str, tuple[SearchEntry, ...]]
    versions: tuple[str, ...]

    def since(self, package: str, symbol: str = PACKAGE_SYMBOL) -> SymbolVersion:
        """Return version data of a package or one of its symbols.

        Args:
            package: Lowercased package path, e.g. ``net/http``.
            symbol: Lowercased symbol, e.g. ``client.get``; empty for the package.

        Returns:
            Introduced and optional deprecated version.

        Raises:
            UnknownPackageError: If the package is not known.
            UnknownSymbolError: If the package has no such symbol.
        """
        symbols = self.packages.get(package)
        if symbols is None:
            raise UnknownPackageError(package)
        symbol_version = symbols.get(symbol)
        if symbol_version is None:
            raise UnknownSymbolError(package, symbol)
        return symbol_version

    def search(self, leaf_name: str) -> tuple[SearchEntry, ...]:
        """Return every entry whose lowercased leaf name matches exactly."""
        return self.search_index.get(leaf_name, ())


@dataclass
class _EntryState:
    """Mutable version data shared by the package table and the search index."""

    display_name: str
    introduced: str
    deprecated: str | None = None


class VersionDatabaseBuilder:
    """Single-writer accumulator feeding releases in ascending order."""

    def __init__(self) -> None:
        self._packages: dict[str, dict[str, _EntryState]] = {}
        self._index: dict[str, list[_EntryState]] = {}
        self._versions: list[str] = []

    def add_version(self, version: str, declarations: Iterable[ApiDeclaration]) -> int:
        """Register every declaration of one release.

        Args:
            version: Release tag of the file being loaded.
            declarations: Parsed declarations in file order.

        Returns:
            Number of declarations consumed.

        Raises:
            ValueError: If the release does not follow the previous one.
        """
        if self._versions and version_sort_key(version) <= version_sort_key(self._versions[-1]):
            raise ValueError(
                f"Release {version} must come after {self._versions[-1]}; "
                "feed releases in ascending order."
            )
        count = 0
        for declaration in declarations:
            if declaration.deprecated:
                self._deprecate(declaration, version)
            else:
                self._register(declaration, version)
            count += 1
        self._versions.append(version)
        return count

    def build(self) -> VersionDatabase:
        """Freeze the accumulated data into a database."""
        packages = {
            package: {key: _symbol_version(state) for key, state in symbols.items()}
            for package, symbols in self._packages.items()
        }
        search_index = {
            leaf: tuple(_search_entry(state) for state in states)
            for leaf, states in self._index.items()
        }
        return VersionDatabase(
            packages=packages,
            search_index=search_index,
            versions=tuple(self._versions),
        )

    def _register(self, declaration: ApiDeclaration, version: str) -> None:
        symbols = self._packages.get(declaration.package)
        if symbols is None:
            symbols = self._add_package(declaration.package, version)
        key = declaration.symbol.lower()
        if key in symbols:
            return
        state = _EntryState(f"{declaration.package} {declaration.symbol}", version)
        symbols[key] = state
        self._add_index_entry(_leaf_name(declaration.symbol, "."), state)

    def _add_package(self, package: str, version: str) -> dict[str, _EntryState]:
        state = _EntryState(package, version)
        symbols = {PACKAGE_SYMBOL: state}
        self._packages[package] = symbols
        self._add_index_entry(_leaf_name(package, "/"), state)
        return symbols

    def _deprecate(self, declaration: ApiDeclaration, version: str) -> None:
        state = self._packages.get(declaration.package, {}).get(declaration.symbol.lower())
        if state is None:
            _LOGGER.warning(
                "deprecation_without_symbol",
                package=declaration.package,
                symbol=declaration.symbol,
                version=version,
            )
            return
        if state.deprecated is None:
            state.deprecated = version

    def _add_index_entry(self, leaf: str, state: _EntryState) -> None:
        self._index.setdefault(leaf, []).append(state)


def _leaf_name(name: str, separator: str) -> str:
    """Return the lowercased last segment of a name."""
    return name.rpartition(separator)[2].lower()


def _symbol_version(state: _EntryState) -> SymbolVersion:
    return SymbolVersion(introduced=state.introduced, deprecated=state.deprecated)


def _search_entry(state: _EntryState) -> SearchEntry:
    return SearchEntry(
        display_name=state.display_name,
        introduced=state.introduced,
        deprecated=state.deprecated,
    )
