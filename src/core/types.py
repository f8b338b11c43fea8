"""Shared typed models.

This module defines immutable data models used by the ingest, store
and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiDeclaration:
    """One parsed line of an API definition file.

    Attributes:
        package: Package path, e.g. ``net/http``.
        symbol: Canonical symbol name in original casing, e.g. ``Client.Get``.
        kind: Declaration kind (const, var, func, method, type).
        deprecated: Whether the line carries the deprecation marker.
    """

    package: str
    symbol: str
    kind: str
    deprecated: bool = False


@dataclass(frozen=True)
class SymbolVersion:
    """Version data of a package or symbol.

    Attributes:
        introduced: Version tag where the symbol first appeared.
        deprecated: Version tag where the symbol was marked deprecated.
    """

    introduced: str
    deprecated: str | None = None


@dataclass(frozen=True)
class SearchEntry:
    """Leaf-name search result.

    Attributes:
        display_name: ``<package>`` or ``<package> <Symbol>`` in original casing.
        introduced: Version tag where the entry first appeared.
        deprecated: Version tag where the entry was marked deprecated.
    """

    display_name: str
    introduced: str
    deprecated: str | None = None
