"""Query parsing and result formatting for the CLI.

This module maps command arguments onto database lookups and
renders lookup and search results as console lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from core.errors import LookupFailure, UnknownPackageError
from core.types import SearchEntry, SymbolVersion

ADDED_IN = "added in"
DEPRECATED_IN = "and deprecated in"
FOUND = "found"
SEVERAL_FOUND = "Several possibilities found :"


@dataclass(frozen=True)
class QueryTarget:
    """Lowercased lookup key built from CLI expressions."""

    package: str
    symbol: str


def parse_query(expressions: Sequence[str]) -> QueryTarget:
    """Build a lookup key from one or two CLI expressions.

    ``net/http``, ``net/http.Client.Get`` and ``net/http Client.Get`` are
    accepted; with a single expression the symbol starts after its first dot.
    """
    package, symbol = expressions[0], ""
    if len(expressions) == 1:
        package, _, symbol = package.partition(".")
    else:
        symbol = expressions[1]
    return QueryTarget(package=package.lower(), symbol=symbol.lower())


def fallback_leaf(error: LookupFailure, target: QueryTarget) -> str:
    """Return the leaf name to search after a failed exact lookup."""
    if isinstance(error, UnknownPackageError) and not target.symbol:
        return target.package.rpartition("/")[2]
    return target.symbol.rpartition(".")[2]


def describe_versions(introduced: str, deprecated: str | None) -> str:
    """Render introduced and deprecated versions as one phrase."""
    if deprecated is None:
        return f"{ADDED_IN} {introduced}"
    return f"{ADDED_IN} {introduced} {DEPRECATED_IN} {deprecated}"


def format_lookup(symbol_version: SymbolVersion) -> str:
    return describe_versions(symbol_version.introduced, symbol_version.deprecated)


def format_search_results(results: Sequence[SearchEntry]) -> list[str]:
    """Render search results, flagging a single match as found."""
    if len(results) == 1:
        return [f"{FOUND} {_format_entry(results[0])}"]
    return [SEVERAL_FOUND, *(_format_entry(entry) for entry in results)]


def _format_entry(entry: SearchEntry) -> str:
    return f"{entry.display_name} {describe_versions(entry.introduced, entry.deprecated)}"
