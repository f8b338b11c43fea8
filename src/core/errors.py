"""gosince exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations

from enum import Enum


class GoSinceError(Exception):
    """Base exception for all gosince failures."""


class ConfigError(GoSinceError):
    """Raised for invalid runtime configuration."""


class FetchError(GoSinceError):
    """Raised when a version file cannot be read, downloaded or cached."""


class DependencyError(GoSinceError):
    """Raised when an optional runtime dependency is missing."""


class EndOfSeries(GoSinceError):
    """Raised by the version source when the requested version is not published.

    The loader treats it as the normal end of the version probe.
    """

    def __init__(self, version: str) -> None:
        super().__init__(f"Version {version} is not published yet.")
        self.version = version


class ParseFailure(Enum):
    """Failure kinds for API declaration parsing."""

    MALFORMED_LINE_PREFIX = "malformed line prefix"
    MISSING_FIELD_SEPARATOR = "missing field separator"
    UNKNOWN_SYMBOL_KIND = "unknown symbol kind"
    EMPTY_NAME = "empty name"
    EMPTY_RECEIVER = "empty receiver"
    EMPTY_RECEIVER_NAME = "empty receiver name"
    EMPTY_METHOD_NAME = "empty method name"
    EMPTY_SUB_NAME = "empty sub name"
    UNEXPECTED_CLOSING_DELIMITER = "unexpected closing delimiter"
    UNTERMINATED_GROUP = "unterminated group"
    UNTERMINATED_LITERAL = "unterminated literal"
    UNEXPECTED_THIRD_FIELD = "unexpected third field"


class ApiParseError(GoSinceError):
    """Raised for malformed API declaration lines.

    Attributes:
        kind: Failure kind.
        detail: Human readable context.
    """

    def __init__(self, kind: ParseFailure, detail: str) -> None:
        super().__init__(f"Parsing failure ({kind.value}): {detail}")
        self.kind = kind
        self.detail = detail


class LookupFailure(GoSinceError):
    """Base class for non-fatal query misses."""


class UnknownPackageError(LookupFailure):
    """Raised when a package is absent from the version database."""

    def __init__(self, package: str) -> None:
        super().__init__(f"package not found: {package}")
        self.package = package


class UnknownSymbolError(LookupFailure):
    """Raised when a symbol is absent from a known package."""

    def __init__(self, package: str, symbol: str) -> None:
        super().__init__(f"symbol not found: {package} {symbol}")
        self.package = package
        self.symbol = symbol
