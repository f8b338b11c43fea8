"""Public SDK surface for gosince.

This module provides a stable import path for library users.
It re-exports the loader, the database and typed result models.
"""

from __future__ import annotations

from core.config import GoSinceConfig
from core.errors import (
    ApiParseError,
    FetchError,
    GoSinceError,
    LookupFailure,
    ParseFailure,
    UnknownPackageError,
    UnknownSymbolError,
)
from core.types import ApiDeclaration, SearchEntry, SymbolVersion
from ingest.api_file_parser import parse_api_file, parse_api_line
from ingest.version_source import VersionSource
from store.database_loader import load_version_database
from store.version_database import VersionDatabase, VersionDatabaseBuilder

__all__ = [
    "ApiDeclaration",
    "ApiParseError",
    "FetchError",
    "GoSinceConfig",
    "GoSinceError",
    "LookupFailure",
    "ParseFailure",
    "SearchEntry",
    "SymbolVersion",
    "UnknownPackageError",
    "UnknownSymbolError",
    "VersionDatabase",
    "VersionDatabaseBuilder",
    "VersionSource",
    "load_version_database",
    "parse_api_file",
    "parse_api_line",
]
