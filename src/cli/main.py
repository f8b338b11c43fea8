"""gosince CLI entry points.
This module exposes the version lookup command.
It maps argparse arguments onto version database queries.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Sequence

from cli.go_doc import run_go_doc
from cli.query_resolution import (
    QueryTarget,
    fallback_leaf,
    format_lookup,
    format_search_results,
    parse_query,
)
from core.config import GoSinceConfig
from core.constants import PROJECT_VERSION
from core.errors import GoSinceError, LookupFailure
from core.logging_config import configure_logging, get_logger
from store.database_loader import load_version_database
from store.version_database import VersionDatabase

_LOGGER = get_logger(__name__)

_USAGE_EPILOG = """Usage of gosince:
gosince <pkg>
gosince <sym>
gosince <pkg>.<sym>[.<methodOrField>]
gosince <pkg> <sym>[.<methodOrField>]
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="gosince",
        description="gosince shows the introducing version of a go package or symbol.",
        epilog=_USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("expression", help="Package, symbol or package.symbol")
    parser.add_argument("symbol", nargs="?", help="Symbol of the package given first")
    parser.add_argument(
        "-p",
        "--cache-path",
        help="Local path to cache the retrieved api information",
    )
    parser.add_argument("-a", "--source-addr", help="Location of Go source")
    parser.add_argument("-d", "--go-doc", action="store_true", help="Call go doc command")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {PROJECT_VERSION}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the gosince CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    expressions = [args.expression] if args.symbol is None else [args.expression, args.symbol]
    try:
        config = _build_config(args)
        configure_logging(config.verbose)
        _LOGGER.info(
            "cli_configuration",
            cache_root=str(config.cache_root),
            source_url=config.source_url,
        )
        database = load_version_database(config)
    except GoSinceError as error:
        print(error, file=sys.stderr)
        return 1
    target = parse_query(expressions)
    try:
        symbol_version = database.since(target.package, target.symbol)
    except LookupFailure as error:
        return _run_search_fallback(database, error, target, args.go_doc)
    print(format_lookup(symbol_version))
    if args.go_doc:
        return run_go_doc(expressions)
    return 0


def _build_config(args: argparse.Namespace) -> GoSinceConfig:
    """Build config from environment with CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Runtime config.
    """
    config = GoSinceConfig.from_env()
    if args.cache_path:
        config = replace(config, cache_root=Path(args.cache_path).expanduser())
    if args.source_addr:
        config = replace(config, source_url=args.source_addr)
    if args.verbose:
        config = replace(config, verbose=True)
    return config


def _run_search_fallback(
    database: VersionDatabase,
    error: LookupFailure,
    target: QueryTarget,
    go_doc: bool,
) -> int:
    """Print leaf-name matches after a failed exact lookup.

    Args:
        database: Loaded version database.
        error: Exact lookup failure.
        target: Query that failed.
        go_doc: Whether to document a single match with go doc.

    Returns:
        Exit code.
    """
    results = database.search(fallback_leaf(error, target))
    if not results:
        print(error, file=sys.stderr)
        return 1
    for line in format_search_results(results):
        print(line)
    if go_doc and len(results) == 1:
        return run_go_doc(results[0].display_name.split(" "))
    return 0
