"""Version database load orchestration.

This module probes releases ``go1``, ``go1.1``, ``go1.2``... in order,
parsing each API file into the builder until the source reports the
end of the series. Any other failure aborts the whole load.
"""

from __future__ import annotations

from itertools import count

from core.config import GoSinceConfig
from core.constants import BASE_VERSION, ENV_CACHE_PATH, ENV_SOURCE_URL
from core.errors import EndOfSeries, FetchError
from core.logging_config import get_logger
from core.version_tags import version_file_name, version_tag
from ingest.api_file_parser import parse_api_file
from ingest.version_source import VersionSource
from store.version_database import VersionDatabase, VersionDatabaseBuilder

_LOGGER = get_logger(__name__)


def load_version_database(
    config: GoSinceConfig,
    source: VersionSource | None = None,
) -> VersionDatabase:
    """Load every published release into a version database.

    Args:
        config: Runtime configuration.
        source: Optional version source, built from config when omitted.

    Returns:
        Immutable database covering ``go1`` up to the last published release.

    Raises:
        FetchError: If a file cannot be retrieved, including a missing ``go1``.
        ApiParseError: If any line of any file is malformed.
    """
    version_source = source or VersionSource(config)
    builder = VersionDatabaseBuilder()
    for minor in count():
        version = version_tag(minor)
        try:
            text = version_source.read(version)
        except EndOfSeries as error:
            if version == BASE_VERSION:
                raise FetchError(
                    f"Cannot retrieve {BASE_VERSION} API information. "
                    f"Check {ENV_CACHE_PATH} and {ENV_SOURCE_URL}."
                ) from error
            break
        declaration_count = builder.add_version(
            version, parse_api_file(text, version_file_name(version))
        )
        _LOGGER.debug("version_loaded", version=version, declarations=declaration_count)
    database = builder.build()
    _LOGGER.info(
        "version_database_loaded",
        versions=len(database.versions),
        packages=len(database.packages),
        latest=database.versions[-1],
    )
    return database
