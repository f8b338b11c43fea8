"""Runtime configuration model for gosince.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_SOURCE_URL,
    ENV_CACHE_PATH,
    ENV_REQUEST_TIMEOUT,
    ENV_S3_PROFILE,
    ENV_S3_REGION,
    ENV_SOURCE_URL,
    ENV_VERBOSE,
    TRUTHY_VALUES,
    default_cache_root,
)
from core.errors import ConfigError


@dataclass(frozen=True)
class GoSinceConfig:
    """Validated runtime configuration.

    Attributes:
        cache_root: Local directory caching downloaded API files.
        source_url: Base location of the Go source tree (https or s3).
        verbose: Whether debug events are logged.
        request_timeout: HTTP timeout in seconds for downloads.
        s3_region: Optional AWS region for s3:// sources.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    cache_root: Path
    source_url: str
    verbose: bool = False
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    s3_region: str | None = None
    s3_profile: str | None = None

    @classmethod
    def from_env(cls) -> "GoSinceConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ConfigError: If environment values are invalid.
        """
        cache_path_value = os.getenv(ENV_CACHE_PATH)
        cache_root = (
            Path(cache_path_value).expanduser() if cache_path_value else _home_cache_root()
        )
        source_url = os.getenv(ENV_SOURCE_URL) or DEFAULT_SOURCE_URL
        timeout_value = os.getenv(ENV_REQUEST_TIMEOUT, str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
        return cls(
            cache_root=cache_root,
            source_url=source_url,
            verbose=_parse_flag(os.getenv(ENV_VERBOSE, "")),
            request_timeout=_parse_timeout(timeout_value),
            s3_region=os.getenv(ENV_S3_REGION),
            s3_profile=os.getenv(ENV_S3_PROFILE),
        )


def _home_cache_root() -> Path:
    """Resolve the default cache root.

    Raises:
        ConfigError: If the user home directory cannot be determined.
    """
    try:
        return default_cache_root()
    except RuntimeError as error:
        raise ConfigError(
            "Cannot locate the user home directory for the default cache. "
            f"Set {ENV_CACHE_PATH} to an explicit cache directory."
        ) from error


def _parse_flag(raw_value: str) -> bool:
    """Return whether an environment flag value is truthy."""
    return raw_value.strip().lower() in TRUTHY_VALUES


def _parse_timeout(raw_value: str) -> float:
    """Parse the request timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive timeout in seconds.

    Raises:
        ConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise ConfigError(
            f"Invalid {ENV_REQUEST_TIMEOUT} value: "
            f"expected number of seconds, got '{raw_value}'. "
            f"Set {ENV_REQUEST_TIMEOUT} to a numeric value."
        ) from error
    if timeout <= 0:
        raise ConfigError(
            f"Invalid {ENV_REQUEST_TIMEOUT} value: expected a positive number, "
            f"got '{raw_value}'."
        )
    return timeout
