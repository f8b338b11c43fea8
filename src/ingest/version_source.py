"""Version file retrieval with a local cache.

This module resolves a release's API file from the cache directory
first, then from the remote Go source tree (https or s3), persisting
every download back into the cache.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import requests

from core.config import GoSinceConfig
from core.constants import (
    ENV_SOURCE_URL,
    FILE_ENCODING,
    NOT_FOUND_MARKER,
    REMOTE_API_DIR_NAME,
    S3_NOT_FOUND_CODES,
)
from core.errors import DependencyError, EndOfSeries, FetchError
from core.logging_config import get_logger
from core.s3_uri import S3Location, is_s3_uri, parse_s3_uri
from core.version_tags import version_file_name

_LOGGER = get_logger(__name__)


class VersionSource:
    """Cache-first reader of per-release API files."""

    def __init__(self, config: GoSinceConfig) -> None:
        self._config = config
        self._cache_root = config.cache_root
        self._source_url = config.source_url.rstrip("/")
        self._s3_location: S3Location | None = None
        self._s3_client: Any = None
        if is_s3_uri(self._source_url):
            self._s3_location = parse_s3_uri(self._source_url)

    def local_path(self, version: str) -> Path:
        """Return the cache path of a release's API file."""
        return self._cache_root / version_file_name(version)

    def remote_location(self, version: str) -> str:
        """Return the remote URL of a release's API file."""
        return f"{self._source_url}/{REMOTE_API_DIR_NAME}/{version_file_name(version)}"

    def read(self, version: str) -> str:
        """Return the API file content of a release.

        Args:
            version: Release tag, e.g. ``go1.21``.

        Returns:
            File text from the cache, or freshly downloaded and cached.

        Raises:
            EndOfSeries: If the remote source does not publish this release.
            FetchError: If the download or the cache write fails.
            DependencyError: If an s3 source is configured without boto3.
        """
        local_path = self.local_path(version)
        try:
            return local_path.read_text(encoding=FILE_ENCODING)
        except (OSError, UnicodeDecodeError) as error:
            _LOGGER.debug("cache_read_failed", path=str(local_path), error=str(error))
        if self._s3_location is None:
            text = self._download_http(version)
        else:
            text = self._download_s3(version, self._s3_location)
        _write_cache_file(local_path, text)
        _LOGGER.info(
            "version_downloaded",
            version=version,
            source=self.remote_location(version),
            path=str(local_path),
        )
        return text

    def _download_http(self, version: str) -> str:
        url = self.remote_location(version)
        try:
            response = requests.get(url, timeout=self._config.request_timeout)
        except requests.RequestException as error:
            raise FetchError(
                f"Failed to download {url}: {error}. "
                f"Check network access or set {ENV_SOURCE_URL}."
            ) from error
        body = response.text
        if body.strip() == NOT_FOUND_MARKER:
            raise EndOfSeries(version)
        if not response.ok:
            raise FetchError(
                f"Failed to download {url}: HTTP status {response.status_code}. "
                f"Check that {ENV_SOURCE_URL} points at a Go source tree."
            )
        return body

    def _download_s3(self, version: str, location: S3Location) -> str:
        if self._s3_client is None:
            self._s3_client = _create_s3_client(self._config)
        from botocore.exceptions import BotoCoreError, ClientError

        key = location.key_for(REMOTE_API_DIR_NAME, version_file_name(version))
        try:
            payload = self._s3_client.get_object(Bucket=location.bucket, Key=key)
            body = payload["Body"].read()
        except ClientError as error:
            if error.response.get("Error", {}).get("Code") in S3_NOT_FOUND_CODES:
                raise EndOfSeries(version) from error
            raise FetchError(
                f"Failed to download s3://{location.bucket}/{key}: {error}."
            ) from error
        except BotoCoreError as error:
            raise FetchError(
                f"Failed to download s3://{location.bucket}/{key}: {error}."
            ) from error
        try:
            return body.decode(FILE_ENCODING)
        except UnicodeDecodeError as error:
            raise FetchError(
                f"Failed to decode s3://{location.bucket}/{key} as {FILE_ENCODING}: {error}."
            ) from error


def _create_s3_client(config: GoSinceConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        DependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise DependencyError(
            "S3 sources require boto3, but it is not installed. "
            "Install boto3 to read API files from s3:// locations."
        ) from error
    session_kwargs = _build_boto3_session_kwargs(config)
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _build_boto3_session_kwargs(config: GoSinceConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config."""
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs


def _write_cache_file(path: Path, text: str) -> None:
    """Write a downloaded file, creating parent directories as needed.

    Raises:
        FetchError: If the cache cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=FILE_ENCODING)
    except OSError as error:
        raise FetchError(
            f"Failed to write cache file {path}: {error}. "
            "Check permissions of the cache directory."
        ) from error
