"""S3 URI parsing helpers.

This module centralizes S3 URI parsing for remote API sources.
It keeps URI validation behavior consistent across the codebase.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import ConfigError

S3_SCHEME = "s3://"


@dataclass(frozen=True)
class S3Location:
    """Parsed S3 location model."""

    bucket: str
    prefix: str

    def key_for(self, *parts: str) -> str:
        """Join path parts under the prefix into an object key."""
        return "/".join(part for part in (self.prefix, *parts) if part)


def is_s3_uri(uri: str) -> bool:
    """Return whether a URI uses the s3 scheme."""
    return uri.startswith(S3_SCHEME)


def parse_s3_uri(uri: str) -> S3Location:
    """Parse and validate an S3 URI.

    Args:
        uri: URI in format ``s3://bucket[/prefix]``.

    Returns:
        Parsed bucket and prefix pair, prefix without surrounding slashes.

    Raises:
        ConfigError: If the bucket is missing.
    """
    stripped_uri = uri.removeprefix(S3_SCHEME)
    bucket, _, prefix = stripped_uri.partition("/")
    if not bucket:
        raise ConfigError(
            f"Invalid S3 URI '{uri}': expected s3://bucket[/prefix]. "
            "Provide at least a bucket name."
        )
    return S3Location(bucket=bucket, prefix=prefix.strip("/"))
