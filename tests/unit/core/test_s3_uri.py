"""Unit tests for S3 URI parsing."""

from __future__ import annotations

import pytest

from core.errors import ConfigError
from core.s3_uri import is_s3_uri, parse_s3_uri


def test_parse_s3_uri_splits_bucket_and_prefix() -> None:
    """Bucket and prefix should be separated and trimmed."""
    location = parse_s3_uri("s3://mirror/golang/go/")

    assert (location.bucket, location.prefix) == ("mirror", "golang/go")
    assert location.key_for("api", "go1.txt") == "golang/go/api/go1.txt"


def test_parse_s3_uri_accepts_bucket_only() -> None:
    """A bare bucket should produce keys at the bucket root."""
    location = parse_s3_uri("s3://mirror")

    assert location.key_for("api", "go1.txt") == "api/go1.txt"


def test_parse_s3_uri_raises_without_bucket() -> None:
    """An empty bucket should be rejected."""
    with pytest.raises(ConfigError):
        parse_s3_uri("s3:///api")

    assert is_s3_uri("s3:///api")
