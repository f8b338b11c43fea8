"""Core constants used across gosince modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

PROJECT_VERSION = "0.1.0"
DEFAULT_CACHE_DIR_NAME = ".gosince"
DEFAULT_SOURCE_URL = "https://raw.githubusercontent.com/golang/go/master"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
REMOTE_API_DIR_NAME = "api"
VERSION_FILE_SUFFIX = ".txt"
BASE_VERSION = "go1"
NOT_FOUND_MARKER = "404: Not Found"
S3_NOT_FOUND_CODES = ("NoSuchKey", "404")
FILE_ENCODING = "utf-8"

PACKAGE_PREFIX = "pkg "
DEPRECATED_SUFFIX = "//deprecated"
COMMENT_CHAR = "#"
UNEXPORTED_METHODS_MARKER = "unexported methods"

ENV_CACHE_PATH = "GOSINCE_CACHE_PATH"
ENV_SOURCE_URL = "GOSINCE_SOURCE_URL"
ENV_VERBOSE = "GOSINCE_VERBOSE"
ENV_REQUEST_TIMEOUT = "GOSINCE_REQUEST_TIMEOUT"
ENV_S3_REGION = "GOSINCE_S3_REGION"
ENV_S3_PROFILE = "GOSINCE_S3_PROFILE"
TRUTHY_VALUES = ("1", "true", "yes", "on")


def default_cache_root() -> Path:
    """Return the default cache directory under the user home."""
    return Path.home() / DEFAULT_CACHE_DIR_NAME
