"""Unit tests for core config parsing."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.config import GoSinceConfig
from core.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS, DEFAULT_SOURCE_URL
from core.errors import ConfigError


def test_from_env_reads_cache_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the cache root from environment."""
    monkeypatch.setenv("GOSINCE_CACHE_PATH", "./.tmp-gosince")

    config = GoSinceConfig.from_env()

    assert config.cache_root.name == ".tmp-gosince"


def test_from_env_defaults_to_home_cache_and_github_source(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Config should fall back to ~/.gosince and the upstream Go tree."""
    monkeypatch.delenv("GOSINCE_CACHE_PATH", raising=False)
    monkeypatch.delenv("GOSINCE_SOURCE_URL", raising=False)
    monkeypatch.delenv("GOSINCE_VERBOSE", raising=False)
    monkeypatch.delenv("GOSINCE_REQUEST_TIMEOUT", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    config = GoSinceConfig.from_env()

    assert config.cache_root == tmp_path / ".gosince"
    assert config.source_url == DEFAULT_SOURCE_URL
    assert config.verbose is False
    assert config.request_timeout == DEFAULT_REQUEST_TIMEOUT_SECONDS


def test_from_env_reads_verbose_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Truthy GOSINCE_VERBOSE values should enable verbose output."""
    monkeypatch.setenv("GOSINCE_VERBOSE", "Yes")

    assert GoSinceConfig.from_env().verbose is True


def test_from_env_raises_for_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-numeric request timeout."""
    monkeypatch.setenv("GOSINCE_REQUEST_TIMEOUT", "not-a-number")

    with pytest.raises(ConfigError):
        GoSinceConfig.from_env()

    assert os.getenv("GOSINCE_REQUEST_TIMEOUT") == "not-a-number"


def test_from_env_raises_for_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject a zero request timeout."""
    monkeypatch.setenv("GOSINCE_REQUEST_TIMEOUT", "0")

    with pytest.raises(ConfigError):
        GoSinceConfig.from_env()
