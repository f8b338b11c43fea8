"""Unit tests for version database load orchestration."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import GoSinceConfig
from core.errors import ApiParseError, EndOfSeries, FetchError, ParseFailure
from store.database_loader import load_version_database
from tests.fake_remote import install_fake_remote
from tests.fixture_paths import copy_api_fixtures


class _DictSource:
    """Version source serving fixed texts and recording probes."""

    def __init__(self, files: dict[str, str]) -> None:
        self.files = files
        self.probed: list[str] = []

    def read(self, version: str) -> str:
        self.probed.append(version)
        if version not in self.files:
            raise EndOfSeries(version)
        return self.files[version]


def _config(cache_root: Path) -> GoSinceConfig:
    return GoSinceConfig(cache_root=cache_root, source_url="https://go.example/go")


def test_load_stops_at_first_unpublished_version(tmp_path: Path) -> None:
    """The probe should load go1..go1.(N-1) when go1.N is missing."""
    source = _DictSource(
        {
            "go1": "pkg os, var Args []string\n",
            "go1.1": "pkg os, func Executable() (string, error)\n",
        }
    )

    database = load_version_database(_config(tmp_path), source=source)

    assert database.versions == ("go1", "go1.1")
    assert source.probed == ["go1", "go1.1", "go1.2"]
    assert database.since("os", "executable").introduced == "go1.1"


def test_load_requires_go1(tmp_path: Path) -> None:
    """A missing base release should be a fatal fetch failure."""
    with pytest.raises(FetchError):
        load_version_database(_config(tmp_path), source=_DictSource({}))


def test_load_aborts_on_malformed_line(tmp_path: Path) -> None:
    """A grammar error in any file should abort without a database."""
    source = _DictSource(
        {
            "go1": "pkg os, var Args []string\n",
            "go1.1": "pkg os func Executable\n",
        }
    )

    with pytest.raises(ApiParseError) as error_info:
        load_version_database(_config(tmp_path), source=source)

    assert error_info.value.kind is ParseFailure.MISSING_FIELD_SEPARATOR
    assert source.probed == ["go1", "go1.1"]


def test_load_reads_cache_then_probes_remote(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Cached files should be used and only the next version probed remotely."""
    cache_root = copy_api_fixtures(tmp_path / "cache", "go1.txt", "go1.1.txt", "go1.2.txt")
    remote = install_fake_remote(monkeypatch, {})

    database = load_version_database(_config(cache_root))

    assert database.versions == ("go1", "go1.1", "go1.2")
    assert remote.requested_urls == ["https://go.example/go/api/go1.3.txt"]
