"""Unit tests for release tag helpers."""

from __future__ import annotations

import pytest

from core.version_tags import version_file_name, version_sort_key, version_tag


def test_version_tag_starts_series_at_go1() -> None:
    """Minor zero should be the bare base release."""
    assert [version_tag(minor) for minor in range(3)] == ["go1", "go1.1", "go1.2"]


def test_version_file_name_appends_txt_suffix() -> None:
    """API files should be named after their release tag."""
    assert version_file_name("go1.21") == "go1.21.txt"


def test_version_sort_key_orders_numerically() -> None:
    """go1.10 should sort after go1.9."""
    tags = ["go1.10", "go1", "go1.9", "go1.2"]

    assert sorted(tags, key=version_sort_key) == ["go1", "go1.2", "go1.9", "go1.10"]


def test_version_sort_key_rejects_foreign_tags() -> None:
    """Tags outside the go1 series should fail."""
    with pytest.raises(ValueError):
        version_sort_key("go2.0")
