"""Go release tag helpers.

Tags follow ``go1`` then ``go1.N`` with increasing minor numbers.
"""

from __future__ import annotations

from core.constants import BASE_VERSION, VERSION_FILE_SUFFIX


def version_tag(minor: int) -> str:
    """Return the release tag for a minor version number."""
    if minor == 0:
        return BASE_VERSION
    return f"{BASE_VERSION}.{minor}"


def version_file_name(version: str) -> str:
    """Return the API file name for a release tag."""
    return f"{version}{VERSION_FILE_SUFFIX}"


def version_sort_key(version: str) -> int:
    """Return the minor number ordering a release tag.

    Raises:
        ValueError: If the tag is not a ``go1`` series tag.
    """
    if version == BASE_VERSION:
        return 0
    prefix = f"{BASE_VERSION}."
    if not version.startswith(prefix):
        raise ValueError(f"Not a {BASE_VERSION} release tag: '{version}'")
    return int(version.removeprefix(prefix))
