"""Group published npm versions into release channels.

A channel key is the numeric core for stable releases (``1.2.0``) or the
core suffixed with ``-rc`` / ``-beta`` for pre-release lines. ``preview``
builds share the ``-rc`` channel with release candidates.

    1.2.0                      -> 1.2.0       : 1.2.0
    1.2.0-beta.1.20.30-stable  -> 1.2.0-beta  : 1.2.0-beta.1.20.30-stable
    1.2.0-rc.1.20.40-preview.2 -> 1.2.0-rc    : 1.2.0-rc.1.20.40-preview.2
    1.2.0-preview.3            -> 1.2.0-rc    : 1.2.0-preview.3
"""

from __future__ import annotations

from collections.abc import Iterable

import httpx

from addon_scaffold.helpers.helpers_logging import (
    highlight,
    print_info,
    print_warning,
)
from addon_scaffold.helpers.registry_client import (
    fetch_package_document,
    package_versions,
)

# Channel key -> concrete version strings published under it.
VersionTable = dict[str, list[str]]

EXCLUDED_CORE = "0.0.1"
EXCLUDED_TAG_MARKER = "internal"

# Tag prefix -> channel suffix. Order does not matter, prefixes are disjoint.
TAG_CHANNELS: dict[str, str] = {
    "rc": "-rc",
    "beta": "-beta",
    "preview": "-rc",
}


class EmptyVersionTableError(Exception):
    """No published version of a package qualifies for selection."""

    def __init__(self, package_name: str) -> None:
        super().__init__(f"No selectable versions found for {package_name}")
        self.package_name = package_name


def _is_excluded(segments: list[str]) -> bool:
    if segments[0] == EXCLUDED_CORE:
        return True
    return len(segments) > 1 and EXCLUDED_TAG_MARKER in segments[1]


def channel_for(raw_version: str) -> tuple[str, str] | None:
    """Return ``(channel_key, stored_value)`` for one raw version.

    Returns None when the version is excluded or its tag is not one of
    the known channel prefixes.
    """
    segments = raw_version.split("-")
    if _is_excluded(segments):
        return None

    core = segments[0]
    if len(segments) == 1:
        return core, core

    tag = segments[1]
    for prefix, suffix in TAG_CHANNELS.items():
        if tag.startswith(prefix):
            return core + suffix, raw_version
    return None


def bucket_versions(raw_versions: Iterable[str]) -> VersionTable:
    """Build a fresh version table from raw version strings."""
    table: VersionTable = {}
    for raw_version in raw_versions:
        entry = channel_for(raw_version)
        if entry is None:
            continue
        key, value = entry
        bucket = table.setdefault(key, [])
        if value not in bucket:
            bucket.append(value)
    return table


def unclassified_versions(raw_versions: Iterable[str]) -> list[str]:
    """Return versions that pass the exclusion rule but have an unknown tag."""
    return [
        raw_version
        for raw_version in raw_versions
        if channel_for(raw_version) is None
        and not _is_excluded(raw_version.split("-"))
    ]


def classify_versions(
    package_name: str,
    client: httpx.Client | None = None,
) -> VersionTable:
    """Fetch a package's versions from the registry and group them by channel.

    Registry errors propagate unchanged; nothing is returned on failure.
    """
    print_info(f"Fetching versions for {highlight(package_name)}...")
    raw_versions = package_versions(fetch_package_document(package_name, client))

    skipped = unclassified_versions(raw_versions)
    if skipped:
        print_warning(
            f"Skipped {len(skipped)} version(s) of {package_name} "
            f"with an unrecognized tag (e.g. {skipped[0]})"
        )
    return bucket_versions(raw_versions)


def latest_in_table(package_name: str, table: VersionTable) -> tuple[str, str]:
    """Return the greatest ``(channel_key, version)`` pair of a table.

    Both levels are compared as plain strings, in the same order the
    selection prompts list them.
    """
    if not table:
        raise EmptyVersionTableError(package_name)
    key = sorted(table, reverse=True)[0]
    return key, sorted(table[key], reverse=True)[0]


def latest_version(
    package_name: str,
    client: httpx.Client | None = None,
) -> tuple[str, str]:
    """Fetch and return the newest ``(channel_key, version)`` of a package."""
    return latest_in_table(package_name, classify_versions(package_name, client))
