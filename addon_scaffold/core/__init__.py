"""Core logic: version channels, project info and file content."""

from addon_scaffold.core.version_classifier import (
    EmptyVersionTableError,
    VersionTable,
    bucket_versions,
    classify_versions,
    latest_version,
)
from addon_scaffold.core.version_selection import (
    DependencyVersion,
    channel_choices,
    version_choices,
)

__all__ = [
    "DependencyVersion",
    "EmptyVersionTableError",
    "VersionTable",
    "bucket_versions",
    "channel_choices",
    "classify_versions",
    "latest_version",
    "version_choices",
]
