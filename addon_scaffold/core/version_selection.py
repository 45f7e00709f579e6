"""Two-stage dependency version selection.

Stage one picks a channel key from a version table, stage two picks a
concrete version inside that channel. The ordering helpers are pure; the
``ask_*`` functions only feed them to a prompter.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from addon_scaffold.core.version_classifier import (
    EmptyVersionTableError,
    VersionTable,
    classify_versions,
    latest_version,
)
from addon_scaffold.helpers.helpers_logging import highlight
from addon_scaffold.helpers.interactive import Prompter

SERVER_PACKAGE = "@minecraft/server"
SERVER_UI_PACKAGE = "@minecraft/server-ui"


@dataclass(frozen=True)
class DependencyVersion:
    """A selected dependency.

    ``manifest_version`` is the channel key written into the pack manifest,
    ``npm_version`` the concrete version written into package.json.
    """

    package: str
    manifest_version: str
    npm_version: str


def channel_choices(table: VersionTable, package_name: str = "") -> list[str]:
    """Return channel keys sorted descending."""
    if not table:
        raise EmptyVersionTableError(package_name)
    return sorted(table, reverse=True)


def version_choices(table: VersionTable, channel: str) -> list[str]:
    """Return the versions of one channel sorted descending."""
    if channel not in table:
        raise ValueError(f"Unknown channel: {channel}")
    return sorted(table[channel], reverse=True)


def ask_version(
    package_name: str,
    prompter: Prompter,
    table: VersionTable | None = None,
    client: httpx.Client | None = None,
) -> DependencyVersion:
    """Prompt for a channel, then for a version within it."""
    if table is None:
        table = classify_versions(package_name, client)

    channel = prompter.ask_choice(
        f"Select your {highlight(package_name)} version in manifest",
        channel_choices(table, package_name),
    )
    version = prompter.ask_choice(
        f"Select your {highlight(package_name)} version in npm",
        version_choices(table, channel),
    )
    return DependencyVersion(package_name, channel, version)


def ask_require(
    package_name: str,
    prompter: Prompter,
    client: httpx.Client | None = None,
) -> DependencyVersion | None:
    """Ask whether an optional dependency is needed, then its version."""
    if not prompter.ask_yes(f"Require {highlight(package_name)}?", default=False):
        return None
    return ask_version(package_name, prompter, client=client)


def latest_dependency(
    package_name: str,
    client: httpx.Client | None = None,
) -> DependencyVersion:
    """Select the newest channel and version without prompting."""
    channel, version = latest_version(package_name, client)
    return DependencyVersion(package_name, channel, version)
