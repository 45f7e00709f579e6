#!/usr/bin/env python3
"""Minecraft Add-on Scaffold CLI - Main Entry Point.

Usage:
    mcaddon <command> [options]

Commands:
    init       Create a new behavior/resource pack project in the current directory
    switch     Re-select dependency versions of an existing project
    versions   List the release channels published for an npm package
    help       Show this help message
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from addon_scaffold.cli.init_project import run_init, run_switch
from addon_scaffold.core.version_classifier import (
    EmptyVersionTableError,
    classify_versions,
)
from addon_scaffold.core.version_selection import (
    SERVER_PACKAGE,
    channel_choices,
    version_choices,
)
from addon_scaffold.helpers.helpers_logging import (
    highlight,
    print_error,
    print_header,
    print_info,
)
from addon_scaffold.helpers.interactive import ConsolePrompter
from addon_scaffold.helpers.project_config import ProjectConfigError
from addon_scaffold.helpers.registry_client import RegistryError
from addon_scaffold.helpers.settings import SettingsError

# Exit code for Ctrl-C (128 + SIGINT)
_EXIT_CANCELLED = 130

# Errors printed as a one-line message instead of a traceback
_USER_ERRORS = (
    RegistryError,
    ProjectConfigError,
    EmptyVersionTableError,
    SettingsError,
)

_DIR_OPTION = click.option(
    "--dir",
    "project_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory (default: current directory)",
)
_YES_OPTION = click.option(
    "--yes",
    "-y",
    "auto",
    is_flag=True,
    help="Accept defaults and pick the newest dependency versions without asking",
)


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)


def _resolve_dir(project_dir: Path | None, create: bool = False) -> Path:
    target = project_dir or Path.cwd()
    if create:
        target.mkdir(parents=True, exist_ok=True)
    return target


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level mcaddon command group."""
    if ctx.invoked_subcommand is None:
        print_help()
    return 0


@_click_cli.command(name="init", help="Create a new add-on project")
@_DIR_OPTION
@_YES_OPTION
def init_cmd(project_dir: Path | None, auto: bool) -> int:
    info = run_init(_resolve_dir(project_dir, create=True), ConsolePrompter(), auto=auto)
    return 0 if info is not None else 1


@_click_cli.command(name="switch", help="Re-select dependency versions of a project")
@_DIR_OPTION
@_YES_OPTION
def switch_cmd(project_dir: Path | None, auto: bool) -> int:
    run_switch(_resolve_dir(project_dir), ConsolePrompter(), auto=auto)
    return 0


@_click_cli.command(name="versions", help="List release channels of an npm package")
@click.argument("package", default=SERVER_PACKAGE)
def versions_cmd(package: str) -> int:
    table = classify_versions(package)
    print_header(f"\nRelease channels of {package}")
    for channel in channel_choices(table, package):
        versions = version_choices(table, channel)
        label = highlight(channel.ljust(24))
        print(f"  {label} {len(versions)} version(s), newest {versions[0]}")
    return 0


@_click_cli.command(name="help", help="Show help message")
def help_cmd() -> int:
    print_help()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else argv

    try:
        result = _click_cli.main(
            args=args,
            prog_name="mcaddon",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _EXIT_CANCELLED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except _USER_ERRORS as exc:
        print_error(str(exc))
        if isinstance(exc, RegistryError):
            print_info("Check your network connection or MCADDON_REGISTRY_URL.")
        return 1

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
