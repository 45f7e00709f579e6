"""
Initialize or reconfigure a Minecraft Bedrock add-on project.

init   -- ask the project questions, pick dependency versions, write the
          behavior/resource pack layout and mcaddon.yaml.
switch -- reload mcaddon.yaml, pick new dependency versions and rewrite
          the manifests. Pack UUIDs are kept.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from addon_scaffold.core.manifest_builder import (
    behavior_manifest,
    gitignore,
    main_script,
    package_json,
    resource_manifest,
    tsconfig_json,
)
from addon_scaffold.core.project_info import (
    ProjectInfo,
    collect_init_info,
    default_info,
    with_dependencies,
)
from addon_scaffold.core.version_selection import (
    SERVER_PACKAGE,
    SERVER_UI_PACKAGE,
    DependencyVersion,
    ask_require,
    ask_version,
    latest_dependency,
)
from addon_scaffold.helpers.fs_writer import mkdir, read_json, write_json, write_text
from addon_scaffold.helpers.helpers_logging import (
    highlight,
    print_header,
    print_info,
    print_success,
)
from addon_scaffold.helpers.interactive import Prompter
from addon_scaffold.helpers.project_config import (
    ProjectConfigError,
    config_path,
    load_project_config,
    save_project_config,
)

# Dependencies offered by the wizard: (package, required)
DEPENDENCY_PACKAGES: list[tuple[str, bool]] = [
    (SERVER_PACKAGE, True),
    (SERVER_UI_PACKAGE, False),
]


def select_dependencies(
    info: ProjectInfo,
    prompter: Prompter,
    client: httpx.Client | None = None,
) -> ProjectInfo:
    """Pick dependency versions and return an updated copy of ``info``.

    In auto mode required packages get their newest version, and optional
    ones are only refreshed when the project already depends on them.
    """
    selected: list[DependencyVersion] = []
    for package, required in DEPENDENCY_PACKAGES:
        if info.auto:
            if required or info.dependency(package) is not None:
                selected.append(latest_dependency(package, client))
            continue

        if required:
            selected.append(ask_version(package, prompter, client=client))
        else:
            dep = ask_require(package, prompter, client=client)
            if dep is not None:
                selected.append(dep)

    return with_dependencies(info, selected)


def script_entry_path(info: ProjectInfo, project_dir: Path) -> Path:
    """Where the starter script lives (ts sources compile into the pack)."""
    if info.language == "ts":
        return project_dir / info.scripts_path / "main.ts"
    return project_dir / info.beh_path / "scripts" / "main.js"


def project_directories(info: ProjectInfo, project_dir: Path) -> list[Path]:
    directories = [
        project_dir / info.beh_path,
        project_dir / info.beh_path / "scripts",
    ]
    if info.res:
        directories.append(project_dir / info.res_path)
    if info.language == "ts":
        directories.append(project_dir / info.scripts_path)
    return directories


def write_project(info: ProjectInfo, project_dir: Path) -> None:
    """Write every project file for ``info``.

    Manifests, package.json and mcaddon.yaml always reflect ``info``;
    user-editable starter files are never overwritten.
    """
    print_info("\n📁 Creating directory structure...")
    mkdir(project_directories(info, project_dir), root=project_dir)

    print_info("\n📄 Writing project files...")
    write_json(
        project_dir / info.beh_path / "manifest.json",
        behavior_manifest(info),
        root=project_dir,
    )
    if info.res:
        write_json(
            project_dir / info.res_path / "manifest.json",
            resource_manifest(info),
            root=project_dir,
        )

    package_path = project_dir / "package.json"
    write_json(package_path, package_json(info, read_json(package_path)), root=project_dir)

    if info.language == "ts":
        write_json(
            project_dir / "tsconfig.json",
            tsconfig_json(info),
            overwrite=False,
            root=project_dir,
        )
    write_text(script_entry_path(info, project_dir), main_script(info), overwrite=False, root=project_dir)
    write_text(project_dir / ".gitignore", gitignore(), overwrite=False, root=project_dir)

    save_project_config(info, project_dir)


def _print_dependencies(info: ProjectInfo) -> None:
    for dep in info.dependencies:
        print_info(
            f"  {highlight(dep.package)}: manifest {dep.manifest_version}, npm {dep.npm_version}"
        )


def run_init(
    project_dir: Path,
    prompter: Prompter,
    auto: bool = False,
    client: httpx.Client | None = None,
) -> ProjectInfo | None:
    """Create a new project in ``project_dir``.

    Returns:
        The written project info, or None if the user declined to
        re-initialize an existing project.

    Raises:
        ProjectConfigError: In auto mode when the directory already holds
            a project config.
    """
    if config_path(project_dir).exists():
        if auto:
            raise ProjectConfigError(
                f"{project_dir} is already initialized. Use 'mcaddon switch' instead."
            )
        if not prompter.ask_yes("Project is already initialized. Re-initialize?", default=False):
            print_info("Aborted.")
            return None

    info = default_info(project_dir)
    if not auto:
        print_header("This utility will walk you through creating a project.")
        print_info("Press ^C at any time to quit.")
        info = collect_init_info(info, prompter)

    info = select_dependencies(info, prompter, client)
    write_project(info, project_dir)

    print_success(f"Project {highlight(info.name)} initialized")
    _print_dependencies(info)
    return info


def run_switch(
    project_dir: Path,
    prompter: Prompter,
    auto: bool = False,
    client: httpx.Client | None = None,
) -> ProjectInfo:
    """Re-select dependency versions of an existing project.

    Raises:
        ProjectConfigError: If mcaddon.yaml is missing or invalid.
    """
    info = load_project_config(project_dir, auto=auto)
    print_header(f"Switching dependencies of {info.name}")

    info = select_dependencies(info, prompter, client)
    write_project(info, project_dir)

    print_success(f"Project {highlight(info.name)} updated")
    _print_dependencies(info)
    return info
