"""
Load and save the project config file (mcaddon.yaml).

The file is the persisted form of ``ProjectInfo``; switch mode rebuilds
its info from it instead of asking the init questions again.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

from ruamel.yaml.error import YAMLError

from addon_scaffold.core.project_info import (
    InvalidVersionError,
    PackUuids,
    ProjectInfo,
    parse_version,
)
from addon_scaffold.core.version_selection import DependencyVersion
from addon_scaffold.helpers.helpers_logging import print_success
from addon_scaffold.helpers.settings import PROJECT_CONFIG_FILE
from addon_scaffold.helpers.yaml_loader import (
    ConfigDict,
    load_yaml_file,
    save_yaml_file,
)

_UUID_FIELDS = ("behavior", "data_module", "script_module", "resource", "resource_module")


class ProjectConfigError(Exception):
    """Project config file is missing or invalid."""


def config_path(project_dir: Path) -> Path:
    return project_dir / PROJECT_CONFIG_FILE


def info_to_config(info: ProjectInfo) -> ConfigDict:
    """Serialize project info into the config file layout."""
    return {
        "name": info.name,
        "description": info.description,
        "version": info.version,
        "language": info.language,
        "allow_eval": info.allow_eval,
        "res": info.res,
        "min_engine_version": list(info.min_engine_version),
        "paths": {
            "behavior": info.beh_path,
            "resource": info.res_path,
            "scripts": info.scripts_path,
        },
        "uuids": {name: getattr(info.uuids, name) for name in _UUID_FIELDS},
        "dependencies": {
            dep.package: {
                "manifest": dep.manifest_version,
                "npm": dep.npm_version,
            }
            for dep in info.dependencies
        },
    }


def _require_mapping(raw: object, where: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ProjectConfigError(f"{where} must be a mapping")
    return cast(dict[str, Any], raw)


def _require_bool(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ProjectConfigError(f"'{key}' must be true or false, got {value!r}")
    return value


def _parse_engine_version(raw: object) -> tuple[int, int, int]:
    message = "'min_engine_version' must be a list of three integers"
    if not isinstance(raw, list) or len(raw) != 3:
        raise ProjectConfigError(message)
    try:
        major, minor, patch = (int(part) for part in raw)
    except (TypeError, ValueError) as e:
        raise ProjectConfigError(message) from e
    return major, minor, patch


def _parse_uuids(raw: object) -> PackUuids:
    uuids = _require_mapping(raw, "'uuids'")
    missing = [name for name in _UUID_FIELDS if not uuids.get(name)]
    if missing:
        raise ProjectConfigError(f"'uuids' is missing: {', '.join(missing)}")
    return PackUuids(*(str(uuids[name]) for name in _UUID_FIELDS))


def _parse_dependencies(raw: object) -> tuple[DependencyVersion, ...]:
    if raw is None:
        return ()
    deps = _require_mapping(raw, "'dependencies'")
    parsed: list[DependencyVersion] = []
    for package, entry in deps.items():
        entry_map = _require_mapping(entry, f"dependency '{package}'")
        if "manifest" not in entry_map or "npm" not in entry_map:
            raise ProjectConfigError(
                f"dependency '{package}' needs both 'manifest' and 'npm' versions"
            )
        parsed.append(
            DependencyVersion(str(package), str(entry_map["manifest"]), str(entry_map["npm"]))
        )
    return tuple(parsed)


def config_to_info(raw: object, auto: bool = True) -> ProjectInfo:
    """Build switch-mode project info from loaded config content."""
    data = _require_mapping(raw, "Project config")
    if not data.get("name"):
        raise ProjectConfigError("Project config has no 'name'")

    version = str(data.get("version", "1.0.0"))
    try:
        parse_version(version)
    except InvalidVersionError as e:
        raise ProjectConfigError(str(e)) from e

    language = str(data.get("language", "js"))
    if language not in ("js", "ts"):
        raise ProjectConfigError(f"Unsupported language '{language}' (expected js or ts)")

    paths = _require_mapping(data.get("paths", {}), "'paths'")
    engine = _parse_engine_version(data.get("min_engine_version", [1, 20, 0]))

    return ProjectInfo(
        name=str(data["name"]),
        description=str(data.get("description") or ""),
        version=version,
        res=_require_bool(data, "res", True),
        allow_eval=_require_bool(data, "allow_eval", False),
        language=language,
        beh_path=str(paths.get("behavior", "behavior_packs/")),
        res_path=str(paths.get("resource", "resource_packs/")),
        scripts_path=str(paths.get("scripts", "scripts/")),
        mode="switch",
        auto=auto,
        min_engine_version=engine,
        uuids=_parse_uuids(data.get("uuids")),
        dependencies=_parse_dependencies(data.get("dependencies")),
    )


def load_project_config(project_dir: Path, auto: bool = True) -> ProjectInfo:
    """Load ``mcaddon.yaml`` from a project directory.

    Raises:
        ProjectConfigError: If the file is missing or invalid.
    """
    path = config_path(project_dir)
    if not path.exists():
        raise ProjectConfigError(
            f"{PROJECT_CONFIG_FILE} not found in {project_dir}. Run 'mcaddon init' first."
        )
    try:
        raw = load_yaml_file(path)
    except (YAMLError, OSError) as e:
        raise ProjectConfigError(f"Failed to parse {path}: {e}") from e
    return config_to_info(raw, auto=auto)


def save_project_config(info: ProjectInfo, project_dir: Path) -> Path:
    """Write ``mcaddon.yaml`` for a project and return its path."""
    path = config_path(project_dir)
    save_yaml_file(info_to_config(info), path)
    print_success(f"Saved: {PROJECT_CONFIG_FILE}")
    return path
