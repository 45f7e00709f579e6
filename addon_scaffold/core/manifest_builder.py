"""Render project file content from ``ProjectInfo``.

All builders are pure: they return dicts or strings and never touch disk.
"""

from __future__ import annotations

import json
from typing import Any

from addon_scaffold.core.project_info import ProjectInfo

MANIFEST_FORMAT_VERSION = 2
SCRIPT_ENTRY = "scripts/main.js"
TYPESCRIPT_VERSION = "^5.4.0"


def _header(info: ProjectInfo, pack_uuid: str, suffix: str) -> dict[str, Any]:
    return {
        "name": f"{info.name} {suffix}".strip(),
        "description": info.description,
        "uuid": pack_uuid,
        "version": list(info.version_array),
        "min_engine_version": list(info.min_engine_version),
    }


def behavior_manifest(info: ProjectInfo) -> dict[str, Any]:
    """Build the behavior pack manifest.json."""
    version = list(info.version_array)
    dependencies: list[dict[str, Any]] = [
        {"module_name": dep.package, "version": dep.manifest_version}
        for dep in info.dependencies
    ]
    if info.res:
        dependencies.append({"uuid": info.uuids.resource, "version": version})

    manifest: dict[str, Any] = {
        "format_version": MANIFEST_FORMAT_VERSION,
        "header": _header(info, info.uuids.behavior, "BP"),
        "modules": [
            {
                "type": "data",
                "uuid": info.uuids.data_module,
                "version": version,
            },
            {
                "type": "script",
                "language": "javascript",
                "uuid": info.uuids.script_module,
                "entry": SCRIPT_ENTRY,
                "version": version,
            },
        ],
        "dependencies": dependencies,
    }
    if info.allow_eval:
        manifest["capabilities"] = ["script_eval"]
    return manifest


def resource_manifest(info: ProjectInfo) -> dict[str, Any]:
    """Build the resource pack manifest.json."""
    version = list(info.version_array)
    return {
        "format_version": MANIFEST_FORMAT_VERSION,
        "header": _header(info, info.uuids.resource, "RP"),
        "modules": [
            {
                "type": "resources",
                "uuid": info.uuids.resource_module,
                "version": version,
            },
        ],
        "dependencies": [
            {"uuid": info.uuids.behavior, "version": version},
        ],
    }


def _npm_name(name: str) -> str:
    """npm package names are lowercase with no spaces."""
    return "-".join(name.lower().split()) or "addon"


def package_json(
    info: ProjectInfo,
    existing: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build package.json, merging into an existing one when given.

    Keys of ``existing`` are kept; selected dependencies override the
    versions it already pins.
    """
    data: dict[str, Any] = dict(existing or {})
    data.setdefault("name", _npm_name(info.name))
    data["version"] = info.version
    data["description"] = info.description
    data.setdefault("private", True)

    dependencies = dict(data.get("dependencies") or {})
    for dep in info.dependencies:
        dependencies[dep.package] = dep.npm_version
    data["dependencies"] = dependencies

    if info.language == "ts":
        dev_dependencies = dict(data.get("devDependencies") or {})
        dev_dependencies.setdefault("typescript", TYPESCRIPT_VERSION)
        data["devDependencies"] = dev_dependencies

        scripts = dict(data.get("scripts") or {})
        scripts.setdefault("build", "tsc")
        data["scripts"] = scripts
    return data


def tsconfig_json(info: ProjectInfo) -> dict[str, Any]:
    """Build tsconfig.json compiling scripts/ into the behavior pack."""
    return {
        "compilerOptions": {
            "target": "ES2020",
            "module": "ES2020",
            "moduleResolution": "Node",
            "strict": True,
            "rootDir": info.scripts_path.rstrip("/"),
            "outDir": info.beh_path + "scripts",
        },
        "include": [info.scripts_path + "**/*"],
    }


def main_script(info: ProjectInfo) -> str:
    """Starter entry script for the behavior pack."""
    lines = [
        'import { world } from "@minecraft/server";',
        "",
        "world.afterEvents.worldInitialize.subscribe(() => {",
        f"  console.warn({json.dumps(info.name + ' loaded')});",
        "});",
        "",
    ]
    return "\n".join(lines)


def gitignore() -> str:
    return "node_modules/\n*.mcpack\n*.mcaddon\n"
