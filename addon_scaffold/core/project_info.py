"""Project information collected by the wizard.

``ProjectInfo`` is frozen; every wizard step takes one and returns an
updated copy.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field, replace
from pathlib import Path

from addon_scaffold.core.version_selection import DependencyVersion
from addon_scaffold.helpers.helpers_logging import highlight, print_warning
from addon_scaffold.helpers.interactive import Prompter

LANGUAGES = ["ts", "js"]
DEFAULT_VERSION = "1.0.0"
DEFAULT_MIN_ENGINE_VERSION = (1, 20, 0)

_VERSION_RE = re.compile(r"^\d+\.\d+\.\d+$")


class InvalidVersionError(ValueError):
    """Project version is not ``MAJOR.MINOR.PATCH``."""


def parse_version(text: str) -> tuple[int, int, int]:
    """Parse ``MAJOR.MINOR.PATCH`` into an int triple."""
    if not _VERSION_RE.match(text.strip()):
        raise InvalidVersionError(
            f"Invalid version '{text}': expected MAJOR.MINOR.PATCH (e.g. 1.0.0)"
        )
    major, minor, patch = (int(part) for part in text.strip().split("."))
    return major, minor, patch


@dataclass(frozen=True)
class PackUuids:
    """UUIDs identifying the packs and their modules."""

    behavior: str
    data_module: str
    script_module: str
    resource: str
    resource_module: str

    @classmethod
    def generate(cls) -> PackUuids:
        return cls(*(str(uuid.uuid4()) for _ in range(5)))


@dataclass(frozen=True)
class ProjectInfo:
    """Everything needed to render the project files."""

    name: str
    description: str = ""
    version: str = DEFAULT_VERSION
    res: bool = True
    allow_eval: bool = False
    language: str = "js"
    beh_path: str = "behavior_packs/"
    res_path: str = "resource_packs/"
    scripts_path: str = "scripts/"
    mode: str = "init"
    auto: bool = True
    min_engine_version: tuple[int, int, int] = DEFAULT_MIN_ENGINE_VERSION
    uuids: PackUuids = field(default_factory=PackUuids.generate)
    dependencies: tuple[DependencyVersion, ...] = ()

    @property
    def version_array(self) -> tuple[int, int, int]:
        return parse_version(self.version)

    def dependency(self, package_name: str) -> DependencyVersion | None:
        for dep in self.dependencies:
            if dep.package == package_name:
                return dep
        return None


def default_info(project_dir: Path) -> ProjectInfo:
    """Init-mode defaults: project named after its directory."""
    return ProjectInfo(name=project_dir.resolve().name)


def with_dependencies(
    info: ProjectInfo,
    dependencies: list[DependencyVersion],
) -> ProjectInfo:
    return replace(info, dependencies=tuple(dependencies))


def _ask_project_version(prompter: Prompter, default: str) -> str:
    while True:
        answer = prompter.ask_text("Version:", default=default)
        try:
            parse_version(answer)
        except InvalidVersionError as e:
            print_warning(str(e))
            continue
        return answer.strip()


def collect_init_info(info: ProjectInfo, prompter: Prompter) -> ProjectInfo:
    """Ask the init-mode questions, starting from ``info`` as defaults."""
    name = prompter.ask_text("Project name:", default=info.name) or info.name
    version = _ask_project_version(prompter, info.version)
    description = prompter.ask_text("Description:", default=info.description)
    res = prompter.ask_yes(f"Create {highlight('resource_packs')}?", default=info.res)
    allow_eval = prompter.ask_yes(
        f"Allow {highlight('eval')} and {highlight('new Function')}?",
        default=info.allow_eval,
    )
    language = prompter.ask_choice("Language:", LANGUAGES)

    return replace(
        info,
        name=name,
        version=version,
        description=description,
        res=res,
        allow_eval=allow_eval,
        language=language,
        mode="init",
        auto=False,
    )
