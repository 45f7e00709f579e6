"""End-to-end tests for the init and switch wizard flows."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from addon_scaffold.cli.init_project import run_init, run_switch, select_dependencies
from addon_scaffold.core.project_info import ProjectInfo
from addon_scaffold.core.version_selection import DependencyVersion
from addon_scaffold.helpers.project_config import ProjectConfigError, load_project_config
from addon_scaffold.helpers.registry_client import NetworkFailure
from tests.conftest import ScriptedPrompter

_LATEST_SERVER = DependencyVersion(
    "@minecraft/server", "1.2.0-rc", "1.2.0-rc.1.20.30-preview.20"
)


def _read_json(path: Path) -> dict[str, object]:
    return json.loads(path.read_text(encoding="utf-8"))


class TestSelectDependencies:
    def test_auto_picks_latest_required_only(self, registry_client: httpx.Client) -> None:
        info = select_dependencies(ProjectInfo(name="addon"), ScriptedPrompter(), registry_client)

        assert info.dependencies == (_LATEST_SERVER,)

    def test_auto_refreshes_existing_optional(self, registry_client: httpx.Client) -> None:
        old_ui = DependencyVersion("@minecraft/server-ui", "1.0.0", "1.0.0")
        info = ProjectInfo(name="addon", dependencies=(old_ui,))

        updated = select_dependencies(info, ScriptedPrompter(), registry_client)

        assert updated.dependencies == (
            _LATEST_SERVER,
            DependencyVersion(
                "@minecraft/server-ui", "1.1.0-beta", "1.1.0-beta.1.20.10-stable"
            ),
        )

    def test_interactive_asks_required_then_optional(
        self,
        registry_client: httpx.Client,
    ) -> None:
        prompter = ScriptedPrompter(yeses=[False], choices=["1.1.0", "1.1.0"])
        info = ProjectInfo(name="addon", auto=False)

        updated = select_dependencies(info, prompter, registry_client)

        assert updated.dependencies == (
            DependencyVersion("@minecraft/server", "1.1.0", "1.1.0"),
        )
        assert prompter.exhausted()


class TestRunInit:
    """``mcaddon init`` flow."""

    def test_auto_init_writes_default_layout(
        self,
        isolated_project: Path,
        registry_client: httpx.Client,
    ) -> None:
        info = run_init(isolated_project, ScriptedPrompter(), auto=True, client=registry_client)

        assert info is not None
        assert info.name == "my-addon"
        beh = _read_json(isolated_project / "behavior_packs" / "manifest.json")
        res = _read_json(isolated_project / "resource_packs" / "manifest.json")
        assert beh["dependencies"] == [
            {"module_name": "@minecraft/server", "version": "1.2.0-rc"},
            {"uuid": info.uuids.resource, "version": [1, 0, 0]},
        ]
        assert res["dependencies"] == [{"uuid": info.uuids.behavior, "version": [1, 0, 0]}]
        package = _read_json(isolated_project / "package.json")
        assert package["dependencies"] == {
            "@minecraft/server": "1.2.0-rc.1.20.30-preview.20"
        }
        assert (isolated_project / "behavior_packs" / "scripts" / "main.js").exists()
        assert (isolated_project / ".gitignore").exists()
        assert not (isolated_project / "tsconfig.json").exists()
        assert load_project_config(isolated_project).uuids == info.uuids

    def test_interactive_ts_init(
        self,
        isolated_project: Path,
        registry_client: httpx.Client,
    ) -> None:
        prompter = ScriptedPrompter(
            texts=["Cool Addon", "0.1.0", "Does cool things"],
            yeses=[False, True, True],
            choices=[
                "ts",
                "1.2.0-beta",
                "1.2.0-beta.1.20.10-stable",
                "1.0.0",
                "1.0.0",
            ],
        )

        info = run_init(isolated_project, prompter, client=registry_client)

        assert info is not None
        assert prompter.exhausted()
        assert not (isolated_project / "resource_packs").exists()
        beh = _read_json(isolated_project / "behavior_packs" / "manifest.json")
        assert beh["header"]["name"] == "Cool Addon BP"
        assert beh["header"]["version"] == [0, 1, 0]
        assert beh["capabilities"] == ["script_eval"]
        assert beh["dependencies"] == [
            {"module_name": "@minecraft/server", "version": "1.2.0-beta"},
            {"module_name": "@minecraft/server-ui", "version": "1.0.0"},
        ]
        assert (isolated_project / "scripts" / "main.ts").exists()
        assert (isolated_project / "tsconfig.json").exists()
        package = _read_json(isolated_project / "package.json")
        assert package["name"] == "cool-addon"
        assert package["scripts"] == {"build": "tsc"}

    def test_auto_init_refuses_existing_project(
        self,
        isolated_project: Path,
        registry_client: httpx.Client,
    ) -> None:
        run_init(isolated_project, ScriptedPrompter(), auto=True, client=registry_client)

        with pytest.raises(ProjectConfigError, match="mcaddon switch"):
            run_init(isolated_project, ScriptedPrompter(), auto=True, client=registry_client)

    def test_interactive_reinit_can_be_declined(
        self,
        isolated_project: Path,
        registry_client: httpx.Client,
    ) -> None:
        run_init(isolated_project, ScriptedPrompter(), auto=True, client=registry_client)
        prompter = ScriptedPrompter(yeses=[False])

        assert run_init(isolated_project, prompter, client=registry_client) is None
        assert prompter.exhausted()

    def test_starter_script_is_not_overwritten(
        self,
        isolated_project: Path,
        registry_client: httpx.Client,
    ) -> None:
        script = isolated_project / "behavior_packs" / "scripts" / "main.js"
        script.parent.mkdir(parents=True)
        script.write_text("// mine\n", encoding="utf-8")

        run_init(isolated_project, ScriptedPrompter(), auto=True, client=registry_client)

        assert script.read_text(encoding="utf-8") == "// mine\n"

    def test_registry_failure_writes_nothing(self, isolated_project: Path) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(NetworkFailure, match="Failed to fetch"):
                run_init(isolated_project, ScriptedPrompter(), auto=True, client=client)

        assert list(isolated_project.iterdir()) == []


class TestRunSwitch:
    """``mcaddon switch`` flow."""

    def test_switch_reselects_and_keeps_uuids(
        self,
        isolated_project: Path,
        registry_client: httpx.Client,
    ) -> None:
        created = run_init(isolated_project, ScriptedPrompter(), auto=True, client=registry_client)
        assert created is not None
        package_path = isolated_project / "package.json"
        package = _read_json(package_path)
        package["license"] = "MIT"
        package_path.write_text(json.dumps(package), encoding="utf-8")
        prompter = ScriptedPrompter(yeses=[False], choices=["1.0.0", "1.0.0"])

        switched = run_switch(isolated_project, prompter, client=registry_client)

        assert switched.mode == "switch"
        assert switched.uuids == created.uuids
        beh = _read_json(isolated_project / "behavior_packs" / "manifest.json")
        assert beh["header"]["uuid"] == created.uuids.behavior
        assert beh["dependencies"][0] == {"module_name": "@minecraft/server", "version": "1.0.0"}
        package = _read_json(package_path)
        assert package["license"] == "MIT"
        assert package["dependencies"]["@minecraft/server"] == "1.0.0"
        assert load_project_config(isolated_project).dependencies == (
            DependencyVersion("@minecraft/server", "1.0.0", "1.0.0"),
        )

    def test_auto_switch_uses_latest(
        self,
        isolated_project: Path,
        registry_client: httpx.Client,
    ) -> None:
        run_init(isolated_project, ScriptedPrompter(), auto=True, client=registry_client)

        switched = run_switch(isolated_project, ScriptedPrompter(), auto=True, client=registry_client)

        assert switched.dependencies == (_LATEST_SERVER,)

    def test_switch_without_project(self, isolated_project: Path) -> None:
        with pytest.raises(ProjectConfigError, match="mcaddon init"):
            run_switch(isolated_project, ScriptedPrompter())
