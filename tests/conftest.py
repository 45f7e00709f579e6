"""Shared fixtures for the add-on scaffold test suite.

Provides a scripted prompter (answers queued per question kind), an
``httpx.MockTransport``-backed registry client, and an isolated project
directory.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path

import httpx
import pytest

# ---------------------------------------------------------------------------
# Registry documents
# ---------------------------------------------------------------------------

SERVER_VERSIONS = [
    "0.0.1",
    "1.0.0",
    "1.1.0",
    "1.2.0-beta.1.20.10-stable",
    "1.2.0-beta.1.20.20-stable",
    "1.2.0-rc.1.20.30-preview.20",
    "1.3.0-internal.1.20.40-preview.1",
    "1.1.0-alpha.1",
]

SERVER_UI_VERSIONS = [
    "1.0.0",
    "1.1.0-beta.1.20.10-stable",
]

DEFAULT_DOCUMENTS: dict[str, list[str]] = {
    "@minecraft/server": SERVER_VERSIONS,
    "@minecraft/server-ui": SERVER_UI_VERSIONS,
}


def registry_document(versions: list[str]) -> dict[str, object]:
    """Minimal npm package document."""
    return {"versions": {version: {"version": version} for version in versions}}


def make_registry_client(documents: dict[str, list[str]]) -> httpx.Client:
    """Client whose transport serves ``documents`` keyed by package name."""

    def handler(request: httpx.Request) -> httpx.Response:
        package = request.url.path.lstrip("/")
        if package not in documents:
            return httpx.Response(404, json={"error": "Not found"})
        return httpx.Response(200, content=json.dumps(registry_document(documents[package])))

    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture()
def registry_client() -> Iterator[httpx.Client]:
    """Registry client serving @minecraft/server and @minecraft/server-ui."""
    with make_registry_client(DEFAULT_DOCUMENTS) as client:
        yield client


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Prompter that replays queued answers and records every question."""

    def __init__(
        self,
        texts: list[str] | None = None,
        yeses: list[bool] | None = None,
        choices: list[str] | None = None,
    ) -> None:
        self.texts = list(texts or [])
        self.yeses = list(yeses or [])
        self.choices = list(choices or [])
        self.asked: list[tuple[str, str, list[str]]] = []

    def ask_text(self, message: str, default: str = "") -> str:
        self.asked.append(("text", message, []))
        assert self.texts, f"Unexpected text question: {message}"
        return self.texts.pop(0)

    def ask_yes(self, message: str, default: bool = False) -> bool:
        self.asked.append(("yes", message, []))
        assert self.yeses, f"Unexpected yes/no question: {message}"
        return self.yeses.pop(0)

    def ask_choice(self, message: str, options: list[str]) -> str:
        self.asked.append(("choice", message, list(options)))
        assert self.choices, f"Unexpected choice question: {message}"
        answer = self.choices.pop(0)
        assert answer in options, f"{answer!r} not offered in {options}"
        return answer

    def exhausted(self) -> bool:
        return not (self.texts or self.yeses or self.choices)


# ---------------------------------------------------------------------------
# Project directory
# ---------------------------------------------------------------------------


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated empty project directory and cd into it.

    After the test, the working directory is restored.
    """
    project = tmp_path / "my-addon"
    project.mkdir()
    original_cwd = Path.cwd()
    os.chdir(project)
    try:
        yield project
    finally:
        os.chdir(original_cwd)


@pytest.fixture(autouse=True)
def _clean_registry_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests never inherit registry settings from the developer shell."""
    monkeypatch.delenv("MCADDON_REGISTRY_URL", raising=False)
    monkeypatch.delenv("MCADDON_REGISTRY_TIMEOUT", raising=False)
