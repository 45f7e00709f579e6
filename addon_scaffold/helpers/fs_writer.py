"""Filesystem writer for scaffolded project files."""

import json
from collections.abc import Iterable
from pathlib import Path

from addon_scaffold.helpers.helpers_logging import (
    print_success,
    print_warning,
)


def _display(path: Path, root: Path | None) -> str:
    if root is not None and path.is_relative_to(root):
        return str(path.relative_to(root))
    return str(path)


def mkdir(dirs: Iterable[Path], root: Path | None = None) -> list[Path]:
    """Create missing directories (parents included).

    Returns:
        The directories that were actually created.
    """
    created: list[Path] = []
    for dir_path in dirs:
        if dir_path.exists():
            continue
        dir_path.mkdir(parents=True, exist_ok=True)
        created.append(dir_path)
        print_success(f"Created directory: {_display(dir_path, root)}/")
    return created


def write_text(
    path: Path,
    text: str,
    overwrite: bool = True,
    root: Path | None = None,
) -> bool:
    """Write a text file.

    Returns:
        False if the file existed and ``overwrite`` is off, True otherwise.
    """
    name = _display(path, root)
    if path.exists() and not overwrite:
        print_warning(f"{name} already exists, skipping...")
        return False

    existed = path.exists()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    print_success(f"{'Updated' if existed else 'Created'}: {name}")
    return True


def write_json(
    path: Path,
    obj: object,
    overwrite: bool = True,
    root: Path | None = None,
) -> bool:
    """Write a tab-indented JSON file (see ``write_text``)."""
    text = json.dumps(obj, indent="\t", ensure_ascii=False) + "\n"
    return write_text(path, text, overwrite=overwrite, root=root)


def read_json(path: Path) -> dict[str, object] | None:
    """Read a JSON object file, or None if it is missing or not an object."""
    if not path.exists():
        return None
    try:
        data: object = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        print_warning(f"{path.name} is not valid JSON, it will be regenerated")
        return None
    if not isinstance(data, dict):
        return None
    return data
