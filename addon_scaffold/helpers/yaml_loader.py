"""
YAML loader for the project config file.
Provides a ruamel.yaml instance that keeps user comments on round-trip.
"""

from pathlib import Path
from typing import Union, cast

from ruamel.yaml import YAML

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


def _create_yaml_loader() -> YAML:
    """Create a round-trip YAML instance with comment preservation."""
    yaml_obj = YAML()
    yaml_obj.preserve_quotes = True
    yaml_obj.default_flow_style = False
    yaml_obj.indent(mapping=2, sequence=4, offset=2)
    return yaml_obj


yaml = _create_yaml_loader()


def load_yaml_file(file_path: Path) -> ConfigValue:
    """Load a YAML file.

    ruamel.yaml's round-trip loader does not construct arbitrary Python
    objects from YAML tags.

    Raises:
        FileNotFoundError: If file does not exist
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with file_path.open(encoding='utf-8') as f:
        return cast(ConfigValue, yaml.load(f))


def save_yaml_file(data: ConfigDict, file_path: Path) -> None:
    """Save data to a YAML file, creating parent directories."""
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open('w', encoding='utf-8') as f:
        yaml.dump(data, f)
