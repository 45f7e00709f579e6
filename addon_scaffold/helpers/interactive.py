"""Interactive prompts for the wizard flows."""

from __future__ import annotations

from typing import Protocol

import click

from addon_scaffold.helpers.helpers_logging import print_info


class Prompter(Protocol):
    """Question-asking surface used by the wizard steps."""

    def ask_text(self, message: str, default: str = "") -> str:
        """Ask for a free-form answer."""
        ...

    def ask_yes(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...

    def ask_choice(self, message: str, options: list[str]) -> str:
        """Ask the user to pick exactly one of ``options``."""
        ...


class ConsolePrompter:
    """Terminal prompter backed by click.

    Ctrl-C and EOF surface as ``click.Abort``.
    """

    def ask_text(self, message: str, default: str = "") -> str:
        answer: str = click.prompt(
            message,
            default=default,
            show_default=bool(default),
            type=str,
        )
        return answer.strip()

    def ask_yes(self, message: str, default: bool = False) -> bool:
        return click.confirm(message, default=default)

    def ask_choice(self, message: str, options: list[str]) -> str:
        if not options:
            raise ValueError(f"No options available for: {message}")

        print_info(f"\n{message}")
        for i, option in enumerate(options, 1):
            print(f"  {i}. {option}")

        index: int = click.prompt(
            f"Select (1-{len(options)})",
            type=click.IntRange(1, len(options)),
            default=1,
        )
        return options[index - 1]
