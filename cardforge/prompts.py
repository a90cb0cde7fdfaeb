"""Interactive terminal prompts built on click."""

from pathlib import Path
from typing import Callable, Optional

import click

from cardforge.errors import PromptAbortedError


def prompt_text(label: str, default: Optional[str] = None,
                validator: Optional[Callable[[str], None]] = None) -> str:
    """Ask for a line of text.

    The validator raises ValueError for unacceptable input; the user is
    asked again with the error message shown.
    """
    def check(value: str) -> str:
        value = value.strip()
        if validator is not None:
            try:
                validator(value)
            except ValueError as e:
                raise click.BadParameter(str(e))
        return value

    try:
        return click.prompt(label, default=default, value_proc=check)
    except click.Abort as e:
        raise PromptAbortedError(f"Prompt failed: {label}") from e


def path_exists(value: str) -> None:
    if not value or not Path(value).expanduser().exists():
        raise ValueError("Path does not exist")


def prompt_path(label: str, default: Path | str) -> Path:
    """Ask for an existing path, re-prompting until one is given."""
    result = prompt_text(f"Location of the {label}", default=str(default), validator=path_exists)
    click.echo(f"You chose {result!r}")
    return Path(result).expanduser()


def prompt_select(label: str, options: list[str], default: Optional[str] = None) -> str:
    """Pick one option from a numbered menu."""
    if not options:
        raise ValueError("prompt_select needs at least one option")

    click.echo(f"{label}:")
    for i, option in enumerate(options, start=1):
        click.echo(f"  {i:>3}) {option}")

    default_index = options.index(default) + 1 if default in options else 1
    try:
        choice = click.prompt(
            "Enter a number",
            type=click.IntRange(1, len(options)),
            default=default_index,
        )
    except click.Abort as e:
        raise PromptAbortedError(f"Prompt failed: {label}") from e

    result = options[choice - 1]
    click.echo(f"You chose {result!r}")
    return result
