"""Validated console input.

Every helper keeps prompting until the entered value is acceptable, so
callers only ever see values inside the requested bounds.
"""

from enum import Enum
from typing import Type, TypeVar

import click

E = TypeVar("E", bound=Enum)


def _non_blank(value: str) -> str:
    value = value.strip()
    if not value:
        raise click.BadParameter("Input cannot be empty. Please try again.")
    return value


def get_valid_string(prompt: str) -> str:
    """Prompt until non-blank text is entered."""
    return click.prompt(prompt, type=str, value_proc=_non_blank, prompt_suffix=" ")


def get_valid_int(prompt: str, minimum: int, maximum: int) -> int:
    """
    Prompt until an integer within [minimum, maximum] is entered.

    Args:
        prompt: Text shown to the user
        minimum: Lowest accepted value
        maximum: Highest accepted value

    Returns:
        Entered integer
    """
    return click.prompt(
        prompt,
        type=click.IntRange(minimum, maximum),
        prompt_suffix=" ",
    )


def get_valid_double(prompt: str, minimum: float) -> float:
    """Prompt until a number greater than or equal to minimum is entered."""
    return click.prompt(
        prompt,
        type=click.FloatRange(min=minimum),
        prompt_suffix=" ",
    )


def get_choice(prompt: str, enum_cls: Type[E]) -> E:
    """
    Show a numbered list of enum members and return the chosen one.

    Enum values must be the consecutive integers used as choice numbers.

    Args:
        prompt: Text shown after the list
        enum_cls: Enum whose members are offered

    Returns:
        Selected member
    """
    members = list(enum_cls)
    for member in members:
        click.echo(f"{member.value}. {member.label}")

    choice = get_valid_int(
        prompt,
        min(m.value for m in members),
        max(m.value for m in members),
    )
    return enum_cls(choice)


def get_yes_no(prompt: str) -> bool:
    """Prompt for a 1 (yes) / 0 (no) answer."""
    return get_valid_int(f"{prompt} (1=yes, 0=no):", 0, 1) == 1
