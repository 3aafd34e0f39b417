"""Shared Click building blocks for trainctl commands.

``examples_option`` adds an eager ``--examples`` flag that prints usage
examples and exits, keeping ``--help`` short. ``training_id_argument``
is the positional id every single-training command takes, and
``parse_datetime`` turns ISO 8601 option text into a datetime.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def examples_option(examples: str) -> Callable[[F], F]:
    """Decorator: attach an eager ``--examples`` flag showing *examples*."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


training_id_argument = click.argument("training_id", metavar="ID")


def parse_datetime(value: str) -> datetime | str:
    """Parse ISO 8601 text; unparseable input is passed on for validation to reject."""
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return value
