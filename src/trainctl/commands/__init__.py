"""Subcommand modules for trainctl.

Provides register_commands() which uses deferred imports to keep
``trainctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from trainctl.commands.create import create
    from trainctl.commands.query import list_cmd, show
    from trainctl.commands.transition import (
        cancel,
        complete,
        publish,
        register,
        unregister,
    )
    from trainctl.commands.update import update

    cli.add_command(create)
    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(update)
    cli.add_command(publish)
    cli.add_command(complete)
    cli.add_command(cancel)
    cli.add_command(register)
    cli.add_command(unregister)
