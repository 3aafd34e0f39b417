"""Commands: lifecycle transitions and seat registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trainctl.commands._base import examples_option, training_id_argument

if TYPE_CHECKING:
    from trainctl.commands._context import AppContext


@click.command()
@examples_option("  trainctl publish 0b6f3c52-3d0e-4c55-9d1a-2f1b6f8f2a11")
@training_id_argument
@click.pass_obj
def publish(app: AppContext, training_id: str) -> None:
    """Open a draft training for registration."""
    app.run(app.service.publish(training_id))


@click.command()
@examples_option("  trainctl complete 0b6f3c52-3d0e-4c55-9d1a-2f1b6f8f2a11")
@training_id_argument
@click.pass_obj
def complete(app: AppContext, training_id: str) -> None:
    """Mark a published training as completed."""
    app.run(app.service.complete(training_id))


@click.command()
@examples_option(
    """\
  trainctl cancel 0b6f3c52-3d0e-4c55-9d1a-2f1b6f8f2a11 --reason "Speaker unavailable" """
)
@training_id_argument
@click.option("-r", "--reason", required=True, help="Why the training is called off.")
@click.pass_obj
def cancel(app: AppContext, training_id: str, reason: str) -> None:
    """Cancel a draft or published training."""
    app.run(app.service.cancel(training_id, reason))


@click.command()
@examples_option("  trainctl register 0b6f3c52-3d0e-4c55-9d1a-2f1b6f8f2a11")
@training_id_argument
@click.pass_obj
def register(app: AppContext, training_id: str) -> None:
    """Take one seat on a published training."""
    app.run(app.service.register(training_id))


@click.command()
@examples_option("  trainctl unregister 0b6f3c52-3d0e-4c55-9d1a-2f1b6f8f2a11")
@training_id_argument
@click.pass_obj
def unregister(app: AppContext, training_id: str) -> None:
    """Release one seat on a published training."""
    app.run(app.service.unregister(training_id))
