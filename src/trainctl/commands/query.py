"""Commands: list trainings and show one."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trainctl.commands._base import examples_option, training_id_argument
from trainctl.domain.types import TrainingStatusKind

if TYPE_CHECKING:
    from trainctl.commands._context import AppContext


@click.command("list")
@examples_option(
    """\
  trainctl list
  trainctl list --status published
  trainctl -q list --status draft"""
)
@click.option(
    "--status",
    type=click.Choice([s.value for s in TrainingStatusKind]),
    default=None,
    help="Only trainings in this status.",
)
@click.pass_obj
def list_cmd(app: AppContext, status: str | None) -> None:
    """List trainings."""
    kind = TrainingStatusKind(status) if status else None
    app.run(app.service.list_all(status=kind))


@click.command()
@examples_option("  trainctl show 0b6f3c52-3d0e-4c55-9d1a-2f1b6f8f2a11")
@training_id_argument
@click.pass_obj
def show(app: AppContext, training_id: str) -> None:
    """Show one training."""
    app.run(app.service.show(training_id))
