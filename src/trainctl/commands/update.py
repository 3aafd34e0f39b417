"""Command: update training fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trainctl.commands._base import examples_option, parse_datetime, training_id_argument

if TYPE_CHECKING:
    from trainctl.commands._context import AppContext


@click.command()
@examples_option(
    """\
  trainctl update 0b6f3c52-3d0e-4c55-9d1a-2f1b6f8f2a11 --title "New title"
  trainctl update 0b6f3c52-3d0e-4c55-9d1a-2f1b6f8f2a11 --capacity 40 --location "Room B" """
)
@training_id_argument
@click.option("-t", "--title", default=None, help="New title.")
@click.option("-d", "--description", default=None, help="New description.")
@click.option("--date-time", "date_time", default=None, help="New start (ISO 8601).")
@click.option("-l", "--location", default=None, help="New location.")
@click.option("-n", "--capacity", type=int, default=None, help="New seat count.")
@click.pass_obj
def update(
    app: AppContext,
    training_id: str,
    title: str | None,
    description: str | None,
    date_time: str | None,
    location: str | None,
    capacity: int | None,
) -> None:
    """Update a training's fields. Every field is re-validated."""
    changes: dict[str, object] = {}
    if title is not None:
        changes["title"] = title
    if description is not None:
        changes["description"] = description
    if date_time is not None:
        changes["date_time"] = parse_datetime(date_time)
    if location is not None:
        changes["location"] = location
    if capacity is not None:
        changes["capacity"] = capacity

    if not changes:
        click.echo("No changes specified. Use --help for options.", err=True)
        raise SystemExit(1)

    app.run(app.service.update(training_id, changes))
