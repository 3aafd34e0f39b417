"""Command: create a draft training."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trainctl.commands._base import examples_option, parse_datetime

if TYPE_CHECKING:
    from trainctl.commands._context import AppContext


@click.command()
@examples_option(
    """\
  trainctl create --title "Intro to typing" --description "Hands-on session" \\
      --date-time 2099-03-01T10:00:00+09:00 --location Online --capacity 30
  trainctl --json create -t "DDD workshop" -d "Modelling kata" \\
      --date-time 2099-04-02T14:00 -l "Room A" -n 12"""
)
@click.option("-t", "--title", required=True, help="Title (1-100 characters).")
@click.option("-d", "--description", required=True, help="Description (1-1000 characters).")
@click.option(
    "--date-time",
    "date_time",
    required=True,
    help="Start as ISO 8601; naive values are read as UTC. Must be in the future.",
)
@click.option("-l", "--location", required=True, help="Location (1-100 characters).")
@click.option("-n", "--capacity", type=int, required=True, help="Seats (1-1000).")
@click.pass_obj
def create(
    app: AppContext,
    title: str,
    description: str,
    date_time: str,
    location: str,
    capacity: int,
) -> None:
    """Create a new training in draft state."""
    app.run(
        app.service.create(
            title=title,
            description=description,
            date_time=parse_datetime(date_time),
            location=location,
            capacity=capacity,
        )
    )
