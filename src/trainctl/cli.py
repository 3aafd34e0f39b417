"""trainctl entry point: the root Click group and its global options."""

from __future__ import annotations

import click

from trainctl import __version__
from trainctl.commands import register_commands
from trainctl.commands._base import examples_option
from trainctl.commands._context import AppContext
from trainctl.config.settings import TrainSettings


@click.group(invoke_without_command=True)
@examples_option(
    """\
  trainctl create --title "Intro to typing" --description "Hands-on session" \\
      --date-time 2099-03-01T10:00:00+09:00 --location Online --capacity 30
  trainctl --json list --status published
  trainctl publish 0b6f3c52-3d0e-4c55-9d1a-2f1b6f8f2a11"""
)
@click.version_option(version=__version__, prog_name="trainctl")
@click.option("--json", "json_output", is_flag=True, help="Print the result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only ids, or a one-line error.")
@click.option("-v", "--verbose", is_flag=True, help="Show every field and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this trainctl.toml instead of searching for one.",
)
@click.option("--memory", is_flag=True, help="Keep trainings in memory for this run only.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    memory: bool,
) -> None:
    """Manage training sessions from draft to completion."""
    flags: dict[str, object] = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    if memory:
        flags["storage"] = {"backend": "memory"}
    ctx.obj = AppContext(TrainSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
