"""Human-readable rendering of ServiceResult payloads.

Single-training operations share one key/value layout, ``list_trainings``
gets a table, and any other op falls back to dumping ``data`` keys.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from trainctl.output.console import buffer_console, rendered_text, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from trainctl.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console", bool], None]

_VALUE_STYLES = {"id": "train.id", "title": "train.title"}


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a terminal; plain text when stdout is not a TTY."""
    console = buffer_console()
    if not result.ok:
        _error(result, console)
    else:
        _RENDERERS.get(result.op, _generic)(result, console, verbose)
    return rendered_text(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One id per line, a single id, or a one-line error."""
    if not result.ok:
        message = result.error.message if result.error else "unknown error"
        return f"ERROR: {result.op} — {message}"
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items)
    training_id = result.data.get("id")
    return str(training_id) if training_id is not None else f"OK: {result.op}"


def _header(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="train.ok"), Text(result.op, style="train.op"), sep="  ")


def _line(console: Console, key: str, value: Any) -> None:
    style = style_for_status(str(value)) if key == "status" else _VALUE_STYLES.get(key, "")
    console.print(Text(f"  {key}: ", style="train.key"), Text(str(value), style=style), sep="")


def _status_of(training: dict[str, Any]) -> str:
    status = training.get("status")
    return str(status.get("type", "")) if isinstance(status, dict) else ""


def _seats(training: dict[str, Any]) -> str:
    return f"{training.get('registered_count', 0)}/{training.get('capacity', 0)}"


def _error(result: ServiceResult, console: Console) -> None:
    err = result.error
    parts = [Text("ERROR", style="train.error"), Text(f"  {result.op}", style="train.op")]
    if err is not None:
        parts.append(Text(f" [{err.code}]", style="train.key"))
    message = err.message if err else "unknown error"
    console.print(*parts, Text(f" — {message}"), sep="")


def _training(result: ServiceResult, console: Console, verbose: bool) -> None:
    t = result.data
    _header(console, result)
    _line(console, "id", t.get("id", ""))
    _line(console, "title", t.get("title", ""))
    _line(console, "status", _status_of(t))
    _line(console, "date_time", t.get("date_time", ""))
    _line(console, "location", t.get("location", ""))
    _line(console, "seats", _seats(t))
    reason = (t.get("status") or {}).get("reason")
    if reason:
        _line(console, "reason", reason)
    if verbose:
        for key in ("description", "created_at", "updated_at"):
            _line(console, key, t.get(key, ""))


def _training_table(result: ServiceResult, console: Console, verbose: bool) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    _header(console, result)
    _line(console, "count", result.data.get("count", len(items)))
    if not items:
        return

    table = Table(pad_edge=False)
    table.add_column("ID", style="train.id", no_wrap=True)
    table.add_column("Title", style="train.title")
    table.add_column("Status")
    table.add_column("When")
    table.add_column("Seats", justify="right")
    if verbose:
        table.add_column("Location")
        table.add_column("Updated", style="dim")

    for item in items:
        status = _status_of(item)
        cells: list[str | Text] = [
            str(item.get("id", "")),
            str(item.get("title", "")),
            Text(status, style=style_for_status(status)),
            str(item.get("date_time", "")),
            _seats(item),
        ]
        if verbose:
            cells += [str(item.get("location", "")), str(item.get("updated_at", ""))]
        table.add_row(*cells)
    console.print(table)


def _generic(result: ServiceResult, console: Console, verbose: bool) -> None:
    _header(console, result)
    for key, value in result.data.items():
        _line(console, key, value)


_RENDERERS: dict[str, Renderer] = {
    op: _training
    for op in (
        "create_training",
        "show_training",
        "update_training",
        "publish_training",
        "complete_training",
        "cancel_training",
        "register_participant",
        "unregister_participant",
    )
}
_RENDERERS["list_trainings"] = _training_table
