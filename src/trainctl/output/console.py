"""Rich theme and an in-memory Console for building output strings.

Renderers print to a Console whose file is a StringIO and hand back the
text, so formatting stays a pure ``ServiceResult -> str`` step and the
command layer decides where the text goes. Rich drops colour codes on
its own when stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STATUS_STYLES: dict[str, str] = {
    "draft": "train.status.draft",
    "published": "train.status.published",
    "completed": "train.status.completed",
    "cancelled": "train.status.cancelled",
}

TRAIN_THEME = Theme(
    {
        "train.ok": "bold green",
        "train.error": "bold red",
        "train.op": "bold cyan",
        "train.key": "dim",
        "train.id": "bold blue",
        "train.title": "bold",
        "train.status.draft": "dim",
        "train.status.published": "green",
        "train.status.completed": "blue",
        "train.status.cancelled": "red",
    }
)


def buffer_console(width: int = 120) -> Console:
    """A themed Console writing into a fresh StringIO."""
    return Console(file=StringIO(), theme=TRAIN_THEME, highlight=False, width=width)


def rendered_text(console: Console) -> str:
    """Everything printed to a :func:`buffer_console` so far."""
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue()


def style_for_status(status: str) -> str:
    return STATUS_STYLES.get(status, "")
