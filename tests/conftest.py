"""Shared pytest fixtures and test helpers for trainctl tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from trainctl.cli import cli
from trainctl.domain import lifecycle
from trainctl.domain.result import Ok
from trainctl.domain.training import Training
from trainctl.infrastructure.repositories.memory import InMemoryTrainingRepository
from trainctl.services.pipeline import TrainingPipeline

FIXED_NOW = datetime(2030, 1, 15, 9, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """A pinned clock reading shared by domain and pipeline tests."""
    return FIXED_NOW


@pytest.fixture
def valid_fields() -> dict[str, Any]:
    """Field set that passes every validation rule against FIXED_NOW."""
    return {
        "title": "Functional Python in practice",
        "description": "Pure functions, immutable data, and explicit errors.",
        "date_time": FIXED_NOW + timedelta(days=30),
        "location": "Online",
        "capacity": 30,
    }


@pytest.fixture
def make_training(
    valid_fields: dict[str, Any], now: datetime
) -> Callable[..., Training]:
    """Factory building a draft training, with optional field overrides."""

    def _make(**overrides: Any) -> Training:
        result = lifecycle.create({**valid_fields, **overrides}, now=now)
        assert isinstance(result, Ok), result
        return result.value

    return _make


@pytest.fixture
def repository() -> InMemoryTrainingRepository:
    return InMemoryTrainingRepository()


@pytest.fixture
def pipeline(repository: InMemoryTrainingRepository, now: datetime) -> TrainingPipeline:
    """Pipeline over an in-memory store with the clock pinned to FIXED_NOW."""
    return TrainingPipeline(repository, clock=lambda: now)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no config discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes. The SQLite store lands in ``tmp_path/.trainctl``.
    """
    monkeypatch.delenv("TRAINCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "trainctl.toml").write_text("")


_CREATE_ARGS = [
    "create",
    "--title",
    "Intro to typing",
    "--description",
    "Hands-on session on gradual typing.",
    "--date-time",
    "2099-03-01T10:00:00+09:00",
    "--location",
    "Online",
    "--capacity",
    "2",
]


@pytest.fixture
def create_args() -> Callable[..., list[str]]:
    """Build ``create`` argv; keyword overrides replace option values, e.g. ``capacity="5"``."""

    def _build(**overrides: str) -> list[str]:
        args = list(_CREATE_ARGS)
        for key, value in overrides.items():
            flag = "--" + key.replace("_", "-")
            args[args.index(flag) + 1] = value
        return args

    return _build


@pytest.fixture
def create_training(
    cli_runner: CliRunner, create_args: Callable[..., list[str]]
) -> Callable[..., str]:
    """Create a training through the CLI and return its id."""

    def _create(**overrides: str) -> str:
        result = cli_runner.invoke(cli, ["--json", *create_args(**overrides)])
        assert result.exit_code == 0, result.output
        return str(json.loads(result.output)["data"]["id"])

    return _create
