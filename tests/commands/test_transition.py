"""Tests for lifecycle transition and registration commands."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner

from trainctl.cli import cli


def _json(cli_runner: CliRunner, *args: str) -> tuple[int, dict[str, Any]]:
    result = cli_runner.invoke(cli, ["--json", *args])
    return result.exit_code, json.loads(result.output)


@pytest.mark.usefixtures("_isolated_project")
class TestPublishComplete:
    def test_publish(self, cli_runner: CliRunner, create_training: Callable[..., str]) -> None:
        training_id = create_training()
        code, data = _json(cli_runner, "publish", training_id)
        assert code == 0
        assert data["op"] == "publish_training"
        assert data["data"]["status"]["type"] == "published"
        assert "published_at" in data["data"]["status"]

    def test_publish_twice(
        self, cli_runner: CliRunner, create_training: Callable[..., str]
    ) -> None:
        training_id = create_training()
        _json(cli_runner, "publish", training_id)
        code, data = _json(cli_runner, "publish", training_id)
        assert code == 1
        assert data["error"]["code"] == "DOMAIN_ERROR"
        assert data["error"]["message"] == "operation not allowed in current state: published"

    def test_complete_requires_published(
        self, cli_runner: CliRunner, create_training: Callable[..., str]
    ) -> None:
        training_id = create_training()
        code, data = _json(cli_runner, "complete", training_id)
        assert code == 1
        assert data["error"]["message"] == "operation not allowed in current state: draft"

    def test_complete(self, cli_runner: CliRunner, create_training: Callable[..., str]) -> None:
        training_id = create_training()
        _json(cli_runner, "publish", training_id)
        code, data = _json(cli_runner, "complete", training_id)
        assert code == 0
        assert data["data"]["status"]["type"] == "completed"


@pytest.mark.usefixtures("_isolated_project")
class TestCancel:
    def test_cancel(self, cli_runner: CliRunner, create_training: Callable[..., str]) -> None:
        training_id = create_training()
        result = cli_runner.invoke(cli, ["cancel", training_id, "--reason", "Speaker unavailable"])
        assert result.exit_code == 0
        assert "cancelled" in result.output
        assert "reason: Speaker unavailable" in result.output

    def test_short_reason(
        self, cli_runner: CliRunner, create_training: Callable[..., str]
    ) -> None:
        training_id = create_training()
        code, data = _json(cli_runner, "cancel", training_id, "-r", "meh")
        assert code == 1
        assert data["error"]["code"] == "VALIDATION_ERROR"

    def test_reason_required(
        self, cli_runner: CliRunner, create_training: Callable[..., str]
    ) -> None:
        training_id = create_training()
        assert cli_runner.invoke(cli, ["cancel", training_id]).exit_code == 2

    def test_terminal(self, cli_runner: CliRunner, create_training: Callable[..., str]) -> None:
        training_id = create_training()
        _json(cli_runner, "cancel", training_id, "-r", "Double booked")
        code, data = _json(cli_runner, "publish", training_id)
        assert code == 1
        assert data["error"]["message"] == "operation not allowed in current state: cancelled"


@pytest.mark.usefixtures("_isolated_project")
class TestRegistration:
    def test_register_until_full(
        self, cli_runner: CliRunner, create_training: Callable[..., str]
    ) -> None:
        training_id = create_training()
        _json(cli_runner, "publish", training_id)

        _, first = _json(cli_runner, "register", training_id)
        assert first["data"]["registered_count"] == 1
        _, second = _json(cli_runner, "register", training_id)
        assert second["data"]["seats_left"] == 0

        code, full = _json(cli_runner, "register", training_id)
        assert code == 1
        assert full["error"]["message"] == "training is full (2 seats)"

    def test_unregister(self, cli_runner: CliRunner, create_training: Callable[..., str]) -> None:
        training_id = create_training()
        _json(cli_runner, "publish", training_id)
        code, data = _json(cli_runner, "unregister", training_id)
        assert code == 1
        assert data["error"]["message"] == "training has no registered participants"

        _json(cli_runner, "register", training_id)
        code, data = _json(cli_runner, "unregister", training_id)
        assert code == 0
        assert data["data"]["registered_count"] == 0

    def test_register_draft(
        self, cli_runner: CliRunner, create_training: Callable[..., str]
    ) -> None:
        training_id = create_training()
        result = cli_runner.invoke(cli, ["register", training_id])
        assert result.exit_code == 1
        assert "DOMAIN_ERROR" in result.output
