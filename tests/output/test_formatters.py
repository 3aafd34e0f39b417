"""Tests for output mode selection."""

from __future__ import annotations

import json

from trainctl.output.formatters import OutputSettings, format_result
from trainctl.services.result import ServiceResult

RESULT = ServiceResult(
    ok=True,
    op="list_trainings",
    data={"count": 0, "items": []},
    warnings=["No trainings found"],
)


class TestFormatResult:
    def test_default_is_rich(self) -> None:
        out = format_result(RESULT)
        assert out.startswith("OK")
        assert "count: 0" in out

    def test_json(self) -> None:
        out = format_result(RESULT, settings=OutputSettings(json_output=True))
        parsed = json.loads(out)
        assert parsed["op"] == "list_trainings"
        assert parsed["warnings"] == ["No trainings found"]

    def test_json_wins_over_quiet(self) -> None:
        out = format_result(RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(out)["ok"] is True

    def test_quiet(self) -> None:
        assert format_result(RESULT, settings=OutputSettings(quiet=True)) == ""
