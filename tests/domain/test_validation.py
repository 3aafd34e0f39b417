"""Tests for the training field validation engine."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

import pytest

from trainctl.domain.result import Err, Ok
from trainctl.domain.types import FailureKind
from trainctl.domain.validation import MSG_DATE_IN_PAST, TrainingFields, validate_fields


def _err(result: Any) -> str:
    assert isinstance(result, Err), result
    assert result.kind is FailureKind.VALIDATION
    return result.error


class TestValidFields:
    def test_accepts_valid(self, valid_fields: dict[str, Any], now: datetime) -> None:
        result = validate_fields(valid_fields, now=now)
        assert isinstance(result, Ok)
        assert isinstance(result.value, TrainingFields)
        assert result.value.title == valid_fields["title"]

    def test_accepts_pydantic_model(self, valid_fields: dict[str, Any], now: datetime) -> None:
        model = TrainingFields.model_validate(valid_fields, context={"now": now})
        assert isinstance(validate_fields(model, now=now), Ok)


class TestStringBounds:
    @pytest.mark.parametrize(
        ("field", "maximum"),
        [("title", 100), ("description", 1000), ("location", 100)],
    )
    def test_boundaries(
        self, valid_fields: dict[str, Any], now: datetime, field: str, maximum: int
    ) -> None:
        assert isinstance(validate_fields({**valid_fields, field: "a"}, now=now), Ok)
        assert isinstance(validate_fields({**valid_fields, field: "a" * maximum}, now=now), Ok)

        empty = _err(validate_fields({**valid_fields, field: ""}, now=now))
        assert empty == f"{field} is required"

        too_long = _err(validate_fields({**valid_fields, field: "a" * (maximum + 1)}, now=now))
        assert too_long == f"{field} must be {maximum} characters or fewer"

    def test_counts_characters_not_bytes(self, valid_fields: dict[str, Any], now: datetime) -> None:
        title = "研" * 100
        assert isinstance(validate_fields({**valid_fields, "title": title}, now=now), Ok)

    def test_non_string_title(self, valid_fields: dict[str, Any], now: datetime) -> None:
        assert _err(validate_fields({**valid_fields, "title": 42}, now=now)) == (
            "title must be a string"
        )


class TestCapacity:
    @pytest.mark.parametrize("capacity", [1, 2, 500, 999, 1000])
    def test_in_range(self, valid_fields: dict[str, Any], now: datetime, capacity: int) -> None:
        assert isinstance(validate_fields({**valid_fields, "capacity": capacity}, now=now), Ok)

    def test_zero(self, valid_fields: dict[str, Any], now: datetime) -> None:
        message = _err(validate_fields({**valid_fields, "capacity": 0}, now=now))
        assert message == "capacity must be at least 1"

    def test_over_max(self, valid_fields: dict[str, Any], now: datetime) -> None:
        message = _err(validate_fields({**valid_fields, "capacity": 1001}, now=now))
        assert message == "capacity must be at most 1000"

    @pytest.mark.parametrize("capacity", [1.5, "30", True])
    def test_non_integer(self, valid_fields: dict[str, Any], now: datetime, capacity: Any) -> None:
        message = _err(validate_fields({**valid_fields, "capacity": capacity}, now=now))
        assert message == "capacity must be an integer"


class TestDateTime:
    def test_past(self, valid_fields: dict[str, Any], now: datetime) -> None:
        past = now - timedelta(days=1)
        assert _err(validate_fields({**valid_fields, "date_time": past}, now=now)) == (
            MSG_DATE_IN_PAST
        )

    def test_equal_to_now_is_past(self, valid_fields: dict[str, Any], now: datetime) -> None:
        assert _err(validate_fields({**valid_fields, "date_time": now}, now=now)) == (
            MSG_DATE_IN_PAST
        )

    def test_just_after_now(self, valid_fields: dict[str, Any], now: datetime) -> None:
        later = now + timedelta(microseconds=1)
        assert isinstance(validate_fields({**valid_fields, "date_time": later}, now=now), Ok)

    def test_now_is_read_per_call(self, valid_fields: dict[str, Any], now: datetime) -> None:
        """The same input passes or fails depending on the clock at call time."""
        when = now + timedelta(hours=1)
        data = {**valid_fields, "date_time": when}
        assert isinstance(validate_fields(data, now=now), Ok)
        assert isinstance(validate_fields(data, now=when + timedelta(seconds=1)), Err)

    def test_naive_datetime_is_utc(self, valid_fields: dict[str, Any], now: datetime) -> None:
        naive = (now + timedelta(days=1)).replace(tzinfo=None)
        result = validate_fields({**valid_fields, "date_time": naive}, now=now)
        assert isinstance(result, Ok)
        assert result.value.date_time.utcoffset() == timedelta(0)

    def test_iso_string(self, valid_fields: dict[str, Any], now: datetime) -> None:
        data = {**valid_fields, "date_time": "2099-03-01T10:00:00+09:00"}
        assert isinstance(validate_fields(data, now=now), Ok)

    def test_garbage_string(self, valid_fields: dict[str, Any], now: datetime) -> None:
        message = _err(validate_fields({**valid_fields, "date_time": "next tuesday"}, now=now))
        assert message == "date_time must be a valid datetime"

    def test_default_now_is_wall_clock(self, valid_fields: dict[str, Any]) -> None:
        past = datetime(2000, 1, 1)
        assert _err(validate_fields({**valid_fields, "date_time": past})) == MSG_DATE_IN_PAST


class TestFirstFailureOnly:
    def test_reports_first_field_in_order(self, now: datetime) -> None:
        everything_wrong = {
            "title": "",
            "description": "",
            "date_time": now - timedelta(days=1),
            "location": "",
            "capacity": 0,
        }
        assert _err(validate_fields(everything_wrong, now=now)) == "title is required"

    def test_date_checked_before_location(
        self, valid_fields: dict[str, Any], now: datetime
    ) -> None:
        data = {**valid_fields, "date_time": now, "location": ""}
        assert _err(validate_fields(data, now=now)) == MSG_DATE_IN_PAST

    def test_missing_field(self, valid_fields: dict[str, Any], now: datetime) -> None:
        data = {k: v for k, v in valid_fields.items() if k != "location"}
        assert _err(validate_fields(data, now=now)) == "location is required"

    def test_unknown_field(self, valid_fields: dict[str, Any], now: datetime) -> None:
        data = {**valid_fields, "status": "published"}
        assert _err(validate_fields(data, now=now)) == "status is not an editable field"

    def test_never_raises(self, now: datetime) -> None:
        assert isinstance(validate_fields({}, now=now), Err)
