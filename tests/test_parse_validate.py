"""Tests for command line value parsing and validation."""

from __future__ import annotations

import pendulum
import pytest
import typer

from clientdesk.terminal.parse import parse_date
from clientdesk.terminal.validate import (
    validate_amount,
    validate_payment_status,
    validate_task_priority,
    validate_task_status,
)
from clientdesk.time import today_local


class TestParseDate:
    def test_iso_date(self):
        assert parse_date("2026-04-01") == pendulum.date(2026, 4, 1)

    @pytest.mark.parametrize(
        "value, offset",
        [("today", 0), ("t", 0), ("tomorrow", 1), ("o", 1), ("y", -1), ("3", 3), ("-2", -2)],
    )
    def test_relative_dates(self, value, offset):
        assert parse_date(value) == today_local().add(days=offset)

    def test_none(self):
        assert parse_date(None) is None

    @pytest.mark.parametrize("value", ["next week", "2026-13-45", "04/01/2026"])
    def test_invalid(self, value):
        with pytest.raises(typer.BadParameter):
            parse_date(value)


class TestValidate:
    @pytest.mark.parametrize(
        "value", ["In Progress", "in progress", "in-progress", "InProgress", "in_progress"]
    )
    def test_task_status_spellings(self, value):
        assert validate_task_status(value) == "In Progress"

    def test_task_status_unknown(self):
        with pytest.raises(typer.BadParameter, match="Status must be one of"):
            validate_task_status("Done")

    def test_priority_and_payment_status(self):
        assert validate_task_priority("high") == "High"
        assert validate_payment_status("paid") == "Paid"
        assert validate_task_priority(None) is None
        with pytest.raises(typer.BadParameter):
            validate_payment_status("refunded")

    def test_amount(self):
        assert validate_amount(12.5) == 12.5
        with pytest.raises(typer.BadParameter):
            validate_amount(-1.0)
