"""Tests for the per-client dashboard figures."""

from __future__ import annotations

import pendulum

from clientdesk.service.dashboard import RECENT_PAYMENT_COUNT, summarize_client
from clientdesk.template.payment import get_payment_template

from doubles import make_task


def _payment(day: int, amount: float, status: str = "Unpaid"):
    payment = get_payment_template("client-1")
    payment["date"] = pendulum.date(2026, 1, day)
    payment["amount"] = amount
    payment["status"] = status  # type: ignore[typeddict-item]
    return payment


class TestSummarizeClient:
    def test_empty_client(self):
        summary = summarize_client([], [], [])

        assert summary["task_count"] == 0
        assert summary["open_task_count"] == 0
        assert summary["total_paid"] == 0.0
        assert summary["recent_payments"] == []
        assert set(summary["tasks_by_status"].values()) == {0}

    def test_task_counts(self):
        """Open tasks are Pending plus In Progress; blocked uses the full collection."""
        tasks = [
            make_task("a", dependencies=["b"]),
            make_task("b", status="In Progress"),
            make_task("c", status="Completed"),
            make_task("d", status="On Hold", dependencies=["gone"]),
        ]

        summary = summarize_client(tasks, [], tasks)

        assert summary["task_count"] == 4
        assert summary["tasks_by_status"]["Pending"] == 1
        assert summary["tasks_by_status"]["On Hold"] == 1
        assert summary["open_task_count"] == 2
        assert summary["blocked_task_count"] == 1

    def test_payment_totals(self):
        payments = [
            _payment(3, 100.0, "Paid"),
            _payment(2, 40.0, "Pending"),
            _payment(1, 10.5, "Unpaid"),
        ]

        summary = summarize_client([], payments, [])

        assert summary["total_paid"] == 100.0
        assert summary["total_outstanding"] == 50.5

    def test_recent_payments_are_latest_by_date(self):
        payments = [_payment(day, float(day)) for day in range(1, 10)]

        recent = summarize_client([], payments, [])["recent_payments"]

        assert len(recent) == RECENT_PAYMENT_COUNT
        assert [payment["date"].day for payment in recent] == [4, 5, 6, 7, 8, 9]
