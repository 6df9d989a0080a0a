"""Mini README: Tests for the typer command line entry point."""

from __future__ import annotations

from typer.testing import CliRunner

import plan_deliveries
from dronedelivery.geometry import Position
from dronedelivery.pipeline import PlannedDay
from dronedelivery.route_planning import UnreachableDestination

runner = CliRunner()


def test_plan_rejects_bad_date() -> None:
    result = runner.invoke(plan_deliveries.cli, ["plan", "23-01-2025", "https://example.test"])
    assert result.exit_code == 1
    assert "Date error" in result.output


def test_plan_rejects_bad_url() -> None:
    result = runner.invoke(plan_deliveries.cli, ["plan", "2025-01-23", "ftp://example.test"])
    assert result.exit_code == 1
    assert "URL error" in result.output


def test_plan_reports_summary(monkeypatch, tmp_path) -> None:
    calls = {}

    def fake_run_day(day, url, *, output_directory=None):
        calls.update(day=day, url=url, output_directory=output_directory)
        return PlannedDay(orders=[], movements=[])

    monkeypatch.setattr(plan_deliveries, "run_day", fake_run_day)
    result = runner.invoke(
        plan_deliveries.cli,
        ["plan", "2025-01-23", "https://example.test", "--output-dir", str(tmp_path)],
    )
    assert result.exit_code == 0
    assert "Planned 0 of 0 orders (0 movements)." in result.output
    assert calls == {"day": "2025-01-23", "url": "https://example.test", "output_directory": tmp_path}


def test_plan_reports_unreachable_destination(monkeypatch) -> None:
    def fake_run_day(day, url, *, output_directory=None):
        raise UnreachableDestination(Position(0, 0), Position(1, 1), 5, "step limit exceeded")

    monkeypatch.setattr(plan_deliveries, "run_day", fake_run_day)
    result = runner.invoke(plan_deliveries.cli, ["plan", "2025-01-23", "https://example.test"])
    assert result.exit_code == 1
    assert "step limit exceeded" in result.output
