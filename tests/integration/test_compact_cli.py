"""Integration tests for the compact schedule CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from simready.cli.main import app

SCHEDULES_PATH = Path(__file__).parent.parent / "fixtures" / "schedules"

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestCompactParse:
    def test_parse_text_file(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["compact", "parse", str(SCHEDULES_PATH / "office_occupancy.txt")]
        )

        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert rows[0] == {"value": "12/31", "type": "Through"}
        assert rows[2] == {"value": "0", "type": "Until", "time": "08:00"}
        assert len(rows) == 6

    def test_parse_empty_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """An empty schedule yields the default scaffold."""
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")

        result = runner.invoke(app, ["compact", "parse", str(path)])

        assert [row["type"] for row in json.loads(result.stdout)] == [
            "Through",
            "For",
            "Until",
        ]

    def test_parse_missing_file(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["compact", "parse", str(SCHEDULES_PATH / "nope.txt")])

        assert result.exit_code == 1
        assert "Error reading" in result.output


class TestCompactFormat:
    def test_format_rows(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["compact", "format", str(SCHEDULES_PATH / "rows.json")])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Through: 12/31",
            "For: AllDays",
            "Until: 17:00, 1",
            "Until: 24:00, 0",
        ]

    def test_format_rejects_unknown_row_type(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        path = tmp_path / "rows.json"
        path.write_text(json.dumps([{"type": "Holiday", "value": "1/1"}]), encoding="utf-8")

        result = runner.invoke(app, ["compact", "format", str(path)])

        assert result.exit_code == 1
        assert "Errors:" in result.output
