"""Integration tests for the readiness CLI command."""

import json
import stat
from pathlib import Path

import pytest
from typer.testing import CliRunner

from simready.cli.main import app

DOCUMENTS_PATH = Path(__file__).parent.parent / "fixtures" / "documents"

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def engine(tmp_path: Path) -> Path:
    """An executable stand-in for the simulation engine."""
    path = tmp_path / "energyplus"
    path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


def _office_args(*extra: str) -> list[str]:
    return [
        "readiness",
        str(DOCUMENTS_PATH / "office.json"),
        "--zones",
        str(DOCUMENTS_PATH / "zones.json"),
        *extra,
    ]


class TestReadinessCommand:
    """Tests for the readiness command."""

    def test_ready_with_engine(self, runner: CliRunner, engine: Path) -> None:
        result = runner.invoke(app, _office_args("--engine-path", str(engine)))

        assert result.exit_code == 0
        assert "[ok]    7. Run EnergyPlus" in result.output
        assert "Overall: ok" in result.output

    def test_without_engine(self, runner: CliRunner, tmp_path: Path) -> None:
        """A missing engine downgrades the run step to a warning."""
        result = runner.invoke(
            app, _office_args("--engine-path", str(tmp_path / "missing"))
        )

        assert result.exit_code == 2
        assert "[warn]  7. Run EnergyPlus" in result.output
        assert "Overall: warning" in result.output

    def test_engine_from_environment(
        self, runner: CliRunner, engine: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SIMREADY_ENGINE_PATH", str(engine))

        result = runner.invoke(app, _office_args())

        assert result.exit_code == 0

    def test_blocked_document(self, runner: CliRunner, engine: Path) -> None:
        result = runner.invoke(
            app,
            [
                "readiness",
                str(DOCUMENTS_PATH / "missing_material.json"),
                "--zones",
                str(DOCUMENTS_PATH / "single_zone.json"),
                "--engine-path",
                str(engine),
            ],
        )

        assert result.exit_code == 1
        assert "Blocked by: 2. Constructions & Materials" in result.output
        assert "7. Run EnergyPlus" in result.output

    def test_missing_document(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["readiness", str(DOCUMENTS_PATH / "nope.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output


class TestReadinessJsonOutput:
    def test_json_steps(self, runner: CliRunner, engine: Path) -> None:
        result = runner.invoke(
            app, _office_args("--engine-path", str(engine), "--json")
        )

        steps = json.loads(result.stdout)
        assert [step["id"] for step in steps] == [
            "geometry",
            "constructions",
            "schedules-loads",
            "thermostats-ideal-loads",
            "weather-location",
            "idf-generation",
            "run-energyplus",
        ]
        assert all(step["status"] == "ok" for step in steps)
        assert steps[5]["actions"] == [{"label": "Generate IDF", "actionId": "generate-idf"}]
