"""Tests for configuration loading and result output."""

import csv
import json

import pytest
from pydantic import ValidationError

from timerace import RaceAction, RaceConfig, RaceEngine
from timerace.output import ConsoleOutput, Exporter


class TestRaceConfig:
    """Test race configuration."""

    def test_defaults(self):
        config = RaceConfig()
        assert config.max_time == 300.0
        assert config.total_laps == 5
        assert config.log_capacity == 10
        assert config.ai_progress_range == (8, 15)

    def test_from_json_file(self, tmp_path):
        """Test rules load from a JSON file."""
        path = tmp_path / "race.json"
        path.write_text(json.dumps({"total_laps": 3, "max_time": 90, "log_capacity": 4}))

        config = RaceConfig.from_json_file(path)
        engine = RaceEngine(config=config)

        assert engine.circuit.total_laps == 3
        assert engine.max_time == 90
        assert engine.log.capacity == 4

    def test_invalid_ai_range(self):
        """Test an empty AI progress range is rejected."""
        with pytest.raises(ValidationError):
            RaceConfig(ai_progress_range=(15, 8))

    def test_invalid_threshold(self):
        """Test the pit threshold must be a fraction of the tank."""
        with pytest.raises(ValidationError):
            RaceConfig(pit_stop_fuel_threshold=1.5)


class TestConsoleOutput:
    """Test console formatting."""

    def test_vehicle_catalog(self, engine, capsys):
        ConsoleOutput.print_vehicle_catalog(engine.available_vehicles)
        out = capsys.readouterr().out

        assert "VEHICLES" in out
        assert "Lightning McQueen" in out
        assert "eco" in out

    def test_race_status(self, started_engine, capsys):
        started_engine.execute_action(RaceAction.SPEED_UP)
        ConsoleOutput.print_race_status(started_engine)
        out = capsys.readouterr().out

        assert "Lap 1/5" in out
        assert "Speed:  20" in out
        assert "Pos: 1st" in out

    def test_race_status_without_vehicle(self, engine, capsys):
        ConsoleOutput.print_race_status(engine)
        assert "No vehicle selected" in capsys.readouterr().out

    def test_standings_and_log(self, started_engine, capsys):
        started_engine.selected_vehicle.current_fuel = 1.0
        started_engine.execute_action(RaceAction.MAINTAIN_SPEED)

        ConsoleOutput.print_standings(started_engine)
        ConsoleOutput.print_log(started_engine)
        out = capsys.readouterr().out

        assert "STANDINGS" in out
        assert "Turbo Tom" in out
        assert "Out of fuel!" in out
        assert "14:30:05 - Race started with Lightning McQueen" in out


class TestExporter:
    """Test file export."""

    def test_summary_json(self, started_engine, tmp_path):
        started_engine.execute_action(RaceAction.SPEED_UP)
        exporter = Exporter(output_dir=tmp_path / "out")

        path = exporter.export_summary_json(started_engine)
        data = json.loads(path.read_text())

        assert data["status"] == "active"
        assert data["time_remaining"] == 295.0
        assert data["vehicle"]["name"] == "Lightning McQueen"
        assert data["vehicle"]["category"] == "racing"
        assert data["circuit"]["overall_progress"] == 8.0
        assert [s["position"] for s in data["standings"]] == [1, 2, 3, 4]
        assert data["log"][-1] == "14:30:05 - Speed increased"

    def test_standings_csv(self, started_engine, tmp_path):
        started_engine.execute_action(RaceAction.MAINTAIN_SPEED)
        exporter = Exporter(output_dir=tmp_path)

        path = exporter.export_standings_csv(started_engine)
        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))

        assert len(rows) == 4
        assert rows[0]["position"] == "1"
        assert rows[-1]["name"] == "You"
