"""Export race results to CSV and JSON."""

import csv
import json
from pathlib import Path
from typing import Any

from timerace.simulation.engine import RaceEngine


class Exporter:
    """Exports race state to various formats."""

    def __init__(self, output_dir: str | Path = "output"):
        """Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_standings_csv(
        self,
        engine: RaceEngine,
        filename: str = "standings.csv",
    ) -> Path:
        """Export current standings to CSV.

        Args:
            engine: Race engine
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["position", "name", "is_player", "lap", "lap_progress"])

            for participant in sorted(engine.participants, key=lambda p: p.position):
                writer.writerow([
                    participant.position,
                    participant.name,
                    participant.is_player,
                    participant.current_lap,
                    f"{participant.lap_progress:.1f}",
                ])

        return filepath

    def export_summary_json(
        self,
        engine: RaceEngine,
        filename: str = "race_summary.json",
    ) -> Path:
        """Export a race summary to JSON.

        Args:
            engine: Race engine
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename
        vehicle = engine.selected_vehicle

        data: dict[str, Any] = {
            "status": engine.status.value,
            "result": engine.result,
            "time_remaining": engine.time_remaining,
            "max_time": engine.max_time,
            "player_position": engine.player_position_label(),
            "vehicle": vehicle.model_dump(mode="json") if vehicle is not None else None,
            "circuit": {
                **engine.circuit.model_dump(mode="json"),
                "overall_progress": round(engine.circuit.overall_progress(), 2),
            },
            "standings": [
                {
                    "position": p.position,
                    "name": p.name,
                    "is_player": p.is_player,
                    "total_progress": p.total_progress,
                }
                for p in sorted(engine.participants, key=lambda p: p.position)
            ],
            "log": [str(entry) for entry in engine.log],
        }

        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)

        return filepath
