"""Console output formatting."""

from timerace.models import Vehicle
from timerace.simulation.engine import RaceEngine


class ConsoleOutput:
    """Formats race state for console display."""

    @staticmethod
    def print_vehicle_catalog(vehicles: list[Vehicle]) -> None:
        """Print the selectable vehicles.

        Args:
            vehicles: Vehicle catalog
        """
        print("\n" + "=" * 64)
        print("VEHICLES")
        print("=" * 64)
        print(f"{'#':<3} {'Name':<20} {'Category':<10} {'Speed':<7} {'Fuel':<7} {'Burn':<6}")
        print("-" * 64)

        for idx, vehicle in enumerate(vehicles):
            print(
                f"{idx:<3} "
                f"{vehicle.name:<20} "
                f"{vehicle.category.value:<10} "
                f"{vehicle.max_speed:<7} "
                f"{vehicle.max_fuel:<7.1f} "
                f"{vehicle.fuel_consumption:<6.1f}"
            )

        print("=" * 64)

    @staticmethod
    def print_race_status(engine: RaceEngine) -> None:
        """Print a one-line summary of the player's race.

        Args:
            engine: Race engine
        """
        vehicle = engine.selected_vehicle
        circuit = engine.circuit
        if vehicle is None:
            print("No vehicle selected")
            return

        print(
            f"Lap {circuit.display_lap}/{circuit.total_laps} "
            f"({circuit.lap_progress:5.1f}%)  "
            f"Speed: {vehicle.current_speed:3d}  "
            f"Fuel: {vehicle.fuel_percentage():5.1f}%  "
            f"Time: {engine.time_remaining:5.1f}s  "
            f"Pos: {engine.player_position_label()}"
        )

    @staticmethod
    def print_standings(engine: RaceEngine) -> None:
        """Print current standings.

        Args:
            engine: Race engine
        """
        print("\n" + "=" * 50)
        print("STANDINGS")
        print("=" * 50)
        print(f"{'Pos':<4} {'Name':<20} {'Lap':<5} {'Progress':<10}")
        print("-" * 50)

        for participant in sorted(engine.participants, key=lambda p: p.position):
            marker = " *" if participant.is_player else ""
            print(
                f"{participant.position:<4} "
                f"{participant.name:<20} "
                f"{participant.current_lap:<5} "
                f"{participant.lap_progress:5.1f}%"
                f"{marker}"
            )

        print("=" * 50)
        if engine.result:
            print(engine.result)

    @staticmethod
    def print_log(engine: RaceEngine) -> None:
        """Print the recent race log, newest last."""
        print("\nRACE LOG:")
        print("-" * 50)
        print(engine.log.text())
