"""Markdown logger for gameplay events (clicks, plantings, spawns, game over)."""

import datetime


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Lawn Defense Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Events\n\n")
                f.write("| Timestamp | Event | Result | Details |\n")
                f.write("|-----------|-------|--------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, event: str, result: str, details: str) -> None:
        timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {result} | {details} |\n")
        except OSError as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_click(self, pos: tuple[float, float], hit: bool, details: str = "") -> None:
        """
        Log a mouse click on the lawn.

        Parameters
        ----------
        pos : tuple[float, float]
            Click position (x, y) in playfield pixels
        hit : bool
            Whether the click collected a sun or placed a plant
        details : str, optional
            Additional details about the click
        """
        result = "HIT" if hit else "MISS"
        self._write_row(f"CLICK ({pos[0]:.0f}, {pos[1]:.0f})", result, details)

    def log_plant(self, kind: str, row: int, col: int, sun_left: int) -> None:
        self._write_row("PLANT", kind.upper(), f"Cell ({row}, {col}), {sun_left} sun left")

    def log_sun_collected(self, value: int, total: int) -> None:
        self._write_row("SUN", f"+{value}", f"Total {total}")

    def log_zombie_spawn(self, kind: str, row: int, next_interval_ms: float) -> None:
        """
        Log a zombie arriving on the lawn.

        Parameters
        ----------
        kind : str
            Zombie kind name
        row : int
            Lane the zombie walks in
        next_interval_ms : float
            Spawn interval after this spawn, to track the difficulty ramp
        """
        self._write_row("ZOMBIE", kind.upper(), f"Row {row}, next in {next_interval_ms:.0f} ms")

    def log_game_over(self, elapsed_ms: float) -> None:
        self._write_row("GAME OVER", "SYSTEM", f"Lawn overrun after {elapsed_ms / 1000:.1f} s")
