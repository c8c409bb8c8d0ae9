"""Markdown logger for gameplay events (strikes, spawns, game over, win)."""

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
                f.write("# Whack-a-Mole Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Game Events\n\n")
                f.write("| Timestamp | Event | Result | Details |\n")
                f.write("|-----------|-------|--------|---------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def _append(self, event: str, result: str, details: str) -> None:
        timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write(f"| {timestamp} | {event} | {result} | {details} |\n")

    def log_strike(self, key: str, hit: bool, details: str = "") -> None:
        """
        Log a digit key strike.

        Parameters
        ----------
        key : str
            The digit that was pressed
        hit : bool
            Whether a mole was in that hole
        details : str, optional
            Additional details about the strike
        """
        try:
            self._append(f"KEY {key}", "HIT" if hit else "MISS", details)
        except Exception as e:
            print(f"Failed to log strike: {e}")

    def log_spawn(self, holes: list[int]) -> None:
        """Log the hole numbers revealed by one spawn tick."""
        try:
            shown = ", ".join(str(index + 1) for index in holes)
            self._append("SPAWN", "SYSTEM", f"Moles at holes {shown}")
        except Exception as e:
            print(f"Failed to log spawn: {e}")

    def log_game_over(self, scores: int) -> None:
        try:
            self._append("GAME OVER", "SYSTEM", f"Final score {scores}")
        except Exception as e:
            print(f"Failed to log game over: {e}")

    def log_win(self, scores: int) -> None:
        try:
            self._append("WIN", "SYSTEM", f"Score {scores} passed the win threshold")
        except Exception as e:
            print(f"Failed to log win: {e}")
