"""
Scoreboard for console TicTacToe.
Keeps the win/loss/draw tally and stores it in a small text file.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from logic.board import Player
from logic.win_checker import MatchResult

from .config import StorageConfig

logger = logging.getLogger(__name__)


@dataclass
class Scoreboard:
    """Running tally of finished matches."""
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, result: MatchResult):
        """Count one finished match."""
        if result.winner is None:
            self.draws += 1
        elif result.winner == Player.X:
            self.x_wins += 1
        else:
            self.o_wins += 1

    def reset(self):
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    def wins_for(self, player: Player) -> int:
        return self.x_wins if player == Player.X else self.o_wins

    @property
    def total_games(self) -> int:
        return self.x_wins + self.o_wins + self.draws


class ScoreboardStore:
    """
    Reads and writes the scoreboard file.

    File format is a single line of three non-negative integers:
    X wins, O wins, draws. A missing file is an empty tally; an unreadable
    one is logged and treated as empty.
    """

    def __init__(self, path: Union[str, Path] = StorageConfig.SCOREBOARD_FILE):
        self.path = Path(path)

    def load(self) -> Scoreboard:
        """
        Load the tally from disk.

        Returns:
            The stored Scoreboard, or a zeroed one.
        """
        if not self.path.exists():
            return Scoreboard()

        try:
            text = self.path.read_text(encoding=StorageConfig.ENCODING)
        except OSError as e:
            logger.warning("Could not read scoreboard %s: %s", self.path, e)
            return Scoreboard()

        fields = text.split()
        if len(fields) != StorageConfig.FIELD_COUNT:
            logger.warning("Ignoring malformed scoreboard %s: %r", self.path, text)
            return Scoreboard()

        try:
            counts = [int(f) for f in fields]
        except ValueError:
            logger.warning("Ignoring malformed scoreboard %s: %r", self.path, text)
            return Scoreboard()

        if any(c < 0 for c in counts):
            logger.warning("Ignoring scoreboard %s with negative counts", self.path)
            return Scoreboard()

        return Scoreboard(*counts)

    def save(self, scoreboard: Scoreboard):
        """Write the tally to disk, creating parent directories."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        line = f"{scoreboard.x_wins} {scoreboard.o_wins} {scoreboard.draws}\n"
        self.path.write_text(line, encoding=StorageConfig.ENCODING)
        logger.debug("Saved scoreboard to %s", self.path)

    def reset(self) -> Scoreboard:
        """Store and return a zeroed tally."""
        scoreboard = Scoreboard()
        self.save(scoreboard)
        return scoreboard
