"""
Win checker for console TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .board import Board, Player


class MatchStatus(Enum):
    """Where a match stands after a move."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class MatchResult:
    """Final classification of a finished match. winner is None for a draw."""
    winner: Optional[Player] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.winner is None:
            return "Draw"
        return f"{self.winner.mark} wins"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines as flat indices
    WINNING_LINES = np.array([
        # Rows
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
        # Columns
        [0, 3, 6],
        [1, 4, 7],
        [2, 5, 8],
        # Diagonals
        [0, 4, 8],
        [2, 4, 6],
    ], dtype=np.intp)

    def winner(self, board: Board, player: Player) -> bool:
        """
        Check if a player holds any complete line.

        Args:
            board: The board to inspect.
            player: The player to check.

        Returns:
            True if all 3 cells of some line belong to player.
        """
        lines = board.cells[self.WINNING_LINES]
        return bool(np.any(np.all(lines == player.value, axis=1)))

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in Player:
            if self.winner(board, player):
                return player
        return None

    def is_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw is a full board where neither player has a line.
        """
        if not board.is_full():
            return False
        return not any(self.winner(board, player) for player in Player)

    def classify(self, board: Board, last_mover: Player) -> MatchStatus:
        """
        Classify the board after last_mover has moved.

        The mover's win is checked before the draw, so a full board
        that completes a line counts as a win.
        """
        if self.winner(board, last_mover):
            return MatchStatus.WON
        if self.is_draw(board):
            return MatchStatus.DRAWN
        return MatchStatus.IN_PROGRESS

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of flat indices, or None.
        """
        cells = board.cells
        for line in self.WINNING_LINES:
            a, b, c = (int(i) for i in line)
            if cells[a] != 0 and cells[a] == cells[b] == cells[c]:
                return (a, b, c)
        return None
