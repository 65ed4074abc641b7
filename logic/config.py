"""
Game configuration for console TicTacToe.
Engine constants and the per-match settings.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Player


class GameConfig:
    """
    Engine-wide constants.
    """

    # ==================== TURN ORDER ====================
    # The same mark always opens a match
    FIRST_PLAYER = Player.X

    # ==================== SEARCH SCORING ====================
    # Win at depth d scores WIN_SCORE - d, loss scores d - WIN_SCORE
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # Alpha-beta never changes the chosen move, only the node count
    USE_PRUNING = True


@dataclass(frozen=True)
class MatchConfig:
    """
    Settings for one match. Read once when the match starts.
    """
    vs_computer: bool = False
    human_player: Player = Player.X
    computer_is_optimal: bool = True

    @property
    def computer_player(self) -> Optional[Player]:
        """The mark the computer plays, or None for human vs human."""
        if not self.vs_computer:
            return None
        return self.human_player.opposite()
