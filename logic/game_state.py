"""
Game state management for console TicTacToe.
Tracks the board, current player, move history and match status.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board, IllegalMoveError, Player
from .config import GameConfig
from .win_checker import MatchResult, MatchStatus, WinChecker

logger = logging.getLogger(__name__)


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Flat cell index (0-8)
    move_number: int        # Ply number in the match (0-8)

    @property
    def position(self) -> Tuple[int, int]:
        """(row, col) of the move."""
        return Board.to_row_col(self.index)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe match.

    Tracks:
    - The 3x3 board
    - Current player
    - Move history
    - Match status (in progress, won, drawn)

    A move is applied, the board is classified (mover's win first,
    then draw), and the turn passes only while the match is in progress.
    Once won or drawn the state accepts no more moves.
    """

    board: Board = field(default_factory=Board)

    # Current player's turn
    current_player: Player = GameConfig.FIRST_PLAYER

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    status: MatchStatus = MatchStatus.IN_PROGRESS
    winner: Optional[Player] = None

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)

    @property
    def is_game_over(self) -> bool:
        return self.status != MatchStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == MatchStatus.DRAWN

    @property
    def result(self) -> Optional[MatchResult]:
        """The MatchResult once the match has ended, None before."""
        if not self.is_game_over:
            return None
        return MatchResult(winner=self.winner)

    def make_move(self, index: int) -> MatchStatus:
        """
        Play the current player's mark at the given cell.

        Args:
            index: Flat cell index (0-8).

        Returns:
            The match status after the move.

        Raises:
            IllegalMoveError: If the game is over or the cell is not legal.
                              The state is left unchanged.
        """
        if self.is_game_over:
            raise IllegalMoveError("Game is already over!")

        mover = self.current_player
        self.board.place(index, mover)

        move = Move(player=mover, index=index, move_number=len(self.moves))
        self.moves.append(move)

        self.status = self.win_checker.classify(self.board, mover)

        if self.status == MatchStatus.WON:
            self.winner = mover
            logger.info("%s completes a line with cell %d", mover.mark, index)
        elif self.status == MatchStatus.DRAWN:
            logger.info("Board full after cell %d, match drawn", index)
        else:
            self.current_player = mover.opposite()

        return self.status

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            moves=list(self.moves),
            status=self.status,
            winner=self.winner,
        )
