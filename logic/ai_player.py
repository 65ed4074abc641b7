"""
Computer players for console TicTacToe.
AIPlayer uses the Minimax algorithm to choose the best move,
RandomPlayer picks any legal cell.
"""

import logging
import random
from typing import Optional

from .board import Board, Player
from .config import GameConfig
from .game_state import GameState
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

# Returned when the board has no empty cell
NO_MOVE = -1


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Faster wins and slower losses score higher, and among equal
    scores the lowest cell index is chosen.
    """

    def __init__(
        self,
        player: Player = Player.O,
        opponent: Optional[Player] = None,
        use_pruning: bool = GameConfig.USE_PRUNING
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            opponent: The other player (default: player.opposite())
            use_pruning: Use alpha-beta pruning during the search.
        """
        self.player = player
        self.opponent = opponent if opponent is not None else player.opposite()
        if self.opponent == self.player:
            raise ValueError("AI player and opponent must be different marks")

        self.use_pruning = use_pruning
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def best_move(self, board: Board) -> int:
        """
        Get the best move for self.player on the given board.

        The board is explored in place and restored before returning.

        Args:
            board: Current board.

        Returns:
            Flat index of the best move, or NO_MOVE if the board is full.
        """
        self.positions_evaluated = 0

        best_score = float('-inf')
        best_move = NO_MOVE

        for index in board.empty_indices():
            with board.tentative(index, self.player):
                # A pruned branch reports <= best_score and never replaces it
                alpha = best_score if self.use_pruning else float('-inf')
                score = self._minimax(board, 0, False, alpha, float('inf'))

            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "%s evaluated %d positions. Best move: %d (score: %s)",
            self.player.mark, self.positions_evaluated, best_move, best_score
        )

        return best_move

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float,
        beta: float
    ) -> float:
        """
        Minimax algorithm with optional alpha-beta pruning.

        Args:
            board: Position to evaluate (after the previous ply).
            depth: Plies since the root move, starting at 0.
            is_maximizing: True if self.player moves next.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        # Check terminal states
        if self.win_checker.winner(board, self.player):
            return GameConfig.WIN_SCORE - depth  # Win (prefer faster wins)
        if self.win_checker.winner(board, self.opponent):
            return depth - GameConfig.WIN_SCORE  # Loss (prefer slower losses)
        if board.is_full():
            return GameConfig.DRAW_SCORE

        if is_maximizing:
            max_score = float('-inf')
            for index in board.empty_indices():
                with board.tentative(index, self.player):
                    score = self._minimax(board, depth + 1, False, alpha, beta)
                max_score = max(max_score, score)
                if self.use_pruning:
                    alpha = max(alpha, score)
                    if beta <= alpha:
                        break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for index in board.empty_indices():
                with board.tentative(index, self.opponent):
                    score = self._minimax(board, depth + 1, True, alpha, beta)
                min_score = min(min_score, score)
                if self.use_pruning:
                    beta = min(beta, score)
                    if beta <= alpha:
                        break  # Prune
            return min_score

    def choose_move(self, game_state: GameState) -> int:
        """
        Move source hook used by Match.

        Raises:
            ValueError: If it is not this AI's turn.
        """
        if game_state.current_player != self.player:
            raise ValueError(f"It's not {self.player.mark}'s turn!")
        return self.best_move(game_state.board)


class RandomPlayer:
    """
    A computer player that picks a random empty cell.
    Pass a seeded random.Random to make it deterministic.
    """

    def __init__(self, player: Player = Player.O, rng: Optional[random.Random] = None):
        self.player = player
        self.rng = rng if rng is not None else random.Random()

    def pick(self, board: Board) -> int:
        """Get a random empty cell, or NO_MOVE if the board is full."""
        empty_cells = board.empty_indices()
        return self.rng.choice(empty_cells) if empty_cells else NO_MOVE

    def choose_move(self, game_state: GameState) -> int:
        if game_state.current_player != self.player:
            raise ValueError(f"It's not {self.player.mark}'s turn!")
        return self.pick(game_state.board)
