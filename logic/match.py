"""
Match driver for console TicTacToe.
Asks the right move source for each turn and plays until the match ends.
"""

import logging
import random
from typing import Callable, Dict, Optional

from .ai_player import AIPlayer, RandomPlayer
from .board import Player
from .config import MatchConfig
from .game_state import GameState, Move
from .win_checker import MatchResult, MatchStatus

logger = logging.getLogger(__name__)


class Match:
    """
    Runs one match from an empty board to a result.

    Every player is backed by a move source: any object with a
    choose_move(game_state) -> int method. The human source covers both
    marks unless the config puts one of them under computer control.

    Game flow:
    1. Ask the current player's source for a cell
    2. Apply it to the game state (illegal cells raise IllegalMoveError)
    3. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        config: MatchConfig,
        human,
        computer=None,
        rng: Optional[random.Random] = None,
        on_move: Optional[Callable[[GameState, Move], None]] = None
    ):
        """
        Set up a match.

        Args:
            config: Match settings, fixed for the whole match.
            human: Move source for the human-controlled marks.
            computer: Move source for the computer mark. Built from the
                      config (AIPlayer or RandomPlayer) when omitted.
            rng: Random generator for a RandomPlayer built from the config.
            on_move: Called after every applied move.
        """
        self.config = config
        self.state = GameState()
        self.on_move = on_move
        self._result: Optional[MatchResult] = None

        self.sources: Dict[Player, object] = {player: human for player in Player}

        computer_player = config.computer_player
        if computer_player is not None:
            if computer is None:
                if config.computer_is_optimal:
                    computer = AIPlayer(computer_player)
                else:
                    computer = RandomPlayer(computer_player, rng)
            self.sources[computer_player] = computer

        logger.info(
            "New match: vs_computer=%s human=%s optimal=%s",
            config.vs_computer, config.human_player.mark, config.computer_is_optimal
        )

    def is_computer(self, player: Player) -> bool:
        """True if the computer controls this mark."""
        return player == self.config.computer_player

    def play_turn(self) -> MatchStatus:
        """
        Play one move for the current player.

        Returns:
            The match status after the move.

        Raises:
            RuntimeError: If the match has already ended.
            IllegalMoveError: If the move source returns an illegal cell.
        """
        if self.state.is_game_over:
            raise RuntimeError("Match is already finished")

        player = self.state.current_player
        index = self.sources[player].choose_move(self.state)
        status = self.state.make_move(index)

        if self.on_move is not None:
            self.on_move(self.state, self.state.moves[-1])

        return status

    def play(self) -> MatchResult:
        """
        Play turns until the match ends.

        Returns:
            The single MatchResult of this match.

        Raises:
            RuntimeError: If the match was already played to the end.
        """
        if self._result is not None:
            raise RuntimeError("Match is already finished")

        while not self.state.is_game_over:
            self.play_turn()

        self._result = self.state.result
        logger.info("Match finished: %s after %d moves", self._result, len(self.state.moves))
        return self._result

    @property
    def result(self) -> Optional[MatchResult]:
        return self._result
