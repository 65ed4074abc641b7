"""
Logic module for console TicTacToe.
Handles the board, rules, match flow, and AI opponent.
"""

from .board import Board, Player, IllegalMoveError, EMPTY
from .config import GameConfig, MatchConfig
from .game_state import GameState, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, MatchResult, MatchStatus
from .ai_player import AIPlayer, RandomPlayer, NO_MOVE
from .match import Match

__version__ = "1.0.0"
