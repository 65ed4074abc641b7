"""
Storage module for console TicTacToe.
Persists the scoreboard between runs.
"""

from .config import StorageConfig
from .scoreboard import Scoreboard, ScoreboardStore
