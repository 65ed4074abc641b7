"""
Move validator for console TicTacToe.
Validates moves and raw cell selections before they reach the game state.
"""

from dataclasses import dataclass
from typing import List, Optional

from .board import CELL_COUNT, Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    index: Optional[int] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The cell must be on the board (0-8, or 1-9 as typed by a person)
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move by flat index.

        Args:
            board: Current board.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if index is in valid range
        if not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index + 1}. Must be 1-{CELL_COUNT}."
            )

        # Check if cell is empty
        occupant = board.get(index)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index + 1} is already taken by {occupant.mark}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True, index=index)

    def validate_input(self, board: Board, text: str) -> ValidationResult:
        """
        Validate a cell selection typed by a person.

        Cells are numbered 1-9 on screen, so "1" means index 0.

        Args:
            board: Current board.
            text: Raw input line.

        Returns:
            ValidationResult whose index is the flat index when valid.
        """
        try:
            number = int(text.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Please enter a number from 1 to {CELL_COUNT}."
            )

        return self.validate_move(board, number - 1)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on the board.

        Returns:
            List of flat indices, ascending.
        """
        return board.empty_indices()
