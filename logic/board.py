"""
Board for the console TicTacToe game.
A fixed 3x3 grid stored as a flat numpy array of 9 cells.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import numpy as np


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Cell value for an empty square
EMPTY = 0


class IllegalMoveError(ValueError):
    """Raised when a move targets an occupied or out-of-range cell."""


class Player(Enum):
    """The two marks in the game. Values are the stored cell values."""
    X = 1
    O = 2

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def mark(self) -> str:
        return self.name


# Characters accepted by Board.from_string
_CHAR_TO_CELL = {
    "X": Player.X.value,
    "O": Player.O.value,
    ".": EMPTY,
    "-": EMPTY,
    "_": EMPTY,
}


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are addressed by flat index (0-8, row-major) or by (row, col).
    Only empty cells may be written; place() fails fast on anything else
    and leaves the board untouched.
    """

    def __init__(self):
        self._cells = np.zeros(CELL_COUNT, dtype=np.int8)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a compact string like "XX. .O. ..O".

        Args:
            text: 9 cell characters (X, O, or . - _ for empty).
                  Whitespace is ignored.

        Returns:
            A new Board.
        """
        chars = [c for c in text.upper() if not c.isspace()]
        if len(chars) != CELL_COUNT:
            raise ValueError(f"Expected {CELL_COUNT} cells, got {len(chars)}")

        board = cls()
        for index, char in enumerate(chars):
            if char not in _CHAR_TO_CELL:
                raise ValueError(f"Unknown cell character: {char!r}")
            board._cells[index] = _CHAR_TO_CELL[char]
        return board

    @staticmethod
    def to_index(row: int, col: int) -> int:
        """Convert (row, col) to a flat index."""
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IndexError(f"Invalid position ({row}, {col}). Must be 0-2.")
        return row * BOARD_SIZE + col

    @staticmethod
    def to_row_col(index: int) -> Tuple[int, int]:
        """Convert a flat index to (row, col)."""
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"Invalid index {index}. Must be 0-8.")
        return divmod(index, BOARD_SIZE)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the 9 cell values."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def reset(self):
        """Set every cell back to empty."""
        self._cells.fill(EMPTY)

    def get(self, index: int) -> Optional[Player]:
        """
        Get the mark at a flat index.

        Returns:
            The Player occupying the cell, or None if empty.
        """
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"Invalid index {index}. Must be 0-8.")
        value = int(self._cells[index])
        return None if value == EMPTY else Player(value)

    def cell(self, row: int, col: int) -> Optional[Player]:
        """Get the mark at (row, col)."""
        return self.get(self.to_index(row, col))

    def is_legal(self, index) -> bool:
        """True if index is 0-8 and that cell is empty."""
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            return False
        return 0 <= index < CELL_COUNT and bool(self._cells[index] == EMPTY)

    def place(self, index: int, player: Player):
        """
        Put a player's mark on an empty cell.

        Args:
            index: Flat index (0-8).
            player: The mark to place.

        Raises:
            IllegalMoveError: If the cell is out of range or occupied.
        """
        if not self.is_legal(index):
            raise IllegalMoveError(f"Cell {index} is not a legal move")
        self._cells[index] = player.value

    def _clear(self, index: int):
        self._cells[index] = EMPTY

    @contextmanager
    def tentative(self, index: int, player: Player) -> Iterator["Board"]:
        """
        Place a mark for the duration of a with-block, then remove it.

        The cell is cleared on exit even if the block raises.
        """
        self.place(index, player)
        try:
            yield self
        finally:
            self._clear(index)

    def is_full(self) -> bool:
        """True if no empty cell remains."""
        return not np.any(self._cells == EMPTY)

    def empty_indices(self) -> List[int]:
        """Flat indices of the empty cells, ascending."""
        return np.flatnonzero(self._cells == EMPTY).tolist()

    def count(self, player: Player) -> int:
        """How many marks a player has on the board."""
        return int(np.count_nonzero(self._cells == player.value))

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._cells[:] = self._cells
        return new_board

    def snapshot(self) -> Tuple[int, ...]:
        """The cell values as a plain tuple."""
        return tuple(int(v) for v in self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __str__(self) -> str:
        symbols = {EMPTY: ".", Player.X.value: "X", Player.O.value: "O"}
        rows = []
        for row in range(BOARD_SIZE):
            start = row * BOARD_SIZE
            rows.append("".join(symbols[int(v)] for v in self._cells[start:start + BOARD_SIZE]))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board({' '.join(str(self).splitlines())!r})"
