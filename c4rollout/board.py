"""Fixed 7x6 Connect-4 board with gravity drops and win/draw detection."""

from __future__ import annotations

import enum
from typing import Iterable, List, Optional

import numpy as np

COLUMNS = 7
LEVELS = 6
CONNECT = 4

# (dcol, dlevel): horizontal, vertical, diagonal up-right, diagonal up-left.
DIRECTIONS = ((1, 0), (0, 1), (1, 1), (-1, 1))


class Circle(enum.IntEnum):
    INVALID = -1
    EMPTY = 0
    YELLOW = 1
    RED = 2
    DRAW = 3  # outcome code only, never stored in a cell


def opponent(player: Circle) -> Circle:
    if player == Circle.YELLOW:
        return Circle.RED
    if player == Circle.RED:
        return Circle.YELLOW
    raise ValueError(f"not a player color: {player!r}")


# Cell lookup by stored int value; only these three are ever stored.
_CELLS = (Circle.EMPTY, Circle.YELLOW, Circle.RED)


def line_through(grid: List[List[int]], col: int, level: int, color: int) -> bool:
    """
    True if `color` at grid[level][col] lies on a line of CONNECT or more.

    `grid` is Board.cells.tolist(), indexed grid[level][col].
    """

    for dc, dl in DIRECTIONS:
        total = 1
        for sign in (1, -1):
            c, l = col + sign * dc, level + sign * dl
            while 0 <= c < COLUMNS and 0 <= l < LEVELS and grid[l][c] == color:
                total += 1
                c += sign * dc
                l += sign * dl
        if total >= CONNECT:
            return True
    return False


class Board:
    """
    Grid of COLUMNS x LEVELS cells.

    cells[level, col] holds a Circle value; level 0 is the bottom row. Every
    accessor takes (col, level) in that order.
    """

    def __init__(self, cells: Optional[np.ndarray] = None) -> None:
        if cells is None:
            self.cells = np.zeros((LEVELS, COLUMNS), dtype=np.int8)
        else:
            cells = np.asarray(cells, dtype=np.int8)
            if cells.shape != (LEVELS, COLUMNS):
                raise ValueError(f"cells must have shape {(LEVELS, COLUMNS)}, got {cells.shape}")
            if not np.isin(cells, [c.value for c in _CELLS]).all():
                raise ValueError("cells may only hold EMPTY, YELLOW or RED")
            self.cells = cells.copy()

    @classmethod
    def from_moves(cls, moves: Iterable[int], first: Circle = Circle.RED) -> "Board":
        """Replay a sequence of column drops, alternating colors starting with `first`."""
        board = cls()
        player = first
        for i, col in enumerate(moves):
            if col < 0 or col >= COLUMNS:
                raise ValueError(f"move {i}: column {col} out of range")
            if not board.drop(col, player):
                raise ValueError(f"move {i}: column {col} is full")
            player = opponent(player)
        return board

    def get(self, col: int, level: int) -> Circle:
        if col < 0 or col >= COLUMNS or level < 0 or level >= LEVELS:
            return Circle.INVALID
        return _CELLS[self.cells[level, col]]

    def set(self, col: int, level: int, value: Circle) -> None:
        if col < 0 or col >= COLUMNS or level < 0 or level >= LEVELS:
            return
        if value not in _CELLS:
            raise ValueError(f"not a cell value: {value!r}")
        self.cells[level, col] = int(value)

    def clean(self) -> None:
        self.cells.fill(int(Circle.EMPTY))

    def copy(self) -> "Board":
        return Board(self.cells)

    def copy_from(self, other: "Board") -> None:
        np.copyto(self.cells, other.cells)

    def column_is_full(self, col: int) -> bool:
        return self.get(col, LEVELS - 1) != Circle.EMPTY

    def drop(self, col: int, value: Circle) -> bool:
        if self.column_is_full(col):
            return False
        for level in range(LEVELS):
            if self.get(col, level) == Circle.EMPTY:
                self.set(col, level, value)
                return True
        return False

    def level_of(self, col: int) -> int:
        """Number of pieces in `col`, i.e. the level the next drop lands on. Off-board columns read full."""
        if col < 0 or col >= COLUMNS:
            return LEVELS
        return int(np.count_nonzero(self.cells[:, col]))

    def legal_columns(self) -> List[int]:
        return [col for col in range(COLUMNS) if not self.column_is_full(col)]

    def pieces(self) -> int:
        return int(np.count_nonzero(self.cells))

    def wins_through(self, col: int, level: int) -> bool:
        """True if the piece at (col, level) lies on a line of CONNECT or more."""
        color = self.get(col, level)
        if color in (Circle.EMPTY, Circle.INVALID):
            return False
        return line_through(self.cells.tolist(), col, level, int(color))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Board(pieces={self.pieces()})"


def get_winner(board: Board) -> Circle:
    """
    Scan the whole board for a line of four.

    For each occupied cell and direction, walk backward to the start of the run
    (off-board probes read INVALID and stop the walk), then count forward.
    Returns the winning color, DRAW on a full board without a line, or EMPTY
    while the game is still in progress.
    """

    for level in range(LEVELS):
        for col in range(COLUMNS):
            color = board.get(col, level)
            if color == Circle.EMPTY:
                continue

            for dc, dl in DIRECTIONS:
                c, l = col, level
                while board.get(c - dc, l - dl) == color:
                    c -= dc
                    l -= dl

                count = 0
                while board.get(c, l) == color:
                    count += 1
                    c += dc
                    l += dl
                if count >= CONNECT:
                    return color

    if not np.any(board.cells == int(Circle.EMPTY)):
        return Circle.DRAW
    return Circle.EMPTY
