"""
Board representation for the 2584 Fibonacci sliding-tile puzzle.
"""
from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np


def _fibonacci_table(length: int) -> Tuple[int, ...]:
    table = [0, 1, 2]
    while len(table) < length:
        table.append(table[-1] + table[-2])
    return tuple(table)


# Tile value for each level: level 0 is an empty cell.
FIBONACCI: Tuple[int, ...] = _fibonacci_table(32)


class Direction(IntEnum):
    """Slide directions, in canonical opcode order."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class Board:
    """
    4x4 game board for the 2584 puzzle.

    The board uses a numpy array of tile levels where:
    - 0 = empty cell
    - n = tile worth FIBONACCI[n]

    Cells are addressed either by (row, col) on ``grid`` or by the
    row-major position 0..15 through ``board[pos]``.
    """

    SIZE = 4
    CELLS = SIZE * SIZE

    # Returned by slide/place when the action changes nothing
    INVALID = -1

    def __init__(self, grid: Optional[np.ndarray] = None):
        """Initialize the board, optionally from an existing grid."""
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (self.SIZE, self.SIZE):
                raise ValueError(f"Grid must be {self.SIZE}x{self.SIZE}")
            if grid.min() < 0 or grid.max() >= len(FIBONACCI):
                raise ValueError(f"Tile levels must be in 0..{len(FIBONACCI) - 1}")
            self.grid = grid.astype(np.int8)
        else:
            self.grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)

    def copy(self) -> Board:
        """Create a deep copy of the board."""
        return Board(self.grid.copy())

    def __getitem__(self, pos: int) -> int:
        return int(self.grid[pos // self.SIZE, pos % self.SIZE])

    def __setitem__(self, pos: int, level: int):
        self.grid[pos // self.SIZE, pos % self.SIZE] = level

    @staticmethod
    def level_to_score(level: int) -> int:
        """Map a tile level to its Fibonacci value."""
        return FIBONACCI[level]

    @staticmethod
    def can_merge(a: int, b: int) -> bool:
        """
        Two tiles merge when their levels are consecutive, or both are 1.
        A merge past the highest level in FIBONACCI is not allowed.
        """
        if max(a, b) + 1 >= len(FIBONACCI):
            return False
        return (a == 1 and b == 1) or abs(a - b) == 1

    def place(self, pos: int, tile: int) -> int:
        """
        Place a new tile on an empty cell.

        Args:
            pos: Row-major position 0..15
            tile: Tile level, 1 or 2

        Returns:
            0 on success, INVALID if the position or tile is not allowed
        """
        if not 0 <= pos < self.CELLS:
            return self.INVALID
        if tile not in (1, 2):
            return self.INVALID
        if self[pos] != 0:
            return self.INVALID
        self[pos] = tile
        return 0

    def slide(self, direction: int) -> int:
        """
        Slide all tiles in the given direction, merging where allowed.

        Returns:
            The reward (sum of merged tile values), or INVALID if nothing moved.
            An invalid slide leaves the board untouched.
        """
        direction = Direction(direction)
        if direction == Direction.UP:
            return self.slide_up()
        if direction == Direction.RIGHT:
            return self.slide_right()
        if direction == Direction.DOWN:
            return self.slide_down()
        return self.slide_left()

    def slide_left(self) -> int:
        rows = []
        reward = 0
        for row in self.grid.tolist():
            merged, row_reward = self._slide_row_left(row)
            rows.append(merged)
            reward += row_reward

        after = np.array(rows, dtype=np.int8)
        if np.array_equal(after, self.grid):
            return self.INVALID
        self.grid = after
        return reward

    def slide_right(self) -> int:
        self.reflect_horizontal()
        reward = self.slide_left()
        self.reflect_horizontal()
        return reward

    def slide_up(self) -> int:
        self.transpose()
        reward = self.slide_left()
        self.transpose()
        return reward

    def slide_down(self) -> int:
        self.transpose()
        reward = self.slide_right()
        self.transpose()
        return reward

    @classmethod
    def _slide_row_left(cls, row: List[int]) -> Tuple[List[int], int]:
        """Shift one row to the left; each tile merges at most once."""
        packed = []
        reward = 0
        hold = 0
        for tile in row:
            if tile == 0:
                continue
            if not hold:
                hold = tile
            elif cls.can_merge(tile, hold):
                level = max(tile, hold) + 1
                packed.append(level)
                reward += FIBONACCI[level]
                hold = 0
            else:
                packed.append(hold)
                hold = tile
        if hold:
            packed.append(hold)
        return packed + [0] * (cls.SIZE - len(packed)), reward

    def rotate_left(self):
        """Rotate the board 90 degrees counterclockwise, in place."""
        self.grid = np.ascontiguousarray(np.rot90(self.grid, 1))

    def rotate_right(self):
        """Rotate the board 90 degrees clockwise, in place."""
        self.grid = np.ascontiguousarray(np.rot90(self.grid, -1))

    def reflect_horizontal(self):
        self.grid = np.ascontiguousarray(self.grid[:, ::-1])

    def transpose(self):
        self.grid = np.ascontiguousarray(self.grid.T)

    def empty_positions(self) -> List[int]:
        """Return the row-major positions of all empty cells."""
        return [int(p) for p in np.flatnonzero(self.grid == 0)]

    def get_empty_cells(self) -> int:
        """Return the count of empty cells."""
        return int(np.sum(self.grid == 0))

    def max_tile(self) -> int:
        """Return the highest tile level on the board."""
        return int(self.grid.max())

    def to_array(self) -> np.ndarray:
        """Return a copy of the grid as a numpy array."""
        return self.grid.copy()

    def __str__(self) -> str:
        """Return the board with tile values rather than levels."""
        width = max(len(str(FIBONACCI[self.max_tile()])), 1)
        border = "+" + "-" * ((width + 1) * self.SIZE + 1) + "+"
        lines = [border]
        for row in self.grid:
            cells = (str(FIBONACCI[cell]) if cell else "." for cell in row)
            lines.append("| " + " ".join(c.rjust(width) for c in cells) + " |")
        lines.append(border)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(empty={self.get_empty_cells()}/{self.CELLS})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.grid.tobytes())
