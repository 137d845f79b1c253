"""
Board evaluation used at the leaves of the heuristic search.

The score rewards tiles arranged in strictly monotonic chains along a
scoring line, checked under all four rotations of the board, plus a bonus
for every empty cell.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from tilegame.core.board import Board

CORNERS = (0, 3, 12, 15)


@dataclass
class EvaluationConfig:
    """Configuration for board evaluation."""
    # Scoring lines, as row-major positions; each is checked in 4 rotations
    tuples: Tuple[Tuple[int, ...], ...] = field(default_factory=lambda: ((0, 1, 2, 3),))

    # Points per empty cell
    space_weight: int = 5

    # Multiplier for the max-tile-in-corner bonus (off by default)
    corner_weight: int = 0


DEFAULT_EVALUATION = EvaluationConfig()


class BoardEvaluator:
    """
    Scores a board position.

    Evaluation:
    - For each scoring line and each rotation, the Fibonacci values of
      positions 1..3 count only when the whole line is strictly increasing
      or strictly decreasing; two equal neighbours (empty cells included)
      void the line
    - +space_weight per empty cell
    - +corner_weight * max tile level when the max tile sits in a corner
    """

    ROTATIONS = 4

    def __init__(self, config: Optional[EvaluationConfig] = None):
        self.config = config or DEFAULT_EVALUATION

    def evaluate(self, board: Board) -> int:
        """Evaluate a board without modifying it."""
        work = board.copy()
        score = 0
        for line in self.config.tuples:
            for _ in range(self.ROTATIONS):
                score += self.line_score(work, line)
                work.rotate_left()

        score += self.space_score(work)
        if self.config.corner_weight:
            score += self.config.corner_weight * self.max_tile_corner_score(work)
        return score

    @staticmethod
    def line_score(board: Board, line: Tuple[int, ...]) -> int:
        """Score one line if it is strictly monotonic, else 0."""
        decreasing = increasing = True
        score = 0
        for prev, pos in zip(line, line[1:]):
            if board[pos] == board[prev]:
                return 0
            score += Board.level_to_score(board[pos])
            if board[pos] > board[prev]:
                decreasing = False
            else:
                increasing = False
        return score if decreasing or increasing else 0

    def space_score(self, board: Board) -> int:
        return board.get_empty_cells() * self.config.space_weight

    @staticmethod
    def max_tile_corner_score(board: Board) -> int:
        """Return the max tile level if its first occurrence is in a corner."""
        max_tile, max_pos = 0, -1
        for pos in range(Board.CELLS):
            if board[pos] > max_tile:
                max_tile, max_pos = board[pos], pos
        return max_tile if max_pos in CORNERS else 0
