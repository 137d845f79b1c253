"""
Search-based strategies for the 2584 puzzle.

The heuristic strategy looks ahead over the player's own slides only;
the environment's tile placements are never simulated.
"""
import logging
from typing import Optional, Tuple

import numpy as np

from .base import Strategy, StrategyInfo
from .evaluation import BoardEvaluator
from tilegame.core.action import Slide
from tilegame.core.board import Board, Direction

logger = logging.getLogger(__name__)


class HeuristicStrategy(Strategy):
    """Depth-limited search over the player's slides with board evaluation."""

    INFO = StrategyInfo(
        id="heuristic",
        name="Heuristic",
        short_desc="Lookahead search with monotonic-line evaluation",
        algorithm="For each legal slide, adds its reward to the best score reachable by "
                  "further slides up to the search depth. Leaves are scored by the "
                  "evaluator: monotonic-line score over 4 rotations + 5 per empty cell. "
                  "Illegal branches score 0. Tile spawns are not modeled.",
        complexity="O(4^(depth+1)) simulations per turn",
        category="Search-Based"
    )

    USES_DEPTH = True
    DEFAULT_DEPTH = 1

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        depth: int = DEFAULT_DEPTH,
        evaluator: Optional[BoardEvaluator] = None,
    ):
        super().__init__(rng)
        if depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {depth}")
        self.depth = depth
        self.evaluator = evaluator or BoardEvaluator()

    def select_move(self, board: Board) -> Optional[Slide]:
        move = self._pick_best(self.get_move_scores(board))
        if move is None:
            logger.debug("No legal slide on %r", board)
        return move

    def _evaluate_move(self, board: Board, direction: Direction) -> Optional[Tuple[int, str]]:
        after = board.copy()
        reward = after.slide(direction)
        if reward == Board.INVALID:
            return None

        critic = self.tree_search(after, self.depth)
        return reward + critic, f"+{reward} | lookahead:{critic}"

    def tree_search(self, board: Board, depth: int) -> int:
        """
        Best total reward reachable from this board.

        At depth 0 the board is scored by the evaluator. Otherwise every
        direction is tried on a copy; an illegal direction counts as 0, so a
        stuck board scores 0 rather than failing.
        """
        if depth <= 0:
            return self.evaluator.evaluate(board)

        best_score = 0
        for direction in Direction:
            after = board.copy()
            reward = after.slide(direction)
            score = 0
            if reward != Board.INVALID:
                score = reward + self.tree_search(after, depth - 1)
            best_score = max(best_score, score)
        return best_score
