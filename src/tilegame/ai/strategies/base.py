"""
Base strategy class for 2584 move selection.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, List, Tuple, Dict, Any

import numpy as np

from tilegame.core.action import Slide
from tilegame.core.board import Board, Direction


@dataclass
class StrategyInfo:
    """Metadata about a strategy for display and comparison."""
    id: str
    name: str
    short_desc: str   # One-line summary
    algorithm: str    # Technical description of the algorithm
    complexity: str   # "O(1)", "O(4^d)", etc.
    category: str     # "Baseline", "Greedy", "Search-Based"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'short_desc': self.short_desc,
            'algorithm': self.algorithm,
            'complexity': self.complexity,
            'category': self.category,
        }


class Strategy(ABC):
    """
    Abstract base class for all move-selection strategies.

    A strategy looks at a board and returns the Slide to make, or None
    when no direction changes the board. It never mutates the board it
    is given; every trial move runs on a copy.
    """

    # Override this in subclasses
    INFO: StrategyInfo = StrategyInfo(
        id="base",
        name="Base Strategy",
        short_desc="Abstract base class",
        algorithm="Override this in subclasses",
        complexity="N/A",
        category="N/A"
    )

    # True when the constructor takes a search depth
    USES_DEPTH: bool = False

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Args:
            rng: Random generator to draw from. Agents pass their own so
                that every draw comes from one seeded stream.
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.move_explanations: List[str] = []

    @abstractmethod
    def select_move(self, board: Board) -> Optional[Slide]:
        """
        Select a move according to this strategy.

        Args:
            board: Current board (left unchanged)

        Returns:
            The selected slide, or None if no direction is legal
        """
        pass

    def get_move_scores(self, board: Board) -> List[Tuple[Slide, int, str]]:
        """
        Score every legal direction and explain each score.

        Returns:
            List of (slide, score, explanation) tuples in direction order.
            Illegal directions are left out.
        """
        scored = []
        for direction in Direction:
            evaluated = self._evaluate_move(board, direction)
            if evaluated is None:
                continue
            score, explanation = evaluated
            scored.append((Slide(direction), score, explanation))
        return scored

    def _evaluate_move(self, board: Board, direction: Direction) -> Optional[Tuple[int, str]]:
        """
        Evaluate a single direction. Override in subclasses.

        Returns:
            (score, explanation), or None if the slide is illegal
        """
        reward = board.copy().slide(direction)
        if reward == Board.INVALID:
            return None
        return reward, f"+{reward}"

    def _pick_best(self, scored: List[Tuple[Slide, int, str]]) -> Optional[Slide]:
        """Return the highest-scoring slide; on a tie the later direction wins."""
        best = None
        for move, score, explanation in scored:
            if best is None or score >= best[1]:
                best = (move, score, explanation)

        if best is None:
            return None
        self.move_explanations.append(f"{best[0]}: {best[2]}")
        return best[0]

    def explain_last_move(self) -> str:
        """Get explanation for the last move made."""
        if self.move_explanations:
            return self.move_explanations[-1]
        return "No moves made yet"

    def reset(self):
        """Reset strategy state for a new game."""
        self.move_explanations = []

    @classmethod
    def get_info(cls) -> StrategyInfo:
        """Get strategy metadata."""
        return cls.INFO
