"""
Simple one-ply strategies for the 2584 puzzle.

These serve as baselines for the search-based heuristic strategy.
"""
from typing import Optional

from .base import Strategy, StrategyInfo
from tilegame.core.action import Slide
from tilegame.core.board import Board, Direction


class RandomStrategy(Strategy):
    """Baseline: makes a uniformly random legal slide."""

    INFO = StrategyInfo(
        id="random",
        name="Random",
        short_desc="Uniformly random legal slide",
        algorithm="Shuffles the four directions and plays the first one whose "
                  "simulated slide changes the board. Every legal direction is "
                  "equally likely regardless of the opcode order.",
        complexity="O(4) simulations per turn",
        category="Baseline"
    )

    def select_move(self, board: Board) -> Optional[Slide]:
        directions = list(Direction)
        self.rng.shuffle(directions)
        for direction in directions:
            if board.copy().slide(direction) != Board.INVALID:
                self.move_explanations.append(f"Random: {direction.name}")
                return Slide(direction)
        return None


class GreedyStrategy(Strategy):
    """Maximizes the immediate merge reward each turn."""

    INFO = StrategyInfo(
        id="greedy",
        name="Greedy",
        short_desc="Maximizes immediate reward per slide",
        algorithm="Simulates each direction and keeps the legal one with the highest "
                  "merge reward. Ties go to the later direction in opcode order. Does "
                  "not look past the current slide.",
        complexity="O(4) simulations per turn",
        category="Greedy"
    )

    def select_move(self, board: Board) -> Optional[Slide]:
        return self._pick_best(self.get_move_scores(board))
