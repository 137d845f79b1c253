"""
Random environment - adds a new tile to an empty cell after each slide.

Tile odds:
- level 1 (value 1): 90%
- level 2 (value 2): 10%
"""
from typing import Optional

import numpy as np

from .base import RandomAgent
from tilegame.core.action import Place
from tilegame.core.board import Board


class RandomEnvironment(RandomAgent):
    """Environment that drops a random tile on a random empty cell."""

    LOW_TILE = 1
    HIGH_TILE = 2

    # One draw over POPUP_RANGE outcomes; only the last one gives HIGH_TILE
    POPUP_RANGE = 10

    def __init__(self, args: str = ""):
        super().__init__("name=random role=environment " + args)
        self.space = np.arange(Board.CELLS)

    def take_action(self, board: Board) -> Optional[Place]:
        """Place a tile on the first empty cell of a shuffled scan."""
        self.rng.shuffle(self.space)
        for pos in self.space:
            if board[pos] != 0:
                continue
            popup = self.rng.integers(self.POPUP_RANGE)
            tile = self.HIGH_TILE if popup == self.POPUP_RANGE - 1 else self.LOW_TILE
            return Place(int(pos), tile)
        return None
