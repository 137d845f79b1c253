"""
Player agent - slides tiles using the strategy named by its ``play`` property.
"""
import logging
from typing import Optional

from .base import RandomAgent
from tilegame.ai.strategies import get_strategy
from tilegame.core.action import Slide
from tilegame.core.board import Board

logger = logging.getLogger(__name__)


class Player(RandomAgent):
    """
    Player that picks a legal slide.

    Properties:
        play: random (default), greedy or heuristic
        depth: extra plies searched by the heuristic strategy (default 1)
        seed: seed for the random generator
    """

    DEFAULT_PLAY = "random"

    def __init__(self, args: str = ""):
        super().__init__("name=dummy role=player " + args)
        self.play_type = self.meta.get("play", self.DEFAULT_PLAY)

        depth = None
        if "depth" in self.meta:
            value = self.numeric_property("depth")
            if not value.is_integer():
                raise ValueError(f"Property 'depth' must be a whole number: '{self.meta['depth']}'")
            depth = int(value)

        self.strategy = get_strategy(self.play_type, rng=self.rng, depth=depth)
        logger.debug("%s plays %s", self.name(), self.strategy.INFO.name)

    def open_episode(self, flag: str = ""):
        self.strategy.reset()

    def take_action(self, board: Board) -> Optional[Slide]:
        """Return a legal slide, or None when the board is stuck."""
        return self.strategy.select_move(board)
