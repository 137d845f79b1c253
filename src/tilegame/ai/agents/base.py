"""
Base agent interface for the 2584 puzzle.

Every agent carries a small property store parsed from a string of
``key=value`` pairs, e.g. ``"name=greedy seed=7 play=greedy"``.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np

from tilegame.core.action import Action
from tilegame.core.board import Board

logger = logging.getLogger(__name__)


def parse_properties(args: str) -> Dict[str, str]:
    """
    Parse whitespace-separated ``key=value`` pairs.

    Later pairs override earlier ones.

    Raises:
        ValueError: If a pair has no '='
    """
    meta: Dict[str, str] = {}
    for pair in args.split():
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Malformed property '{pair}', expected key=value")
        meta[key] = value
    return meta


class Agent:
    """
    Base class for players and environments.

    An agent receives a board and returns the action to make, or None
    when it has nothing legal to do.
    """

    def __init__(self, args: str = ""):
        self.meta = parse_properties("name=unknown role=unknown " + args)

    def open_episode(self, flag: str = ""):
        """Called at the start of each episode."""
        pass

    def close_episode(self, flag: str = ""):
        """Called at the end of each episode."""
        pass

    def take_action(self, board: Board) -> Optional[Action]:
        return None

    def check_for_win(self, board: Board) -> bool:
        return False

    def property(self, key: str) -> str:
        """
        Look up a property.

        Raises:
            KeyError: If the property was never set
        """
        if key not in self.meta:
            raise KeyError(f"Agent has no property '{key}'")
        return self.meta[key]

    def numeric_property(self, key: str) -> float:
        """
        Look up a property and parse it as a number.

        Raises:
            KeyError: If the property was never set
            ValueError: If the value is not numeric
        """
        value = self.property(key)
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"Property '{key}' is not numeric: '{value}'") from None

    def notify(self, msg: str):
        """Insert or update a single ``key=value`` property."""
        self.meta.update(parse_properties(msg))
        logger.debug("%s notified: %s", self.name(), msg)

    def name(self) -> str:
        return self.property("name")

    def role(self) -> str:
        return self.property("role")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name()}, role={self.role()})"


class RandomAgent(Agent):
    """
    Base for agents that need randomness.

    The generator is seeded from the ``seed`` property when present and is
    otherwise left unseeded.
    """

    def __init__(self, args: str = ""):
        super().__init__(args)
        seed = int(self.numeric_property("seed")) if "seed" in self.meta else None
        self.rng = np.random.default_rng(seed)
