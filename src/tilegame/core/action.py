"""
Actions that agents hand back to the game.

A player answers with a Slide, the environment with a Place. An agent
that has no legal action returns None.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .board import Board, Direction


class Action(ABC):
    """An immutable move that can be applied to a board."""

    @abstractmethod
    def apply(self, board: Board) -> int:
        """
        Apply the action to the board in place.

        Returns:
            The reward earned, or Board.INVALID if the board rejected it.
        """
        pass


@dataclass(frozen=True)
class Slide(Action):
    """Slide every tile in one direction."""
    direction: Direction

    def __post_init__(self):
        object.__setattr__(self, "direction", Direction(self.direction))

    def apply(self, board: Board) -> int:
        return board.slide(self.direction)

    def __str__(self) -> str:
        return f"#{self.direction.name[0]}"


@dataclass(frozen=True)
class Place(Action):
    """Put a new tile of the given level on an empty cell."""
    position: int
    tile: int

    def apply(self, board: Board) -> int:
        return board.place(self.position, self.tile)

    def __str__(self) -> str:
        return f"{self.position:X}{Board.level_to_score(self.tile)}"
