from .board import Board, Direction, FIBONACCI
from .action import Action, Slide, Place
from .game import Game, MoveResult, play_episode

__all__ = [
    "Board", "Direction", "FIBONACCI",
    "Action", "Slide", "Place",
    "Game", "MoveResult", "play_episode",
]
