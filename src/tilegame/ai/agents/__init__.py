from .base import Agent, RandomAgent
from .environment import RandomEnvironment
from .player import Player

__all__ = ["Agent", "RandomAgent", "RandomEnvironment", "Player"]
