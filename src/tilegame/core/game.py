"""
Episode logic for the 2584 puzzle: a player and an environment take turns
on one board until either of them runs out of moves.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from .action import Action, Slide
from .board import Board, FIBONACCI

if TYPE_CHECKING:
    from tilegame.ai.agents.base import Agent

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Result of applying an action."""
    success: bool
    reward: int
    game_over: bool
    error: Optional[str] = None


class Game:
    """
    Game controller for a single episode.

    The game works as follows:
    1. The environment places two opening tiles
    2. The player slides, then the environment places one tile, and so on
    3. The slide rewards add up to the score
    4. The game ends when an agent has no action or an action is rejected
    """

    OPENING_TILES = 2

    def __init__(self, board: Optional[Board] = None):
        self.board = board.copy() if board is not None else Board()
        self.score = 0
        self.turn_count = 0
        self.placements = 0
        self.game_over = False

    def apply(self, action: Optional[Action]) -> MoveResult:
        """
        Apply an action to the board.

        A missing or rejected action ends the game instead of raising.
        """
        if self.game_over:
            return MoveResult(success=False, reward=0, game_over=True,
                              error="Game is already over")

        if action is None:
            self.game_over = True
            return MoveResult(success=False, reward=0, game_over=True,
                              error="No action available")

        reward = action.apply(self.board)
        if reward == Board.INVALID:
            self.game_over = True
            return MoveResult(success=False, reward=0, game_over=True,
                              error=f"Illegal action: {action}")

        if isinstance(action, Slide):
            self.score += reward
            self.turn_count += 1
        else:
            self.placements += 1

        return MoveResult(success=True, reward=reward, game_over=False)

    def get_score(self) -> int:
        return self.score

    def get_max_tile(self) -> int:
        return self.board.max_tile()

    def is_game_over(self) -> bool:
        return self.game_over

    def get_state(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            'grid': self.board.grid.tolist(),
            'score': self.score,
            'turn_count': self.turn_count,
            'max_tile': FIBONACCI[self.get_max_tile()],
            'game_over': self.game_over,
        }

    def __str__(self) -> str:
        lines = [
            f"Turn: {self.turn_count}  Score: {self.score}",
            "",
            str(self.board),
        ]
        if self.game_over:
            lines.append("\n*** GAME OVER ***")
        return "\n".join(lines)


def play_episode(
    player: Agent,
    environment: Agent,
    max_turns: Optional[int] = None,
    verbose: bool = False
) -> Game:
    """
    Play a complete episode between a player and an environment.

    Args:
        player: Agent that answers with slides
        environment: Agent that answers with tile placements
        max_turns: Stop after this many player moves (None = until game over)
        verbose: If True, print the board after each player move

    Returns:
        The finished Game
    """
    game = Game()
    player.open_episode()
    environment.open_episode()

    step = 0
    while not game.is_game_over():
        if max_turns is not None and game.turn_count >= max_turns:
            break

        who = environment if step < Game.OPENING_TILES or step % 2 else player
        step += 1

        action = who.take_action(game.board)
        result = game.apply(action)
        if not result.success:
            logger.debug("%s ended the episode: %s", who.name(), result.error)
            break

        if verbose and who is player:
            print(f"\n{action}  +{result.reward}")
            print(game)

        if who.check_for_win(game.board):
            logger.debug("%s won after %d turns", who.name(), game.turn_count)
            game.game_over = True

    player.close_episode()
    environment.close_episode()
    return game
