"""
Arena for comparing play modes.

Every play mode plays the same sequence of seeded games against the
random environment, and per-mode statistics are accumulated.
"""
import logging
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import List, Dict, Optional, Any, Callable

import numpy as np

from tilegame.ai.agents import Player, RandomEnvironment
from tilegame.ai.strategies import STRATEGIES
from tilegame.core.board import FIBONACCI
from tilegame.core.game import Game, play_episode

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a single game."""
    play_mode: str
    score: int
    turns: int
    max_tile: int
    seed: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class StrategyStats:
    """Accumulated statistics for a play mode."""
    play_mode: str
    games_played: int = 0
    total_score: int = 0
    max_score: int = 0
    min_score: Optional[int] = None
    total_turns: int = 0
    max_tile_ever: int = 0
    scores: List[int] = field(default_factory=list)

    @property
    def avg_score(self) -> float:
        return self.total_score / self.games_played if self.games_played else 0

    @property
    def avg_turns(self) -> float:
        return self.total_turns / self.games_played if self.games_played else 0

    @property
    def score_std(self) -> float:
        return float(np.std(self.scores)) if self.scores else 0

    def record(self, result: GameResult):
        self.games_played += 1
        self.total_score += result.score
        self.scores.append(result.score)
        self.max_score = max(self.max_score, result.score)
        self.min_score = result.score if self.min_score is None else min(self.min_score, result.score)
        self.total_turns += result.turns
        self.max_tile_ever = max(self.max_tile_ever, result.max_tile)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'play_mode': self.play_mode,
            'games_played': self.games_played,
            'avg_score': self.avg_score,
            'max_score': self.max_score,
            'min_score': self.min_score or 0,
            'score_std': self.score_std,
            'avg_turns': self.avg_turns,
            'max_tile_ever': self.max_tile_ever,
        }


class Arena:
    """
    The Arena runs complete episodes for each play mode.

    Supports:
    - Single game runs
    - Benchmarks over many seeded games
    """

    def __init__(self, seed: Optional[int] = None, depth: Optional[int] = None):
        self.base_seed = seed if seed is not None else int(datetime.now().timestamp())
        self.depth = depth
        self.stats: Dict[str, StrategyStats] = {}

    def make_player(self, play_mode: str, seed: int) -> Player:
        args = f"play={play_mode} seed={seed}"
        if self.depth is not None:
            args += f" depth={self.depth}"
        return Player(args)

    def run_game(
        self,
        play_mode: str,
        seed: Optional[int] = None,
        max_turns: Optional[int] = None
    ) -> GameResult:
        """
        Run a single game with a play mode.

        The environment is seeded with the game seed, so two play modes
        given the same seed face the same tile stream for as long as
        their boards agree.
        """
        game_seed = seed if seed is not None else self.base_seed
        player = self.make_player(play_mode, game_seed)
        environment = RandomEnvironment(f"seed={game_seed}")

        game: Game = play_episode(player, environment, max_turns=max_turns)
        logger.debug("%s seed=%d score=%d turns=%d", play_mode, game_seed,
                     game.get_score(), game.turn_count)

        return GameResult(
            play_mode=play_mode,
            score=game.get_score(),
            turns=game.turn_count,
            max_tile=FIBONACCI[game.get_max_tile()],
            seed=game_seed
        )

    def run_benchmark(
        self,
        play_modes: Optional[List[str]] = None,
        num_games: int = 10,
        max_turns: Optional[int] = None,
        callback: Optional[Callable] = None
    ) -> Dict[str, StrategyStats]:
        """
        Run num_games seeded games for each play mode.

        Args:
            play_modes: Modes to compare (default: every registered strategy)
            num_games: Games per mode
            max_turns: Optional cap on player moves per game
            callback: Optional callback(play_mode, game_index, result)

        Returns:
            Dict mapping play mode to its StrategyStats
        """
        play_modes = play_modes or list(STRATEGIES)
        for mode in play_modes:
            if mode not in STRATEGIES:
                available = ", ".join(STRATEGIES.keys())
                raise ValueError(f"Unknown strategy: {mode}. Available: {available}")

        for mode in play_modes:
            stats = self.stats.setdefault(mode, StrategyStats(play_mode=mode))
            for i in range(num_games):
                result = self.run_game(mode, seed=self.base_seed + i, max_turns=max_turns)
                stats.record(result)
                if callback:
                    callback(mode, i, result)

        return {mode: self.stats[mode] for mode in play_modes}

    def get_leaderboard(self) -> List[Dict[str, Any]]:
        """Get play modes ranked by average score."""
        rankings = [stats.to_dict() for stats in self.stats.values()]
        rankings.sort(key=lambda x: x['avg_score'], reverse=True)
        for i, r in enumerate(rankings):
            r['rank'] = i + 1
        return rankings
