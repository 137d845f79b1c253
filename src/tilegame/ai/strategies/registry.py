"""
Strategy registry - central place to access all available strategies.
"""
from typing import Dict, List, Optional, Type

import numpy as np

from .base import Strategy, StrategyInfo
from .simple_strategies import RandomStrategy, GreedyStrategy
from .search_strategies import HeuristicStrategy


# Registry of all available strategies, keyed by play mode
STRATEGIES: Dict[str, Type[Strategy]] = {
    'random': RandomStrategy,
    'greedy': GreedyStrategy,
    'heuristic': HeuristicStrategy,
}


def get_strategy(
    strategy_id: str,
    rng: Optional[np.random.Generator] = None,
    depth: Optional[int] = None
) -> Strategy:
    """
    Get a strategy instance by ID.

    Args:
        strategy_id: The strategy identifier
        rng: Random generator shared with the owning agent
        depth: Search depth; only search-based strategies use it

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy_id is not found
    """
    if strategy_id not in STRATEGIES:
        available = ", ".join(STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {strategy_id}. Available: {available}")

    strategy_cls = STRATEGIES[strategy_id]
    if depth is not None and strategy_cls.USES_DEPTH:
        return strategy_cls(rng=rng, depth=depth)
    return strategy_cls(rng=rng)


def list_strategies() -> List[StrategyInfo]:
    """
    Get info about all available strategies.

    Returns:
        List of StrategyInfo objects
    """
    return [cls.INFO for cls in STRATEGIES.values()]
