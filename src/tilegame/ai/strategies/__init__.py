"""
Move-selection strategies for the 2584 puzzle.

Each strategy is a different way of choosing a slide, from a random
baseline to a depth-limited search with board evaluation.
"""
from .base import Strategy, StrategyInfo
from .evaluation import BoardEvaluator, EvaluationConfig, DEFAULT_EVALUATION
from .registry import STRATEGIES, get_strategy, list_strategies

__all__ = [
    'Strategy',
    'StrategyInfo',
    'BoardEvaluator',
    'EvaluationConfig',
    'DEFAULT_EVALUATION',
    'STRATEGIES',
    'get_strategy',
    'list_strategies',
]
