"""
Computer opponent: positional evaluation and minimax search.
"""
from .evaluator import PositionalEvaluator, POSITION_WEIGHTS
from .minimax import MinimaxSearch, SearchResult

__all__ = ['PositionalEvaluator', 'POSITION_WEIGHTS', 'MinimaxSearch', 'SearchResult']
