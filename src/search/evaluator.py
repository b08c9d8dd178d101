"""
Static positional evaluation for Othello positions.
"""
from typing import Optional
import numpy as np

from ..game.board import Board

# Corners are worth most, the cells touching them least
POSITION_WEIGHTS = np.array([
    [100, -20, 10,  5,  5, 10, -20, 100],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [ 10,  -2,  0,  0,  0,  0,  -2,  10],
    [  5,  -2,  0,  0,  0,  0,  -2,   5],
    [  5,  -2,  0,  0,  0,  0,  -2,   5],
    [ 10,  -2,  0,  0,  0,  0,  -2,  10],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [100, -20, 10,  5,  5, 10, -20, 100],
], dtype=np.int32)


def is_symmetric(weights: np.ndarray) -> bool:
    """Check that a weight table is unchanged by every rotation and reflection of the board."""
    for k in range(4):
        rotated = np.rot90(weights, k)
        if not (np.array_equal(rotated, weights) and np.array_equal(np.fliplr(rotated), weights)):
            return False
    return True


class PositionalEvaluator:
    """Scores a board as the weighted sum of one side's discs minus the opponent's."""

    def __init__(self, weights: Optional[np.ndarray] = None):
        """
        Initialize the evaluator.

        Args:
            weights: Optional 8x8 weight table (default: POSITION_WEIGHTS)

        Raises:
            ValueError: If the table has the wrong shape or is not symmetric
        """
        if weights is None:
            weights = POSITION_WEIGHTS
        weights = np.asarray(weights, dtype=np.int32)
        if weights.shape != (Board.SIZE, Board.SIZE):
            raise ValueError(f"Weight table must be {Board.SIZE}x{Board.SIZE}, got {weights.shape}")
        if not is_symmetric(weights):
            raise ValueError("Weight table must be symmetric under rotations and reflections")
        self.weights = weights

    def score(self, board: Board, side: int) -> int:
        """
        Evaluate a position from side's point of view.

        Args:
            board: The position to score
            side: Board.DARK or Board.LIGHT

        Returns:
            Integer score; positive favours side
        """
        grid = board.get_board_state()
        own = self.weights[grid == side].sum()
        theirs = self.weights[grid == Board.opponent(side)].sum()
        return int(own - theirs)

    __call__ = score


_default_evaluator = PositionalEvaluator()


def score(board: Board, side: int) -> int:
    """Score a position with the default weight table."""
    return _default_evaluator.score(board, side)
