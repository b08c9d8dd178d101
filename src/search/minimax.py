"""
Depth-limited minimax search with alpha-beta pruning for the computer opponent.

Sign convention: Dark is the maximizing side and every leaf is scored from
Dark's point of view, so Light picks the lowest score.
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..game.board import Board, Cell
from .evaluator import PositionalEvaluator

logger = logging.getLogger(__name__)

# Reference side for every static evaluation
MAXIMIZING_SIDE = Board.DARK


@dataclass(frozen=True)
class SearchResult:
    """Move chosen by a search (None when the side cannot move) and its score."""
    move: Optional[Tuple[int, int]]
    score: int
    nodes: int = 0


class MinimaxSearch:
    """Minimax over cloned boards, optionally pruned with alpha-beta."""

    def __init__(self, evaluator: Optional[PositionalEvaluator] = None, depth: int = 3,
                 use_pruning: bool = True, pass_is_leaf: bool = True):
        """
        Initialize the search.

        Args:
            evaluator: Static evaluator used at the leaves
            depth: Default number of plies searched by choose_move
            use_pruning: Cut off siblings once beta <= alpha
            pass_is_leaf: Score a side without legal moves statically instead
                of letting the opponent move on with the same depth budget
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.evaluator = evaluator or PositionalEvaluator()
        self.depth = depth
        self.use_pruning = use_pruning
        self.pass_is_leaf = pass_is_leaf
        self.nodes = 0

    @classmethod
    def from_config(cls, search_config, evaluator: Optional[PositionalEvaluator] = None) -> 'MinimaxSearch':
        """Create a search from a SearchConfig."""
        return cls(evaluator=evaluator,
                   depth=search_config.depth,
                   use_pruning=search_config.use_pruning,
                   pass_is_leaf=search_config.pass_is_leaf)

    def evaluate(self, board: Board) -> int:
        self.nodes += 1
        return self.evaluator.score(board, MAXIMIZING_SIDE)

    def choose_move(self, board: Board, side: int, depth: Optional[int] = None) -> SearchResult:
        """
        Pick the best legal move for side.

        Args:
            board: Position to search from; it is never modified
            side: The side to move
            depth: Plies to search, including the root move (default: self.depth)

        Returns:
            SearchResult with the chosen move, or move=None if side cannot move
        """
        depth = self.depth if depth is None else depth
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        self.nodes = 0
        moves = board.legal_moves(side)
        if not moves:
            return SearchResult(None, self.evaluate(board), self.nodes)

        maximizing = side == MAXIMIZING_SIDE
        alpha, beta = -math.inf, math.inf
        best_move = None
        best_score = None

        for row, col in moves:
            child = board.clone()
            child.apply(row, col, side)
            value = self.minimax(child, depth - 1, not maximizing, alpha, beta)

            if best_score is None or (value > best_score if maximizing else value < best_score):
                best_score = value
                best_move = (row, col)

            if self.use_pruning:
                if maximizing:
                    alpha = max(alpha, best_score)
                else:
                    beta = min(beta, best_score)

        logger.debug("Search depth %d for %s: move %s score %s (%d nodes)",
                     depth, Cell(side).name,
                     best_move, best_score, self.nodes)
        return SearchResult(best_move, best_score, self.nodes)

    def minimax(self, board: Board, depth: int, maximizing: bool, alpha: float, beta: float) -> int:
        """
        Score a position by looking depth plies ahead.

        Args:
            board: Position to score; it is never modified
            depth: Remaining plies
            maximizing: True when Dark is to move in this position
            alpha: Best score Dark is already assured of
            beta: Best score Light is already assured of

        Returns:
            Score from Dark's point of view
        """
        if depth == 0:
            return self.evaluate(board)

        side = MAXIMIZING_SIDE if maximizing else Board.opponent(MAXIMIZING_SIDE)
        moves = board.legal_moves(side)
        if not moves:
            if self.pass_is_leaf or not board.has_legal_move(Board.opponent(side)):
                return self.evaluate(board)
            # Forced pass: the opponent moves on with the same budget
            self.nodes += 1
            return self.minimax(board, depth, not maximizing, alpha, beta)

        self.nodes += 1
        best_score = -math.inf if maximizing else math.inf
        for row, col in moves:
            child = board.clone()
            child.apply(row, col, side)
            value = self.minimax(child, depth - 1, not maximizing, alpha, beta)

            if maximizing:
                best_score = max(best_score, value)
                alpha = max(alpha, best_score)
            else:
                best_score = min(best_score, value)
                beta = min(beta, best_score)

            if self.use_pruning and beta <= alpha:
                break

        return best_score
