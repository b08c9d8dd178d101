"""
Move sources that can drive a GameController.
"""
import logging
import random
from typing import Callable, Optional, Tuple

from ..game.board import Board, Cell
from ..search import MinimaxSearch

logger = logging.getLogger(__name__)


class Player:
    """A move source: proposes a move for a given board and side."""

    def __init__(self, name: str):
        self.name = name

    def get_move(self, board: Board, side: int) -> Optional[Tuple[int, int]]:
        """
        Propose a move.

        Args:
            board: A copy of the current position
            side: The side to move

        Returns:
            (row, col) tuple, or None if there is nothing to propose
        """
        raise NotImplementedError

    def reset(self):
        """Reset any per-game state."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class HumanPlayer(Player):
    """Relays coordinates from an external input source (pointer, keyboard)."""

    def __init__(self, input_fn: Callable[[Board, int], Optional[Tuple[int, int]]], name: str = "human"):
        super().__init__(name)
        self.input_fn = input_fn

    def get_move(self, board: Board, side: int) -> Optional[Tuple[int, int]]:
        return self.input_fn(board, side)


class SearchPlayer(Player):
    """Computer opponent backed by minimax search."""

    def __init__(self, search: Optional[MinimaxSearch] = None, name: Optional[str] = None):
        self.search = search or MinimaxSearch()
        super().__init__(name or f"minimax_d{self.search.depth}")
        self.last_result = None

    def get_move(self, board: Board, side: int) -> Optional[Tuple[int, int]]:
        self.last_result = self.search.choose_move(board, side)
        if self.last_result.move is None:
            logger.info("%s has no valid moves. Passing...", self.name)
        else:
            logger.info("%s (%s) plays %s | score: %d | nodes: %d",
                        self.name, Cell(side).name.lower(), self.last_result.move,
                        self.last_result.score, self.last_result.nodes)
        return self.last_result.move

    def reset(self):
        self.last_result = None


class RandomPlayer(Player):
    """Baseline player choosing uniformly among legal moves."""

    def __init__(self, seed: Optional[int] = None, name: str = "random"):
        super().__init__(name)
        self.seed = seed
        self.rng = random.Random(seed)

    def get_move(self, board: Board, side: int) -> Optional[Tuple[int, int]]:
        valid_moves = board.legal_moves(side)
        return self.rng.choice(valid_moves) if valid_moves else None
