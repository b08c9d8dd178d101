"""
Board module for Othello.
Handles the grid of discs, move legality, the flip algorithm and outcome detection.
Uses a numpy array representation so the state can be handed to renderers as-is.
"""
from enum import Enum, IntEnum
from typing import List, Tuple
import numpy as np


class Cell(IntEnum):
    """State of a single board cell."""
    EMPTY = 0
    DARK = 1   # Moves first
    LIGHT = 2


class Outcome(Enum):
    """Result of a game, derived from the final disc counts."""
    IN_PROGRESS = "in_progress"
    DARK_WINS = "dark_wins"
    LIGHT_WINS = "light_wins"
    DRAW = "draw"


# Pass marker used in move histories
PASS = (-1, -1)

# Directions as (d_row, d_col), scanned in this order
DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1),
              (0, -1),           (0, 1),
              (1, -1),  (1, 0),  (1, 1)]


class Board:
    """
    Represents the Othello board as an 8x8 grid of cells plus the side to move.

    The grid only changes through apply(). The side to move only changes
    through toggle_player(), which the game controller calls once per
    placement or forced pass.
    """

    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    EMPTY = Cell.EMPTY
    DARK = Cell.DARK
    LIGHT = Cell.LIGHT

    _SYMBOLS = {Cell.EMPTY: '.', Cell.DARK: 'B', Cell.LIGHT: 'W'}
    _PARSE = {'.': Cell.EMPTY, '-': Cell.EMPTY,
              'B': Cell.DARK, 'X': Cell.DARK,
              'W': Cell.LIGHT, 'O': Cell.LIGHT}

    def __init__(self):
        """Initialize a board in the canonical starting position, Dark to move."""
        self._board = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self._board[3, 3] = self.LIGHT
        self._board[3, 4] = self.DARK
        self._board[4, 3] = self.DARK
        self._board[4, 4] = self.LIGHT
        self.current_player = self.DARK

    @classmethod
    def from_string(cls, text: str, current_player: int = Cell.DARK) -> 'Board':
        """
        Build a board from a text diagram.

        Args:
            text: Eight rows of eight symbols ('.' empty, 'B'/'X' dark,
                'W'/'O' light). Whitespace inside and between rows is ignored.
            current_player: Side to move on the new board

        Returns:
            A new Board

        Raises:
            ValueError: If the diagram is malformed or the side is not a player
        """
        symbols = [ch for ch in text.upper() if not ch.isspace()]
        if len(symbols) != cls.BOARD_SIZE:
            raise ValueError(f"Expected {cls.BOARD_SIZE} cells, got {len(symbols)}")
        unknown = sorted(set(symbols) - set(cls._PARSE))
        if unknown:
            raise ValueError(f"Unknown board symbols: {''.join(unknown)}")

        board = cls()
        board._board = np.array([cls._PARSE[ch] for ch in symbols],
                                dtype=np.int8).reshape(cls.SIZE, cls.SIZE)
        board.current_player = cls._check_side(current_player)
        return board

    @classmethod
    def _check_side(cls, side: int) -> Cell:
        if side not in (cls.DARK, cls.LIGHT):
            raise ValueError(f"Not a playing side: {side!r}")
        return Cell(side)

    @staticmethod
    def opponent(side: int) -> Cell:
        """Return the other playing side."""
        return Cell(3 - side)

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        """Check whether (row, col) lies on the board."""
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    def clone(self) -> 'Board':
        """Create an independent deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board._board = self._board.copy()
        new_board.current_player = self.current_player
        return new_board

    def _run_length(self, row: int, col: int, d_row: int, d_col: int, side: int) -> int:
        """
        Count the opponent discs outflanked from (row, col) in one direction.

        Returns 0 unless the run of opponent discs is closed by one of
        side's own discs inside the board.
        """
        opponent = 3 - side
        r, c = row + d_row, col + d_col
        count = 0
        while 0 <= r < self.SIZE and 0 <= c < self.SIZE and self._board[r, c] == opponent:
            r += d_row
            c += d_col
            count += 1

        if count > 0 and 0 <= r < self.SIZE and 0 <= c < self.SIZE and self._board[r, c] == side:
            return count
        return 0

    def is_legal(self, row: int, col: int, side: int) -> bool:
        """Check if side may place a disc at (row, col). Never mutates the board."""
        if not self.in_bounds(row, col) or self._board[row, col] != self.EMPTY:
            return False

        for d_row, d_col in DIRECTIONS:
            if self._run_length(row, col, d_row, d_col, side):
                return True
        return False

    def legal_moves(self, side: int) -> List[Tuple[int, int]]:
        """
        Get all legal moves for a side.

        Args:
            side: Board.DARK or Board.LIGHT

        Returns:
            List of (row, col) tuples in row-major order
        """
        return [(row, col)
                for row in range(self.SIZE)
                for col in range(self.SIZE)
                if self.is_legal(row, col, side)]

    def has_legal_move(self, side: int) -> bool:
        """Check if the side has at least one legal move."""
        return any(self.is_legal(row, col, side)
                   for row in range(self.SIZE)
                   for col in range(self.SIZE))

    def flips_for(self, row: int, col: int, side: int) -> List[Tuple[int, int]]:
        """
        Get the discs a placement would flip.

        Returns:
            List of (row, col) tuples, grouped by direction and ordered by
            distance from the placement. Empty if the placement is illegal.
        """
        if not self.in_bounds(row, col) or self._board[row, col] != self.EMPTY:
            return []

        flipped = []
        for d_row, d_col in DIRECTIONS:
            count = self._run_length(row, col, d_row, d_col, side)
            flipped.extend((row + i * d_row, col + i * d_col) for i in range(1, count + 1))
        return flipped

    def apply(self, row: int, col: int, side: int) -> bool:
        """
        Place a disc for side and flip every outflanked run.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)
            side: The side placing the disc

        Returns:
            bool: True if the move was legal and made, False otherwise
        """
        flipped = self.flips_for(row, col, side)
        if not flipped:
            return False

        self._board[row, col] = side
        for r, c in flipped:
            self._board[r, c] = side
        return True

    def toggle_player(self) -> None:
        """Hand the move to the other side."""
        self.current_player = self.opponent(self.current_player)

    def count_discs(self) -> Tuple[int, int]:
        """
        Get the current disc counts.

        Returns:
            Tuple of (dark_count, light_count)
        """
        dark_count = int(np.count_nonzero(self._board == self.DARK))
        light_count = int(np.count_nonzero(self._board == self.LIGHT))
        return dark_count, light_count

    def outcome(self) -> Outcome:
        """Derive the outcome: in progress while either side can move, else by disc majority."""
        if self.has_legal_move(self.DARK) or self.has_legal_move(self.LIGHT):
            return Outcome.IN_PROGRESS
        return outcome_from_counts(*self.count_discs())

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array copy of the grid (0 empty, 1 dark, 2 light)
        """
        return self._board.copy()

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        row, col = position
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell out of range: {position}")
        return Cell(int(self._board[row, col]))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.current_player == other.current_player
                and np.array_equal(self._board, other._board))

    def __str__(self) -> str:
        """Return a string representation of the board."""
        rows = ["  " + " ".join(str(c) for c in range(self.SIZE))]
        for i in range(self.SIZE):
            row = [self._SYMBOLS[Cell(int(v))] for v in self._board[i]]
            rows.append(f"{i} " + " ".join(row))

        dark_count, light_count = self.count_discs()
        status = ["\n".join(rows)]
        status.append(f"To move: {'Dark' if self.current_player == self.DARK else 'Light'}")
        status.append(f"Score - Dark: {dark_count}, Light: {light_count}")
        return "\n".join(status)


def outcome_from_counts(dark_count: int, light_count: int) -> Outcome:
    """Decide a finished game: strict majority wins, equal counts draw."""
    if dark_count > light_count:
        return Outcome.DARK_WINS
    if light_count > dark_count:
        return Outcome.LIGHT_WINS
    return Outcome.DRAW
