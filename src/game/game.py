"""
Othello game module.
Handles turn order between two move sources, passes and the end of the game.
"""
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple
import numpy as np

from .board import Board, Outcome, PASS

logger = logging.getLogger(__name__)


class GameRecord(NamedTuple):
    """Summary of a finished game, handed to persistence sinks."""
    timestamp: datetime
    dark_count: int
    light_count: int
    outcome: Outcome


class GameController:
    """
    Sequences a game between two move sources.

    A move source is any object with get_move(board, side) returning a
    (row, col) tuple, or None when it has nothing to propose. Move sources
    only ever see a clone of the board.
    """

    def __init__(self, dark_player, light_player, board: Optional[Board] = None):
        """
        Initialize a new game.

        Args:
            dark_player: Move source for the Dark side (moves first)
            light_player: Move source for the Light side
            board: Optional starting position, copied (default: canonical start)
        """
        self.players = {Board.DARK: dark_player, Board.LIGHT: light_player}
        self.board = board.clone() if board is not None else Board()
        self.outcome = Outcome.IN_PROGRESS
        self.record: Optional[GameRecord] = None
        self.move_history: List[Dict[str, Any]] = []
        self._listeners: List[Callable[[GameRecord], None]] = []
        self._check_game_over()

    def reset(self) -> None:
        """Start a fresh game with the same move sources."""
        self.board = Board()
        self.outcome = Outcome.IN_PROGRESS
        self.record = None
        self.move_history = []
        for player in self.players.values():
            if hasattr(player, 'reset'):
                player.reset()

    def add_game_over_listener(self, listener: Callable[[GameRecord], None]) -> None:
        """
        Register a callable that receives the GameRecord when the game ends.

        If the game is already over, the listener gets the record immediately.
        """
        self._listeners.append(listener)
        if self.record is not None:
            self._notify(listener)

    @property
    def current_player(self) -> int:
        return self.board.current_player

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.outcome is not Outcome.IN_PROGRESS

    def legal_moves(self, side: Optional[int] = None) -> List[Tuple[int, int]]:
        """
        Get the legal moves for a side.

        Args:
            side: Board.DARK or Board.LIGHT (default: side to move)
        """
        if side is None:
            side = self.board.current_player
        return self.board.legal_moves(side)

    def get_board_state(self) -> np.ndarray:
        """Get a copy of the grid for rendering."""
        return self.board.get_board_state()

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (dark, light).

        Returns:
            Tuple of (dark_count, light_count)
        """
        return self.board.count_discs()

    def play_turn(self) -> bool:
        """
        Advance the game by one turn.

        Returns:
            bool: True if a disc was placed or a forced pass was made,
            False if nothing happened (game over, no input yet, illegal move)
        """
        if self.is_game_over():
            return False

        side = self.board.current_player
        if not self.board.has_legal_move(side):
            self._pass_turn(side)
            return True

        move = self.players[side].get_move(self.board.clone(), side)
        if move is None:
            return False

        row, col = move
        return self.submit_move(row, col)

    def submit_move(self, row: int, col: int) -> bool:
        """
        Place a disc for the side to move.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was legal and made, False otherwise
        """
        if self.is_game_over():
            return False

        side = self.board.current_player
        flipped = self.board.flips_for(row, col, side)
        if not self.board.apply(row, col, side):
            logger.debug("Rejected illegal move (%s, %s) for %s", row, col, side.name)
            return False

        self.move_history.append({
            'player': side,
            'move': (row, col),
            'flipped': flipped,
        })
        self.board.toggle_player()
        self._check_game_over()
        return True

    def play(self, max_turns: Optional[int] = None) -> Outcome:
        """
        Play turns until the game ends.

        Args:
            max_turns: Optional cap on the number of turns to play

        Returns:
            The outcome (IN_PROGRESS only if max_turns ran out)

        Raises:
            RuntimeError: If a move source stops proposing legal moves
        """
        turns = 0
        while not self.is_game_over():
            if max_turns is not None and turns >= max_turns:
                break
            if not self.play_turn():
                side = self.board.current_player
                raise RuntimeError(f"{side.name} player did not make a legal move")
            turns += 1
        return self.outcome

    def _pass_turn(self, side) -> None:
        logger.info("%s has no legal moves. Passing...", side.name.capitalize())
        self.move_history.append({'player': side, 'move': PASS, 'flipped': []})
        self.board.toggle_player()
        self._check_game_over()

    def _check_game_over(self) -> None:
        """Move to the finished state once neither side can move."""
        outcome = self.board.outcome()
        if outcome is Outcome.IN_PROGRESS:
            return

        self.outcome = outcome
        dark_count, light_count = self.board.count_discs()
        self.record = GameRecord(datetime.now(), dark_count, light_count, outcome)
        logger.info("Game over. Dark: %d, Light: %d, result: %s",
                    dark_count, light_count, outcome.value)

        for listener in self._listeners:
            self._notify(listener)

    def _notify(self, listener: Callable[[GameRecord], None]) -> None:
        try:
            listener(self.record)
        except Exception:
            logger.exception("Game-over listener %r failed", listener)

    def __str__(self) -> str:
        """String representation of the game state."""
        result = str(self.board)
        if self.is_game_over():
            if self.outcome is Outcome.DRAW:
                result += "\nGame over! It's a draw!"
            else:
                winner = 'Dark' if self.outcome is Outcome.DARK_WINS else 'Light'
                result += f"\nGame over! {winner} wins!"
        return result
