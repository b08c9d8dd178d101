"""
Othello game module.
This package contains the core game logic for Othello.
"""

from .board import Board, Cell, Outcome, PASS
from .game import GameController, GameRecord

__all__ = ['Board', 'Cell', 'Outcome', 'PASS', 'GameController', 'GameRecord']
