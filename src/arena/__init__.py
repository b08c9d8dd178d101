"""
Arena module for matches and tournaments between move sources.
"""
from .arena import Arena, EloRatings
from .players import Player, HumanPlayer, SearchPlayer, RandomPlayer

__all__ = ['Arena', 'EloRatings', 'Player', 'HumanPlayer', 'SearchPlayer', 'RandomPlayer']
