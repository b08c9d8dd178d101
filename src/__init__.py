"""
Othello rules engine and minimax computer opponent.
"""
