"""
Play a game of Othello in the terminal.
"""
import os
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.arena import HumanPlayer, RandomPlayer, SearchPlayer
from src.config import Config, get_default_config
from src.game import GameController
from src.logger import setup_logger
from src.search import MinimaxSearch

def read_move(board, side):
    """Ask for a move on stdin as 'row col'."""
    print(board)
    while True:
        text = input(f"{side.name.capitalize()}, enter your move as 'row col' (q to quit): ").strip().lower()
        if text == "q":
            raise SystemExit(0)
        parts = text.replace(",", " ").split()
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            row, col = int(parts[0]), int(parts[1])
            if board.is_legal(row, col, side):
                return row, col
        print("Illegal move, try again.")

def make_player(kind: str, config: Config):
    if kind == "human":
        return HumanPlayer(read_move)
    if kind == "random":
        return RandomPlayer(seed=config.seed)
    return SearchPlayer(MinimaxSearch.from_config(config.search))

def main():
    import argparse

    parser = argparse.ArgumentParser(description='Play Othello against a person or the computer')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                      help='Path to config file')
    parser.add_argument('--dark', choices=['human', 'computer', 'random'], default=None,
                      help='Who plays Dark (moves first)')
    parser.add_argument('--light', choices=['human', 'computer', 'random'], default=None,
                      help='Who plays Light')
    parser.add_argument('--depth', type=int, default=None,
                      help='Search depth for computer players')
    parser.add_argument('--seed', type=int, default=None,
                      help='Seed for random players')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.dark:
        config.game.dark_player = args.dark
    if args.light:
        config.game.light_player = args.light
    if args.depth is not None:
        config.search.depth = args.depth
    if args.seed is not None:
        config.seed = args.seed
    config.validate()

    logger = setup_logger(config)
    controller = GameController(make_player(config.game.dark_player, config),
                                make_player(config.game.light_player, config))
    try:
        outcome = controller.play()
    except (KeyboardInterrupt, EOFError):
        print("\nGame abandoned.")
        return
    finally:
        logger.close()

    print(controller)
    dark_count, light_count = controller.get_score()
    print(f"Final score - Dark: {dark_count}, Light: {light_count} ({outcome.value})")

if __name__ == "__main__":
    main()
