"""
Script for running tournaments between Othello search engines of different depths.
"""
import os
import argparse

from src.arena import Arena, RandomPlayer, SearchPlayer
from src.config import Config, get_default_config
from src.logger import setup_logger
from src.search import MinimaxSearch

def main():
    parser = argparse.ArgumentParser(description='Run a tournament between Othello engines')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                       help='Path to config file')
    parser.add_argument('--depths', type=int, nargs='+', default=[1, 2, 3],
                       help='Search depths to enter into the tournament')
    parser.add_argument('--rounds', type=int, default=None,
                       help='Number of rounds to play')
    parser.add_argument('--random', action='store_true',
                       help='Add a random player as baseline')
    parser.add_argument('--no-progress', action='store_true',
                       help='Hide the progress bar')
    args = parser.parse_args()

    config = Config.load(args.config) if os.path.exists(args.config) else get_default_config()
    if args.rounds is not None:
        config.arena.rounds = args.rounds
    config.validate()

    logger = setup_logger(config)
    arena = Arena.from_config(config.arena)

    if args.random:
        arena.add_player(RandomPlayer(seed=config.seed))
    for depth in sorted(set(args.depths)):
        search = MinimaxSearch(depth=depth,
                               use_pruning=config.search.use_pruning,
                               pass_is_leaf=config.search.pass_is_leaf)
        arena.add_player(SearchPlayer(search))

    if len(arena.players) < 2:
        print("Need at least 2 players to start a tournament")
        logger.close()
        return

    print("\nTournament Participants:")
    for i, player_id in enumerate(arena.players.keys(), 1):
        print(f"{i}. {player_id}")

    print(f"\nStarting tournament with {config.arena.rounds} rounds...")
    results = arena.run_tournament(rounds=config.arena.rounds, progress=not args.no_progress)
    for step, (key, tally) in enumerate(results['matchups'].items(), 1):
        logger.log_metrics({'wins1': tally['wins1'], 'wins2': tally['wins2'], 'draws': tally['draws']},
                           step, prefix=f"{key}/")

    print(f"\nTournament completed! {results['games_played']} games in {results['duration']:.1f}s")
    print("\nFinal Leaderboard:")
    print(arena.format_leaderboard())
    logger.close()

if __name__ == '__main__':
    main()
