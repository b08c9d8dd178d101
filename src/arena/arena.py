"""
Arena for running matches and tournaments between move sources with Elo ratings.
"""
import logging
import time
from typing import List, Dict, Optional

from tqdm import tqdm

from ..game import GameController, Outcome
from .players import Player

logger = logging.getLogger(__name__)


class EloRatings:
    """Elo rating table for tracking player strength."""

    def __init__(self, k: float = 32, initial_rating: float = 1500.0):
        """
        Initialize the rating table.

        Args:
            k: K-factor, controls how much ratings change after each game
            initial_rating: Initial rating for new players
        """
        self.k = k
        self.initial_rating = initial_rating
        self.ratings: Dict[str, float] = {}
        self.games_played: Dict[str, int] = {}

    def add_player(self, player_id: str):
        if player_id not in self.ratings:
            self.ratings[player_id] = self.initial_rating
            self.games_played[player_id] = 0

    def get_rating(self, player_id: str) -> float:
        return self.ratings.get(player_id, self.initial_rating)

    @staticmethod
    def expected_score(rating_a: float, rating_b: float) -> float:
        """Expected score of a player rated rating_a against one rated rating_b."""
        return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / 400.0))

    def update(self, player_a: str, player_b: str, score_a: float):
        """
        Update ratings after a game.

        Args:
            player_a: ID of player A
            player_b: ID of player B
            score_a: Score for player A (1.0 for win, 0.5 for draw, 0.0 for loss)
        """
        self.add_player(player_a)
        self.add_player(player_b)

        expected_a = self.expected_score(self.ratings[player_a], self.ratings[player_b])
        delta = self.k * (score_a - expected_a)
        self.ratings[player_a] += delta
        self.ratings[player_b] -= delta
        self.games_played[player_a] += 1
        self.games_played[player_b] += 1

    def get_leaderboard(self) -> List[Dict]:
        """Get the players sorted by rating, best first."""
        leaderboard = [{'player_id': player_id,
                        'rating': rating,
                        'games_played': self.games_played[player_id]}
                       for player_id, rating in self.ratings.items()]
        leaderboard.sort(key=lambda x: x['rating'], reverse=True)
        return leaderboard


class Arena:
    """Arena for running games and tournaments between players."""

    def __init__(self, ratings: Optional[EloRatings] = None):
        self.elo = ratings if ratings is not None else EloRatings()
        self.players: Dict[str, Player] = {}

    @classmethod
    def from_config(cls, arena_config) -> 'Arena':
        """Create an arena from an ArenaConfig."""
        return cls(EloRatings(k=arena_config.elo_k, initial_rating=arena_config.initial_rating))

    def add_player(self, player: Player):
        """Add a player to the arena."""
        if player.name in self.players:
            raise ValueError(f"Duplicate player name: {player.name}")
        self.players[player.name] = player
        self.elo.add_player(player.name)

    def play_game(self, dark_id: str, light_id: str) -> float:
        """
        Play a single game between two players.

        Args:
            dark_id: ID of the player taking Dark (moves first)
            light_id: ID of the player taking Light

        Returns:
            1.0 if the Dark player wins, 0.5 for a draw, 0.0 if the Light player wins
        """
        if dark_id not in self.players or light_id not in self.players:
            raise ValueError(f"One or both players not found: {dark_id}, {light_id}")

        for player_id in (dark_id, light_id):
            self.players[player_id].reset()
        controller = GameController(self.players[dark_id], self.players[light_id])
        outcome = controller.play()
        dark_count, light_count = controller.get_score()
        logger.debug("%s (Dark) vs %s (Light): %d-%d", dark_id, light_id, dark_count, light_count)

        if outcome is Outcome.DARK_WINS:
            return 1.0
        if outcome is Outcome.LIGHT_WINS:
            return 0.0
        return 0.5

    def run_tournament(self, rounds: int = 2, progress: bool = True) -> Dict:
        """
        Run a round-robin tournament between all players.

        Every pair meets once per round, swapping colours each round.

        Args:
            rounds: Number of rounds to play
            progress: Show a progress bar

        Returns:
            Dictionary with matchup tallies, leaderboard and duration
        """
        player_ids = list(self.players.keys())
        if len(player_ids) < 2:
            raise ValueError("Need at least 2 players for a tournament")

        pairs = [(player_ids[i], player_ids[j])
                 for i in range(len(player_ids))
                 for j in range(i + 1, len(player_ids))]
        results = {
            'games_played': 0,
            'matchups': {f"{a}_vs_{b}": {'player1': a, 'player2': b, 'wins1': 0, 'wins2': 0, 'draws': 0}
                         for a, b in pairs},
            'start_time': time.time(),
        }

        with tqdm(total=rounds * len(pairs), desc="Tournament", disable=not progress) as bar:
            for round_num in range(rounds):
                for a, b in pairs:
                    dark_id, light_id = (a, b) if round_num % 2 == 0 else (b, a)
                    score = self.play_game(dark_id, light_id)
                    self.elo.update(dark_id, light_id, score)

                    tally = results['matchups'][f"{a}_vs_{b}"]
                    score_a = score if dark_id == a else 1.0 - score
                    if score_a == 1.0:
                        tally['wins1'] += 1
                    elif score_a == 0.0:
                        tally['wins2'] += 1
                    else:
                        tally['draws'] += 1
                    results['games_played'] += 1
                    bar.update(1)

        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        results['leaderboard'] = self.elo.get_leaderboard()
        return results

    def format_leaderboard(self) -> str:
        """Render the current leaderboard as a table."""
        lines = ["Rank  Player ID               Rating  Games Played",
                 "----  ---------------------  -------  ------------"]
        for i, player in enumerate(self.elo.get_leaderboard(), 1):
            lines.append(f"{i:4d}  {player['player_id']:22s}  {player['rating']:7.1f}  {player['games_played']:12d}")
        return "\n".join(lines)
