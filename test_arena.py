"""
Test script for players and the tournament arena.
"""
from src.arena import Arena, EloRatings, HumanPlayer, RandomPlayer, SearchPlayer
from src.game import Board
from src.search import MinimaxSearch

EMPTY_ROW = "........"

def test_human_player_relays_input():
    calls = []

    def pick(board, side):
        calls.append(side)
        return (2, 3)

    player = HumanPlayer(pick)
    assert player.get_move(Board(), Board.DARK) == (2, 3)
    assert calls == [Board.DARK]

def test_search_player():
    player = SearchPlayer(MinimaxSearch(depth=2))

    assert player.name == "minimax_d2"
    assert player.get_move(Board(), Board.DARK) == (2, 3)
    assert player.last_result.move == (2, 3)

    finished = Board.from_string("BBB....." + EMPTY_ROW * 7)
    assert player.get_move(finished, Board.LIGHT) is None

def test_random_player_is_seeded():
    board = Board()
    first = [RandomPlayer(seed=9).get_move(board, Board.DARK) for _ in range(5)]
    second = [RandomPlayer(seed=9).get_move(board, Board.DARK) for _ in range(5)]

    assert first == second
    assert all(move in board.legal_moves(Board.DARK) for move in first)

def test_elo_update():
    elo = EloRatings(k=32, initial_rating=1500.0)
    elo.update("a", "b", 1.0)

    assert elo.get_rating("a") == 1516.0
    assert elo.get_rating("b") == 1484.0
    assert elo.games_played == {"a": 1, "b": 1}
    assert [p['player_id'] for p in elo.get_leaderboard()] == ["a", "b"]

    elo.update("a", "b", 0.5)
    assert elo.get_rating("a") < 1516.0, "Favourite loses rating on a draw"

def test_play_game():
    arena = Arena()
    arena.add_player(RandomPlayer(seed=1))
    arena.add_player(SearchPlayer(MinimaxSearch(depth=1)))

    result = arena.play_game("random", "minimax_d1")
    assert result in (0.0, 0.5, 1.0)

def test_play_game_resets_players():
    class CountingPlayer(RandomPlayer):
        resets = 0

        def reset(self):
            self.resets += 1

    counting = CountingPlayer(seed=2)
    arena = Arena()
    arena.add_player(counting)
    arena.add_player(SearchPlayer(MinimaxSearch(depth=1)))

    arena.play_game("random", "minimax_d1")
    arena.play_game("minimax_d1", "random")
    assert counting.resets == 2

def test_tournament():
    arena = Arena(EloRatings(k=16))
    arena.add_player(RandomPlayer(seed=5))
    arena.add_player(SearchPlayer(MinimaxSearch(depth=1)))
    arena.add_player(SearchPlayer(MinimaxSearch(depth=2)))

    results = arena.run_tournament(rounds=2, progress=False)

    assert results['games_played'] == 6
    assert len(results['matchups']) == 3
    for tally in results['matchups'].values():
        assert tally['wins1'] + tally['wins2'] + tally['draws'] == 2
    leaderboard = results['leaderboard']
    assert len(leaderboard) == 3
    assert abs(sum(p['rating'] for p in leaderboard) - 3 * 1500.0) < 1e-6
    assert all(p['games_played'] == 4 for p in leaderboard)
    assert "minimax_d2" in arena.format_leaderboard()

def test_arena_rejects_bad_setup():
    arena = Arena()
    arena.add_player(RandomPlayer(seed=1))

    for action in (lambda: arena.add_player(RandomPlayer(seed=2)),
                   lambda: arena.run_tournament(rounds=1, progress=False),
                   lambda: arena.play_game("random", "nobody")):
        try:
            action()
        except ValueError:
            pass
        else:
            raise AssertionError("Expected ValueError")

if __name__ == "__main__":
    test_human_player_relays_input()
    test_search_player()
    test_random_player_is_seeded()
    test_elo_update()
    test_play_game()
    test_play_game_resets_players()
    test_tournament()
    test_arena_rejects_bad_setup()
    print("All arena tests passed!")
