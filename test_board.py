"""
Test script for the Othello board rules.
"""
from src.game.board import Board, Cell, Outcome

EMPTY_ROW = "........"

def make_board(*rows, current_player=Board.DARK):
    """Build a board from the given top rows, padding the rest with empty rows."""
    rows = list(rows) + [EMPTY_ROW] * (Board.SIZE - len(rows))
    return Board.from_string("\n".join(rows), current_player)


def test_initial_board():
    """Test the initial board setup."""
    board = Board()
    state = board.get_board_state()

    assert state.shape == (8, 8), "Board should be 8x8"
    assert board[3, 3] == Cell.LIGHT
    assert board[4, 4] == Cell.LIGHT
    assert board[3, 4] == Cell.DARK
    assert board[4, 3] == Cell.DARK
    assert (state == Board.EMPTY).sum() == 60, "Should have 60 empty squares initially"
    assert board.count_discs() == (2, 2)
    assert board.current_player == Board.DARK, "Dark moves first"

    print("Initial board test passed!")


def test_legal_moves_from_start():
    """Test legal move generation in the initial position."""
    board = Board()

    assert board.legal_moves(Board.DARK) == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert board.legal_moves(Board.LIGHT) == [(2, 4), (3, 5), (4, 2), (5, 3)]
    assert board.has_legal_move(Board.DARK)
    assert board.has_legal_move(Board.LIGHT)

    print("Legal moves test passed!")


def test_flip_sandwiched_disc():
    """Dark at (3,3) flips Light at (3,4) against Dark at (3,5)."""
    board = make_board(EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, "....WB..")

    assert board.is_legal(3, 3, Board.DARK)
    assert board.apply(3, 3, Board.DARK)
    assert board[3, 4] == Cell.DARK, "Sandwiched disc should flip"
    assert board[3, 3] == Cell.DARK
    assert board.count_discs() == (3, 0)

    print("Flip test passed!")


def test_flips_every_direction_at_once():
    """A placement flips all outflanked runs, not just the first one found."""
    board = make_board(EMPTY_ROW,
                       ".B.B....",
                       "..WW....",
                       ".BW.....")

    assert board.flips_for(3, 3, Board.DARK) == [(2, 2), (2, 3), (3, 2)]
    assert board.apply(3, 3, Board.DARK)
    for cell in [(2, 2), (2, 3), (3, 2), (3, 3)]:
        assert board[cell] == Cell.DARK, f"{cell} should be dark"
    assert board.count_discs() == (7, 0)


def test_long_run_flips():
    """Every disc of a long run is flipped."""
    board = make_board("BWWWWWW.")

    assert board.flips_for(0, 7, Board.DARK) == [(0, 6), (0, 5), (0, 4), (0, 3), (0, 2), (0, 1)]
    assert board.apply(0, 7, Board.DARK)
    assert board.count_discs() == (8, 0)


def test_occupied_cell_is_illegal():
    """Placing on any non-empty cell fails and leaves the board unchanged."""
    board = Board()
    before = board.clone()

    for row, col in [(3, 3), (3, 4), (4, 3), (4, 4)]:
        for side in (Board.DARK, Board.LIGHT):
            assert not board.is_legal(row, col, side)
            assert not board.apply(row, col, side)
            assert board == before
            assert (board.get_board_state() == before.get_board_state()).all()

    print("Illegal move test passed!")


def test_no_capture_is_illegal():
    """Empty cells without an outflanked run are rejected."""
    board = Board()
    before = board.clone()

    assert not board.apply(0, 0, Board.DARK), "No neighbours at all"
    # Diagonal run of Light ends on an empty cell
    assert not board.apply(2, 2, Board.DARK)
    assert board.flips_for(2, 2, Board.DARK) == []
    assert board == before


def test_run_off_the_board_is_illegal():
    """A run of opponent discs that reaches the edge captures nothing."""
    board = make_board("WWWW.B..")

    assert not board.is_legal(4, 0, Board.DARK)
    assert not board.is_legal(0, 4, Board.DARK)
    assert board.legal_moves(Board.DARK) == []


def test_out_of_bounds_is_rejected():
    """Coordinates outside the grid never reach the grid storage."""
    board = Board()
    before = board.clone()

    for row, col in [(-1, 0), (0, -1), (8, 0), (0, 8), (-1, -1), (8, 8)]:
        assert not board.is_legal(row, col, Board.DARK)
        assert not board.apply(row, col, Board.DARK)
        assert board.flips_for(row, col, Board.DARK) == []
    assert board == before


def test_apply_does_not_change_side_to_move():
    board = Board()

    assert board.apply(2, 3, Board.DARK)
    assert board.current_player == Board.DARK
    board.toggle_player()
    assert board.current_player == Board.LIGHT


def test_clone_independence():
    """Mutating a clone never affects the original board."""
    board = Board()
    copy = board.clone()

    assert copy == board
    assert copy.apply(2, 3, Board.DARK)
    copy.toggle_player()

    assert board == Board(), "Original should still be the starting position"
    assert board.current_player == Board.DARK
    assert copy.current_player == Board.LIGHT
    assert board[2, 3] == Cell.EMPTY


def test_snapshot_is_a_copy():
    board = Board()
    state = board.get_board_state()
    state[0, 0] = Board.DARK

    assert board[0, 0] == Cell.EMPTY


def test_outcome():
    """Outcome follows the disc majority once neither side can move."""
    assert Board().outcome() is Outcome.IN_PROGRESS
    assert make_board("BBB.....").outcome() is Outcome.DARK_WINS
    assert make_board("B.......", *[EMPTY_ROW] * 6, ".......W").outcome() is Outcome.DRAW
    assert make_board("B.......", *[EMPTY_ROW] * 6, "......WW").outcome() is Outcome.LIGHT_WINS


def test_from_string_rejects_bad_input():
    for text in ["B" * 63, "Q" * 64]:
        try:
            Board.from_string(text)
        except ValueError:
            pass
        else:
            raise AssertionError(f"Expected ValueError for {text!r}")

    try:
        Board.from_string("." * 64, current_player=Board.EMPTY)
    except ValueError:
        pass
    else:
        raise AssertionError("EMPTY is not a side")


if __name__ == "__main__":
    print("Running Othello board tests...\n")

    test_initial_board()
    test_legal_moves_from_start()
    test_flip_sandwiched_disc()
    test_flips_every_direction_at_once()
    test_long_run_flips()
    test_occupied_cell_is_illegal()
    test_no_capture_is_illegal()
    test_run_off_the_board_is_illegal()
    test_out_of_bounds_is_rejected()
    test_apply_does_not_change_side_to_move()
    test_clone_independence()
    test_snapshot_is_a_copy()
    test_outcome()
    test_from_string_rejects_bad_input()

    print("\nAll tests passed successfully!")
