import pytest

from ultitactoe.state import (
    BigBoard,
    BoardStatus,
    GameStatus,
    MoveError,
    Player,
    Position,
    SmallBoard,
)


def _small(rows, last):
    board = SmallBoard()
    board.cells = [list(row) for row in rows]
    board.last_played = last
    return board


def test_new_small_board_is_empty():
    board = SmallBoard()
    assert all(cell == " " for row in board.cells for cell in row)
    assert board.last_played == Position(-1, -1)
    assert board.status is BoardStatus.BOARD_START


def test_small_board_without_moves_is_in_progress():
    assert SmallBoard().detect() is BoardStatus.IN_PROGRESS


def test_row_win_for_x():
    board = _small(["   ", "XXX", "O O"], Position(1, 0))
    assert board.detect() is BoardStatus.X_WON


def test_column_win_for_o():
    board = _small([" OX", " OX", " O "], Position(2, 1))
    assert board.detect() is BoardStatus.O_WON


def test_diagonal_win():
    board = _small(["X O", " XO", "  X"], Position(1, 1))
    assert board.detect() is BoardStatus.X_WON


def test_anti_diagonal_win():
    board = _small(["X O", " OX", "O X"], Position(2, 0))
    assert board.detect() is BoardStatus.O_WON


def test_win_not_through_last_move_is_ignored():
    board = _small(["XXX", " O ", "  O"], Position(2, 2))
    assert board.detect() is BoardStatus.IN_PROGRESS


def test_full_board_without_line_is_draw():
    board = _small(["XOX", "XOO", "OXX"], Position(2, 2))
    assert board.detect() is BoardStatus.DRAW


def test_small_render_separators():
    lines = SmallBoard().render().splitlines()
    assert lines[1] == "---|---|---  "
    assert lines[3] == "---|---|---  "
    assert lines[-1] == "  "


def test_small_render_shows_marks():
    board = _small(["X  ", "   ", "  O"], Position(0, 0))
    text = board.render()
    assert text.count("X") == 1
    assert text.count("O") == 1


def test_new_big_board_defaults():
    board = BigBoard()
    assert board.status is GameStatus.START
    assert board.current_player is Player.X
    assert board.last_played == Position(-1, -1)
    assert all(small.status is BoardStatus.BOARD_START for row in board.boards for small in row)


def test_play_move_marks_cell_and_starts_game():
    board = BigBoard()
    board.play_move(0, 1, 2, 0)
    assert board.boards[0][1].cells[2][0] == "X"
    assert board.status is GameStatus.PLAYING


def test_play_move_uses_current_player():
    board = BigBoard()
    board.current_player = Player.O
    board.play_move(2, 2, 1, 1)
    assert board.boards[2][2].cells[1][1] == "O"


def test_play_move_on_filled_spot_raises():
    board = BigBoard()
    board.play_move(0, 0, 0, 0)
    board.current_player = Player.O
    with pytest.raises(MoveError, match="Already filled spot"):
        board.play_move(0, 0, 0, 0)
    assert board.boards[0][0].cells[0][0] == "X"


@pytest.mark.parametrize("coords", [(-1, 0, 0, 0), (0, 3, 0, 0), (0, 0, 3, 0), (0, 0, 0, -1)])
def test_play_move_out_of_range_raises(coords):
    board = BigBoard()
    with pytest.raises(MoveError, match="Invalid coordinate"):
        board.play_move(*coords)
    assert board.status is GameStatus.START


def test_play_move_on_finished_board_raises():
    board = BigBoard()
    board.boards[1][1].status = BoardStatus.DRAW
    with pytest.raises(MoveError, match="already finished"):
        board.play_move(1, 1, 0, 0)


def test_big_board_without_moves_is_in_progress():
    assert BigBoard().detect() is BoardStatus.IN_PROGRESS


def test_big_board_row_win():
    board = BigBoard()
    for col in range(3):
        board.boards[0][col].status = BoardStatus.X_WON
    board.last_played = Position(0, 1)
    assert board.detect() is BoardStatus.X_WON


def test_big_board_diagonal_win():
    board = BigBoard()
    for n in range(3):
        board.boards[n][2 - n].status = BoardStatus.O_WON
    board.last_played = Position(1, 1)
    assert board.detect() is BoardStatus.O_WON


def test_big_board_all_drawn_is_draw():
    board = BigBoard()
    for row in board.boards:
        for small in row:
            small.status = BoardStatus.DRAW
    board.last_played = Position(2, 2)
    assert board.detect() is BoardStatus.DRAW


def test_big_board_mixed_is_in_progress():
    board = BigBoard()
    board.boards[0][0].status = BoardStatus.X_WON
    board.boards[0][1].status = BoardStatus.O_WON
    board.boards[0][2].status = BoardStatus.X_WON
    board.last_played = Position(0, 0)
    assert board.detect() is BoardStatus.IN_PROGRESS


def test_big_render_layout():
    board = BigBoard()
    board.play_move(0, 1, 2, 0)
    lines = board.render().splitlines()
    assert lines[1] == "---|---|---   ---|---|---   ---|---|---   "
    assert lines[5] == "  "
    assert lines[4][15] == "X"
    assert board.render().count("X") == 1