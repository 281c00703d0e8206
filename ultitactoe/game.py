"""Interactive terminal game loop for ultimate tic-tac-toe."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .state import BigBoard, BoardStatus, GameStatus, MoveError, Player, Position

_BANNER = (
    "                   _ _   _                 _                  \n"
    "             _   _| | |_(_)_ __ ___   __ _| |_ ___            \n"
    "            | | | | | __| | '_ ` _ \\ / _` | __/ _ \\           \n"
    "            | |_| | | |_| | | | | | | (_| | ||  __/           \n"
    "  _   _      \\__,_|_|\\__|_|_| |_| |_|\\__,_|\\__\\___|           \n"
    " | |_(_) ___          | |_ __ _  ___          | |_ ___   ___  \n"
    " | __| |/ __|  _____  | __/ _` |/ __|  _____  | __/ _ \\ / _ \\ \n"
    " | |_| | (__  |_____| | || (_| | (__  |_____| | || (_) |  __/ \n"
    "  \\__|_|\\___|          \\__\\__,_|\\___|          \\__\\___/ \\___| \n"
)
_RULE = "---------------------------------------------------------------\n"
_COLUMNS = "     0             1             2       \n"

_RESULTS = {
    BoardStatus.X_WON: "PLAYER X WON!!!",
    BoardStatus.O_WON: "PLAYER O WON!!!",
    BoardStatus.DRAW: "DRAW!!! :(",
}


class InputError(ValueError):
    """Raised when the player's input cannot be used."""


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise InputError("Unexpected end of input.")
    try:
        return int(token)
    except ValueError:
        raise InputError(f"Expected an integer, got {token!r}.") from None


def _read_coords(tokens: Iterator[str]) -> tuple[int, int]:
    first, second = _read_int(tokens), _read_int(tokens)
    if not (0 <= first <= 2 and 0 <= second <= 2):
        raise InputError("Invalid coordinate(s).")
    return first, second


def _next_player(player: Player) -> Player:
    return Player.O if player is Player.X else Player.X


def _choose_move(board: BigBoard, tokens: Iterator[str], out: TextIO) -> tuple[int, int, int, int]:
    if board.status is GameStatus.START:
        out.write("Choose board to start playing: <x> <y>\n")
        i, j = _read_coords(tokens)
        out.write("Insert your move: <x> <y> \n")
        return (i, j, *_read_coords(tokens))

    target = board.boards[board.last_played.x][board.last_played.y].last_played
    if target == Position(-1, -1):
        out.write("Current Board: Whichever (in progress) board you want! \n")
        out.write("Give board you want to play at: <x> <y> \n")
        i, j = _read_coords(tokens)
        if board.boards[i][j].status is not BoardStatus.IN_PROGRESS:
            raise InputError("Board is already finished.")
    else:
        i, j = target.x, target.y
        out.write(f"Current Board: ({i}, {j})\n")
    out.write("Insert your move: <x> <y> \n")
    return (i, j, *_read_coords(tokens))


def run_game(
    board: BigBoard,
    input_stream: Iterable[str],
    output_stream: TextIO,
    error_stream: TextIO,
) -> BoardStatus:
    """Play ``board`` until it is decided and return the deciding status.

    Raises InputError when the input runs out or holds an unusable move.
    """
    tokens = _tokens(input_stream)
    while True:
        output_stream.write("\r" + _BANNER + "\n" + _RULE + _COLUMNS)
        output_stream.write(board.render())
        output_stream.write(_RULE)
        output_stream.write(f"Current Player: {'X' if board.current_player is Player.X else 'O'}\n")

        i, j, x, y = _choose_move(board, tokens, output_stream)

        try:
            board.play_move(i, j, x, y)
        except MoveError as exc:
            error_stream.write(f"{exc}\n")

        board.last_played = Position(i, j)
        small = board.boards[i][j]
        small.last_played = Position(x, y)

        small_status = small.detect()
        if small_status is not BoardStatus.IN_PROGRESS:
            small.status = small_status
            if small_status is not BoardStatus.DRAW:
                result = board.detect()
                if result in _RESULTS:
                    output_stream.write(_RESULTS[result] + "\n")
                    board.status = GameStatus.OVER
                    return result

        board.current_player = _next_player(board.current_player)


def main(argv: list[str] | None = None) -> int:
    """Run a game on the terminal."""
    board = BigBoard()
    try:
        run_game(board, sys.stdin, sys.stdout, sys.stderr)
    except InputError as exc:
        print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())