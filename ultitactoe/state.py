"""Board state for ultimate tic-tac-toe: small boards, the big board and their rules."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum

_SIZE = 3
_EMPTY = " "
_SMALL_SEPARATOR = "---|---|---  "
_BIG_SEPARATOR = "---|---|---   ---|---|---   ---|---|---   "


class GameStatus(Enum):
    """Overall state of a game."""

    START = "start"
    PLAYING = "playing"
    PAUSED = "paused"
    OVER = "over"


class BoardStatus(Enum):
    """Outcome of a single board."""

    BOARD_START = "board_start"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"


class Player(Enum):
    """A player, identified by the mark it puts on the board."""

    X = "X"
    O = "O"  # noqa: E741
    NONE = " "


@dataclass(frozen=True)
class Position:
    """A cell or board coordinate; (-1, -1) means nothing has been played yet."""

    x: int = -1
    y: int = -1


class MoveError(ValueError):
    """Raised when a move cannot be played."""


def _in_range(value: int) -> bool:
    return 0 <= value < _SIZE


def _lines_through(position: Position) -> Iterator[list[tuple[int, int]]]:
    """Yield the row, column and diagonals that pass through ``position``."""
    x, y = position.x, position.y
    yield [(x, col) for col in range(_SIZE)]
    yield [(row, y) for row in range(_SIZE)]
    if x == y:
        yield [(n, n) for n in range(_SIZE)]
    if x + y == _SIZE - 1:
        yield [(n, _SIZE - 1 - n) for n in range(_SIZE)]


def _winner(
    value_at: Callable[[int, int], Hashable],
    position: Position,
    winners: Mapping[Hashable, BoardStatus],
) -> BoardStatus | None:
    for line in _lines_through(position):
        first, *rest = (value_at(row, col) for row, col in line)
        if all(value == first for value in rest) and first in winners:
            return winners[first]
    return None


def _empty_cells() -> list[list[str]]:
    return [[_EMPTY] * _SIZE for _ in range(_SIZE)]


@dataclass
class SmallBoard:
    """A 3x3 tic-tac-toe board inside the big board."""

    cells: list[list[str]] = field(default_factory=_empty_cells)
    last_played: Position = field(default_factory=Position)
    status: BoardStatus = BoardStatus.BOARD_START

    def render(self) -> str:
        """Return the board drawn as a 3x3 grid."""
        lines = []
        for index, row in enumerate(self.cells):
            lines.append("|".join(f" {cell} " for cell in row) + "  ")
            lines.append(_SMALL_SEPARATOR if index < _SIZE - 1 else "  ")
        return "\n".join(lines) + "\n"

    def detect(self) -> BoardStatus:
        """Return the board's outcome, judged from the lines through the last move."""
        if not (_in_range(self.last_played.x) and _in_range(self.last_played.y)):
            return BoardStatus.IN_PROGRESS
        winners = {Player.X.value: BoardStatus.X_WON, Player.O.value: BoardStatus.O_WON}
        won = _winner(lambda r, c: self.cells[r][c], self.last_played, winners)
        if won is not None:
            return won
        if all(cell != _EMPTY for row in self.cells for cell in row):
            return BoardStatus.DRAW
        return BoardStatus.IN_PROGRESS


def _small_boards() -> list[list[SmallBoard]]:
    return [[SmallBoard() for _ in range(_SIZE)] for _ in range(_SIZE)]


@dataclass
class BigBoard:
    """The 3x3 grid of small boards that makes up a game."""

    boards: list[list[SmallBoard]] = field(default_factory=_small_boards)
    current_player: Player = Player.X
    last_played: Position = field(default_factory=Position)
    status: GameStatus = GameStatus.START

    def render(self) -> str:
        """Return all nine small boards drawn side by side."""
        lines = []
        for big_row in self.boards:
            for k in range(_SIZE):
                lines.append(
                    "".join(
                        f" {cell} " + ("|" if index < _SIZE - 1 else "   ")
                        for small in big_row
                        for index, cell in enumerate(small.cells[k])
                    )
                )
                lines.append(_BIG_SEPARATOR if k < _SIZE - 1 else "  ")
        return "\n".join(lines) + "\n"

    def play_move(self, i: int, j: int, x: int, y: int) -> None:
        """Put the current player's mark at cell (x, y) of small board (i, j)."""
        if not all(_in_range(value) for value in (i, j, x, y)):
            raise MoveError("Invalid coordinate(s).")
        small = self.boards[i][j]
        if small.status not in (BoardStatus.IN_PROGRESS, BoardStatus.BOARD_START):
            raise MoveError("Small board is already finished.")
        if small.cells[x][y] != _EMPTY:
            raise MoveError("Already filled spot.")
        small.cells[x][y] = Player.X.value if self.current_player is Player.X else Player.O.value
        if self.status is GameStatus.START:
            self.status = GameStatus.PLAYING

    def detect(self) -> BoardStatus:
        """Return the game's outcome, judged from the small boards' statuses."""
        if not (_in_range(self.last_played.x) and _in_range(self.last_played.y)):
            return BoardStatus.IN_PROGRESS
        winners = {BoardStatus.X_WON: BoardStatus.X_WON, BoardStatus.O_WON: BoardStatus.O_WON}
        won = _winner(lambda r, c: self.boards[r][c].status, self.last_played, winners)
        if won is not None:
            return won
        if all(small.status is BoardStatus.DRAW for row in self.boards for small in row):
            return BoardStatus.DRAW
        return BoardStatus.IN_PROGRESS