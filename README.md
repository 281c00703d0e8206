# ultitactoe

Ultimate tic-tac-toe for two players sharing one terminal.

The board is a 3×3 grid of small tic-tac-toe boards. Complete a row, column or diagonal on a small board to win it. Win three small boards in a row, column or diagonal of the big board to win the game.

## Installing

```
pip install .
```

## Playing

```
ultitactoe
```

Player X goes first and the players take turns. Every coordinate is a pair of integers from 0 to 2, typed as `<x> <y>`.

- On the first turn you choose a small board, then the cell to play in it.
- After that, the cell just played decides which small board the next player must play in: playing cell `(1, 2)` sends your opponent to small board `(1, 2)`.
- A move on a cell that is already filled, or on a small board that is already won, is reported as an error; the mark is not placed and the turn passes to the other player.

The game ends when one player wins the big board, and the winner is announced. Input that is not an integer, a coordinate outside 0 to 2, or input that runs out stops the game with an error message.

## Using it as a library

`ultitactoe.state` holds the game state:

- `BigBoard` is the whole game. `boards` is its 3×3 grid of `SmallBoard`. `current_player` is a `Player`. `last_played` is the `Position` of the small board played last. `status` is a `GameStatus`.
- `BigBoard.play_move(i, j, x, y)` puts the current player's mark at cell `(x, y)` of small board `(i, j)`. It raises `MoveError` for coordinates out of range, a finished small board or a filled cell.
- `SmallBoard.detect()` and `BigBoard.detect()` return a `BoardStatus` (`X_WON`, `O_WON`, `DRAW` or `IN_PROGRESS`). They judge from the lines through the `last_played` position.
- `render()` on either board returns the board drawn as text.

```python
from ultitactoe.state import BigBoard, BoardStatus, Position

board = BigBoard()
board.play_move(1, 1, 0, 0)    # small board (1, 1), cell (0, 0)
board.last_played = Position(1, 1)
board.boards[1][1].last_played = Position(0, 0)
print(board.render())
print(board.boards[1][1].detect() is BoardStatus.IN_PROGRESS)
```

`ultitactoe.game.run_game(board, input_stream, output_stream, error_stream)` plays a whole game over any text streams, which lets you script a game or test one. It returns the `BoardStatus` that decided the game. It raises `InputError` when the input is unusable or runs out.

```python
import io
from ultitactoe.game import run_game
from ultitactoe.state import BigBoard

moves = io.StringIO("1 1 0 0\n")
out, err = io.StringIO(), io.StringIO()
run_game(BigBoard(), moves, out, err)   # raises InputError once the moves run out
```

## What it does not do

There is no computer opponent, no undo, and no way to save or load a game. Both players play at the same terminal.

## Running the tests

```
pip install .[test]
pytest
```