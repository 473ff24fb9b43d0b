# tictactoe

Tic-tac-toe for the terminal. You can play against a friend or against the
computer. If you log in with a local account, your games are saved, and you
can replay any past game move by move.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
tictactoe
tictactoe --data-dir path/to/data
```

`--data-dir` sets the directory that holds the accounts file and the game
history. It defaults to the current directory.

The start menu offers:

- **Login**: sign in with a registered username and password. Games played
  while logged in are saved to your history.
- **Register**: create an account. Surrounding spaces are removed from the
  username and passwords. Passwords are rated Weak, Medium or Strong:
  - a password shorter than 6 characters, or one with no ASCII letter or
    digit, is Weak and is refused;
  - a password of at least 8 characters with upper-case letters, lower-case
    letters and digits is Strong;
  - any other password is Medium, and you are asked whether to go ahead.
- **Play as guest**: play without an account. No history is kept.
- **Quit**.

After that, pick a game mode:

- **Player vs Player**: enter both names, neither of them blank. Player 1
  plays X and Player 2 plays O.
- **Player vs AI**: choose a difficulty, then your symbol (X or O).
  - *Easy* plays a random empty square.
  - *Medium* uses a minimax search that looks two moves deep.
  - *Hard* uses a minimax search over the rest of the game.

Enter a move as a row and a column, each from 1 to 3 (for example `2 2`).
Enter `r` to clear the board or `q` to go back to the game-mode menu. The
board keeps a running score of wins and ties until you leave it.

The **Settings** entry of the game-mode menu lets you switch account, view
your history, exit or go back. In the history view, enter a game number to
replay it move by move, `c` to clear your history, or `b` to go back.

## Data files

Accounts are stored in `registered_users.json` in the data directory.
Passwords are kept only as SHA-256 hashes. Each user's games go to
`history/<username>_game_history.json` under the same directory, as a JSON
array with the players, the game mode, the outcome, a timestamp, the winning
symbol and the list of moves.

## Using the library

You can use the game logic without the terminal front end:

```python
from tictactoe.game import GameBoard, GameMode

board = GameBoard()
board.set_game_mode(GameMode.PLAYER_VS_AI)
board.set_ai_difficulty("Hard")
board.set_player_symbol("X")
board.set_player_names("Alice", "AI")
result = board.play(1, 1)  # zero-based row and column
print(result.ai_move, result.finished)
print(board.status_text())
print(board.score_text())
```

`GameBoard.play` raises `InvalidMoveError` when the cell is taken or off the
board. It returns a `MoveResult` that holds the move, the computer's reply,
the board after the turn and, once the game is over, its outcome.

The other modules:

- `tictactoe.ai`: `AIPlayer`, the computer opponent, with `Difficulty`,
  `check_win` and `is_board_full`.
- `tictactoe.history`: `GameSession` and `GameHistory`, which read and write
  saved games.
- `tictactoe.accounts`: `UserRegistry`, `hash_password` and
  `check_password_strength`.
- `tictactoe.replay`: `format_session`, plus `replay_moves` and
  `replay_frames`, which turn a saved game back into the symbols placed and
  the boards in between.
- `tictactoe.cli`: `TerminalApp`, `render_board` and `main`.

## Limitations

There is no graphical interface. The terminal front end is the only way to
play. Accounts and history are plain local files, not shared between
machines.