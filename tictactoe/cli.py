"""Interactive terminal front end: accounts, game modes, play and history."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO

from tictactoe.accounts import (
    DEFAULT_USERS_FILE,
    AuthenticationError,
    PasswordStrength,
    RegistrationError,
    UserRegistry,
    check_password_strength,
)
from tictactoe.ai import Difficulty
from tictactoe.game import GameBoard, GameMode, InvalidMoveError
from tictactoe.history import GameHistory
from tictactoe.replay import format_session, replay_frames, replay_moves

_SEPARATOR = "\n---+---+---\n"
_BAD_CHOICE = "Please choose one of the listed options."
_PROMPT_USER = "Username: "
_PROMPT_HIDDEN = "Password: "
_PROMPT_CONFIRM = "Confirm password: "


def render_board(board: Sequence[Sequence[str]]) -> str:
    """Draw a 3x3 board of marks; free cells (empty strings) show as dots."""
    return _SEPARATOR.join(
        "|".join(f" {cell or '.'} " for cell in row) for row in board
    )


class TerminalApp:
    """The whole game driven through line-based prompts."""

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None,
        data_dir: str | Path = ".",
    ) -> None:
        self._input_func = input_func
        self._out = output if output is not None else sys.stdout
        self.data_dir = Path(data_dir)
        self.registry = UserRegistry(self.data_dir / DEFAULT_USERS_FILE)
        self.username = ""

    # io helpers

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> str:
        reader = self._input_func if self._input_func is not None else input
        return reader(prompt)

    def _choose(self, title: str, options: Sequence[str]) -> str:
        self._say(title)
        for number, label in enumerate(options, start=1):
            self._say(f"  {number}) {label}")
        return self._ask("> ").strip()

    def _confirm(self, question: str) -> bool:
        return self._ask(f"{question} [y/N] ").strip().lower() in ("y", "yes")

    def _history(self) -> GameHistory:
        return GameHistory(self.username, self.data_dir / "history")

    # entry point

    def run(self) -> int:
        """Run until the user quits or input ends; return the exit status."""
        try:
            while self._login_menu():
                if not self._mode_menu():
                    break
        except (EOFError, KeyboardInterrupt):
            self._say()
        finally:
            self.registry.save()
        return 0

    # accounts

    def _login_menu(self) -> bool:
        while True:
            choice = self._choose(
                "Tic-tac-toe", ["Login", "Register", "Play as guest", "Quit"]
            )
            if choice == "1":
                if self._login():
                    return True
            elif choice == "2":
                self._register()
            elif choice == "3":
                self.username = ""
                return True
            elif choice == "4":
                return False
            else:
                self._say(_BAD_CHOICE)

    def _login(self) -> bool:
        username = self._ask(_PROMPT_USER)
        password = self._ask(_PROMPT_HIDDEN)
        try:
            self.username = self.registry.authenticate(username, password)
        except AuthenticationError as exc:
            self._say(f"Error: {exc}")
            return False
        self._say("LOGGED IN SUCCESSFULLY!")
        return True

    def _register(self) -> None:
        username = self._ask(_PROMPT_USER)
        password = self._ask(_PROMPT_HIDDEN)
        confirm = self._ask(_PROMPT_CONFIRM)
        candidate = password.strip()
        if (
            username.strip()
            and candidate
            and candidate == confirm.strip()
            and check_password_strength(candidate) is PasswordStrength.MEDIUM
            and not self._confirm("Password is medium strength. Proceed anyway?")
        ):
            return
        try:
            self.registry.register(username, password, confirm, accept_medium=True)
        except RegistrationError as exc:
            self._say(f"Error: {exc}")
            return
        self._say("REGISTERED SUCCESSFULLY!")

    # game selection

    def _mode_menu(self) -> bool:
        """Return True to go back to the login menu, False to leave the program."""
        while True:
            choice = self._choose(
                "Game mode", ["Player vs Player", "Player vs AI", "Settings"]
            )
            if choice == "1":
                self._play(self._two_player_board())
            elif choice == "2":
                self._play(self._ai_board())
            elif choice == "3":
                action = self._settings()
                if action is not None:
                    return action
            else:
                self._say(_BAD_CHOICE)

    def _two_player_board(self) -> GameBoard:
        while True:
            player1 = self._ask("Player 1 name: ").strip()
            player2 = self._ask("Player 2 name: ").strip()
            if player1 and player2:
                break
            self._say("Player names cannot be empty")
        board = GameBoard(self.username, self._history())
        board.set_game_mode(GameMode.PLAYER_VS_PLAYER)
        board.set_player_names(player1, player2)
        return board

    def _ai_board(self) -> GameBoard:
        levels = list(Difficulty)
        while True:
            choice = self._choose("AI difficulty", [level.value for level in levels])
            if choice in ("1", "2", "3"):
                difficulty = levels[int(choice) - 1]
                break
            self._say(_BAD_CHOICE)
        while True:
            symbol = self._ask("Choose your symbol (X/O): ").strip().upper()[:1]
            if symbol in ("X", "O"):
                break
            self._say(_BAD_CHOICE)
        board = GameBoard(self.username, self._history())
        board.set_game_mode(GameMode.PLAYER_VS_AI)
        board.set_ai_difficulty(difficulty)
        board.set_player_symbol(symbol)
        board.set_player_names(self.username or "Player", "AI")
        return board

    # play

    def _play(self, board: GameBoard) -> None:
        self._say(board.score_text())
        while True:
            self._say(render_board(board.symbols))
            self._say(board.status_text())
            command = self._ask("Move (row col), 'r' to reset, 'q' to return: ").strip()
            if command.lower() == "q":
                return
            if command.lower() == "r":
                board.reset()
                continue
            parts = command.replace(",", " ").split()
            if len(parts) != 2 or not all(part.isdigit() for part in parts):
                self._say("Enter row and column as two numbers from 1 to 3.")
                continue
            row, col = (int(part) - 1 for part in parts)
            try:
                result = board.play(row, col)
            except InvalidMoveError as exc:
                self._say(f"Invalid move: {exc}")
                continue
            if result.ai_move is not None:
                ai_row, ai_col = result.ai_move
                self._say(f"AI plays row {ai_row + 1}, col {ai_col + 1}")
            if result.finished:
                self._say(render_board(result.board))
                self._say(result.message or "")
                self._say(board.score_text())

    # settings and history

    def _settings(self) -> Optional[bool]:
        """Return True to switch account, False to exit, None to go back."""
        while True:
            choice = self._choose(
                "Settings", ["Switch account", "History", "Exit", "Back"]
            )
            if choice == "1":
                self.username = ""
                return True
            if choice == "2":
                self._show_history()
            elif choice == "3":
                return False
            elif choice == "4":
                return None
            else:
                self._say(_BAD_CHOICE)

    def _show_history(self) -> None:
        history = self._history()
        while True:
            games = history.load_games()
            if not games:
                self._say("No games played yet.")
            for index, session in enumerate(games):
                self._say(format_session(index, session))
            choice = self._ask(
                "Game number to replay, 'c' to clear, 'b' to go back: "
            ).strip().lower()
            if choice == "b":
                return
            if choice == "c":
                history.clear_history()
                continue
            if choice.isdigit() and 1 <= int(choice) <= len(games):
                self._replay(games[int(choice) - 1])
            else:
                self._say(_BAD_CHOICE)

    def _replay(self, session) -> None:
        steps = zip(replay_moves(session), replay_frames(session))
        for number, ((row, col, symbol), frame) in enumerate(steps, start=1):
            self._say(f"Move {number}: {symbol} at row {row + 1}, col {col + 1}")
            self._say(render_board(frame))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="tictactoe", description="Play tic-tac-toe.")
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding the users file and game history",
    )
    args = parser.parse_args(argv)
    return TerminalApp(data_dir=args.data_dir).run()


if __name__ == "__main__":
    sys.exit(main())