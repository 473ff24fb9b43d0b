"""Game state of a single 3x3 board: turns, wins, ties, scores and history."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from tictactoe.ai import EMPTY, AIPlayer, Difficulty
from tictactoe.history import GameHistory, GameSession

log = logging.getLogger(__name__)

Cell = Tuple[int, int]
Symbols = Tuple[Tuple[str, ...], ...]

_LINES: Tuple[Tuple[Cell, Cell, Cell], ...] = (
    *(((r, 0), (r, 1), (r, 2)) for r in range(3)),
    *(((0, c), (1, c), (2, c)) for c in range(3)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class GameMode(str, Enum):
    """Who plays the second side; the value is the label saved in the history."""

    PLAYER_VS_PLAYER = "Player vs Player"
    PLAYER_VS_AI = "Player vs AI"


class InvalidMoveError(ValueError):
    """Raised when a move targets a cell that is taken or off the board."""


@dataclass(frozen=True)
class MoveResult:
    """What one call to :meth:`GameBoard.play` did.

    ``board`` shows the marks after the turn, taken before any reset that a
    finished game causes.
    """

    move: Cell
    symbol: str
    board: Symbols
    ai_move: Optional[Cell] = None
    outcome: Optional[str] = None
    message: Optional[str] = None
    winner_symbol: str = ""

    @property
    def finished(self) -> bool:
        return self.outcome is not None


class GameBoard:
    """A tic-tac-toe board for two people or for a person against the computer."""

    def __init__(
        self,
        username: str = "",
        history: Optional[GameHistory] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.username = username
        self.history = history if history is not None else GameHistory(username)
        self._rng = rng
        self.board: List[List[int]] = [[0] * 3 for _ in range(3)]
        self.current_player = 1
        self.game_mode = GameMode.PLAYER_VS_PLAYER
        self.ai_difficulty = Difficulty.EASY
        self.ai_player: Optional[AIPlayer] = None
        self.player_symbol = "X"
        self.ai_symbol = "O"
        self.player1_name = ""
        self.player2_name = ""
        self.player1_score = 0
        self.player2_score = 0
        self.tie_score = 0
        self.moves: List[Cell] = []

    # configuration

    def _new_ai(self) -> AIPlayer:
        return AIPlayer(self.ai_symbol, self.player_symbol, self.ai_difficulty, self._rng)

    def set_game_mode(self, mode: GameMode | str) -> None:
        self.game_mode = GameMode(mode)
        if self.game_mode is GameMode.PLAYER_VS_AI:
            self.ai_symbol = "X" if self.player_symbol == "O" else "O"
            self.ai_player = self._new_ai()
            self.player2_name = "AI"
        else:
            self.ai_player = None
            self.player_symbol = "X"
            self.ai_symbol = "O"
        self.reset()

    def set_ai_difficulty(self, difficulty: Difficulty | str) -> None:
        self.ai_difficulty = Difficulty(difficulty)
        if self.game_mode is GameMode.PLAYER_VS_AI:
            self.ai_symbol = "X" if self.player_symbol == "O" else "O"
            self.ai_player = self._new_ai()
        self.reset()

    def set_player_names(self, player1: str, player2: str) -> None:
        """Name both sides; blanks fall back to the username or default names."""
        self.player1_name = player1 or self.username or "Player 1"
        if self.game_mode is GameMode.PLAYER_VS_AI:
            self.player2_name = "AI"
        else:
            self.player2_name = player2 or "Player 2"

    def set_player_symbol(self, symbol: str) -> None:
        """Choose the person's mark against the computer; ignored between two people."""
        if symbol not in ("X", "O"):
            raise ValueError(f"Invalid symbol: {symbol!r}")
        if self.game_mode is GameMode.PLAYER_VS_AI:
            self.player_symbol = symbol
            self.ai_symbol = "X" if symbol == "O" else "O"
            self.ai_player = self._new_ai()
            self.reset()
        else:
            log.debug(
                "Symbol selection ignored in PlayerVsPlayer mode; Player 1 is X, Player 2 is O"
            )
            self.player_symbol = "X"
            self.ai_symbol = "O"

    # state

    def _symbol_of(self, player: int) -> str:
        if self.game_mode is GameMode.PLAYER_VS_PLAYER:
            return "X" if player == 1 else "O"
        return self.player_symbol if player == 1 else self.ai_symbol

    @property
    def symbols(self) -> Symbols:
        """The marks on the board, with an empty string for a free cell."""
        return tuple(
            tuple(self._symbol_of(value) if value else "" for value in row)
            for row in self.board
        )

    def _is_full(self) -> bool:
        return all(value for row in self.board for value in row)

    def check_win(self) -> bool:
        """Return True when either side fills a row, column or diagonal."""
        for line in _LINES:
            (r0, c0), (r1, c1), (r2, c2) = line
            first = self.board[r0][c0]
            if first and first == self.board[r1][c1] == self.board[r2][c2]:
                return True
        return False

    def reset(self) -> None:
        """Clear the board and give the first turn to player one."""
        self.board = [[0] * 3 for _ in range(3)]
        self.current_player = 1
        self.moves = []

    def status_text(self) -> str:
        if self.game_mode is GameMode.PLAYER_VS_AI and self.current_player == 2:
            name = "AI"
        else:
            name = self.player1_name if self.current_player == 1 else self.player2_name
        return f"Current Player: {name} ({self._symbol_of(self.current_player)})"

    def score_text(self) -> str:
        second = "AI" if self.game_mode is GameMode.PLAYER_VS_AI else self.player2_name
        return (
            f"Score: {self.player1_name}: {self.player1_score}, "
            f"{second}: {self.player2_score}, Ties: {self.tie_score}"
        )

    # play

    def _finish(
        self,
        move: Cell,
        symbol: str,
        ai_move: Optional[Cell],
        outcome: str,
        message: str,
        winner_symbol: str,
    ) -> MoveResult:
        snapshot = self.symbols
        if self.username:
            self.history.save_game(
                GameSession(
                    player1_name=self.player1_name,
                    player2_name=self.player2_name,
                    game_mode=self.game_mode.value,
                    outcome=outcome,
                    moves=list(self.moves),
                    winner_symbol=winner_symbol,
                )
            )
        self.reset()
        return MoveResult(
            move=move,
            symbol=symbol,
            board=snapshot,
            ai_move=ai_move,
            outcome=outcome,
            message=message,
            winner_symbol=winner_symbol,
        )

    def play(self, row: int, col: int) -> MoveResult:
        """Place the current player's mark, then let the computer answer if it is its turn."""
        if not (0 <= row < 3 and 0 <= col < 3):
            raise InvalidMoveError(f"Cell ({row}, {col}) is off the board")
        if self.board[row][col]:
            raise InvalidMoveError(f"Cell ({row}, {col}) is already filled")

        move = (row, col)
        player = self.current_player
        symbol = self._symbol_of(player)
        self.board[row][col] = player
        self.moves.append(move)
        self.current_player = 3 - player

        if self.check_win():
            if player == 1:
                winner = self.player1_name
                self.player1_score += 1
            else:
                winner = self.player2_name
                self.player2_score += 1
            return self._finish(move, symbol, None, f"{winner} wins", f"{winner} wins!", symbol)

        if self._is_full():
            self.tie_score += 1
            return self._finish(move, symbol, None, "Tie", "It's a tie!", "")

        ai_move: Optional[Cell] = None
        if (
            self.game_mode is GameMode.PLAYER_VS_AI
            and self.current_player == 2
            and self.ai_player is not None
        ):
            ai_board = [
                [
                    EMPTY if value == 0 else (self.player_symbol if value == 1 else self.ai_symbol)
                    for value in board_row
                ]
                for board_row in self.board
            ]
            ai_move = self.ai_player.make_move(ai_board)
            if ai_move is not None:
                ai_row, ai_col = ai_move
                self.board[ai_row][ai_col] = 2
                self.moves.append(ai_move)
                self.current_player = 1

            if self.check_win():
                self.player2_score += 1
                return self._finish(move, symbol, ai_move, "AI wins", "AI wins!", self.ai_symbol)
            if self._is_full():
                self.tie_score += 1
                return self._finish(move, symbol, ai_move, "Tie", "It's a tie!", "")

        return MoveResult(move=move, symbol=symbol, board=self.symbols, ai_move=ai_move)