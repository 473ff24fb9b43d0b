"""Computer opponent: random moves on Easy, alpha-beta minimax otherwise."""

from __future__ import annotations

import math
import random
from enum import Enum
from typing import Iterator, List, Optional, Tuple

EMPTY = " "

Board = List[List[str]]
Cell = Tuple[int, int]

_LINES: Tuple[Tuple[Cell, Cell, Cell], ...] = (
    *(((r, 0), (r, 1), (r, 2)) for r in range(3)),
    *(((0, c), (1, c), (2, c)) for c in range(3)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)

WIN_SCORE = 10


class Difficulty(str, Enum):
    """How hard the computer plays."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @property
    def search_depth(self) -> int:
        return {Difficulty.HARD: 9, Difficulty.MEDIUM: 2, Difficulty.EASY: 0}[self]


def empty_cells(board: Board) -> Iterator[Cell]:
    """Yield the free cells of ``board`` in row-major order."""
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == EMPTY:
                yield (r, c)


def is_board_full(board: Board) -> bool:
    """Return True when no cell of ``board`` is free."""
    return all(cell != EMPTY for row in board for cell in row)


def check_win(board: Board, symbol: str) -> bool:
    """Return True when ``symbol`` fills a row, column or diagonal."""
    return any(all(board[r][c] == symbol for r, c in line) for line in _LINES)


class AIPlayer:
    """A computer player that picks moves on a 3x3 board."""

    def __init__(
        self,
        ai_symbol: str,
        player_symbol: str,
        difficulty: Difficulty | str = Difficulty.EASY,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.ai_symbol = ai_symbol
        self.player_symbol = player_symbol
        self.difficulty = Difficulty(difficulty)
        self._rng = rng if rng is not None else random.Random()

    def make_move(self, board: Board) -> Optional[Cell]:
        """Place the computer's symbol on ``board`` and return the chosen cell.

        Returns None when the board has no free cell; the board is then left
        untouched.
        """
        if self.difficulty is Difficulty.EASY:
            choices = list(empty_cells(board))
            move = self._rng.choice(choices) if choices else None
        else:
            move = self._best_move(board)

        if move is not None:
            r, c = move
            board[r][c] = self.ai_symbol
        return move

    def evaluate(self, board: Board) -> int:
        """Score a position: +10 if the computer has won, -10 if the player has, else 0."""
        if check_win(board, self.ai_symbol):
            return WIN_SCORE
        if check_win(board, self.player_symbol):
            return -WIN_SCORE
        return 0

    def _best_move(self, board: Board) -> Optional[Cell]:
        depth = self.difficulty.search_depth
        best_score = -math.inf
        best: Optional[Cell] = None
        for r, c in list(empty_cells(board)):
            board[r][c] = self.ai_symbol
            score = self._minimax(board, depth - 1, False, -math.inf, math.inf)
            board[r][c] = EMPTY
            if score > best_score:
                best_score = score
                best = (r, c)
        return best

    def _minimax(
        self, board: Board, depth: int, maximizing: bool, alpha: float, beta: float
    ) -> float:
        score = self.evaluate(board)
        if score in (WIN_SCORE, -WIN_SCORE) or is_board_full(board) or depth == 0:
            return score

        symbol = self.ai_symbol if maximizing else self.player_symbol
        best = -math.inf if maximizing else math.inf
        # A cut-off ends the scan of the current row only.
        for row in board:
            for c, cell in enumerate(row):
                if cell != EMPTY:
                    continue
                row[c] = symbol
                value = self._minimax(board, depth - 1, not maximizing, alpha, beta)
                row[c] = EMPTY
                if maximizing:
                    best = max(best, value)
                    alpha = max(alpha, value)
                else:
                    best = min(best, value)
                    beta = min(beta, value)
                if beta <= alpha:
                    break
        return best