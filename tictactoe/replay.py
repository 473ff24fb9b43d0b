"""Listing and step-by-step replay of saved games."""

from __future__ import annotations

from typing import Iterator, Tuple

from tictactoe.history import GameSession

ReplayMove = Tuple[int, int, str]
Frame = Tuple[Tuple[str, ...], ...]


def format_session(index: int, session: GameSession) -> str:
    """One line describing a saved game; ``index`` is its zero-based position."""
    stamp = session.timestamp.strftime("%Y-%m-%d %H:%M:%S") if session.timestamp else ""
    return (
        f"Game {index + 1}: {session.player1_name} vs {session.player2_name} "
        f"({session.game_mode}) - {session.outcome} [{stamp}]"
    )


def _symbol_for(session: GameSession, move_index: int) -> str:
    first = move_index % 2 == 0
    if session.game_mode == "Player vs Player":
        return "X" if first else "O"
    winner = session.winner_symbol
    loser = "O" if winner == "X" else "X"
    if "Player wins" in session.outcome:
        return winner if first else loser
    if "AI wins" in session.outcome:
        return loser if first else winner
    return "O" if first else "X"


def replay_moves(session: GameSession) -> Iterator[ReplayMove]:
    """Yield each saved move as ``(row, col, symbol)`` in the order it was played."""
    for move_index, (row, col) in enumerate(session.moves):
        yield row, col, _symbol_for(session, move_index)


def replay_frames(session: GameSession) -> Iterator[Frame]:
    """Yield the board after each move; moves off the board leave it unchanged."""
    grid = [[""] * 3 for _ in range(3)]
    for row, col, symbol in replay_moves(session):
        if 0 <= row < 3 and 0 <= col < 3:
            grid[row][col] = symbol
        yield tuple(tuple(line) for line in grid)