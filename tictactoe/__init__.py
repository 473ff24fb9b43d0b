"""Tic-tac-toe with local accounts, a minimax computer opponent, game history and replay."""

__version__ = "1.0.0"
__all__ = ["ai", "history", "accounts", "game", "replay", "cli"]