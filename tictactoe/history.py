"""Per-user game history stored as a JSON array on disk."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Tuple

log = logging.getLogger(__name__)

Move = Tuple[int, int]


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _parse_timestamp(text: str) -> Optional[datetime]:
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


@dataclass
class GameSession:
    """One finished game: who played, how it ended and every move made."""

    player1_name: str = ""
    player2_name: str = ""
    game_mode: str = ""
    outcome: str = ""
    timestamp: Optional[datetime] = field(default_factory=_now)
    moves: List[Move] = field(default_factory=list)
    winner_symbol: str = ""

    def to_dict(self) -> dict:
        return {
            "player1Name": self.player1_name,
            "player2Name": self.player2_name,
            "gameMode": self.game_mode,
            "outcome": self.outcome,
            "timestamp": (
                self.timestamp.isoformat(timespec="seconds") if self.timestamp else ""
            ),
            "winnerSymbol": self.winner_symbol,
            "moves": [{"row": row, "col": col} for row, col in self.moves],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameSession":
        raw_moves = data.get("moves")
        moves: List[Move] = []
        if isinstance(raw_moves, list):
            for item in raw_moves:
                obj = item if isinstance(item, dict) else {}
                moves.append((_to_int(obj.get("row")), _to_int(obj.get("col"))))
        return cls(
            player1_name=_to_str(data.get("player1Name")),
            player2_name=_to_str(data.get("player2Name")),
            game_mode=_to_str(data.get("gameMode")),
            outcome=_to_str(data.get("outcome")),
            timestamp=_parse_timestamp(_to_str(data.get("timestamp"))),
            moves=moves,
            winner_symbol=_to_str(data.get("winnerSymbol")),
        )


def _dump(value: Any) -> str:
    return json.dumps(value, indent=4, sort_keys=True, ensure_ascii=False) + "\n"


class GameHistory:
    """The saved games of one user; a guest (empty username) keeps no history."""

    def __init__(self, username: str = "", directory: str | Path = "history") -> None:
        self.username = username
        self.path: Optional[Path] = None
        if username:
            folder = Path(directory)
            folder.mkdir(parents=True, exist_ok=True)
            self.path = folder / f"{username}_game_history.json"

    def _read_entries(self) -> Optional[list]:
        assert self.path is not None
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        try:
            data = json.loads(text)
        except ValueError:
            return []
        return data if isinstance(data, list) else []

    def save_game(self, session: GameSession) -> None:
        """Append ``session`` to the user's history file."""
        if self.path is None:
            log.debug("No username provided, skipping game history save")
            return
        entries = self._read_entries() or []
        entries.append(session.to_dict())
        self.path.write_text(_dump(entries), encoding="utf-8")

    def load_games(self) -> List[GameSession]:
        """Return the saved games, oldest first."""
        if self.path is None:
            log.debug("No username provided, returning empty game history")
            return []
        entries = self._read_entries()
        if entries is None:
            log.debug("History file %s does not exist", self.path)
            return []
        return [GameSession.from_dict(item) for item in entries if isinstance(item, dict)]

    def clear_history(self) -> None:
        """Remove every saved game of the user."""
        if self.path is None:
            log.debug("No username provided, skipping clear history")
            return
        self.path.write_text(_dump([]), encoding="utf-8")