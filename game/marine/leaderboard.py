"""
JSON-file leaderboard; the persistence side of a finished episode.
"""

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .session import GameResult

logger = logging.getLogger(__name__)


def _valid_entry(entry: Any) -> bool:
    if not isinstance(entry, dict):
        return False
    score = entry.get("score")
    # bool is an int subclass but never a real score
    return isinstance(score, int) and not isinstance(score, bool)


def format_board(entries: List[Dict[str, Any]], highlight: Optional[str] = None) -> List[str]:
    """Printable rows; entries named ``highlight`` are marked with ``*``"""
    if not entries:
        return ["  (no scores yet)"]
    rows = []
    for i, entry in enumerate(entries, 1):
        name = str(entry.get("name", "?"))
        mark = "*" if highlight and name == highlight else " "
        rows.append(f"{mark}{i:2d}. {name:16} {entry['score']}")
    return rows


class Leaderboard:
    """
    Top-N scores stored as a JSON list of ``{name, score, date}``.

    The last display name used is kept in a small text file next to the
    board (``<path>.name``). Instances are callable with a ``GameResult`` so
    they can be registered directly as a session game-over listener.
    """

    def __init__(self, path: str, capacity: int = 10):
        self.path = path
        self.capacity = capacity
        self.name_path = os.path.splitext(path)[0] + ".name"

    def load(self) -> List[Dict[str, Any]]:
        """Stored entries; missing or unreadable files give an empty board"""
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable leaderboard %s: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.warning("Ignoring malformed leaderboard %s", self.path)
            return []

        entries = [e for e in data if _valid_entry(e)]
        if len(entries) != len(data):
            logger.warning("Dropped %d malformed entries from %s", len(data) - len(entries), self.path)
        return entries

    def save(self, entries: List[Dict[str, Any]]):
        self._write_atomic(self.path, json.dumps(entries, indent=2))

    def add(self, result: GameResult) -> List[Dict[str, Any]]:
        """Record a result and return the updated top entries"""
        entries = self.load()
        entries.append({
            "name": result.display_name,
            "score": int(result.score),
            "date": datetime.now(timezone.utc).isoformat(),
        })
        # sort is stable: earlier entries stay ahead on ties
        entries.sort(key=lambda e: e["score"], reverse=True)
        top = entries[: self.capacity]
        self.save(top)
        return top

    def clear(self):
        if os.path.exists(self.path):
            os.remove(self.path)

    # ----------------------------
    # Remembered display name
    # ----------------------------

    def load_name(self) -> str:
        try:
            with open(self.name_path, "r", encoding="utf-8") as f:
                return f.read().strip()
        except OSError:
            return ""

    def save_name(self, name: str):
        self._write_atomic(self.name_path, (name or "").strip())

    def __call__(self, result: GameResult):
        self.add(result)

    @staticmethod
    def _write_atomic(path: str, text: str):
        """Write via a temp file in the same directory, then swap it in"""
        parent = os.path.dirname(path) or "."
        os.makedirs(parent, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=parent, prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


def attach_leaderboard(session, leaderboard: Leaderboard, name: Optional[str] = None, echo: bool = True) -> str:
    """
    Wire a leaderboard into a session.

    ``name=None`` reuses the remembered display name; an explicit name is
    remembered for next time. Every game over records the result and, with
    ``echo``, prints the updated board with the player's rows marked.
    Returns the display name in effect.
    """
    if name is None:
        name = leaderboard.load_name()
    elif name.strip():
        leaderboard.save_name(name)
    session.display_name = name

    def report(result: GameResult):
        top = leaderboard.add(result)
        if echo:
            print(f"\nSaved for {result.display_name} ({result.score} pearls). Top dives:")
            for row in format_board(top, highlight=result.display_name):
                print(row)

    session.add_game_over_listener(report)
    return session.display_name
