"""
Pickup count for the active episode
"""


class Scoreboard:
    """Running score; only grows within an episode"""

    def __init__(self):
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def reset(self):
        self._value = 0

    def add(self, n: int = 1):
        assert n >= 0, f"score increments must be non-negative, got {n}"
        self._value += n
        assert self._value >= 0

    def final(self) -> int:
        """Result handed to the game-over transition"""
        return self._value
