"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def dist2(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared distance between two points"""
    dx = x1 - x2
    dy = y1 - y2
    return dx * dx + dy * dy


def circles_overlap(x1, y1, r1, x2, y2, r2, slack: float = 0.0) -> bool:
    """Strict circle overlap test; ``slack`` shrinks the radius sum"""
    rr = r1 + r2 - slack
    return dist2(x1, y1, x2, y2) < rr * rr


def sanitize_dt(dt: float, max_dt: float) -> float:
    """Clamp a frame delta into [0, max_dt]; NaN and negatives become 0"""
    if dt is None or math.isnan(dt) or dt < 0.0:
        return 0.0
    return min(dt, max_dt)
