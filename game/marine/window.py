"""
Arcade windows for the marine dive game.

``DiveWindow`` only draws a ``Snapshot``; ``PlayWindow`` adds keyboard input
and drives a ``Session`` from the frame clock.
"""

import time
from typing import Any, Dict, List, Optional

import arcade

from .clock import FrameClock
from .config import DiveConfig
from .leaderboard import Leaderboard, format_board
from .session import GameResult, InputSignals, Session, SessionState, Snapshot
from .utils import clamp


class DiveWindow(arcade.Window):
    """Arcade window for rendering a snapshot of the dive game"""

    def __init__(self, config: DiveConfig, title: str = "Marine Dive"):
        super().__init__(int(config.width), int(config.height), title)
        self.config = config
        self.snapshot: Optional[Snapshot] = None

        # Colors
        self.WATER_C = (2, 132, 199)
        self.SURFACE_C = (186, 230, 253)
        self.SEABED_C = (20, 83, 45)
        self.JELLY_C = (167, 139, 250)
        self.PEARL_C = (229, 231, 235)
        self.SHELL_C = (6, 95, 70)
        self.HEAD_C = (22, 163, 74)
        self.HUD_C = (229, 231, 235)
        self.HIGHLIGHT_C = (250, 204, 21)

    def sy(self, y: float) -> float:
        """Simulation y grows downward; arcade's grows upward"""
        return self.config.height - y

    def on_draw(self):
        self.clear()
        cfg = self.config
        w, h = cfg.width, cfg.height

        # Water, surface line and seabed
        arcade.draw_lrbt_rectangle_filled(0, w, 0, h, self.WATER_C)
        arcade.draw_lrbt_rectangle_filled(0, w, self.sy(cfg.surface_y), self.sy(cfg.surface_y) + 2, self.SURFACE_C)
        arcade.draw_lrbt_rectangle_filled(0, w, 0, self.sy(cfg.seabed_y), self.SEABED_C)

        snap = self.snapshot
        if snap is None:
            return

        for j in snap.hazards:
            arcade.draw_ellipse_filled(j.x, self.sy(j.y), j.radius * 1.8, j.radius * 1.4, self.JELLY_C)

        for p in snap.pickups:
            arcade.draw_circle_filled(p.x, self.sy(p.y), p.radius, self.PEARL_C)

        # Turtle: shell + head, head nods with vertical speed
        t = snap.player
        tilt = clamp(t.vy / cfg.max_speed, -0.6, 0.6)
        arcade.draw_ellipse_filled(t.x, self.sy(t.y), t.radius * 3.2, t.radius * 2.4, self.SHELL_C)
        arcade.draw_circle_filled(t.x + t.radius * 1.4, self.sy(t.y) - tilt * t.radius, t.radius * 0.7, self.HEAD_C)

        # HUD
        arcade.draw_lrbt_rectangle_filled(14, 114, h - 52, h - 12, (0, 0, 0, 90))
        arcade.draw_text(str(snap.score), 24, h - 42, self.HUD_C, 24, bold=True)

        if snap.state is SessionState.MENU:
            self._draw_banner("Marine Dive", "Hold Space to dive: dodge jellyfish, collect pearls. Press Space to start")
        elif snap.state is SessionState.GAMEOVER:
            self._draw_banner("Dive over!", f"Pearls: {snap.score}. Space to dive again, R for menu")

    def _draw_banner(self, title: str, subtitle: str):
        cx, cy = self.config.width / 2, self.config.height / 2
        arcade.draw_lrbt_rectangle_filled(cx - 330, cx + 330, cy - 50, cy + 50, (15, 23, 42, 200))
        arcade.draw_text(title, cx, cy + 10, self.HUD_C, 26, anchor_x="center", bold=True)
        arcade.draw_text(subtitle, cx, cy - 25, self.HUD_C, 12, anchor_x="center")


class PlayWindow(DiveWindow):
    """Interactive game: Space to start/dive, R to go back to the menu, C to clear scores"""

    def __init__(self, session: Session, leaderboard: Optional[Leaderboard] = None, title: str = "Marine Dive"):
        super().__init__(session.config, title)
        self.session = session
        self.leaderboard = leaderboard
        self.clock = FrameClock(max_dt=session.config.max_dt)
        self._diving = False
        self._activate = False
        self.snapshot = session.snapshot()

        # Top list shown over the game-over banner
        self.board: List[Dict[str, Any]] = []
        self.saved_for: Optional[str] = None
        if leaderboard is not None:
            self.board = leaderboard.load()
            session.add_game_over_listener(self.on_game_over)

    def on_game_over(self, result: GameResult):
        # registered after the leaderboard itself, so the board is current
        self.board = self.leaderboard.load()
        self.saved_for = result.display_name

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.SPACE:
            if self.session.state is not SessionState.PLAYING:
                self._activate = True
            self._diving = True
        elif symbol == arcade.key.R:
            self.session.reset_to_menu()
            self._diving = False
        elif symbol == arcade.key.C and self.leaderboard is not None:
            if self.session.state is not SessionState.PLAYING:
                self.leaderboard.clear()
                self.board = []

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol == arcade.key.SPACE:
            self._diving = False

    def on_update(self, delta_time: float):
        dt = self.clock.delta(time.perf_counter() * 1000.0)
        self.session.tick(InputSignals(activate=self._activate, hold_dive=self._diving), dt)
        self._activate = False
        self.snapshot = self.session.snapshot()

    def on_draw(self):
        super().on_draw()
        if self.leaderboard is None or self.session.state is SessionState.PLAYING:
            return

        x, y = self.config.width - 230, self.config.height - 30
        if self.session.state is SessionState.GAMEOVER and self.saved_for:
            arcade.draw_text(f"Saved for {self.saved_for}", x, y, self.HUD_C, 12, bold=True)
            y -= 20
        highlight = self.saved_for or self.session.display_name
        for row in format_board(self.board, highlight=highlight):
            color = self.HIGHLIGHT_C if row.startswith("*") else self.HUD_C
            arcade.draw_text(row, x, y, color, 11, font_name="Courier New")
            y -= 16
        arcade.draw_text("C clears scores", x, y - 4, self.HUD_C, 10)
