"""
Session - lifecycle and per-tick simulation of the marine dive game
--------------------------------------------------------------------
- States: menu -> playing -> gameover -> playing ..., reset to menu from anywhere
- One tick runs to completion: spawn -> advance/cull -> physics -> seabed check
  -> collisions -> score
- Game over freezes the world and hands the final result to listeners once

The session is the single owner of every entity; presentation code only ever
sees a ``Snapshot`` copy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .collision import resolve_collisions
from .config import DEFAULT_CONFIG, DiveConfig
from .entities import Hazard, Pickup, PlayerBody
from .physics import step_player
from .scoring import Scoreboard
from .spawner import EntityStore, UniformSource
from .utils import sanitize_dt

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAMEOVER = "gameover"


@dataclass(frozen=True)
class InputSignals:
    """Logical input for one tick"""
    activate: bool = False  # edge: starts an episode from menu/gameover
    hold_dive: bool = False  # level: true while dive is held


@dataclass(frozen=True)
class GameResult:
    """Final result handed to the persistence collaborator"""
    display_name: str
    score: int


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the world for rendering"""
    player: PlayerBody
    hazards: Tuple[Hazard, ...]
    pickups: Tuple[Pickup, ...]
    score: int
    state: SessionState


@dataclass
class TickOutcome:
    simulated: bool = False
    died: bool = False
    cause: Optional[str] = None  # "seabed" or "hazard"
    collected: int = 0


GameOverListener = Callable[[GameResult], None]


class Session:
    """Owns the state machine, the player, the entity store and the score"""

    def __init__(
        self,
        config: Optional[DiveConfig] = None,
        rng: Optional[UniformSource] = None,
        display_name: str = "",
    ):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.store = EntityStore(self.config, rng)
        self.scoreboard = Scoreboard()
        self.player = self._spawn_player()
        self.state = SessionState.MENU
        self.last_result: Optional[GameResult] = None

        self._display_name = ""
        self.display_name = display_name
        self._listeners: List[GameOverListener] = []

    # ----------------------------
    # Read-only accessors
    # ----------------------------

    @property
    def score(self) -> int:
        return self.scoreboard.value

    @property
    def hazards(self) -> List[Hazard]:
        return self.store.hazards

    @property
    def pickups(self) -> List[Pickup]:
        return self.store.pickups

    @property
    def display_name(self) -> str:
        return self._display_name

    @display_name.setter
    def display_name(self, value: Optional[str]):
        self._display_name = (value or "").strip()[: self.config.display_name_max]

    def snapshot(self) -> Snapshot:
        return Snapshot(
            player=replace(self.player),
            hazards=tuple(replace(h) for h in self.store.hazards),
            pickups=tuple(replace(p) for p in self.store.pickups),
            score=self.score,
            state=self.state,
        )

    def add_game_over_listener(self, listener: GameOverListener):
        self._listeners.append(listener)

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def activate(self) -> bool:
        """Start a new episode from menu or gameover; no-op while playing"""
        if self.state is SessionState.PLAYING:
            return False
        logger.debug("Session %s -> playing", self.state.value)
        self.state = SessionState.PLAYING
        self._reset_world()
        return True

    def reset_to_menu(self):
        """Discard the current episode and return to the canonical menu state"""
        if self.state is not SessionState.MENU:
            logger.debug("Session %s -> menu", self.state.value)
        self.state = SessionState.MENU
        self._reset_world()

    def _reset_world(self):
        self.player = self._spawn_player()
        self.store.clear()
        self.scoreboard.reset()

    def _spawn_player(self) -> PlayerBody:
        cfg = self.config
        return PlayerBody(x=cfg.spawn_x, y=cfg.spawn_y, radius=cfg.player_radius)

    def _game_over(self, cause: str):
        if self.state is not SessionState.PLAYING:
            return
        self.state = SessionState.GAMEOVER
        name = self._display_name or self.config.default_display_name
        result = GameResult(display_name=name, score=self.scoreboard.final())
        self.last_result = result
        logger.info("Game over (%s): %s scored %d", cause, name, result.score)

        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception:
                logger.exception("Game-over listener %r failed", listener)

    # ----------------------------
    # Simulation
    # ----------------------------

    def tick(self, inputs: Optional[InputSignals] = None, dt: float = 0.0) -> TickOutcome:
        """Advance the session by one frame of ``dt`` seconds"""
        if inputs is None:
            inputs = InputSignals()
        dt = sanitize_dt(dt, self.config.max_dt)

        if inputs.activate:
            self.activate()

        if self.state is not SessionState.PLAYING:
            return TickOutcome()

        self.store.update(dt)

        if step_player(self.player, inputs.hold_dive, dt, self.config):
            self._game_over("seabed")
            return TickOutcome(simulated=True, died=True, cause="seabed")

        result = resolve_collisions(self.player, self.store.hazards, self.store.pickups, self.config)
        if result.hit_hazard:
            self._game_over("hazard")
            return TickOutcome(simulated=True, died=True, cause="hazard")

        if result.collected:
            self.scoreboard.add(result.collected)

        return TickOutcome(simulated=True, collected=result.collected)
