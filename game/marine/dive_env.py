"""
DiveEnv - the marine dive game as a Gymnasium environment
----------------------------------------------------------
- Simulation lives in ``Session``; this class only maps actions, observations
  and rewards onto it
- Discrete(2) action: 0 float (buoyancy), 1 hold dive
- Vector observation: player y/vy + top-K nearest hazards + top-M nearest pearls
- Episode terminates on game over (seabed or jellyfish), truncates at max_steps

Quick test:
    python -m game.marine.dive_env
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import DiveConfig
from .session import InputSignals, Session, SessionState
from .utils import clamp

DEFAULT_REWARDS = {
    "R_PICKUP": 1.0,   # per pearl
    "R_ALIVE": 0.01,   # per surviving step
    "R_DEATH": 5.0,    # on game over
}


class DiveEnv(gym.Env):
    """Side-scrolling dive game exposed through the Gymnasium API"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = 0.033,
        max_steps: int = 1800,
        k_hazards: int = 3,
        m_pickups: int = 2,
        reward_config: Optional[Dict[str, float]] = None,
        config: Optional[DiveConfig] = None,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode: {render_mode}")
        self.render_mode = render_mode

        self.config = config if config is not None else DiveConfig()
        self.dt = dt
        self.max_steps = max_steps
        self.k_hazards = k_hazards
        self.m_pickups = m_pickups

        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k.startswith("R_")})

        self.action_space = spaces.Discrete(2)

        # Player: y(1) vy(1)
        # Each hazard / pickup: rel pos(2)
        obs_dim = 2 + (self.k_hazards * 2) + (self.m_pickups * 2)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None

        self.session: Session = None  # type: ignore
        self._step_count = 0
        self._pickups_collected = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self._pickups_collected = 0

        self.session = Session(self.config, rng=self.np_random)
        self.session.activate()

        return self._get_obs(), self._get_info()

    def step(self, action):
        outcome = self.session.tick(InputSignals(hold_dive=bool(int(action))), self.dt)
        self._pickups_collected += outcome.collected

        reward = self.rewards["R_PICKUP"] * outcome.collected
        if not outcome.simulated:
            # stepping past game over: the world is frozen
            reward = 0.0
        elif outcome.died:
            reward -= self.rewards["R_DEATH"]
        else:
            reward += self.rewards["R_ALIVE"]

        terminated = self.session.state is SessionState.GAMEOVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()
        if outcome.cause:
            info["death_cause"] = outcome.cause

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        player = self.session.player

        obs_parts: List[float] = [
            clamp(player.y / cfg.height * 2 - 1, -1, 1),
            clamp(player.vy / cfg.max_speed, -1, 1),
        ]

        def nearest(entities, n):
            ranked = sorted(entities, key=lambda e: (e.x - player.x) ** 2 + (e.y - player.y) ** 2)
            parts = []
            for i in range(n):
                if i < len(ranked):
                    e = ranked[i]
                    parts += [clamp((e.x - player.x) / cfg.width, -1, 1),
                              clamp((e.y - player.y) / cfg.height, -1, 1)]
                else:
                    parts += [0.0, 0.0]
            return parts

        obs_parts += nearest(self.session.hazards, self.k_hazards)
        obs_parts += nearest(self.session.pickups, self.m_pickups)

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.session.score,
            "pickups_collected": self._pickups_collected,
            "alive": self.session.state is SessionState.PLAYING,
            "num_hazards": len(self.session.hazards),
            "num_pickups": len(self.session.pickups),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import DiveWindow
            self._window = DiveWindow(self.config, title="DiveEnv - Arcade")

        self._window.snapshot = self.session.snapshot()
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run one episode with a random policy and return its total reward"""
    env = DiveEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f} (pearls: {info['score']}, steps: {info['step']})")

    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
