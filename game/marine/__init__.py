"""Marine dive game - buoyancy side-scroller simulation core and Gymnasium env"""

from .config import DiveConfig
from .session import GameResult, InputSignals, Session, SessionState, Snapshot
from .dive_env import DiveEnv, run_random_episode

__all__ = [
    'DiveConfig',
    'GameResult',
    'InputSignals',
    'Session',
    'SessionState',
    'Snapshot',
    'DiveEnv',
    'run_random_episode',
]
