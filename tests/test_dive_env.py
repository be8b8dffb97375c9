import numpy as np
import pytest
from gymnasium.utils.env_checker import check_env

from game.marine import DiveEnv


def test_passes_gymnasium_checker():
    check_env(DiveEnv(), skip_render_check=True)


def test_reset_observation_in_space():
    env = DiveEnv(k_hazards=3, m_pickups=2)
    obs, info = env.reset(seed=0)

    assert obs.shape == (2 + 3 * 2 + 2 * 2,)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0 and info["alive"]


def test_same_seed_same_rollout():
    def rollout(seed):
        env = DiveEnv()
        env.reset(seed=seed)
        observations = []
        for i in range(120):
            obs, reward, terminated, truncated, info = env.step(i % 3 == 0)
            observations.append(obs)
            if terminated:
                break
        return np.array(observations)

    np.testing.assert_array_equal(rollout(3), rollout(3))


def test_always_diving_hits_seabed():
    env = DiveEnv()
    env.reset(seed=1)

    for _ in range(60):
        obs, reward, terminated, truncated, info = env.step(1)
        if terminated:
            break

    assert terminated
    assert info["death_cause"] == "seabed"
    assert not info["alive"]
    assert reward == pytest.approx(-env.rewards["R_DEATH"])


def test_truncates_at_max_steps():
    env = DiveEnv(max_steps=5)
    env.reset(seed=2)
    for _ in range(5):
        obs, reward, terminated, truncated, info = env.step(0)
    assert truncated and not terminated
    assert reward == pytest.approx(env.rewards["R_ALIVE"])


def test_reward_config_overrides():
    env = DiveEnv(reward_config={"name": "custom", "R_DEATH": 1.0})
    assert env.rewards["R_DEATH"] == 1.0
    assert "name" not in env.rewards


def test_unknown_render_mode_rejected():
    with pytest.raises(ValueError):
        DiveEnv(render_mode="rgb_array")


def test_no_reward_after_termination():
    env = DiveEnv()
    env.reset(seed=1)
    terminated = False
    while not terminated:
        obs, reward, terminated, truncated, info = env.step(1)

    for action in (0, 1):
        obs, reward, terminated, truncated, info = env.step(action)
        assert reward == 0.0
        assert terminated
