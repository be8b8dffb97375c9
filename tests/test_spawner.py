import math

import pytest

from game.marine.entities import Hazard, Pickup
from game.marine.spawner import EntityStore


def test_accumulator_spawns_on_interval(config, draws):
    store = EntityStore(config, draws([0.5]))

    assert not store.accumulate(0.5)
    assert not store.accumulate(0.5)
    assert store.spawn_accumulator == pytest.approx(1000.0)
    assert store.accumulate(0.5)
    assert store.spawn_accumulator == 0.0


def test_spawn_hazard_uses_draws_in_order(config, draws):
    store = EntityStore(config, draws([0.0, 0.1, 0.5]))
    store.spawn()

    assert store.pickups == []
    assert len(store.hazards) == 1
    h = store.hazards[0]
    assert h.x == config.width + config.spawn_x_offset
    assert h.y == config.surface_y + config.spawn_margin
    assert h.radius == config.hazard_radius
    assert h.phase == pytest.approx(math.pi)


def test_spawn_pickup_above_hazard_probability(config, draws):
    store = EntityStore(config, draws([0.5, 0.9]))
    store.spawn()

    assert store.hazards == []
    p = store.pickups[0]
    # band = 390 - 40 - 80 = 270; floor(80 + 0.5 * 270)
    assert p.y == 215.0
    assert p.radius == config.pickup_radius


def test_spawn_positions_stay_in_navigable_band(config):
    store = EntityStore(config)
    for _ in range(200):
        store.spawn()
    for e in store.hazards + store.pickups:
        assert config.surface_y + config.spawn_margin <= e.y < config.seabed_y - config.spawn_margin


def test_advance_moves_left_and_bobs(config):
    store = EntityStore(config)
    store.hazards.append(Hazard(x=400.0, y=200.0, phase=0.0))
    store.pickups.append(Pickup(x=400.0, y=200.0))

    store.advance(0.02)

    h, p = store.hazards[0], store.pickups[0]
    assert h.x == pytest.approx(400.0 - config.hazard_speed * 0.02)
    assert h.phase == pytest.approx(config.bob_rate * 0.02)
    assert h.y == pytest.approx(200.0 + math.sin(h.phase) * config.bob_amplitude * 0.02)
    assert p.x == pytest.approx(400.0 - config.pickup_speed * 0.02)
    assert p.y == 200.0


def test_cull_removes_offscreen_and_keeps_order(config):
    store = EntityStore(config)
    store.hazards = [
        Hazard(x=10.0, y=100.0),
        Hazard(x=-45.0, y=110.0),  # -45 + 24 = -21: gone
        Hazard(x=300.0, y=120.0),
        Hazard(x=-43.0, y=130.0),  # -43 + 24 = -19: stays
    ]
    store.pickups = [Pickup(x=-31.0, y=100.0), Pickup(x=50.0, y=100.0), Pickup(x=-29.0, y=90.0)]

    store.cull()

    assert [h.y for h in store.hazards] == [100.0, 120.0, 130.0]
    assert [p.x for p in store.pickups] == [50.0, -29.0]


def test_update_spawns_then_advances(config, draws):
    store = EntityStore(config, draws([0.5, 0.9]))
    store.spawn_accumulator = config.spawn_interval_ms - 1

    store.update(0.01)

    assert len(store.pickups) == 1
    assert store.pickups[0].x == pytest.approx(config.width + config.spawn_x_offset - config.pickup_speed * 0.01)


def test_clear_resets_everything(config):
    store = EntityStore(config)
    store.spawn()
    store.spawn_accumulator = 500.0
    store.clear()
    assert len(store) == 0
    assert store.spawn_accumulator == 0.0
