from game.marine.collision import resolve_collisions
from game.marine.entities import Hazard, Pickup, PlayerBody


def player():
    return PlayerBody(x=140.0, y=280.0, radius=20.0)


def test_overlapping_hazard_kills(config):
    # dist2 = 100 < (20 + 24 - 2)^2 = 1764
    result = resolve_collisions(player(), [Hazard(x=150.0, y=280.0, radius=24.0)], [], config)
    assert result.hit_hazard


def test_hazard_forgiveness_shrinks_hitbox(config):
    # Touching at 43 px would overlap without forgiveness (44), not with it (42)
    result = resolve_collisions(player(), [Hazard(x=183.0, y=280.0, radius=24.0)], [], config)
    assert not result.hit_hazard

    result = resolve_collisions(player(), [Hazard(x=181.9, y=280.0, radius=24.0)], [], config)
    assert result.hit_hazard


def test_hazard_hit_skips_pickups(config):
    pickups = [Pickup(x=140.0, y=280.0)]
    result = resolve_collisions(player(), [Hazard(x=150.0, y=280.0)], pickups, config)

    assert result.hit_hazard
    assert result.collected == 0
    assert len(pickups) == 1


def test_overlapping_pickup_is_collected(config):
    # dist2 = 100 < (20 + 10)^2 = 900
    pickups = [Pickup(x=150.0, y=280.0, radius=10.0)]
    result = resolve_collisions(player(), [], pickups, config)

    assert not result.hit_hazard
    assert result.collected == 1
    assert pickups == []


def test_pickup_has_no_forgiveness(config):
    pickups = [Pickup(x=169.5, y=280.0)]
    assert resolve_collisions(player(), [], pickups, config).collected == 1

    pickups = [Pickup(x=170.0, y=280.0)]
    assert resolve_collisions(player(), [], pickups, config).collected == 0


def test_multiple_pickups_in_one_tick_preserve_survivor_order(config):
    pickups = [
        Pickup(x=140.0, y=280.0),
        Pickup(x=600.0, y=100.0),
        Pickup(x=145.0, y=285.0),
        Pickup(x=700.0, y=200.0),
        Pickup(x=135.0, y=275.0),
    ]
    result = resolve_collisions(player(), [Hazard(x=600.0, y=300.0)], pickups, config)

    assert result.collected == 3
    assert [p.x for p in pickups] == [600.0, 700.0]
