import pytest

from spacefighter.flags import CollisionType, TriggerType


def test_combined_collision_type_contains_parts():
    player_ship = CollisionType(CollisionType.PLAYER | CollisionType.SHIP)
    assert player_ship.contains(CollisionType.PLAYER)
    assert player_ship.contains(CollisionType.SHIP)
    assert not player_ship.contains(CollisionType.ENEMY)
    assert not player_ship.contains(CollisionType.PROJECTILE)


def test_none_contains_nothing():
    assert not CollisionType.NONE.contains(CollisionType.NONE)
    assert not CollisionType.NONE.contains(CollisionType.PLAYER)
    assert not TriggerType.NONE.contains(TriggerType.ALL)


def test_collision_bits_match_source_values():
    assert CollisionType(1 << 0) is CollisionType.PLAYER
    assert CollisionType(1 << 1) is CollisionType.ENEMY
    assert CollisionType(1 << 2) is CollisionType.SHIP
    assert CollisionType(1 << 3) is CollisionType.PROJECTILE
    assert CollisionType((1 << 0) | (1 << 3)).contains(CollisionType.PROJECTILE)


def test_collision_types_are_ordered_by_value():
    player_ship = CollisionType(CollisionType.PLAYER | CollisionType.SHIP)
    enemy_ship = CollisionType(CollisionType.ENEMY | CollisionType.SHIP)
    player_projectile = CollisionType(CollisionType.PLAYER | CollisionType.PROJECTILE)
    assert player_ship < enemy_ship < player_projectile
    assert min(enemy_ship, player_ship) == player_ship


def test_bitwise_operations():
    mixed = CollisionType(CollisionType.PLAYER | CollisionType.SHIP)
    assert mixed & CollisionType.SHIP == CollisionType.SHIP
    assert mixed ^ CollisionType.SHIP == CollisionType.PLAYER
    value = CollisionType(0)
    value |= CollisionType.ENEMY
    assert value == CollisionType.ENEMY


def test_trigger_all_covers_every_trigger():
    assert int(TriggerType.ALL) == 0xFFFF
    for trigger in (TriggerType.PRIMARY, TriggerType.SECONDARY, TriggerType.SPECIAL):
        assert TriggerType.ALL.contains(trigger)
        assert trigger.contains(TriggerType.ALL)


@pytest.mark.parametrize(
    "first, second",
    [
        (TriggerType.PRIMARY, TriggerType.SECONDARY),
        (TriggerType.SECONDARY, TriggerType.SPECIAL),
        (TriggerType.PRIMARY, TriggerType.SPECIAL),
    ],
)
def test_distinct_triggers_do_not_overlap(first, second):
    assert not first.contains(second)
    assert (first | second).contains(second)


def test_trigger_accumulation():
    trigger = TriggerType.NONE
    trigger |= TriggerType.PRIMARY
    assert trigger != TriggerType.NONE
    assert trigger == TriggerType.PRIMARY
    assert trigger.contains(TriggerType.PRIMARY)