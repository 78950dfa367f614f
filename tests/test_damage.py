import math
import random
import pytest
from arena.battle.factory import normalize, normalize_move, POWER_CAP, STAT_CAP
from arena.battle.mechanics import accuracy_check, base_damage, compute_damage, damage_roll
from arena.battle.models import Move, PHYSICAL, SPECIAL, STATUS
from arena.core.types import ElementType


def _mon(types=("fire",), **stats):
    return normalize({"types": list(types), "stats": stats})


def test_zero_power_never_damages(fixed_rng):
    glare = Move(name="Glare", type=ElementType.FIRE, category=STATUS, power=0)
    attacker = _mon(("fire",), attack=999, specialAttack=999)
    for defender_types in (("grass", "bug"), ("water",), ("normal",)):
        defender = _mon(defender_types, defense=1, specialDefense=1)
        assert compute_damage(attacker, defender, glare, fixed_rng()) == 0
        assert compute_damage(attacker, defender, glare, random.Random(1)) == 0


def test_exact_formula_top_and_bottom_roll(fixed_rng):
    # ((2.4 * 100 * (100/50)) / 50) + 2 = 11.6
    slam = Move(name="Slam", type=ElementType.NORMAL, category=PHYSICAL, power=100)
    attacker = _mon(("fire",), attack=100)
    defender = _mon(("water",), defense=50)
    assert base_damage(attacker, defender, slam) == pytest.approx(11.6)
    assert compute_damage(attacker, defender, slam, fixed_rng(uniform_at=1.0)) == 11
    assert compute_damage(attacker, defender, slam, fixed_rng(uniform_at=0.0)) == 9


def test_special_moves_use_special_stats(fixed_rng):
    beam = Move(name="Beam", type=ElementType.NORMAL, category=SPECIAL, power=100)
    attacker = _mon(("fire",), attack=1, specialAttack=100)
    defender = _mon(("water",), defense=1, specialDefense=50)
    assert compute_damage(attacker, defender, beam, fixed_rng()) == 11


def test_same_type_bonus_and_effectiveness_stack(fixed_rng):
    flame = Move(name="Flame", type=ElementType.FIRE, category=SPECIAL, power=100)
    attacker = _mon(("fire",), specialAttack=100)
    grass = _mon(("grass",), specialDefense=50)
    grass_bug = _mon(("grass", "bug"), specialDefense=50)
    # 11.6 * 1.5 * 2 = 34.8 ; 11.6 * 1.5 * 4 = 69.6
    assert compute_damage(attacker, grass, flame, fixed_rng()) == 34
    assert compute_damage(attacker, grass_bug, flame, fixed_rng()) == 69
    meta = damage_roll(attacker, grass_bug, flame, fixed_rng())
    assert meta["stab"] == 1.5 and meta["effectiveness"] == 4.0


def test_immunity_deals_zero(fixed_rng):
    bolt = Move(name="Bolt", type=ElementType.ELECTRIC, category=SPECIAL, power=90)
    attacker = _mon(("electric",), specialAttack=200)
    defender = _mon(("ground",))
    assert compute_damage(attacker, defender, bolt, fixed_rng()) == 0


@pytest.mark.parametrize("seed", range(25))
def test_neutral_damage_stays_in_roll_window(seed):
    rng = random.Random(seed)
    mv = Move(name="Hit", type=ElementType.NORMAL, category=PHYSICAL, power=rng.randint(1, 150))
    attacker = _mon(("fire",), attack=rng.randint(1, 250))
    defender = _mon(("water",), defense=rng.randint(1, 250))
    base = base_damage(attacker, defender, mv)
    dmg = compute_damage(attacker, defender, mv, rng)
    assert math.floor(base * 0.85) <= dmg <= math.floor(base)


def test_accuracy_bounds(fixed_rng):
    never = Move(name="Never", type=ElementType.NORMAL, power=40, accuracy=0)
    always = Move(name="Always", type=ElementType.NORMAL, power=40, accuracy=100)
    assert not accuracy_check(never, fixed_rng(roll=0.0))
    assert accuracy_check(always, fixed_rng(roll=0.9999))
    half = Move(name="Half", type=ElementType.NORMAL, power=40, accuracy=50)
    assert accuracy_check(half, fixed_rng(roll=0.49))
    assert not accuracy_check(half, fixed_rng(roll=0.5))


def test_extreme_normalized_stats_give_finite_damage(fixed_rng):
    blast = normalize_move({"name": "Blast", "type": "Fire", "category": "Physical", "power": 10**300})
    attacker = _mon(("fire",), attack=10**308)
    defender = _mon(("grass", "bug"), defense=1)
    dmg = compute_damage(attacker, defender, blast, fixed_rng(uniform_at=1.0))
    expected = math.floor((((2 / 5 + 2) * POWER_CAP * STAT_CAP) / 50 + 2) * 1.5 * 4.0)
    assert expected - 1 <= dmg <= expected
