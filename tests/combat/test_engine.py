"""
Tests for the hit, critical and damage formulas and the attack resolution.
"""

import random

import pytest

from crawler_combat.combat.engine import (
    calculate_damage,
    calculate_hit_chance,
    does_attack_hit,
    engage,
    is_critical,
    resolve_attack,
)
from crawler_combat.core.constants import (
    DEFENSE_CAP,
    MAX_HIT_CHANCE,
    MIN_HIT_CHANCE,
)

# =============================================================================
# Hit chance
# =============================================================================


def test_hit_chance_clamps_to_maximum(make_combatant):
    """
    Test that a far more accurate attacker still has a 5% chance to miss.
    """
    attacker = make_combatant(accuracy=100)
    defender = make_combatant(evasion=0)
    assert calculate_hit_chance(attacker, defender) == MAX_HIT_CHANCE


def test_hit_chance_clamps_to_minimum(make_combatant):
    attacker = make_combatant(accuracy=0)
    defender = make_combatant(evasion=100)
    assert calculate_hit_chance(attacker, defender) == MIN_HIT_CHANCE


def test_hit_chance_unclamped(make_combatant):
    attacker = make_combatant(accuracy=10)
    defender = make_combatant(evasion=8)
    assert calculate_hit_chance(attacker, defender) == pytest.approx(0.9)


def test_hit_chance_always_within_bounds(make_combatant):
    for accuracy in range(0, 120, 7):
        for evasion in range(0, 120, 7):
            chance = calculate_hit_chance(
                make_combatant(accuracy=accuracy), make_combatant(evasion=evasion)
            )
            assert MIN_HIT_CHANCE <= chance <= MAX_HIT_CHANCE


def test_accurate_attacker_almost_always_hits(make_combatant):
    attacker = make_combatant(accuracy=100)
    defender = make_combatant(evasion=0)
    rng = random.Random(7)
    hits = sum(does_attack_hit(attacker, defender, rng) for _ in range(1000))
    assert hits > 900


# =============================================================================
# Critical hits
# =============================================================================


def test_crit_bonus_of_one_always_crits(make_combatant):
    attacker = make_combatant(crit_bonus=1.0)
    rng = random.Random(3)
    assert all(is_critical(attacker, rng) for _ in range(100))


def test_negative_crit_bonus_never_crits(make_combatant):
    attacker = make_combatant(crit_bonus=-0.2)
    rng = random.Random(3)
    assert not any(is_critical(attacker, rng) for _ in range(100))


# =============================================================================
# Damage
# =============================================================================


def test_damage_range_scenario(make_combatant):
    """
    Test that attack power 10 against defense 5 deals between 4 and 6 damage.
    """
    attacker = make_combatant(attack_power=10)
    defender = make_combatant(defense=5)
    rng = random.Random(11)
    for _ in range(500):
        damage = calculate_damage(attacker, defender, False, rng, critical=False)
        assert 4 <= damage <= 6


def test_damage_is_at_least_one(make_combatant, scripted_rng):
    attacker = make_combatant(attack_power=0)
    defender = make_combatant(defense=1000)
    rng = scripted_rng([0.5], variance=0.8)
    assert calculate_damage(attacker, defender, False, rng, critical=False) == 1


def test_critical_multiplies_damage(make_combatant, scripted_rng):
    attacker = make_combatant(attack_power=10)
    defender = make_combatant(defense=0)
    rng = scripted_rng([0.5])
    assert calculate_damage(attacker, defender, False, rng, critical=False) == 10
    assert calculate_damage(attacker, defender, False, rng, critical=True) == 15


def test_ambush_doubles_damage(make_combatant, scripted_rng):
    attacker = make_combatant(attack_power=10)
    defender = make_combatant(defense=5)
    rng = scripted_rng([0.5])
    normal = calculate_damage(attacker, defender, False, rng, critical=False)
    ambush = calculate_damage(attacker, defender, True, rng, critical=False)
    assert normal == 5
    assert ambush == 2 * normal


def test_critical_ambush_stacks_multipliers(make_combatant, scripted_rng):
    attacker = make_combatant(attack_power=10)
    defender = make_combatant(defense=5)
    rng = scripted_rng([0.5])
    assert calculate_damage(attacker, defender, True, rng, critical=True) == 15


def test_defense_mitigation_is_capped(make_combatant, scripted_rng):
    attacker = make_combatant(attack_power=100)
    defender = make_combatant(defense=10**6)
    rng = scripted_rng([0.5])
    damage = calculate_damage(attacker, defender, False, rng, critical=False)
    assert damage == int(100 * (1 - DEFENSE_CAP))


def test_damage_rolls_critical_when_not_given(make_combatant, scripted_rng):
    attacker = make_combatant(attack_power=10, crit_bonus=1.0)
    defender = make_combatant(defense=0)
    rng = scripted_rng([0.5])
    assert calculate_damage(attacker, defender, False, rng) == 15


# =============================================================================
# Attack resolution
# =============================================================================


def test_resolve_attack_miss(attacker, defender, scripted_rng):
    result = resolve_attack(attacker, defender, False, scripted_rng([0.99]))
    assert result.logs == ["Attacker misses Defender!"]
    assert defender.hp == 100
    assert not result.defeated


def test_resolve_attack_hit(attacker, defender, always_hit_rng):
    result = resolve_attack(attacker, defender, False, always_hit_rng)
    assert result.logs == ["Attacker hits Defender for 5 damage!"]
    assert defender.hp == 95


def test_resolve_attack_critical(attacker, defender, scripted_rng):
    result = resolve_attack(attacker, defender, False, scripted_rng([0.5, 0.0]))
    assert result.logs[0].startswith("Critical hit!")
    assert defender.hp == 100 - 7


def test_resolve_attack_ambush(attacker, defender, always_hit_rng):
    result = resolve_attack(attacker, defender, True, always_hit_rng)
    assert result.logs[0].startswith("Ambush!")
    assert defender.hp == 90


def test_resolve_attack_defeat_grants_experience(make_combatant, always_hit_rng):
    attacker = make_combatant(name="Hero")
    victim = make_combatant(name="Rat", hp=3, reward=7)
    result = resolve_attack(attacker, victim, False, always_hit_rng)
    assert result.defeated
    assert result.experience == 7
    assert result.logs[-1] == "Hero defeated Rat!"
    assert victim.hp == 0


def test_resolve_attack_defeat_without_reward(make_combatant, always_hit_rng):
    attacker = make_combatant(name="Hero")
    victim = make_combatant(name="Dummy", hp=1)
    result = resolve_attack(attacker, victim, False, always_hit_rng)
    assert result.defeated
    assert result.experience == 0


def test_engage_ambush_then_counter(attacker, defender, always_hit_rng):
    """
    Test that an ambush exchange logs the ambush strike, then a regular counter.
    """
    result = engage(attacker, defender, True, always_hit_rng)
    assert len(result.logs) == 2
    assert result.logs[0].startswith("Ambush!")
    assert result.logs[1] == "Defender hits Attacker for 5 damage!"
    assert defender.hp == 90
    assert attacker.hp == 95


def test_engage_no_counter_when_defender_dies(make_combatant, always_hit_rng):
    attacker = make_combatant(name="Attacker")
    defender = make_combatant(name="Defender", hp=2)
    result = engage(attacker, defender, False, always_hit_rng)
    assert result.defeated
    assert len(result.logs) == 2
    assert attacker.hp == 100


def test_seeded_exchanges_are_reproducible(make_combatant):
    def fight(seed: int) -> list[str]:
        rng = random.Random(seed)
        a = make_combatant(name="A", crit_bonus=0.2)
        b = make_combatant(name="B", evasion=60)
        logs = []
        for _ in range(10):
            logs.extend(engage(a, b, False, rng).logs)
        return logs

    assert fight(1234) == fight(1234)
