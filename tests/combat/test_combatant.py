"""
Tests for the combatant capability and its mixins.
"""

import pytest

from crawler_combat.combat.combatant import (
    BaseCombatant,
    Combatant,
    StatusEffectCombatant,
)
from crawler_combat.combat.engine import AttackParams
from crawler_combat.core.constants import EnemyKind
from crawler_combat.entities.enemy import Enemy


def test_dummy_satisfies_combatant_protocol(make_combatant):
    assert isinstance(make_combatant(), Combatant)


def test_enemy_satisfies_combatant_protocol():
    assert isinstance(Enemy.spawn(EnemyKind.RAT), Combatant)


def test_plain_object_is_not_a_combatant():
    assert not isinstance(object(), Combatant)


def test_base_combatant_defaults(make_combatant):
    melee = make_combatant()
    archer = make_combatant(attack_distance=4)
    assert melee.is_alive()
    assert not melee.is_ranged()
    assert archer.is_ranged()
    assert BaseCombatant.experience_value(melee) is None


def test_effect_surface_requires_a_manager():
    class Unmanaged(StatusEffectCombatant):
        pass

    with pytest.raises(TypeError):
        Unmanaged()


def test_attack_params_reject_non_combatants(attacker, open_map):
    with pytest.raises(ValueError):
        AttackParams(
            attacker=attacker,
            attacker_x=0,
            attacker_y=0,
            defender=object(),
            defender_x=1,
            defender_y=0,
            is_blocked=open_map,
        )


def test_attack_params_keep_combatant_identity(attacker, defender, open_map):
    params = AttackParams(
        attacker=attacker,
        attacker_x=0,
        attacker_y=0,
        defender=defender,
        defender_x=1,
        defender_y=0,
        is_blocked=open_map,
    )
    assert params.attacker is attacker
    assert params.defender is defender
