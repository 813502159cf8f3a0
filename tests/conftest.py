"""
Shared fixtures for the combat engine tests.
"""

import itertools
import random
from typing import Any, Optional

import pytest
from pydantic import BaseModel, PrivateAttr

from crawler_combat.combat.combatant import BaseCombatant, StatusEffectCombatant
from crawler_combat.effects.status_effect_manager import StatusEffectManager


class DummyCombatant(BaseModel, BaseCombatant, StatusEffectCombatant):
    """A combatant with freely chosen statistics."""

    name: str = "Dummy"
    hp: int = 100
    max_hp: int = 100
    attack_power: int = 10
    defense: int = 5
    accuracy: int = 80
    evasion: int = 20
    crit_bonus: float = 0.0
    weapon: Optional[Any] = None
    attack_distance: int = 1
    reward: Optional[int] = None

    _effects: StatusEffectManager = PrivateAttr(default_factory=StatusEffectManager)

    def model_post_init(self, _: Any) -> None:
        self._effects.owner = self

    @property
    def effects(self) -> StatusEffectManager:
        return self._effects

    def experience_value(self) -> Optional[int]:
        return self.reward


class ScriptedRandom(random.Random):
    """A random source replaying fixed rolls.

    ``random()`` cycles through the given rolls and ``uniform()`` always
    returns the given variance.
    """

    def __init__(self, rolls: list[float], variance: float = 1.0) -> None:
        super().__init__(0)
        self._rolls = itertools.cycle(rolls)
        self.variance = variance

    def random(self) -> float:
        return next(self._rolls)

    def uniform(self, a: float, b: float) -> float:
        return self.variance


@pytest.fixture
def make_combatant():
    """Factory building dummy combatants."""

    def _make(**kwargs: Any) -> DummyCombatant:
        return DummyCombatant(**kwargs)

    return _make


@pytest.fixture
def attacker(make_combatant):
    return make_combatant(name="Attacker")


@pytest.fixture
def defender(make_combatant):
    return make_combatant(name="Defender")


@pytest.fixture
def scripted_rng():
    """Factory building random sources with scripted rolls."""

    def _make(rolls: list[float], variance: float = 1.0) -> ScriptedRandom:
        return ScriptedRandom(rolls, variance)

    return _make


@pytest.fixture
def always_hit_rng(scripted_rng):
    """Every strike hits, none is critical, no damage variance."""
    return scripted_rng([0.5])


@pytest.fixture
def open_map():
    return lambda x, y: False
