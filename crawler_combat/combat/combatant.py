"""
Combatant capability module for the combat engine.

Declares the minimal surface any entity must expose to take part in
combat, and a mixin supplying the derived defaults and the saturating
hit point mutators.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable

from crawler_combat.core.constants import EffectType
from crawler_combat.core.error_handling import ensure_non_negative_int
from crawler_combat.effects.effect import Effect
from crawler_combat.effects.status_effect_manager import StatusEffectManager


@runtime_checkable
class Combatant(Protocol):
    """Anything that can attack, be attacked and carry status effects.

    Combat never constructs or destroys combatants: heroes, enemies and
    test doubles all satisfy this protocol structurally.
    """

    name: str
    hp: int
    max_hp: int
    attack_power: int
    defense: int
    accuracy: int
    evasion: int
    crit_bonus: float
    weapon: Optional[Any]
    attack_distance: int

    def is_alive(self) -> bool:
        """Whether the combatant still has hit points left."""
        ...

    def is_ranged(self) -> bool:
        """Whether the combatant attacks from further than one tile."""
        ...

    def experience_value(self) -> Optional[int]:
        """The experience granted to whoever defeats this combatant."""
        ...

    def take_damage(self, amount: int) -> bool:
        """Applies damage and returns whether the combatant survived."""
        ...

    def heal(self, amount: int) -> None:
        """Restores hit points, never above the maximum."""
        ...


class BaseCombatant:
    """Default implementation of the derived parts of the combatant protocol.

    Classes mixing this in provide ``hp``, ``max_hp``, ``name`` and
    ``attack_distance``; hit points are kept within ``[0, max_hp]``.
    """

    def is_alive(self) -> bool:
        return self.hp > 0

    def is_ranged(self) -> bool:
        return self.attack_distance > 1

    def experience_value(self) -> Optional[int]:
        return None

    def take_damage(self, amount: int) -> bool:
        """
        Applies damage, never bringing hit points below zero.

        Args:
            amount (int): The damage to apply.

        Returns:
            bool: True if the combatant is still alive.

        """
        amount = ensure_non_negative_int(amount, "damage", context={"target": self.name})
        self.hp = max(0, self.hp - amount)
        return self.is_alive()

    def heal(self, amount: int) -> None:
        """
        Restores hit points, never above the maximum.

        Args:
            amount (int): The hit points to restore.

        """
        amount = ensure_non_negative_int(amount, "heal", context={"target": self.name})
        self.hp = min(self.max_hp, self.hp + amount)


class StatusEffectCombatant(ABC):
    """Status effect surface for combatants owning a ``StatusEffectManager``."""

    @property
    @abstractmethod
    def effects(self) -> StatusEffectManager:
        """The manager owning the effects of this combatant."""

    def add_effect(self, effect: Effect) -> None:
        self.effects.add_effect(effect)

    def remove_effect(self, effect_type: EffectType) -> None:
        self.effects.remove_effect(effect_type)

    def has_effect(self, effect_type: EffectType) -> bool:
        return self.effects.has_effect(effect_type)

    def update_effects(self) -> list[str]:
        """Advances the effects of this combatant by one turn."""
        return self.effects.update_effects(self)
