"""
Status effect manager module for the combat engine.

Owns the active status effects of a single combatant, resolves stacking
and replacement when new effects are applied and advances them once per
turn tick.
"""

from typing import Any, Iterator, Optional

from crawler_combat.core.constants import EffectType, get_effect_resistance
from crawler_combat.core.error_handling import require_combatant
from crawler_combat.core.logging import log_debug

from .effect import Effect


class StatusEffectManager:
    """Manages the active status effects of exactly one combatant.

    Effects are kept in a small list scanned linearly by every operation.
    Stackable effects may appear several times; a non-stackable effect type
    appears at most once.
    """

    def __init__(self, owner: Optional[Any] = None) -> None:
        """Initialize the manager for the given owner.

        Args:
            owner (Optional[Any]): The combatant owning the effects.

        """
        self.owner: Optional[Any] = owner
        self.effects: list[Effect] = []

    def __len__(self) -> int:
        return len(self.effects)

    def __iter__(self) -> Iterator[Effect]:
        yield from self.effects

    # === Effect Management ===

    def add_effect(self, effect: Effect) -> None:
        """
        Adds an effect, resolving stacking against the existing ones.

        Stackable effects are always appended. A non-stackable effect
        replaces the existing instance of the same type in place, or is
        appended when there is none.

        Args:
            effect (Effect): The effect to add.

        """
        if effect.is_stackable():
            self.effects.append(effect)
            log_debug(
                f"Stacked {effect.colored_name}",
                {"instances": len(self.get_effects_by_type(effect.effect_type))},
            )
            return

        for index, existing in enumerate(self.effects):
            if existing.effect_type == effect.effect_type:
                self.effects[index] = effect
                log_debug(
                    f"Replaced {effect.colored_name}",
                    {"duration": effect.duration, "intensity": effect.intensity},
                )
                return

        self.effects.append(effect)
        log_debug(
            f"Added {effect.colored_name}",
            {"duration": effect.duration, "intensity": effect.intensity},
        )

    def remove_effect(self, effect_type: EffectType) -> None:
        """Removes every instance of the given effect type."""
        self.effects = [e for e in self.effects if e.effect_type != effect_type]

    def clear(self) -> None:
        self.effects.clear()

    # === Queries ===

    def get_effects_by_type(self, effect_type: EffectType) -> list[Effect]:
        return [e for e in self.effects if e.effect_type == effect_type]

    def has_effect(self, effect_type: EffectType) -> bool:
        return any(e.effect_type == effect_type for e in self.effects)

    def get_resistance(self, effect_type: EffectType) -> float:
        """
        Returns the resistance against the given effect type.

        The value is informational: it is never applied to effects already
        active, callers may use it to scale the chance of inflicting a new one.

        Args:
            effect_type (EffectType): The effect type.

        Returns:
            float: The resistance as a probability in [0, 1].

        """
        return get_effect_resistance(effect_type)

    # === Turn Update ===

    def update_effects(self, combatant: Optional[Any] = None) -> list[str]:
        """
        Advances every effect by one turn.

        Periodic damage is applied first, from the effects active at the
        start of the tick. Only then are durations decremented and the
        expired effects dropped.

        Args:
            combatant (Optional[Any]):
                The combatant receiving the damage, the owner if omitted.

        Returns:
            list[str]: One damage line per damaging effect, one line per expired effect.

        """
        combatant = require_combatant(
            combatant if combatant is not None else self.owner, "combatant"
        )
        messages: list[str] = []

        damaging = [
            e
            for e in self.effects
            if e.effect_type.deals_periodic_damage and not e.is_expired()
        ]
        for effect in damaging:
            damage = effect.damage()
            if damage <= 0:
                continue
            combatant.take_damage(damage)
            messages.append(
                f"{combatant.name} takes {damage} damage from {effect.description()}"
            )

        active: list[Effect] = []
        for effect in self.effects:
            if effect.update():
                active.append(effect)
            else:
                messages.append(f"{combatant.name}'s {effect.description()} has expired")
        self.effects = active

        log_debug(
            f"Effects updated on {combatant.name}",
            {"active": len(self.effects), "messages": len(messages)},
        )
        return messages
