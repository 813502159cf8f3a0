"""
Status effect module for the combat engine.

Defines a single status effect instance applied to a combatant: its type,
the number of turns it still lasts and its intensity.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from crawler_combat.core.constants import (
    DEFAULT_EFFECT_INTENSITY,
    MAX_EFFECT_INTENSITY,
    MIN_EFFECT_INTENSITY,
    EffectType,
    is_overwritable,
)
from crawler_combat.core.error_handling import (
    ensure_int_in_range,
    ensure_non_negative_int,
)


class Effect(BaseModel):
    """
    A status effect instance afflicting a combatant.

    Effects are active while they have turns left. Every turn tick consumes
    one turn; once the remaining duration reaches zero the effect is expired
    and its owner drops it.
    """

    effect_type: EffectType = Field(
        description="The kind of status effect.",
    )
    duration: int = Field(
        description="Remaining duration of the effect, in turns.",
    )
    intensity: int = Field(
        default=DEFAULT_EFFECT_INTENSITY,
        description="Strength of the effect, the damage per turn of damaging effects.",
    )

    @field_validator("duration", mode="before")
    @classmethod
    def _correct_duration(cls, value: Any, info: ValidationInfo) -> int:
        return ensure_non_negative_int(
            value, "duration", context={"effect_type": str(info.data.get("effect_type"))}
        )

    @field_validator("intensity", mode="before")
    @classmethod
    def _correct_intensity(cls, value: Any, info: ValidationInfo) -> int:
        return ensure_int_in_range(
            value,
            "intensity",
            MIN_EFFECT_INTENSITY,
            MAX_EFFECT_INTENSITY,
            default=DEFAULT_EFFECT_INTENSITY,
            context={"effect_type": str(info.data.get("effect_type"))},
        )

    @classmethod
    def new(cls, effect_type: EffectType, duration: int) -> "Effect":
        """Creates an effect with the default intensity."""
        return cls(effect_type=effect_type, duration=duration)

    @classmethod
    def with_intensity(
        cls, effect_type: EffectType, duration: int, intensity: int
    ) -> "Effect":
        """Creates an effect with the given intensity, clamped to its valid range."""
        return cls(effect_type=effect_type, duration=duration, intensity=intensity)

    @property
    def colored_name(self) -> str:
        """Returns the effect name with color formatting applied."""
        return self.effect_type.colored_name

    def is_expired(self) -> bool:
        """Check if the effect has no turns left.

        Returns:
            bool: True if the remaining duration is zero.

        """
        return self.duration <= 0

    def is_stackable(self) -> bool:
        return self.effect_type.is_stackable

    def is_overwritable(self) -> bool:
        return is_overwritable(self.effect_type)

    def damage(self) -> int:
        """
        Returns the damage this effect deals to its bearer every turn.

        Returns:
            int: The intensity for damaging effects, 0 for every other effect.

        """
        if self.effect_type.deals_periodic_damage:
            return self.intensity
        return 0

    def update(self) -> bool:
        """
        Consumes one turn of the effect.

        Returns:
            bool: True if the effect is still active after the tick.

        """
        self.duration = max(0, self.duration - 1)
        return not self.is_expired()

    def description(self) -> str:
        """
        Returns a human-readable description of the effect.

        Returns:
            str: The effect label, its damage per turn and the turns left.

        """
        details = []
        if self.effect_type.deals_periodic_damage:
            details.append(f"-{self.damage()} HP/turn")
        if self.duration > 0:
            details.append(f"{self.duration} turns left")
        if details:
            return f"{self.effect_type.label} ({', '.join(details)})"
        return self.effect_type.label

    def __str__(self) -> str:
        return self.description()
