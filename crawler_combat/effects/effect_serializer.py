"""
Serialization of status effects.

Save/load layers persist the effects of a combatant through this module.
The effect type, the remaining duration and the intensity are stored
verbatim so a reloaded effect resumes exactly where it stopped.
"""

from typing import Any, Iterable, Optional

from catchery import log_warning
from pydantic import ValidationError

from crawler_combat.core.constants import EffectType

from .effect import Effect


class EffectSerializer:
    """Centralized serialization for status effects."""

    @staticmethod
    def serialize(effect: Effect) -> dict[str, Any]:
        """
        Serialize an effect to dictionary format.

        Args:
            effect (Effect): The effect to serialize.

        Returns:
            dict[str, Any]: Dictionary representation of the effect.
        """
        return {
            "effect_type": effect.effect_type.name,
            "duration": effect.duration,
            "intensity": effect.intensity,
        }

    @staticmethod
    def deserialize(data: dict[str, Any]) -> Optional[Effect]:
        """
        Deserialize an effect from a dictionary.

        Args:
            data (dict[str, Any]): The dictionary containing effect data.

        Returns:
            Optional[Effect]: The effect, or None if the data is not a known effect.
        """
        type_name = data.get("effect_type")
        try:
            effect_type = EffectType[str(type_name)]
        except KeyError:
            log_warning(
                f"Unknown effect type '{type_name}', skipping effect",
                {"data": data},
            )
            return None

        duration = data.get("duration")
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            log_warning(
                f"Effect '{type_name}' has no readable duration, skipping effect",
                {"data": data},
            )
            return None

        intensity = data.get("intensity")
        if intensity is None:
            intensity = Effect.model_fields["intensity"].default

        try:
            return Effect(effect_type=effect_type, duration=duration, intensity=intensity)
        except ValidationError as e:
            log_warning(
                f"Effect '{type_name}' could not be restored, skipping effect",
                {"data": data, "error": str(e)},
            )
            return None


def serialize_effects(effects: Iterable[Effect]) -> list[dict[str, Any]]:
    """Serializes a collection of effects, preserving their order."""
    return [EffectSerializer.serialize(effect) for effect in effects]


def deserialize_effects(data: Iterable[dict[str, Any]]) -> list[Effect]:
    """Deserializes a list of effects, dropping the entries that cannot be read."""
    effects = []
    for entry in data:
        effect = EffectSerializer.deserialize(entry)
        if effect is not None:
            effects.append(effect)
    return effects
