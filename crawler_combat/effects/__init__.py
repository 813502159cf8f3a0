"""
Effects system module for the combat engine.

This module contains the status effects that afflict combatants between
turns (burning, poison, bleeding, paralysis, frost, ...), the manager that
owns and advances them, and their serialization for save/load layers.
"""

from .effect import Effect
from .effect_serializer import (
    EffectSerializer,
    deserialize_effects,
    serialize_effects,
)
from .status_effect_manager import StatusEffectManager

__all__ = [
    "Effect",
    "EffectSerializer",
    "StatusEffectManager",
    "deserialize_effects",
    "serialize_effects",
]
