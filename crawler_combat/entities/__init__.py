"""
Entities module for the combat engine.

This module contains the concrete combatants shipped with the engine:
enemies with their per-kind statistics, and the weapons they wield.
"""

from .enemy import (
    Enemy,
    EnemyStats,
    get_base_accuracy,
    get_base_crit_bonus,
    get_base_evasion,
    get_base_stats,
)
from .weapon import Weapon

__all__ = [
    "Enemy",
    "EnemyStats",
    "Weapon",
    "get_base_accuracy",
    "get_base_crit_bonus",
    "get_base_evasion",
    "get_base_stats",
]
