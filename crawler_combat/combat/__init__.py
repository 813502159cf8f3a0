"""
Combat system module for the combat engine.

This module handles combat resolution: the combatant capability, hit,
critical and damage formulas, ambush and line of sight checks, and the
manager orchestrating standard, initiative and ranged rounds.
"""

from .combat_manager import CombatManager
from .combatant import BaseCombatant, Combatant, StatusEffectCombatant
from .engine import (
    AttackParams,
    calculate_damage,
    calculate_hit_chance,
    does_attack_hit,
    engage,
    is_critical,
    perform_attack_with_ambush,
    resolve_attack,
)
from .result import CombatResult
from .vision import (
    calculate_fov,
    can_ambush,
    distance,
    is_visible,
    is_vulnerable_to_ambush,
    sampled_line,
)

__all__ = [
    # Import from combat_manager.py
    "CombatManager",
    # Import from combatant.py
    "BaseCombatant",
    "Combatant",
    "StatusEffectCombatant",
    # Import from engine.py
    "AttackParams",
    "calculate_damage",
    "calculate_hit_chance",
    "does_attack_hit",
    "engage",
    "is_critical",
    "perform_attack_with_ambush",
    "resolve_attack",
    # Import from result.py
    "CombatResult",
    # Import from vision.py
    "calculate_fov",
    "can_ambush",
    "distance",
    "is_visible",
    "is_vulnerable_to_ambush",
    "sampled_line",
]
