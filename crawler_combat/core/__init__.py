"""
Core module for the combat engine.

This module contains the fundamental components shared by every other part
of the engine: combat constants and enumerations, logging setup and the
input correction helpers.
"""

from .constants import (
    AMBUSH_DISTANCE,
    BASE_CRIT_CHANCE,
    BASE_HIT_CHANCE,
    CRIT_MULTIPLIER,
    DEFENSE_CAP,
    MAX_HIT_CHANCE,
    MIN_DAMAGE,
    MIN_HIT_CHANCE,
    SURPRISE_ATTACK_MODIFIER,
    EffectType,
    EnemyKind,
    EnemyState,
    NiceEnum,
    get_effect_resistance,
    is_overwritable,
)
from .error_handling import (
    ensure_int_in_range,
    ensure_non_negative_int,
    require_combatant,
)
from .logging import (
    get_logger,
    log_debug,
    log_info,
    setup_logging,
)

__all__ = [
    # Import from constants.py
    "AMBUSH_DISTANCE",
    "BASE_CRIT_CHANCE",
    "BASE_HIT_CHANCE",
    "CRIT_MULTIPLIER",
    "DEFENSE_CAP",
    "MAX_HIT_CHANCE",
    "MIN_DAMAGE",
    "MIN_HIT_CHANCE",
    "SURPRISE_ATTACK_MODIFIER",
    "EffectType",
    "EnemyKind",
    "EnemyState",
    "NiceEnum",
    "get_effect_resistance",
    "is_overwritable",
    # Import from error_handling.py
    "ensure_int_in_range",
    "ensure_non_negative_int",
    "require_combatant",
    # Import from logging.py
    "get_logger",
    "log_debug",
    "log_info",
    "setup_logging",
]
