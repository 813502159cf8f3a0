"""
Combat engine module.

Pure formulas for hit chance, critical chance and damage, and the
resolution of a single attack or exchange. Every stochastic function draws
from the ``random.Random`` it is given, so a seeded generator replays a
fight exactly.
"""

import random
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from crawler_combat.core.constants import (
    BASE_CRIT_CHANCE,
    BASE_HIT_CHANCE,
    CRIT_MULTIPLIER,
    DAMAGE_VARIANCE_MAX,
    DAMAGE_VARIANCE_MIN,
    DEFENSE_CAP,
    DEFENSE_SCALE,
    HIT_CHANCE_DIVISOR,
    MAX_HIT_CHANCE,
    MIN_DAMAGE,
    MIN_HIT_CHANCE,
    SURPRISE_ATTACK_MODIFIER,
)
from crawler_combat.core.error_handling import ensure_non_negative_int, require_combatant
from crawler_combat.core.logging import log_debug, log_info

from .combatant import Combatant
from .result import CombatResult
from .vision import can_ambush


class AttackParams(BaseModel):
    """Everything needed to resolve an attack between two positioned combatants."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    attacker: Combatant = Field(
        description="The combatant striking first.",
    )
    attacker_x: int = Field(
        description="Column of the attacker.",
    )
    attacker_y: int = Field(
        description="Row of the attacker.",
    )
    defender: Combatant = Field(
        description="The combatant being attacked.",
    )
    defender_x: int = Field(
        description="Column of the defender.",
    )
    defender_y: int = Field(
        description="Row of the defender.",
    )
    is_blocked: Callable[[int, int], bool] = Field(
        description="Tells whether a tile blocks vision.",
    )
    attacker_fov_range: int = Field(
        default=0,
        description="Vision radius of the attacker, in tiles.",
    )

    @field_validator("attacker", "defender", mode="before")
    @classmethod
    def _require_combatant(cls, value: Any, info: ValidationInfo) -> Any:
        return require_combatant(value, info.field_name)

    @field_validator("attacker_fov_range", mode="before")
    @classmethod
    def _correct_fov_range(cls, value: Any, info: ValidationInfo) -> int:
        attacker = info.data.get("attacker")
        return ensure_non_negative_int(
            value,
            "attacker_fov_range",
            context={"attacker": getattr(attacker, "name", None)},
        )


# =============================================================================
# Formulas
# =============================================================================


def calculate_hit_chance(attacker: Combatant, defender: Combatant) -> float:
    """
    Computes the probability that the attacker hits the defender.

    Args:
        attacker (Combatant): The attacking combatant.
        defender (Combatant): The defending combatant.

    Returns:
        float: The hit chance, clamped to [MIN_HIT_CHANCE, MAX_HIT_CHANCE].

    """
    chance = BASE_HIT_CHANCE + (attacker.accuracy - defender.evasion) / HIT_CHANCE_DIVISOR
    return min(max(chance, MIN_HIT_CHANCE), MAX_HIT_CHANCE)


def does_attack_hit(attacker: Combatant, defender: Combatant, rng: random.Random) -> bool:
    chance = calculate_hit_chance(attacker, defender)
    hit = rng.random() < chance
    log_debug(
        f"{attacker.name} attacks {defender.name}",
        {"hit_chance": round(chance, 3), "hit": hit},
    )
    return hit


def is_critical(attacker: Combatant, rng: random.Random) -> bool:
    """
    Rolls for a critical strike.

    The chance is BASE_CRIT_CHANCE plus the attacker crit bonus, not
    clamped: a chance at or above 1.0 always crits, at or below 0.0 never.

    Args:
        attacker (Combatant): The attacking combatant.
        rng (random.Random): The random source.

    Returns:
        bool: True on a critical strike.

    """
    return rng.random() < BASE_CRIT_CHANCE + attacker.crit_bonus


def calculate_damage(
    attacker: Combatant,
    defender: Combatant,
    is_ambush: bool,
    rng: random.Random,
    critical: Optional[bool] = None,
) -> int:
    """
    Computes the damage of a strike that hit.

    The steps are applied in a fixed order: variance, critical multiplier,
    ambush multiplier, defense mitigation, then the minimum damage floor.

    Args:
        attacker (Combatant): The attacking combatant.
        defender (Combatant): The defending combatant.
        is_ambush (bool): Whether the strike is an ambush.
        rng (random.Random): The random source.
        critical (Optional[bool]):
            Whether the strike is critical, rolled with ``is_critical`` if None.

    Returns:
        int: The damage dealt, at least MIN_DAMAGE.

    """
    raw = attacker.attack_power * rng.uniform(DAMAGE_VARIANCE_MIN, DAMAGE_VARIANCE_MAX)
    if critical is None:
        critical = is_critical(attacker, rng)
    if critical:
        raw *= CRIT_MULTIPLIER
    if is_ambush:
        raw *= SURPRISE_ATTACK_MODIFIER
    defense = max(0, defender.defense)
    defense_factor = min(defense / (defense + DEFENSE_SCALE), DEFENSE_CAP)
    mitigated = raw * (1 - defense_factor)
    return int(max(mitigated, MIN_DAMAGE))


# =============================================================================
# Resolution
# =============================================================================


def resolve_attack(
    attacker: Combatant, defender: Combatant, is_ambush: bool, rng: random.Random
) -> CombatResult:
    """
    Resolves a single strike of the attacker against the defender.

    On a hit the damage is applied to the defender, and a defeat is
    recorded together with the defender's experience value. A miss only
    produces a log line.

    Args:
        attacker (Combatant): The attacking combatant.
        defender (Combatant): The defending combatant.
        is_ambush (bool): Whether the strike is an ambush.
        rng (random.Random): The random source.

    Returns:
        CombatResult: The outcome of the strike.

    """
    result = CombatResult()

    if not does_attack_hit(attacker, defender, rng):
        result.log(f"{attacker.name} misses {defender.name}!")
        return result

    critical = is_critical(attacker, rng)
    damage = calculate_damage(attacker, defender, is_ambush, rng, critical=critical)
    defender.take_damage(damage)

    if is_ambush:
        prefix = "Ambush! Critical hit! " if critical else "Ambush! "
        result.log(
            f"{prefix}{attacker.name} strikes {defender.name} "
            f"from the shadows for {damage} damage!"
        )
    elif critical:
        result.log(f"Critical hit! {attacker.name} deals {damage} damage to {defender.name}!")
    else:
        result.log(f"{attacker.name} hits {defender.name} for {damage} damage!")

    if not defender.is_alive():
        result.log(f"{attacker.name} defeated {defender.name}!")
        result.defeated = True
        result.experience = defender.experience_value() or 0
        log_info(
            f"{defender.name} was defeated by {attacker.name}",
            {"experience": result.experience},
        )

    log_debug(
        f"{attacker.name} dealt {damage} damage to {defender.name}",
        {"critical": critical, "ambush": is_ambush, "defender_hp": defender.hp},
    )
    return result


def engage(
    attacker: Combatant, defender: Combatant, is_ambush: bool, rng: random.Random
) -> CombatResult:
    """
    Resolves an exchange: the attacker strikes, then a surviving defender
    counter-attacks.

    The ambush flag only applies to the first strike; the counter-attack
    never is one since the defender now knows where the attacker is.

    Args:
        attacker (Combatant): The combatant striking first.
        defender (Combatant): The combatant being attacked.
        is_ambush (bool): Whether the first strike is an ambush.
        rng (random.Random): The random source.

    Returns:
        CombatResult: Both strikes, in the order they happened.

    """
    result = resolve_attack(attacker, defender, is_ambush, rng)
    if defender.is_alive():
        result.combine(resolve_attack(defender, attacker, False, rng))
    return result


def perform_attack_with_ambush(params: AttackParams, rng: random.Random) -> CombatResult:
    """
    Checks whether the attacker can ambush the defender, then engages.

    Args:
        params (AttackParams): The combatants and their positions.
        rng (random.Random): The random source.

    Returns:
        CombatResult: The outcome of the exchange.

    """
    ambush = can_ambush(
        params.attacker,
        params.attacker_x,
        params.attacker_y,
        params.defender,
        params.defender_x,
        params.defender_y,
        params.is_blocked,
        params.attacker_fov_range,
    )
    return engage(params.attacker, params.defender, ambush, rng)
