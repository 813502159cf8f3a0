"""
Combat manager module.

Orchestrates the exchanges the turn scheduler asks for: a standard round,
an initiative round and a ranged round. Hit and damage math is delegated to
the engine, ambush and line of sight checks to the vision module.
"""

import random
from typing import Optional

from crawler_combat.core.logging import log_debug

from .combatant import Combatant
from .engine import AttackParams, perform_attack_with_ambush, resolve_attack
from .result import CombatResult
from .vision import can_ambush, distance, is_visible


class CombatManager:
    """Manages combat rounds between two positioned combatants.

    The manager owns the random source used for every roll, so a manager
    built with a seed resolves the same sequence of rounds identically.
    """

    def __init__(
        self, rng: Optional[random.Random] = None, seed: Optional[int] = None
    ) -> None:
        """Initialize the CombatManager with its random source.

        Args:
            rng (Optional[random.Random]): The random source to draw from.
            seed (Optional[int]): Seed of a new random source, used when no rng is given.

        """
        self.rng: random.Random = rng if rng is not None else random.Random(seed)

    def process_combat_round(self, params: AttackParams) -> CombatResult:
        """
        Runs a standard round: an ambush-aware attack followed by the
        defender's counter-attack if it survives.

        Args:
            params (AttackParams): The combatants and their positions.

        Returns:
            CombatResult: The outcome of the round.

        """
        return perform_attack_with_ambush(params, self.rng)

    def process_initiative_combat(self, params: AttackParams) -> CombatResult:
        """
        Runs an initiative round.

        The combatants act in initiative order: the designated attacker
        strikes first, possibly from ambush, then the defender answers with
        a regular strike if still alive.

        Args:
            params (AttackParams): The combatants and their positions.

        Returns:
            CombatResult: The outcome of the round.

        """
        first, second = self._initiative_order(params.attacker, params.defender)
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
        result = resolve_attack(first, second, ambush, self.rng)
        if second.is_alive():
            result.combine(resolve_attack(second, first, False, self.rng))
        return result

    def process_ranged_combat(self, params: AttackParams) -> CombatResult:
        """
        Runs a ranged round.

        The defender must be within the attacker's attack distance and in
        its line of sight, checked in that order. When either check fails
        the round ends with a single log line and nobody is harmed.

        Args:
            params (AttackParams): The combatants and their positions.

        Returns:
            CombatResult: The outcome of the round.

        """
        attacker = params.attacker
        defender = params.defender

        gap = distance(params.attacker_x, params.attacker_y, params.defender_x, params.defender_y)
        if gap > attacker.attack_distance:
            log_debug(
                f"{defender.name} out of range for {attacker.name}",
                {"distance": round(gap, 2), "attack_distance": attacker.attack_distance},
            )
            result = CombatResult()
            result.log(f"{defender.name} is out of range for {attacker.name}")
            return result

        if not is_visible(
            params.attacker_x,
            params.attacker_y,
            params.defender_x,
            params.defender_y,
            params.is_blocked,
        ):
            result = CombatResult()
            result.log(f"No line of sight to {defender.name}")
            return result

        return perform_attack_with_ambush(params, self.rng)

    @staticmethod
    def _initiative_order(
        attacker: Combatant, defender: Combatant
    ) -> tuple[Combatant, Combatant]:
        # TODO: order by agility once combatants expose an initiative stat.
        return attacker, defender
