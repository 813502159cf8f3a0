"""
Vision and ambush module for the combat engine.

Line of sight is checked by sampling a straight line between two tiles and
asking the dungeon whether any intermediate tile blocks vision. Ambushes
are the inverse of ordinary visibility: an attacker close enough to a
defender that cannot be seen directly (around a corner, behind a pillar)
strikes by surprise.
"""

import math
from typing import Callable

from crawler_combat.core.logging import log_debug

from .combatant import Combatant

BlockedPredicate = Callable[[int, int], bool]

Coord = tuple[int, int]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def distance(x1: int, y1: int, x2: int, y2: int) -> float:
    """Euclidean distance between two tiles."""
    return math.hypot(x1 - x2, y1 - y2)


def sampled_line(x1: int, y1: int, x2: int, y2: int) -> list[Coord]:
    """
    Samples the straight line between two tiles.

    One tile is sampled per step along the major axis and rounded to the
    grid. Both endpoints are excluded.

    Args:
        x1 (int): Column of the origin.
        y1 (int): Row of the origin.
        x2 (int): Column of the target.
        y2 (int): Row of the target.

    Returns:
        list[Coord]: The intermediate tiles, ordered from origin to target.

    """
    dx = x2 - x1
    dy = y2 - y1
    steps = max(abs(dx), abs(dy))
    return [
        (
            _round_half_up(x1 + dx * step / steps),
            _round_half_up(y1 + dy * step / steps),
        )
        for step in range(1, steps)
    ]


def is_visible(
    x1: int, y1: int, x2: int, y2: int, is_blocked: BlockedPredicate
) -> bool:
    """
    Checks whether the target tile can be seen from the origin.

    Neither the origin nor the target tile is tested: only the tiles in
    between can block the view.

    Args:
        x1 (int): Column of the origin.
        y1 (int): Row of the origin.
        x2 (int): Column of the target.
        y2 (int): Row of the target.
        is_blocked (BlockedPredicate): Tells whether a tile blocks vision.

    Returns:
        bool: False as soon as one intermediate tile is blocked, True otherwise.

    """
    for x, y in sampled_line(x1, y1, x2, y2):
        if is_blocked(x, y):
            return False
    return True


def calculate_fov(
    x: int, y: int, fov_range: int, is_blocked: BlockedPredicate
) -> set[Coord]:
    """
    Computes the tiles visible from a position within a circular range.

    Args:
        x (int): Column of the observer.
        y (int): Row of the observer.
        fov_range (int): Vision radius, in tiles.
        is_blocked (BlockedPredicate): Tells whether a tile blocks vision.

    Returns:
        set[Coord]: The visible tiles, the observer tile included.

    """
    fov_range = max(0, fov_range)
    visible: set[Coord] = {(x, y)}
    range_sq = fov_range * fov_range
    for dx in range(-fov_range, fov_range + 1):
        for dy in range(-fov_range, fov_range + 1):
            if dx * dx + dy * dy > range_sq:
                continue
            if is_visible(x, y, x + dx, y + dy, is_blocked):
                visible.add((x + dx, y + dy))
    return visible


def can_ambush(
    attacker: Combatant,
    attacker_x: int,
    attacker_y: int,
    defender: Combatant,
    defender_x: int,
    defender_y: int,
    is_blocked: BlockedPredicate,
    attacker_fov_range: int,
) -> bool:
    """
    Determines whether the attacker can ambush the defender.

    The defender must be within the attacker's field of view range while
    the direct line between them is blocked, so the defender has not
    noticed the attacker approaching.

    Args:
        attacker (Combatant): The combatant striking first.
        attacker_x (int): Column of the attacker.
        attacker_y (int): Row of the attacker.
        defender (Combatant): The combatant being attacked.
        defender_x (int): Column of the defender.
        defender_y (int): Row of the defender.
        is_blocked (BlockedPredicate): Tells whether a tile blocks vision.
        attacker_fov_range (int): Vision radius of the attacker, in tiles.

    Returns:
        bool: True if the strike is an ambush.

    """
    gap = distance(attacker_x, attacker_y, defender_x, defender_y)
    if gap > attacker_fov_range:
        return False
    ambush = not is_visible(attacker_x, attacker_y, defender_x, defender_y, is_blocked)
    log_debug(
        f"Ambush check {attacker.name} -> {defender.name}",
        {"distance": round(gap, 2), "fov_range": attacker_fov_range, "ambush": ambush},
    )
    return ambush


def is_vulnerable_to_ambush(
    attacker: Combatant,
    attacker_x: int,
    attacker_y: int,
    defender: Combatant,
    defender_x: int,
    defender_y: int,
    is_blocked: BlockedPredicate,
    defender_fov_range: int,
) -> bool:
    """
    Determines whether the defender could ambush the attacker in return.

    This is ``can_ambush`` seen from the defender's side.

    Returns:
        bool: True if the attacker is exposed to a surprise strike.

    """
    return can_ambush(
        defender,
        defender_x,
        defender_y,
        attacker,
        attacker_x,
        attacker_y,
        is_blocked,
        defender_fov_range,
    )
