"""
Constants and enumerations for the combat engine.

Defines the numeric combat policy (hit, crit, damage and mitigation
constants), the status effect enumeration and the enemy enumerations used
throughout the engine.
"""

from enum import Enum

# =============================================================================
# Combat policy
# =============================================================================

# Hit chance before accuracy and evasion are taken into account.
BASE_HIT_CHANCE = 0.8
# Lower and upper bound of the hit chance.
MIN_HIT_CHANCE = 0.05
MAX_HIT_CHANCE = 0.95
# Every HIT_CHANCE_DIVISOR points of accuracy over evasion add 1.0 to the
# hit chance.
HIT_CHANCE_DIVISOR = 20

# Critical hit chance before the attacker crit bonus.
BASE_CRIT_CHANCE = 0.10
CRIT_MULTIPLIER = 1.5

# Defense mitigation is defense / (defense + DEFENSE_SCALE), capped.
DEFENSE_CAP = 0.8
DEFENSE_SCALE = 5

# Raw damage variance band applied to the attack power.
DAMAGE_VARIANCE_MIN = 0.8
DAMAGE_VARIANCE_MAX = 1.2

MIN_DAMAGE = 1

# Damage multiplier of an ambush (surprise) strike.
SURPRISE_ATTACK_MODIFIER = 2.0
# Reach of an ambush strike, in tiles.
AMBUSH_DISTANCE = 1

# =============================================================================
# Status effects
# =============================================================================

DEFAULT_EFFECT_INTENSITY = 3
MIN_EFFECT_INTENSITY = 1
MAX_EFFECT_INTENSITY = 10


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().replace("_", " ").capitalize()

    @property
    def color(self) -> str:
        """Returns the color string associated with this value."""
        return "dim white"

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies the color formatting of this value to a message."""
        return f"[{self.color}]{message}[/]"


class EffectType(NiceEnum):
    """Defines the status effects that can afflict a combatant."""

    BURNING = "BURNING"
    POISON = "POISON"
    PARALYSIS = "PARALYSIS"
    BLEEDING = "BLEEDING"
    INVISIBILITY = "INVISIBILITY"
    LEVITATION = "LEVITATION"
    SLOW = "SLOW"
    HASTE = "HASTE"
    MIND_VISION = "MIND_VISION"
    ANTI_MAGIC = "ANTI_MAGIC"
    BARKSKIN = "BARKSKIN"
    COMBO = "COMBO"
    FURY = "FURY"
    OOZE = "OOZE"
    FROST = "FROST"
    LIGHT = "LIGHT"
    DARKNESS = "DARKNESS"
    ROOTED = "ROOTED"

    @property
    def is_stackable(self) -> bool:
        """Whether several instances of this effect can coexist."""
        return self in _PERIODIC_DAMAGE_EFFECTS

    @property
    def deals_periodic_damage(self) -> bool:
        """Whether this effect damages its bearer every turn."""
        return self in _PERIODIC_DAMAGE_EFFECTS

    @property
    def label(self) -> str:
        """Returns the base text used to describe this effect."""
        return {
            EffectType.BURNING: "burning",
            EffectType.POISON: "poison",
            EffectType.PARALYSIS: "paralysis",
            EffectType.BLEEDING: "bleeding",
            EffectType.INVISIBILITY: "invisibility",
            EffectType.LEVITATION: "levitation",
            EffectType.SLOW: "slow",
            EffectType.HASTE: "haste",
            EffectType.MIND_VISION: "mind vision",
            EffectType.ANTI_MAGIC: "anti-magic",
            EffectType.BARKSKIN: "barkskin",
            EffectType.COMBO: "combo",
            EffectType.FURY: "fury",
            EffectType.OOZE: "ooze",
            EffectType.FROST: "frost",
            EffectType.LIGHT: "light",
            EffectType.DARKNESS: "darkness",
            EffectType.ROOTED: "rooted",
        }[self]

    @property
    def color(self) -> str:
        """Returns the color string associated with this effect type."""
        return {
            EffectType.BURNING: "bold red",
            EffectType.POISON: "bold green",
            EffectType.PARALYSIS: "bold yellow",
            EffectType.BLEEDING: "red",
            EffectType.INVISIBILITY: "dim white",
            EffectType.LEVITATION: "bold cyan",
            EffectType.SLOW: "white",
            EffectType.HASTE: "green",
            EffectType.MIND_VISION: "magenta",
            EffectType.ANTI_MAGIC: "bold blue",
            EffectType.BARKSKIN: "yellow",
            EffectType.COMBO: "bold yellow",
            EffectType.FURY: "bold red",
            EffectType.OOZE: "green",
            EffectType.FROST: "bold cyan",
            EffectType.LIGHT: "bold white",
            EffectType.DARKNESS: "dim white",
            EffectType.ROOTED: "yellow",
        }.get(self, "dim white")


_PERIODIC_DAMAGE_EFFECTS = frozenset(
    {EffectType.BURNING, EffectType.POISON, EffectType.BLEEDING}
)

# Effects that are neither stackable nor overwritten by a new instance.
_PERSISTENT_EFFECTS = frozenset({EffectType.MIND_VISION, EffectType.INVISIBILITY})


def is_overwritable(effect_type: EffectType) -> bool:
    """
    Checks whether a new instance of the given effect type replaces the old one.

    Args:
        effect_type (EffectType): The effect type to check.

    Returns:
        bool: True for non-stackable effects, except the persistent ones.

    """
    return not effect_type.is_stackable and effect_type not in _PERSISTENT_EFFECTS


def get_effect_resistance(effect_type: EffectType) -> float:
    """
    Returns the base resistance of a combatant against the given effect type.

    Args:
        effect_type (EffectType): The effect type.

    Returns:
        float: The resistance as a probability in [0, 1].

    """
    return {
        EffectType.PARALYSIS: 0.2,
        EffectType.FROST: 0.1,
        EffectType.BURNING: 0.15,
    }.get(effect_type, 0.0)


class EnemyKind(NiceEnum):
    """Defines the kinds of enemy roaming the dungeon."""

    RAT = "RAT"
    SNAKE = "SNAKE"
    GNOLL = "GNOLL"
    CRAB = "CRAB"
    BAT = "BAT"
    SCORPION = "SCORPION"
    GUARD = "GUARD"
    WARLOCK = "WARLOCK"
    GOLEM = "GOLEM"

    @property
    def color(self) -> str:
        """Returns the color string associated with this enemy kind."""
        return {
            EnemyKind.RAT: "bright_red",
            EnemyKind.SNAKE: "bright_green",
            EnemyKind.GNOLL: "yellow",
            EnemyKind.CRAB: "red",
            EnemyKind.BAT: "magenta",
            EnemyKind.SCORPION: "dark_orange",
            EnemyKind.GUARD: "blue",
            EnemyKind.WARLOCK: "bold magenta",
            EnemyKind.GOLEM: "white",
        }.get(self, "dim white")


class EnemyState(NiceEnum):
    """Defines the behavioural state of an enemy."""

    IDLE = "IDLE"
    ALERT = "ALERT"
    HOSTILE = "HOSTILE"
    FLEEING = "FLEEING"
    SLEEPING = "SLEEPING"
    PASSIVE = "PASSIVE"
