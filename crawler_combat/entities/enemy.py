"""
Enemy module for the combat engine.

Defines the enemies roaming the dungeon. Each kind of enemy has its own
base statistics, kept in plain lookup tables rather than in a class
hierarchy.
"""

from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, Field, PrivateAttr

from crawler_combat.combat.combatant import BaseCombatant, StatusEffectCombatant
from crawler_combat.core.constants import EnemyKind, EnemyState
from crawler_combat.core.logging import log_debug
from crawler_combat.effects.status_effect_manager import StatusEffectManager

from .weapon import Weapon


class EnemyStats(NamedTuple):
    """Base statistics of an enemy kind."""

    hp: int
    attack: int
    defense: int
    exp_value: int
    attack_range: int
    detection_range: int
    symbol: str


def get_base_stats(kind: EnemyKind) -> EnemyStats:
    return {
        EnemyKind.RAT: EnemyStats(10, 4, 2, 2, 1, 5, "r"),
        EnemyKind.SNAKE: EnemyStats(12, 6, 3, 4, 1, 6, "s"),
        EnemyKind.GNOLL: EnemyStats(20, 8, 5, 6, 1, 6, "g"),
        EnemyKind.CRAB: EnemyStats(25, 5, 10, 5, 1, 4, "c"),
        EnemyKind.BAT: EnemyStats(15, 10, 4, 3, 1, 8, "b"),
        EnemyKind.SCORPION: EnemyStats(22, 12, 8, 8, 1, 5, "S"),
        EnemyKind.GUARD: EnemyStats(30, 12, 10, 10, 1, 7, "G"),
        EnemyKind.WARLOCK: EnemyStats(18, 15, 5, 12, 3, 8, "W"),
        EnemyKind.GOLEM: EnemyStats(50, 18, 15, 15, 1, 4, "M"),
    }[kind]


def get_base_accuracy(kind: EnemyKind) -> int:
    return {
        EnemyKind.RAT: 8,
        EnemyKind.SNAKE: 10,
        EnemyKind.GNOLL: 12,
        EnemyKind.CRAB: 9,
        EnemyKind.BAT: 15,
        EnemyKind.SCORPION: 13,
        EnemyKind.GUARD: 14,
        EnemyKind.WARLOCK: 16,
        EnemyKind.GOLEM: 10,
    }[kind]


def get_base_evasion(kind: EnemyKind) -> int:
    return {
        EnemyKind.RAT: 6,
        EnemyKind.SNAKE: 12,
        EnemyKind.GNOLL: 8,
        EnemyKind.CRAB: 5,
        EnemyKind.BAT: 18,
        EnemyKind.SCORPION: 10,
        EnemyKind.GUARD: 9,
        EnemyKind.WARLOCK: 14,
        EnemyKind.GOLEM: 4,
    }[kind]


def get_base_crit_bonus(kind: EnemyKind) -> float:
    return {
        EnemyKind.SNAKE: 0.05,
        EnemyKind.GNOLL: 0.05,
        EnemyKind.BAT: 0.05,
        EnemyKind.SCORPION: 0.10,
        EnemyKind.GUARD: 0.05,
        EnemyKind.WARLOCK: 0.10,
    }.get(kind, 0.0)


class Enemy(BaseModel, BaseCombatant, StatusEffectCombatant):
    """
    An enemy combatant.

    Accuracy, evasion and critical bonus come from the enemy kind; a
    wielded weapon adds to the attack power and accuracy and replaces the
    natural attack range with its own hit distance.
    """

    kind: EnemyKind = Field(
        description="The kind of enemy.",
    )
    hp: int = Field(
        description="Current hit points.",
    )
    max_hp: int = Field(
        description="Maximum hit points.",
    )
    attack: int = Field(
        description="Natural attack power, before the weapon bonus.",
    )
    defense: int = Field(
        description="Defense used to mitigate incoming damage.",
    )
    exp_value: int = Field(
        default=0,
        description="Experience granted when the enemy is defeated.",
    )
    x: int = Field(
        default=0,
        description="Column of the enemy in the dungeon.",
    )
    y: int = Field(
        default=0,
        description="Row of the enemy in the dungeon.",
    )
    state: EnemyState = Field(
        default=EnemyState.IDLE,
        description="Current behavioural state.",
    )
    attack_range: int = Field(
        default=1,
        description="Natural attack range, in tiles.",
    )
    detection_range: int = Field(
        default=5,
        description="Field of view range, in tiles.",
    )
    symbol: str = Field(
        default="?",
        description="Character used to draw the enemy.",
    )
    crit_bonus: float = Field(
        default=0.0,
        description="Additive critical hit chance.",
    )
    weapon: Optional[Weapon] = Field(
        default=None,
        description="The weapon wielded by the enemy, if any.",
    )

    _effects: StatusEffectManager = PrivateAttr(default_factory=StatusEffectManager)

    def model_post_init(self, _: Any) -> None:
        if self.max_hp <= 0:
            raise ValueError("max_hp must be a positive integer.")
        self.hp = min(max(0, self.hp), self.max_hp)
        self._effects.owner = self

    @classmethod
    def spawn(
        cls,
        kind: EnemyKind,
        x: int = 0,
        y: int = 0,
        weapon: Optional[Weapon] = None,
    ) -> "Enemy":
        """
        Creates an enemy of the given kind with its base statistics.

        Args:
            kind (EnemyKind): The kind of enemy.
            x (int): Column of the enemy.
            y (int): Row of the enemy.
            weapon (Optional[Weapon]): The weapon wielded by the enemy.

        Returns:
            Enemy: The new enemy, at full health.

        """
        stats = get_base_stats(kind)
        enemy = cls(
            kind=kind,
            hp=stats.hp,
            max_hp=stats.hp,
            attack=stats.attack,
            defense=stats.defense,
            exp_value=stats.exp_value,
            x=x,
            y=y,
            attack_range=stats.attack_range,
            detection_range=stats.detection_range,
            symbol=stats.symbol,
            crit_bonus=get_base_crit_bonus(kind),
            weapon=weapon,
        )
        log_debug(f"Spawned {kind.colored_name}", {"x": x, "y": y, "hp": enemy.hp})
        return enemy

    # ===========================================================================
    # COMBATANT PROPERTIES
    # ===========================================================================

    @property
    def name(self) -> str:
        return self.kind.display_name

    @property
    def effects(self) -> StatusEffectManager:
        return self._effects

    @property
    def attack_power(self) -> int:
        bonus = self.weapon.damage_bonus if self.weapon else 0
        return max(0, self.attack + bonus)

    @property
    def accuracy(self) -> int:
        bonus = self.weapon.accuracy_bonus if self.weapon else 0
        return max(0, get_base_accuracy(self.kind) + bonus)

    @property
    def evasion(self) -> int:
        return get_base_evasion(self.kind)

    @property
    def attack_distance(self) -> int:
        if self.weapon:
            return self.weapon.hit_distance
        return self.attack_range

    def experience_value(self) -> Optional[int]:
        return self.exp_value

    # ===========================================================================
    # STATE TRANSITIONS
    # ===========================================================================

    def set_state(self, new_state: EnemyState) -> None:
        log_debug(f"{self.name} is now {new_state.display_name}")
        self.state = new_state

    def alert(self) -> None:
        self.set_state(EnemyState.ALERT)

    def make_hostile(self) -> None:
        self.set_state(EnemyState.HOSTILE)

    def start_fleeing(self) -> None:
        self.set_state(EnemyState.FLEEING)

    def reset(self) -> None:
        self.set_state(EnemyState.IDLE)
