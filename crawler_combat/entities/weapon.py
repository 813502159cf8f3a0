from typing import Any

from pydantic import BaseModel, Field

from crawler_combat.core.error_handling import ensure_int_in_range


class Weapon(BaseModel):
    """
    Represents a weapon wielded by a combatant.

    A weapon adds to the attack power and accuracy of its wielder and sets
    how far, in tiles, it can strike.
    """

    name: str = Field(
        description="The name of the weapon.",
    )
    damage_bonus: int = Field(
        default=0,
        description="Bonus added to the attack power of the wielder.",
    )
    accuracy_bonus: int = Field(
        default=0,
        description="Bonus added to the accuracy of the wielder.",
    )
    hit_distance: int = Field(
        default=1,
        description="Maximum distance, in tiles, at which the weapon strikes.",
    )

    def model_post_init(self, _: Any) -> None:
        self.hit_distance = ensure_int_in_range(
            self.hit_distance, "hit_distance", 1, context={"weapon": self.name}
        )

    def is_ranged(self) -> bool:
        return self.hit_distance > 1
