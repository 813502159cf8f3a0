"""
Combat result module for the combat engine.

A CombatResult collects the outcome of one attack or round: the log lines
to show the player, whether the defender went down and the experience
earned.
"""

from pydantic import BaseModel, Field


class CombatResult(BaseModel):
    """The outcome of an attack, an exchange or a full round."""

    logs: list[str] = Field(
        default_factory=list,
        description="Human-readable log lines, in the order the events happened.",
    )
    defeated: bool = Field(
        default=False,
        description="Whether a combatant was defeated.",
    )
    experience: int = Field(
        default=0,
        ge=0,
        description="Experience earned by the defeats in this result.",
    )

    def log(self, message: str) -> None:
        self.logs.append(message)

    def combine(self, other: "CombatResult") -> "CombatResult":
        """
        Merges another result into this one.

        Logs are concatenated in order, the defeated flags are OR'd and the
        experience is summed.

        Args:
            other (CombatResult): The result to merge.

        Returns:
            CombatResult: This result, for chaining.

        """
        self.logs.extend(other.logs)
        self.defeated = self.defeated or other.defeated
        self.experience += other.experience
        return self
