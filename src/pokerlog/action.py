"""Action types and recorded player actions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Self


class ActionType(Enum):
    """Possible actions recorded for a seat."""

    FOLD = "Fold"
    CHECK = "Check"
    CALL = "Call"
    BET = "Bet"
    RAISE = "Raise"
    ALL_IN = "Allin"
    SMALL_BLIND = "SB"
    BIG_BLIND = "BB"

    @property
    def contributes(self) -> bool:
        """True if an amount on this action puts chips in the pot."""
        return self not in (ActionType.FOLD, ActionType.CHECK)

    @property
    def is_aggressive(self) -> bool:
        """Bet, raise or all-in: reopens the action for everyone else."""
        return self in (ActionType.BET, ActionType.RAISE, ActionType.ALL_IN)

    @property
    def is_blind(self) -> bool:
        return self in (ActionType.SMALL_BLIND, ActionType.BIG_BLIND)


@dataclass(frozen=True)
class Action:
    """A single recorded action.

    Attributes:
        actor: Seat label (player name or position) that acted.
        type: The action type.
        amount: For contribution-bearing types, the actor's cumulative
            total put in on this street, not the size of this action.
            None when no amount was recorded.
    """

    actor: str
    type: ActionType
    amount: float | None = None

    def __post_init__(self) -> None:
        if self.amount is not None and self.amount < 0:
            raise ValueError(f"Action amount must be non-negative, got {self.amount}")

    def __str__(self) -> str:
        if self.amount is not None and self.type not in (
            ActionType.FOLD,
            ActionType.CHECK,
            ActionType.CALL,
        ):
            return f"{self.actor} {self.type.value} {self.amount:g}"
        return f"{self.actor} {self.type.value}"

    def to_dict(self) -> dict[str, Any]:
        return {"actor": self.actor, "type": self.type.value, "amount": self.amount}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build an action from its stored form.

        Raises ValueError for an unknown action type.
        """
        amount = data.get("amount")
        return cls(
            actor=str(data["actor"]),
            type=ActionType(data["type"]),
            amount=float(amount) if amount is not None else None,
        )
