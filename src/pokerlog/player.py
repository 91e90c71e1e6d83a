"""Players seated in a session and the per-hand roster snapshot."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Player:
    """A player seated at the table for a session."""

    name: str = ""
    seat_number: int = 0
    style: str = "TAG"  # TAG / LAG / TP / LP
    level: str = "Reg"  # Fish / Whale / Reg / Pro

    @property
    def display_name(self) -> str:
        """Trimmed name, or the 1-based seat when unnamed."""
        return self.name.strip() or f"Seat {self.seat_number + 1}"


@dataclass(frozen=True)
class PlayerSnapshot:
    """A player's details as they were when a hand was created.

    Later roster edits never change a recorded hand.
    """

    name: str
    seat_number: int
    style: str = "TAG"
    level: str = "Reg"

    @classmethod
    def of(cls, player: Player) -> PlayerSnapshot:
        return cls(
            name=player.name,
            seat_number=player.seat_number,
            style=player.style,
            level=player.level,
        )

    @property
    def display_name(self) -> str:
        return self.name.strip() or f"Seat {self.seat_number + 1}"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayerSnapshot:
        return cls(
            name=data.get("name", ""),
            seat_number=int(data.get("seat_number", 0)),
            style=data.get("style", "TAG"),
            level=data.get("level", "Reg"),
        )
