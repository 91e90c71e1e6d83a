"""A recorded hand: four streets plus the table geometry it was played at."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .player import PlayerSnapshot
from .pot import hand_pot, pot_before, street_increment, to_bb
from .position import map_positions
from .street import Street, StreetName, check_street_order, new_streets


@dataclass
class Hand:
    """One hand of a session.

    ``button_seat_index`` and ``seat_count`` are captured when the hand is
    created so later roster changes never alter its geometry.

    ``pot_size`` is only a cache written at save time. Read the pot from
    ``computed_pot``, which is always re-derived from the action log.
    """

    streets: list[Street] = field(default_factory=new_streets)
    seat_count: int = 9
    button_seat_index: int | None = None
    players: list[PlayerSnapshot] = field(default_factory=list)
    position: str = "BTN"
    hole_cards: str = ""
    summary: str = ""
    note: str = ""
    is_key_hand: bool = False
    revealed: dict[str, str] = field(default_factory=dict)
    pot_size: float = 0.0

    def __post_init__(self) -> None:
        check_street_order(self.streets)

    def street(self, name: StreetName) -> Street:
        return self.streets[name]

    @property
    def positions(self) -> list[str]:
        """Canonical position per seat at this hand's table."""
        return map_positions(self.seat_count, self.button_seat_index or 0)

    @property
    def computed_pot(self) -> float:
        return hand_pot(self.streets)

    def pot_in_bb(self, points_per_hundred_bb: float) -> float:
        return to_bb(self.computed_pot, points_per_hundred_bb)

    def pot_before(self, name: StreetName) -> float:
        return pot_before(self.streets, name)

    def pot_after(self, name: StreetName) -> float:
        return self.pot_before(name) + street_increment(self.streets[name])

    def to_dict(self) -> dict[str, Any]:
        return {
            "streets": [s.to_dict() for s in self.streets],
            "seat_count": self.seat_count,
            "button_seat_index": self.button_seat_index,
            "players": [p.to_dict() for p in self.players],
            "position": self.position,
            "hole_cards": self.hole_cards,
            "summary": self.summary,
            "note": self.note,
            "is_key_hand": self.is_key_hand,
            "revealed": dict(self.revealed),
            "pot_size": self.pot_size,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Hand:
        """Build a hand from its stored form.

        A missing street list gives four empty streets. A missing seat
        count is taken from the player snapshots when there are at least
        two, else 9. Raises ValueError for streets out of order or unknown
        action types.
        """
        streets = [Street.from_dict(s) for s in data.get("streets", [])] or new_streets()
        players = [PlayerSnapshot.from_dict(p) for p in data.get("players", [])]
        default_seats = len(players) if len(players) >= 2 else 9
        return cls(
            streets=streets,
            seat_count=int(data.get("seat_count", default_seats)),
            button_seat_index=data.get("button_seat_index"),
            players=players,
            position=data.get("position", "BTN"),
            hole_cards=data.get("hole_cards", ""),
            summary=data.get("summary", ""),
            note=data.get("note", ""),
            is_key_hand=bool(data.get("is_key_hand", False)),
            revealed=dict(data.get("revealed", {})),
            pot_size=float(data.get("pot_size", 0.0)),
        )

    @classmethod
    def load(cls, path: Path) -> Hand:
        """Load a hand from a JSON file."""
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def dump(self, path: Path) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
