"""Betting rounds of a recorded hand."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any, Iterable

from .action import Action


class StreetName(IntEnum):
    """The four betting rounds, in the only order they can occur."""

    PREFLOP = 0
    FLOP = 1
    TURN = 2
    RIVER = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> StreetName:
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown street: {label}") from None


@dataclass
class Street:
    """One betting round: optional board text and an ordered action log."""

    name: StreetName
    cards: str = ""
    actions: list[Action] = field(default_factory=list)

    @property
    def display_cards(self) -> str:
        """Board text split into two-character cards ('Th7s5c' -> 'Th 7s 5c')."""
        return " ".join(self.cards[i : i + 2] for i in range(0, len(self.cards), 2))

    @property
    def actors(self) -> set[str]:
        """Every seat with at least one recorded action on this street."""
        return {a.actor for a in self.actions}

    def with_actions(self, actions: Iterable[Action]) -> Street:
        """Copy of this street with a new action log."""
        return replace(self, actions=list(actions))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name.label,
            "cards": self.cards,
            "actions": [a.to_dict() for a in self.actions],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Street:
        return cls(
            name=StreetName.from_label(data["name"]),
            cards=data.get("cards", ""),
            actions=[Action.from_dict(a) for a in data.get("actions", [])],
        )


def new_streets() -> list[Street]:
    """Four empty streets, Preflop through River."""
    return [Street(name=name) for name in StreetName]


def check_street_order(streets: list[Street]) -> None:
    """Raise ValueError unless ``streets`` is exactly Preflop, Flop, Turn, River."""
    names = [s.name for s in streets]
    if names != list(StreetName):
        got = ", ".join(StreetName(n).label for n in names)
        raise ValueError(f"Expected Preflop, Flop, Turn, River; got [{got}]")
