"""A playing session: blinds, point scale, roster and result."""

from __future__ import annotations

from dataclasses import dataclass, field

from .blinds import BlindLevel
from .config import get_config
from .hand import Hand
from .player import Player
from .pot import to_bb


@dataclass
class Session:
    """Table configuration shared by every hand of a session.

    ``points_per_hundred_bb`` is how many points 100 big blinds are
    worth; zero or less means BB conversion is unavailable.
    """

    name: str = ""
    location: str = ""
    blind_level: str = ""
    points_per_hundred_bb: float = 0.0
    buy_in: float = 0.0
    cash_out: float = 0.0
    note: str = ""
    is_active: bool = True
    players: list[Player] = field(default_factory=list)
    hands: list[Hand] = field(default_factory=list)

    @classmethod
    def from_config(cls, **kwargs) -> Session:
        """New session using the configured blind level and scale."""
        defaults = get_config().session
        kwargs.setdefault("blind_level", defaults.blind_level)
        kwargs.setdefault("points_per_hundred_bb", defaults.points_per_hundred_bb)
        return cls(**kwargs)

    @property
    def seated(self) -> list[Player]:
        return sorted(self.players, key=lambda p: p.seat_number)

    @property
    def named_players(self) -> list[str]:
        """Non-empty player names in seat order."""
        return [name for p in self.seated if (name := p.name.strip())]

    @property
    def seat_count(self) -> int:
        """Seats in play: one per named player, else the configured default.

        A single named player is not a table, so it also gets the default.
        """
        named = self.named_players
        if len(named) >= 2:
            return len(named)
        return get_config().table.default_seat_count

    @property
    def blinds(self) -> BlindLevel | None:
        return BlindLevel.parse(self.blind_level)

    @property
    def big_blind(self) -> float:
        """Big blind from the blind level, 0 if it can't be parsed."""
        blinds = self.blinds
        return blinds.big_blind if blinds else 0.0

    @property
    def profit(self) -> float:
        return self.cash_out - self.buy_in

    @property
    def profit_in_bb(self) -> float:
        return to_bb(self.profit, self.points_per_hundred_bb)

    def end(self, buy_in: float, cash_out: float) -> None:
        self.buy_in = buy_in
        self.cash_out = cash_out
        self.is_active = False
