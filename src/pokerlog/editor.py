"""Edit session for a single hand: geometry, action entry and save."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .action import Action, ActionType
from .blinds import blind_seats, post_blinds
from .config import get_config
from .folds import active_seats, append_action, folded_before, reconcile_folds
from .hand import Hand
from .order import acting_order
from .player import PlayerSnapshot
from .position import map_positions
from .pot import hand_pot
from .session import Session
from .street import Street, StreetName, new_streets

logger = logging.getLogger(__name__)


@dataclass
class HandEditor:
    """Records one hand for a session.

    Seats are labelled by player name when the session has named
    players, otherwise by their canonical position. Nothing is written
    back to the session; ``save()`` returns the finished Hand.
    """

    session: Session
    hand: Hand | None = None
    button_seat_index: int = 0
    streets: list[Street] = field(default_factory=new_streets)

    hole_cards: str = ""
    summary: str = ""
    note: str = ""
    is_key_hand: bool = False
    revealed: dict[str, str] = field(default_factory=dict)

    _seat_count: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.hand is not None:
            self._seat_count = self.hand.seat_count
            self.button_seat_index = self.hand.button_seat_index or 0
            self.streets = [s.with_actions(s.actions) for s in self.hand.streets]
            self.hole_cards = self.hand.hole_cards
            self.summary = self.hand.summary
            self.note = self.hand.note
            self.is_key_hand = self.hand.is_key_hand
            self.revealed = dict(self.hand.revealed)
        else:
            self._seat_count = self.session.seat_count
        if self._seat_count < 2:
            raise ValueError(f"A hand needs at least 2 seats, got {self._seat_count}")

    @property
    def seat_count(self) -> int:
        return self._seat_count

    @property
    def is_named(self) -> bool:
        """True if every seat in play has a player name."""
        return len(self.session.named_players) >= self.seat_count

    @property
    def positions(self) -> list[str]:
        """Canonical position per seat, rotated to the current button."""
        return map_positions(self.seat_count, self.button_seat_index)

    @property
    def seat_labels(self) -> list[str]:
        """Label actions are recorded under, per seat."""
        if self.is_named:
            return self.session.named_players[: self.seat_count]
        return self.positions

    @property
    def preflop_order(self) -> list[str]:
        return acting_order(self.positions, True, self.seat_labels)

    @property
    def postflop_order(self) -> list[str]:
        return acting_order(self.positions, False, self.seat_labels)

    def order_for(self, street: StreetName) -> list[str]:
        if street == StreetName.PREFLOP:
            return self.preflop_order
        return self.postflop_order

    def active_players(self, street: StreetName) -> list[str]:
        """Seats that can still be picked to act on ``street``."""
        return active_seats(self.order_for(street), self.streets, street)

    def add_action(
        self,
        street: StreetName,
        actor: str,
        action_type: ActionType,
        amount: float | None = None,
    ) -> Street:
        """Record an action, auto-folding any seats it skipped.

        Calls take their amount from the street; ``amount`` is only kept
        for bets, raises and all-ins.
        """
        if action_type.is_aggressive:
            action = Action(actor, action_type, amount)
        else:
            action = Action(actor, action_type)

        folded = folded_before(self.streets, street)
        order = [seat for seat in self.order_for(street) if seat not in folded]
        self.streets[street] = append_action(self.streets[street], order, action)
        return self.streets[street]

    def hero_position(self, hero_name: str | None = None) -> str:
        """Canonical position of the hero's seat.

        The hero is the seat named ``hero_name`` (configured default),
        else seat 0.
        """
        if hero_name is None:
            hero_name = get_config().table.hero_name
        labels = self.seat_labels
        seat = labels.index(hero_name) if hero_name in labels else 0
        return self.positions[seat]

    def post_blinds(self) -> None:
        sb_seat, bb_seat = blind_seats(self.positions, self.seat_labels)
        self.streets[StreetName.PREFLOP] = post_blinds(
            self.streets[StreetName.PREFLOP],
            self.session.blind_level,
            self.session.points_per_hundred_bb,
            sb_seat,
            bb_seat,
        )

    def reconcile_folds(self) -> None:
        self.streets = reconcile_folds(self.streets, self.seat_labels[: self.seat_count])

    def save(self) -> Hand:
        """Post blinds, settle folds and freeze the hand.

        The stored pot is a cache of the log at save time.
        """
        self.post_blinds()
        self.reconcile_folds()

        seated = self.session.seated[: self.seat_count]
        hand = Hand(
            streets=[s.with_actions(s.actions) for s in self.streets],
            seat_count=self.seat_count,
            button_seat_index=self.button_seat_index % self.seat_count,
            players=[PlayerSnapshot.of(p) for p in seated],
            position=self.hero_position(),
            hole_cards=self.hole_cards,
            summary=self.summary,
            note=self.note,
            is_key_hand=self.is_key_hand,
            revealed=dict(self.revealed),
            pot_size=hand_pot(self.streets),
        )
        logger.debug("Saved hand, pot %g", hand.pot_size)
        return hand
