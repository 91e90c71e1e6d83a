"""Pokerlog - Poker hand recorder with table geometry and pot accounting."""

__version__ = "0.1.0"

from .action import Action, ActionType
from .blinds import BlindLevel, blind_seats, post_blinds
from .editor import HandEditor
from .folds import (
    active_seats,
    append_action,
    auto_fold_unacted,
    cascade_folds,
    folded_before,
    reconcile_folds,
    skipped_seats,
)
from .hand import Hand
from .order import acting_order, round_order
from .player import Player, PlayerSnapshot
from .position import default_positions, map_positions
from .pot import (
    auto_call_amount,
    from_bb,
    hand_pot,
    pot_before,
    street_contributions,
    street_increment,
    to_bb,
)
from .session import Session
from .street import Street, StreetName, new_streets

__all__ = [
    "Action",
    "ActionType",
    "BlindLevel",
    "Hand",
    "HandEditor",
    "Player",
    "PlayerSnapshot",
    "Session",
    "Street",
    "StreetName",
    "acting_order",
    "active_seats",
    "append_action",
    "auto_call_amount",
    "auto_fold_unacted",
    "blind_seats",
    "cascade_folds",
    "default_positions",
    "folded_before",
    "from_bb",
    "hand_pot",
    "map_positions",
    "new_streets",
    "post_blinds",
    "pot_before",
    "reconcile_folds",
    "round_order",
    "skipped_seats",
    "street_contributions",
    "street_increment",
    "to_bb",
]
