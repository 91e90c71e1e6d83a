"""Canonical table positions and seat-to-position mapping."""

import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

# Base sequences, in preflop seating order ending BTN, SB, BB.
BASE_POSITIONS: MappingProxyType[int, tuple[str, ...]] = MappingProxyType(
    {
        9: ("UTG", "UTG+1", "UTG+2", "LJ", "HJ", "CO", "BTN", "SB", "BB"),
        8: ("UTG", "UTG+1", "LJ", "HJ", "CO", "BTN", "SB", "BB"),
        7: ("UTG", "LJ", "HJ", "CO", "BTN", "SB", "BB"),
        6: ("UTG", "HJ", "CO", "BTN", "SB", "BB"),
        5: ("HJ", "CO", "BTN", "SB", "BB"),
        2: ("SB/BTN", "BB"),
    }
)

POSITION_NAMES: MappingProxyType[str, str] = MappingProxyType(
    {
        "UTG": "Under the Gun (UTG)",
        "UTG+1": "UTG+1",
        "UTG+2": "UTG+2",
        "LJ": "Lojack (LJ)",
        "HJ": "Hijack (HJ)",
        "CO": "Cutoff (CO)",
        "BTN": "Button (BTN)",
        "SB": "Small Blind (SB)",
        "BB": "Big Blind (BB)",
        "SB/BTN": "Small Blind / Button (SB/BTN)",
    }
)


def is_small_blind(position: str) -> bool:
    """True for SB, including the heads-up SB/BTN seat."""
    return "SB" in position


def is_big_blind(position: str) -> bool:
    return position == "BB"


def is_blind(position: str) -> bool:
    return is_small_blind(position) or is_big_blind(position)


def describe(position: str) -> str:
    """Human-readable position name; unknown labels are returned as is."""
    return POSITION_NAMES.get(position, position)


def default_positions(seat_count: int) -> list[str]:
    """Unrotated base sequence for a table size.

    Sizes without a canonical sequence get generic "Player N" labels.
    """
    if seat_count in BASE_POSITIONS:
        return list(BASE_POSITIONS[seat_count])
    return [f"Player {i}" for i in range(1, seat_count + 1)]


def map_positions(seat_count: int, button_seat_index: int) -> list[str]:
    """Canonical position label for every seat, index = seat.

    The button seat always maps to BTN (SB/BTN heads-up) and the labels
    follow clockwise from it. ``button_seat_index`` may be any integer;
    it is taken modulo ``seat_count``.

    Raises ValueError if ``seat_count`` is below 2.
    """
    if seat_count < 2:
        raise ValueError(f"seat_count must be at least 2, got {seat_count}")

    base = default_positions(seat_count)
    if seat_count not in BASE_POSITIONS:
        logger.debug("No canonical positions for %d seats, using generic labels", seat_count)

    button = ((button_seat_index % seat_count) + seat_count) % seat_count

    # Where BTN sits in the base sequence
    if seat_count == 2:
        canonical_button = 0
    else:
        canonical_button = max(seat_count - 3, 0)

    positions = []
    for seat in range(seat_count):
        offset = (seat - button + seat_count) % seat_count
        positions.append(base[(canonical_button + offset) % seat_count])
    return positions
