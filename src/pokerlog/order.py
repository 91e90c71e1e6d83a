"""Acting order per street, derived from table geometry."""

from __future__ import annotations

from typing import Sequence

from .action import Action
from .position import is_big_blind, is_blind, is_small_blind


def _rotate(items: Sequence[str], start: int) -> list[str]:
    n = len(items)
    return [items[(start + offset) % n] for offset in range(n)]


def _start_seat(positions: Sequence[str], is_preflop: bool) -> int | None:
    """Physical seat index of the first actor, or None if it can't be found."""
    n = len(positions)

    if n == 2:
        # Heads-up: SB/BTN opens preflop, BB opens every later street
        if is_preflop:
            return next((s for s, p in enumerate(positions) if is_small_blind(p)), None)
        return next((s for s, p in enumerate(positions) if is_big_blind(p)), None)

    if not is_preflop:
        return next((s for s, p in enumerate(positions) if is_small_blind(p)), None)

    bb_seat = next((s for s, p in enumerate(positions) if is_big_blind(p)), 0)
    non_blind = [s for s, p in enumerate(positions) if not is_blind(p)]
    if not non_blind:
        return None
    # First non-blind seat clockwise after the big blind
    return min(non_blind, key=lambda s: (s - bb_seat + n) % n)


def acting_order(
    positions: Sequence[str],
    is_preflop: bool,
    seats: Sequence[str] | None = None,
) -> list[str]:
    """Full cyclic acting order for one street.

    Args:
        positions: Canonical position per physical seat (from
            ``map_positions``).
        is_preflop: Preflop and postflop streets start at different seats.
        seats: Label to return for each seat, e.g. player names.
            Defaults to ``positions``.

    Returns:
        Every seat label exactly once, starting with the first actor and
        continuing in table seating order. If no first actor can be
        identified the seats are returned in seat order.
    """
    labels = list(seats) if seats is not None else list(positions)
    if len(labels) != len(positions):
        raise ValueError(
            f"Got {len(labels)} seat labels for {len(positions)} positions"
        )
    if not labels:
        return []

    start = _start_seat(positions, is_preflop)
    if start is None:
        return labels
    return _rotate(labels, start)


def round_order(order: Sequence[str], actions: Sequence[Action]) -> list[str]:
    """Acting order for the current betting round of a street.

    After a bet, raise or all-in the order restarts at the seat after
    the last aggressor. With no aggressor, or one not in ``order``, the
    street's base order is returned.
    """
    aggressor = next((a.actor for a in reversed(actions) if a.type.is_aggressive), None)
    if aggressor is None or aggressor not in order:
        return list(order)
    return _rotate(order, list(order).index(aggressor) + 1)
