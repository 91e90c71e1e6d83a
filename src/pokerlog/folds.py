"""Implicit folds and fold propagation across streets."""

from __future__ import annotations

import logging
from typing import Sequence

from .action import Action, ActionType
from .order import round_order
from .pot import resolve_call
from .street import Street, StreetName, check_street_order

logger = logging.getLogger(__name__)


def _folders(actions: Sequence[Action]) -> set[str]:
    return {a.actor for a in actions if a.type == ActionType.FOLD}


def auto_fold_unacted(preflop: Street, active_seats: Sequence[str]) -> Street:
    """Append a Fold for every active seat with no preflop action.

    An empty log means the hand hasn't been recorded yet and is returned
    untouched. Folds are appended in the order of ``active_seats``.
    """
    if not preflop.actions:
        return preflop.with_actions(preflop.actions)

    acted = preflop.actors
    unacted = [seat for seat in active_seats if seat not in acted]
    if unacted:
        logger.debug("Auto-folding %s", ", ".join(unacted))
    return preflop.with_actions(
        preflop.actions + [Action(seat, ActionType.FOLD) for seat in unacted]
    )


def cascade_folds(streets: Sequence[Street]) -> list[Street]:
    """Drop every action of a seat on streets after the one it folded on.

    Streets are walked Preflop to River; each keeps only the actions of
    seats that had not folded on an earlier street.
    """
    folded: set[str] = set()
    result = []
    for street in streets:
        kept = [a for a in street.actions if a.actor not in folded]
        dropped = len(street.actions) - len(kept)
        if dropped:
            logger.debug("Dropped %d stale action(s) on the %s", dropped, street.name.label)
        result.append(street.with_actions(kept))
        folded |= _folders(kept)
    return result


def reconcile_folds(
    streets: Sequence[Street], active_seat_order: Sequence[str]
) -> list[Street]:
    """Auto-fold un-acted preflop seats, then cascade folds forward.

    Args:
        streets: Preflop, Flop, Turn and River, in that order.
        active_seat_order: Seats dealt into the hand.

    Returns:
        A new list of four streets.

    Raises:
        ValueError: If the streets are not in Preflop..River order.
    """
    check_street_order(list(streets))
    streets = list(streets)
    streets[StreetName.PREFLOP] = auto_fold_unacted(
        streets[StreetName.PREFLOP], active_seat_order
    )
    return cascade_folds(streets)


def folded_before(streets: Sequence[Street], street: StreetName) -> set[str]:
    """Seats that folded on any street strictly before ``street``."""
    folded: set[str] = set()
    for s in streets:
        if s.name < street:
            folded |= _folders(s.actions)
    return folded


def active_seats(
    order: Sequence[str], streets: Sequence[Street], street: StreetName
) -> list[str]:
    """Seats in ``order`` still in the hand on ``street``.

    Excludes seats that folded earlier or have already folded on this
    street.
    """
    folded = folded_before(streets, street)
    for s in streets:
        if s.name == street:
            folded |= _folders(s.actions)
    return [seat for seat in order if seat not in folded]


def skipped_seats(
    order: Sequence[str], actions: Sequence[Action], actor: str
) -> list[str]:
    """Seats passed over when ``actor`` acts next.

    These are the seats ahead of ``actor`` in the current round order
    (restarted after the last bet or raise) with no action of any kind
    on this street. A seat that has already checked is never skipped.
    """
    current = round_order(order, actions)
    if actor not in current:
        return []
    acted = {a.actor for a in actions}
    return [seat for seat in current[: current.index(actor)] if seat not in acted]


def append_action(street: Street, order: Sequence[str], action: Action) -> Street:
    """Append ``action``, folding any seats it skipped over.

    Implicit folds go in just before the new action. An amount-less call
    is resolved to the largest total put in on the street so far.
    Returns a new Street.
    """
    skipped = skipped_seats(order, street.actions, action.actor)
    folds = [Action(seat, ActionType.FOLD) for seat in skipped]
    if folds:
        logger.debug("%s skipped %s", action.actor, ", ".join(f.actor for f in folds))
    action = resolve_call(action, street.actions)
    return street.with_actions(street.actions + folds + [action])
