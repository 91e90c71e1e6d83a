"""Pot accounting from cumulative-amount action logs.

Every amount on a contribution-bearing action is the actor's running
total for the street. All pot figures are re-derived from the log on
each call; nothing here keeps state.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .action import Action, ActionType
from .street import Street

logger = logging.getLogger(__name__)


def street_contributions(actions: Iterable[Action]) -> dict[str, float]:
    """Cumulative amount each actor has put in over ``actions``.

    Algorithm:
    1. Track each actor's previous total, starting at 0
    2. For a contributing action with a positive amount,
       delta = max(amount - previous, 0)
    3. previous += delta

    Checks, folds and missing or non-positive amounts add nothing, and an
    amount below an actor's previous total never takes chips back out.
    """
    contributions: dict[str, float] = {}
    for action in actions:
        if not action.type.contributes:
            continue
        if action.amount is None or action.amount <= 0:
            continue
        previous = contributions.get(action.actor, 0.0)
        contributions[action.actor] = previous + max(action.amount - previous, 0.0)
    return contributions


def street_increment(street: Street) -> float:
    """Chips added to the pot on one street."""
    return sum(street_contributions(street.actions).values())


def pot_before(streets: Sequence[Street], street_index: int) -> float:
    """Pot at the start of ``streets[street_index]``."""
    return sum(street_increment(s) for s in streets[:street_index])


def hand_pot(streets: Iterable[Street]) -> float:
    """Total pot over every street of a hand."""
    return sum(street_increment(s) for s in streets)


def to_bb(points: float, points_per_hundred_bb: float) -> float:
    """Convert points to big blinds. Returns 0 if the scale is not positive."""
    if points_per_hundred_bb <= 0:
        logger.debug("BB conversion unavailable, scale is %s", points_per_hundred_bb)
        return 0.0
    return points / (points_per_hundred_bb / 100)


def from_bb(big_blinds: float, points_per_hundred_bb: float) -> float:
    """Convert big blinds to points. Returns 0 if the scale is not positive."""
    if points_per_hundred_bb <= 0:
        logger.debug("BB conversion unavailable, scale is %s", points_per_hundred_bb)
        return 0.0
    return big_blinds * (points_per_hundred_bb / 100)


def auto_call_amount(actions: Iterable[Action]) -> float | None:
    """Amount an amount-less call resolves to: the largest total so far.

    Returns None when nobody has put anything in yet; such a call is kept
    as a Call without an amount.
    """
    contributions = street_contributions(actions)
    largest = max(contributions.values(), default=0.0)
    if largest <= 0:
        return None
    return largest


def resolve_call(action: Action, actions: Iterable[Action]) -> Action:
    """Fill in the amount of an amount-less call from the street so far."""
    if action.type != ActionType.CALL or action.amount is not None:
        return action
    amount = auto_call_amount(actions)
    if amount is None:
        return action
    return Action(actor=action.actor, type=action.type, amount=amount)
