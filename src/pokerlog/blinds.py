"""Blind levels and automatic blind posting on the preflop street."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Self, Sequence

from .action import Action, ActionType
from .position import is_big_blind, is_small_blind
from .street import Street, StreetName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlindLevel:
    """Small and big blind in the session's currency unit."""

    small_blind: float
    big_blind: float

    @property
    def small_blind_bb(self) -> float:
        """Small blind as a fraction of the big blind (1/2 -> 0.5)."""
        return self.small_blind / self.big_blind

    @classmethod
    def parse(cls, text: str) -> Self | None:
        """Parse a "<small>/<big>" string such as "1/2" or "2 / 5".

        Returns None unless both blinds are finite positive numbers.
        """
        parts = text.split("/")
        if len(parts) != 2:
            return None
        try:
            small = float(parts[0].strip())
            big = float(parts[1].strip())
        except ValueError:
            return None
        if not all(math.isfinite(v) and v > 0 for v in (small, big)):
            return None
        return cls(small_blind=small, big_blind=big)

    def __str__(self) -> str:
        return f"{self.small_blind:g}/{self.big_blind:g}"


def blind_seats(
    positions: Sequence[str], seats: Sequence[str] | None = None
) -> tuple[str, str]:
    """Labels of the seats posting the small and big blind.

    Looks the blinds up in the canonical positions and returns the
    matching entries of ``seats`` (defaults to ``positions``). Without a
    SB or BB position, falls back to the second-to-last and last seat.
    """
    labels = list(seats) if seats is not None else list(positions)
    if not labels:
        return "SB", "BB"

    sb_idx = next((i for i, p in enumerate(positions) if is_small_blind(p)), None)
    if sb_idx is None or sb_idx >= len(labels):
        sb_idx = len(labels) - 2 if len(labels) >= 2 else 0

    bb_idx = next((i for i, p in enumerate(positions) if is_big_blind(p)), None)
    if bb_idx is None or bb_idx >= len(labels):
        bb_idx = len(labels) - 1

    return labels[sb_idx], labels[bb_idx]


def post_blinds(
    preflop: Street,
    blind_level: str,
    points_per_hundred_bb: float,
    sb_seat: str,
    bb_seat: str,
) -> Street:
    """Insert any missing blind actions at the head of the preflop log.

    Idempotent: a log that already holds both a SmallBlind and a
    BigBlind action is returned unchanged. Amounts are in points, with
    the big blind worth ``points_per_hundred_bb / 100``. An unparseable
    blind level leaves the log as it is.

    Returns a new Street; ``preflop`` is not modified.
    """
    if preflop.name != StreetName.PREFLOP:
        raise ValueError(f"Blinds are posted preflop, not on the {preflop.name.label}")

    has_small = any(a.type == ActionType.SMALL_BLIND for a in preflop.actions)
    has_big = any(a.type == ActionType.BIG_BLIND for a in preflop.actions)
    if has_small and has_big:
        return preflop.with_actions(preflop.actions)

    level = BlindLevel.parse(blind_level)
    if level is None:
        logger.debug("Skipping blinds, cannot parse blind level %r", blind_level)
        return preflop.with_actions(preflop.actions)

    # A negative scale posts zero-point blinds, same as an unset one
    points_per_bb = max(points_per_hundred_bb, 0.0) / 100
    blinds: list[Action] = []
    if not has_small:
        blinds.append(
            Action(sb_seat, ActionType.SMALL_BLIND, level.small_blind_bb * points_per_bb)
        )
    if not has_big:
        blinds.append(Action(bb_seat, ActionType.BIG_BLIND, 1.0 * points_per_bb))

    logger.debug("Posting %s", ", ".join(str(b) for b in blinds))
    return preflop.with_actions(blinds + preflop.actions)
