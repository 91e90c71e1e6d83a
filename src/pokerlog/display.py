"""Rich display layer for recorded hands."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table

from .action import Action, ActionType
from .hand import Hand
from .pot import street_increment, to_bb
from .street import Street, StreetName


def _pot_figure(pot: float, points_per_hundred_bb: float) -> str:
    points = f"{int(round(pot))}"
    if points_per_hundred_bb > 0:
        return f"{points}/{to_bb(pot, points_per_hundred_bb):.1f}bb"
    return points


def street_header(street: Street, pot_before: float, points_per_hundred_bb: float) -> str:
    """Street title with the pot it starts with, e.g. 'Flop(pot:750/1.5bb)'.

    Preflop, and any street starting with an empty pot, shows the bare name.
    """
    if pot_before <= 0 or street.name == StreetName.PREFLOP:
        return street.name.label
    return f"{street.name.label}(pot:{_pot_figure(pot_before, points_per_hundred_bb)})"


def pot_text(pot_after: float, points_per_hundred_bb: float) -> str:
    """Pot after a street's action, or '' when nothing is in it."""
    if pot_after <= 0:
        return ""
    return f"Pot now {_pot_figure(pot_after, points_per_hundred_bb)}"


def total_pot_text(pot: float, points_per_hundred_bb: float) -> str:
    if points_per_hundred_bb > 0:
        return f"{to_bb(pot, points_per_hundred_bb):.1f} BB"
    return f"{pot:.0f}"


def blind_info(hand: Hand) -> tuple[str, str] | None:
    """Display names of the small and big blind of a saved hand.

    None when the hand has no roster snapshot or no stored button.
    """
    if not hand.players or hand.button_seat_index is None:
        return None
    count = hand.seat_count
    if count < 2:
        return None

    button = ((hand.button_seat_index % count) + count) % count
    if count == 2:
        # Heads-up: the button posts the small blind
        sb_idx, bb_idx = button, (button + 1) % count
    else:
        sb_idx, bb_idx = (button + 1) % count, (button + 2) % count

    def display_name(idx: int) -> str:
        if idx >= len(hand.players):
            return f"Seat {idx + 1}"
        return hand.players[idx].display_name

    return display_name(sb_idx), display_name(bb_idx)


def format_action(action: Action, positions: dict[str, str] | None = None) -> str:
    """One action line, tagging a named actor with their position."""
    actor = action.actor
    if positions and actor in positions and positions[actor] != actor:
        actor = f"{actor} ({positions[actor]})"
    text = f"{actor} {action.type.value}"
    if action.amount is not None and action.type != ActionType.FOLD:
        text += f" {action.amount:g}"
    return text


def render_street(
    street: Street,
    pot_before: float,
    points_per_hundred_bb: float,
    positions: dict[str, str] | None = None,
) -> Panel:
    title = street_header(street, pot_before, points_per_hundred_bb)
    if street.cards:
        title += f"  {street.display_cards}"

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("#", style="dim", justify="right")
    table.add_column("Action")
    for i, action in enumerate(street.actions, 1):
        line = format_action(action, positions)
        if action.type == ActionType.FOLD:
            line = f"[dim]{line}[/dim]"
        table.add_row(str(i), line)

    pot_after = pot_before + street_increment(street)
    footer = pot_text(pot_after, points_per_hundred_bb)
    body = Group(table, f"[bold]{footer}[/bold]") if footer else table
    return Panel(body, title=f"[bold cyan]{title}[/bold cyan]", title_align="left")


def render_hand(hand: Hand, points_per_hundred_bb: float) -> Group:
    """Every non-empty street of a hand plus the total pot."""
    labels = [p.display_name for p in hand.players]
    seat_positions = hand.positions
    if len(labels) == len(seat_positions):
        positions = dict(zip(labels, seat_positions))
    else:
        positions = None

    parts: list = []
    header = f"[bold]{hand.position}[/bold]"
    if hand.hole_cards:
        header += f"  {Street(StreetName.PREFLOP, hand.hole_cards).display_cards}"
    blinds = blind_info(hand)
    if blinds:
        header += f"  [dim]SB {blinds[0]} / BB {blinds[1]}[/dim]"
    parts.append(header)

    for street in hand.streets:
        if not street.actions and not street.cards:
            continue
        parts.append(
            render_street(
                street,
                hand.pot_before(street.name),
                points_per_hundred_bb,
                positions,
            )
        )

    pot = hand.computed_pot
    if pot > 0:
        parts.append(f"[bold]Total pot:[/bold] {total_pot_text(pot, points_per_hundred_bb)}")
    return Group(*parts)
