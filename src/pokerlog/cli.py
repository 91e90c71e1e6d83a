"""Command line interface for table geometry and hand replay."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import get_config
from .display import render_hand
from .editor import HandEditor
from .hand import Hand
from .order import acting_order
from .player import Player
from .position import describe, map_positions
from .pot import from_bb, to_bb
from .session import Session

app = typer.Typer(help="Poker hand recorder: positions, acting order and pots")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Set up logging before any command runs."""
    level = "DEBUG" if verbose else get_config().logging.level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def positions(
    seats: int = typer.Argument(..., help="Number of seats at the table"),
    button: int = typer.Argument(0, help="Seat index holding the dealer button"),
):
    """Show the canonical position of every seat."""
    try:
        labels = map_positions(seats, button)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{seats} seats, button on seat {button % seats}")
    table.add_column("Seat", justify="right", style="cyan")
    table.add_column("Position", style="bold")
    table.add_column("Name", style="dim")
    for seat, label in enumerate(labels):
        table.add_row(str(seat), label, describe(label))
    console.print(table)


@app.command()
def order(
    seats: int = typer.Argument(..., help="Number of seats at the table"),
    button: int = typer.Argument(0, help="Seat index holding the dealer button"),
    postflop: bool = typer.Option(False, "--postflop", help="Order for flop, turn and river"),
):
    """Show the acting order for a street."""
    try:
        labels = map_positions(seats, button)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    street = "Postflop" if postflop else "Preflop"
    sequence = acting_order(labels, not postflop)
    console.print(f"[bold]{street}:[/bold] " + " → ".join(sequence))


@app.command()
def replay(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Hand JSON file"),
    blinds: str | None = typer.Option(None, "--blinds", "-b", help="Blind level, e.g. '1/2'"),
    scale: float | None = typer.Option(None, "--scale", "-s", help="Points per 100 BB"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the settled hand here"),
):
    """Post blinds, settle folds and print a recorded hand."""
    config = get_config()
    if blinds is None:
        blinds = config.session.blind_level
    if scale is None:
        scale = config.session.points_per_hundred_bb

    try:
        hand = Hand.load(path)
        session = Session(
            blind_level=blinds,
            points_per_hundred_bb=scale,
            players=[
                Player(name=p.name, seat_number=p.seat_number, style=p.style, level=p.level)
                for p in hand.players
            ],
        )
        settled = HandEditor(session=session, hand=hand).save()
    except (ValueError, KeyError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(render_hand(settled, scale))
    if output is not None:
        settled.dump(output)
        console.print(f"[dim]Saved to {output}[/dim]")


@app.command()
def convert(
    value: float = typer.Argument(..., help="Amount to convert"),
    scale: float | None = typer.Option(None, "--scale", "-s", help="Points per 100 BB"),
    to_points: bool = typer.Option(False, "--to-points", help="Convert BB to points instead"),
):
    """Convert between points and big blinds."""
    if scale is None:
        scale = get_config().session.points_per_hundred_bb
    if scale <= 0:
        console.print("[yellow]No points-per-100BB scale set, conversion unavailable[/yellow]")
    if to_points:
        console.print(f"{value:g} BB = [bold]{from_bb(value, scale):g}[/bold] points")
    else:
        console.print(f"{value:g} points = [bold]{to_bb(value, scale):g}[/bold] BB")


if __name__ == "__main__":
    app()
