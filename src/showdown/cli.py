"""Command-line front end for ranking poker hands."""

import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .card import Card, Suit
from .config import get_config
from .evaluator import select_winners
from .hand import Hand

app = typer.Typer(help="Rank five-card poker hands and find the winner(s)")
console = Console()


def format_card(c: Card, unicode_suits: bool = True) -> str:
    """Format a card with color based on suit."""
    symbol = str(c) if unicode_suits else c.code
    if c.suit in (Suit.HEARTS, Suit.DIAMONDS):
        return f"[red]{symbol}[/red]"
    return f"[white]{symbol}[/white]"


def format_hand(hand: Hand, unicode_suits: bool = True) -> str:
    """Format all five cards of a hand."""
    return " ".join(format_card(c, unicode_suits) for c in hand.cards)


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Rank five-card poker hands."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def winners(
    hands: list[str] = typer.Argument(..., help="Hands like '4D 5D 6D 7D 8D' (one quoted argument each)"),
    workers: int | None = typer.Option(None, "--workers", "-w", help="Threads used to classify hands"),
):
    """Show every hand's category and highlight the winner(s)."""
    try:
        config = get_config()
        if workers is None:
            workers = config.evaluation.max_workers
        unicode_suits = config.display.unicode_suits

        parsed = Hand.parse_many(hands)
        result = select_winners(parsed, max_workers=workers)

        table = Table(title="Showdown")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Hand")
        table.add_column("Category", style="cyan")
        table.add_column("Key", justify="right")
        table.add_column("Result")

        winning = {id(h) for h in result.winners}
        for i, hand in enumerate(result.all_hands, 1):
            c = hand.classification
            outcome = "[bold green]WIN[/bold green]" if id(hand) in winning else ""
            table.add_row(
                str(i),
                format_hand(hand, unicode_suits),
                c.describe(),
                " ".join(str(k) for k in c.key),
                outcome,
            )

        console.print(table)

        if result.is_tie:
            console.print(f"\n[yellow]Split between {len(result.winners)} hands[/yellow]")
        else:
            console.print(f"\n[bold]Winner:[/bold] {result.winners[0].label}")

    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def classify(
    hand: str = typer.Argument(..., help="A hand like 'AH KH QH JH TH'"),
):
    """Classify a single hand."""
    try:
        config = get_config()
        parsed = Hand.from_str(hand)
        c = parsed.classification

        console.print(f"\n[bold]Hand:[/bold]     {format_hand(parsed, config.display.unicode_suits)}")
        console.print(f"[bold]Category:[/bold] {c.describe()}")
        console.print(f"[bold]Key:[/bold]      {' '.join(str(k) for k in c.key)}")

    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
