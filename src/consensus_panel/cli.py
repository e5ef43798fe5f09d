"""Command-line interface for consensus-panel."""

from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel as RichPanel
from rich.table import Table

from consensus_panel.analysis import opinion_spread
from consensus_panel.config import get_settings
from consensus_panel.demo import Painting, painting_panel
from consensus_panel.errors import PanelError
from consensus_panel.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="consensus-panel",
    help="Simulate a panel of evaluators reaching a consensus",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def init_app():
    """Initialize the application."""
    settings = get_settings()
    setup_logging(settings.log_level)
    return settings


@app.command("demo")
def demo(
    colorfulness: float = typer.Option(0.8, "--colorfulness", "-c", help="0 = monochrome, 1 = vivid"),
    curvature: float = typer.Option(0.3, "--curvature", "-k", help="0 = straight lines, 1 = curves"),
    panelists: Optional[int] = typer.Option(None, "--panelists", "-n", help="Number of panelists"),
    traits: Optional[int] = typer.Option(None, "--traits", "-t", help="Traits per panelist"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
):
    """Ask a panel whether it likes a painting."""
    settings = init_app()

    try:
        painting = Painting(title="Demo", colorfulness=colorfulness, curvature=curvature)
        panel = painting_panel(
            panelists if panelists is not None else settings.panelist_count,
            traits if traits is not None else settings.traits_per_panelist,
            seed=seed if seed is not None else settings.seed,
        )
        result = panel.deliberate(painting)
    except (PanelError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Panelists")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Traits", style="cyan")
    table.add_column("Opinion", justify="right")
    table.add_column("Vote")

    for i, vote in enumerate(result.votes, start=1):
        table.add_row(
            str(i),
            ", ".join(vote.traits) or "-",
            f"{vote.opinion:.2f}",
            "[green]like[/green]" if vote.liked else "[red]dislike[/red]",
        )

    console.print(table)

    verdict = "[green]liked[/green]" if result.verdict else "[red]disliked[/red]"
    console.print(
        RichPanel(
            f"Opinion: [bold]{result.opinion:.2f}[/bold]\n"
            f"Votes: {result.positive_votes}/{result.panelist_count} positive\n"
            f"Verdict: {verdict}",
            title=f"Painting (colorfulness={colorfulness}, curvature={curvature})",
        )
    )


@app.command("convergence")
def convergence(
    colorfulness: float = typer.Option(0.8, "--colorfulness", "-c", help="0 = monochrome, 1 = vivid"),
    curvature: float = typer.Option(0.3, "--curvature", "-k", help="0 = straight lines, 1 = curves"),
    sizes: str = typer.Option("1,5,25,125", "--sizes", "-s", help="Comma-separated panel sizes"),
    traits: Optional[int] = typer.Option(None, "--traits", "-t", help="Traits per panelist"),
    rounds: int = typer.Option(50, "--rounds", "-r", help="Evaluations per panel size"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
):
    """Show how opinion spread shrinks as the panel grows."""
    settings = init_app()

    try:
        panel_sizes: List[int] = [int(s.strip()) for s in sizes.split(",") if s.strip()]
        painting = Painting(title="Demo", colorfulness=colorfulness, curvature=curvature)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Opinion spread over {rounds} rounds")
    table.add_column("Panelists", justify="right", style="cyan")
    table.add_column("Mean", justify="right")
    table.add_column("Std", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")

    for size in panel_sizes:
        try:
            panel = painting_panel(
                size,
                traits if traits is not None else settings.traits_per_panelist,
                seed=seed if seed is not None else settings.seed,
            )
            spread = opinion_spread(panel, painting, rounds=rounds)
        except PanelError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

        table.add_row(
            str(size),
            f"{spread.mean:.2f}",
            f"{spread.std:.2f}",
            f"{spread.minimum:.2f}",
            f"{spread.maximum:.2f}",
        )

    console.print(table)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
