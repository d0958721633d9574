"""Command line interface for tabsense_ml."""

import asyncio
import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tabsense_ml.config import configure_logging, get_settings
from tabsense_ml.data_models import DIMENSIONS, TabRecord
from tabsense_ml.errors import TabsenseMLError
from tabsense_ml.inference import (
    DomainKnowledge,
    OrchestrationResult,
    RunProgress,
    SharedInfrastructure,
)

from .loaders import load_tabs

app = typer.Typer(
    name="tabsense-ml",
    help="Multi-dimensional browser tab classification.",
    no_args_is_help=True,
)
console = Console()


def _print_progress(progress: RunProgress) -> None:
    console.print(
        f"[dim]{progress.phase}: {progress.processed}/{progress.total}[/dim]"
    )


async def _run_classification(
    tabs: list[TabRecord],
    force_pass2: bool,
) -> OrchestrationResult:
    infra = await SharedInfrastructure.create(get_settings())
    try:
        return await infra.orchestrator.classify_two_pass(
            tabs, force_pass2=force_pass2, on_progress=_print_progress
        )
    finally:
        await infra.close()


def _print_results(run: OrchestrationResult, tabs: list[TabRecord], limit: int) -> None:
    table = Table(title="Classifications")
    table.add_column("Tab", style="cyan", max_width=50)
    table.add_column("Domain", style="dim")
    for dimension in DIMENSIONS:
        table.add_column(dimension.value)
    table.add_column("Pass 2", justify="center")

    for tab, result in list(zip(tabs, run.results))[:limit]:
        cells = []
        for dimension in DIMENSIONS:
            score = result.classifications[dimension]
            label = score.top_label
            cells.append(f"{label} ({score.top_score:.2f})" if label else "-")
        table.add_row(
            tab.title or tab.url or tab.id,
            tab.domain,
            *cells,
            "[green]yes[/green]" if result.refined_in_pass2 else "",
        )

    console.print(table)


def _print_stats(run: OrchestrationResult) -> None:
    stats = run.stats
    lines = [
        f"Tabs:              {stats.total_tabs} ({stats.cache_hits} cached)",
        f"Pass 1:            {stats.pass1_time_ms:.0f}ms",
        f"Pass 2:            {stats.pass2_time_ms:.0f}ms",
        f"Total:             {stats.total_time_ms:.0f}ms",
        f"Uncertain refined: {stats.uncertain_refined}",
        f"Avg improvement:   {stats.average_improvement:+.3f}",
        f"Domains learned:   {run.patterns.stats.domains_classified}",
    ]
    console.print(Panel("\n".join(lines), title="Run statistics"))


@app.command()
def classify(
    tabs_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Tabs JSON file"),
    force_pass2: bool = typer.Option(
        False, "--force-pass2", help="Run Pass 2 even with few uncertain tabs"
    ),
    limit: int = typer.Option(20, "--limit", "-n", help="Number of results to show"),
) -> None:
    """Classify a tab snapshot with the two-pass strategy."""
    configure_logging()

    try:
        tabs = load_tabs(tabs_file)
    except (json.JSONDecodeError, ValidationError) as exc:
        console.print(f"[red]Invalid tabs file {tabs_file}: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    if not tabs:
        console.print("[yellow]No tabs found[/yellow]")
        raise typer.Exit(0)

    console.print(f"[bold]Classifying {len(tabs)} tabs[/bold]")
    try:
        run = asyncio.run(_run_classification(tabs, force_pass2))
    except TabsenseMLError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1) from exc

    _print_results(run, tabs, limit)
    _print_stats(run)


@app.command()
def domains(
    category: str | None = typer.Option(
        None, "--category", "-c", help="List the domains of one category"
    ),
) -> None:
    """Show domain knowledge statistics."""
    knowledge = DomainKnowledge()

    if category:
        listed = sorted(knowledge.by_category(category))
        if not listed:
            console.print(f"[yellow]No domains in category: {category}[/yellow]")
            raise typer.Exit(1)
        console.print(f"[bold]{category}[/bold] ({len(listed)} domains)")
        for domain in listed:
            console.print(f"  {domain}")
        return

    stats = knowledge.stats()
    console.print(f"[bold]Domain knowledge: {stats['total_domains']} domains[/bold]\n")
    for key, title in (
        ("categories", "Category"),
        ("content_types", "Content type"),
        ("intents", "Intent"),
    ):
        table = Table(title=title)
        table.add_column(title)
        table.add_column("Domains", justify="right")
        for name, count in sorted(stats[key].items(), key=lambda item: -item[1]):
            table.add_row(name, str(count))
        console.print(table)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8100, "--port", "-p", help="Bind port"),
) -> None:
    """Run the HTTP classification service."""
    import uvicorn

    from tabsense_ml.api.app import create_app

    uvicorn.run(create_app(), host=host, port=port)
