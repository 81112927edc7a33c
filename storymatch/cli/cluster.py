"""Cluster command implementation."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..ingestion import DEFAULT_SECTION, load_news_items
from ..pipeline import PipelineOrchestrator

console = Console()


def cluster_command(
    input_path: Path = typer.Argument(..., help="JSON list of items, or an object of section -> items"),
    section: str = typer.Option(
        DEFAULT_SECTION,
        "--section",
        "-s",
        help="Section for a plain list of items",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Config file. Default: $STORYMATCH_CONFIG or ~/.config/storymatch/config.yaml",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print clusters as JSON to stdout"),
) -> None:
    """Cluster news items into stories, section by section."""
    try:
        config = Config(config_path)
        sections = load_news_items(input_path, default_section=section)

        orchestrator = PipelineOrchestrator(config, show_progress=not as_json)
        results = orchestrator.run(sections)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Clustering failed: {e}[/red]")
        raise typer.Exit(1)

    errors = {
        f"{stage.name}:{section}": error
        for stage in orchestrator.stages
        for section, error in stage.errors.items()
    }

    if as_json:
        payload = {name: result.model_dump(mode="json") for name, result in results.items()}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        if errors:
            for where, error in errors.items():
                typer.echo(f"Failed {where}: {error}", err=True)
            raise typer.Exit(1)
        return

    for name, result in results.items():
        table = Table(title=f"{name} ({len(result.clusters)} clusters)")
        table.add_column("Headline", style="yellow")
        table.add_column("Coverage", style="cyan")
        table.add_column("Updated", style="magenta")
        table.add_column("Sources", style="dim")

        for cluster in result.clusters:
            table.add_row(
                cluster.neutral_headline,
                str(cluster.coverage),
                cluster.updated_at.isoformat() if cluster.updated_at else "-",
                ", ".join(sorted({item.source for item in cluster.items})),
            )

        console.print(table)

    if errors:
        raise typer.Exit(1)
