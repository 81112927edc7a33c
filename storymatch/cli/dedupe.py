"""Dedupe command implementation."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..dedup import collapse_duplicates, find_duplicate_groups
from ..ingestion import load_evidence_articles

console = Console()


def dedupe_command(
    input_path: Path = typer.Argument(..., help="JSON list of research articles"),
    threshold: Optional[float] = typer.Option(
        None,
        "--threshold",
        "-t",
        min=0.0,
        max=1.0,
        help="Title similarity threshold. Default: from config (0.85)",
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config file"),
    as_json: bool = typer.Option(False, "--json", help="Print groups as JSON to stdout"),
) -> None:
    """Find research articles announced more than once."""
    try:
        config = Config(config_path)
        if threshold is None:
            threshold = config.config.dedup.title_threshold

        articles = load_evidence_articles(input_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Deduplication failed: {e}[/red]")
        raise typer.Exit(1)

    groups = find_duplicate_groups(articles, threshold)

    if as_json:
        survivors = collapse_duplicates(articles, threshold)
        payload = {
            "groups": groups,
            "articles": [a.model_dump(mode="json") for a in survivors],
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if not groups:
        console.print(f"[green]No duplicates among {len(articles)} articles.[/green]")
        return

    titles = {a.id: a.title for a in articles}
    table = Table(title=f"Duplicate Groups ({len(groups)})")
    table.add_column("Group", style="cyan")
    table.add_column("Article IDs", style="magenta")
    table.add_column("Title", style="yellow")

    for key, member_ids in groups.items():
        table.add_row(key, ", ".join(member_ids), titles.get(member_ids[0], ""))

    console.print(table)
