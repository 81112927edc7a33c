"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, save_config

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        Path.home() / ".config" / "storymatch",
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write a default configuration with per-section thresholds."""
    config_path = config_dir / "config.yaml"

    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {config_path} (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    config = ConfigModel()
    save_config(config, config_path)

    console.print(
        Panel(
            f"[green]✅ Created config: {config_path}[/green]\n\n"
            f"Sections: {', '.join(config.sections)}\n\n"
            f"Next steps:\n"
            f"1. Tune thresholds per section in the config file\n"
            f"2. Run: [bold]storymatch cluster items.json --config {config_path}[/bold]",
            style="green",
        )
    )
