"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists (e.g. STORYMATCH_CONFIG)
load_dotenv()

from .cluster import cluster_command
from .dedupe import dedupe_command
from .init import init_command

app = typer.Typer(
    name="storymatch",
    help="storymatch - group near-duplicate news items and research articles",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("cluster")(cluster_command)
app.command("dedupe")(dedupe_command)


if __name__ == "__main__":
    app()
