"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .build import build_command
from .init import init_command
from .list import list_command

app = typer.Typer(
    name="blogindex",
    help="Build the article index consumed by the blog's listing, search and detail views",
    no_args_is_help=True,
)

# Register commands
app.command("build")(build_command)
app.command("list")(list_command)
app.command("init")(init_command)


if __name__ == "__main__":
    app()
