"""
Recipe Text - CLI Entry Point.

Usage:
    recipe-text parse recipe.txt        Parse a text file and show the result
    recipe-text parse - --json          Parse stdin, print JSON
    recipe-text serve                   Start the web API
    recipe-text health                  Check configuration
    recipe-text --help                  Show help
"""

import json
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from recipe_text.models import PartialRecipe

app = typer.Typer(
    name="recipe-text",
    help="Recipe Text - turn OCR or pasted recipe text into a structured recipe.",
    add_completion=False,
)
console = Console()


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _show_recipe(recipe: PartialRecipe, language: str) -> None:
    """Pretty-print a parsed recipe."""
    categories = ", ".join(c.value for c in recipe.categories)
    console.print(
        Panel.fit(
            f"[bold green]{escape(recipe.name)}[/bold green]\n"
            f"Cuisine: {recipe.cuisine.value}   Categories: {categories}\n"
            f"Prep: {recipe.prep_time_minutes} min   Cook: {recipe.cook_time_minutes} min   "
            f"Portions: {recipe.portions}\n"
            f"[dim]Language: {language}[/dim]",
            title="Parsed Recipe",
            border_style="green",
        )
    )

    if recipe.ingredients:
        table = Table(title="Ingredients")
        table.add_column("#", style="dim")
        table.add_column("Amount")
        table.add_column("Unit")
        table.add_column("Name", style="bold")
        for ing in recipe.ingredients:
            table.add_row(ing.id, escape(ing.amount), escape(ing.unit), escape(ing.name))
        console.print(table)
    else:
        console.print("[yellow]No ingredients found - consider entering them manually.[/yellow]")

    if recipe.instructions:
        console.print("\n[bold]Instructions[/bold]")
        for i, step in enumerate(recipe.instructions, 1):
            console.print(f"  {i}. {escape(step)}")
    else:
        console.print("[dim]No instructions found.[/dim]")


@app.command()
def parse(
    path: str = typer.Argument(None, help="Text file to parse ('-' or omitted reads stdin)"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Print the recipe as JSON"),
) -> None:
    """Parse recipe text from a file or stdin."""
    from recipe_text.extractor import parse_recipe_text
    from recipe_text.normalizer import detect_language

    try:
        raw_text = _read_input(path)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Could not read {escape(str(path))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    recipe = parse_recipe_text(raw_text)

    if as_json:
        typer.echo(json.dumps(recipe.to_dict(), ensure_ascii=False, indent=2))
        return

    _show_recipe(recipe, detect_language(raw_text))


@app.command()
def health() -> None:
    """Check configuration."""
    from recipe_text.config import get_settings

    console.print("\n[bold]Recipe Text Health Check[/bold]\n")

    try:
        settings = get_settings()
        console.print("[green]OK[/green] Configuration loaded")
        console.print(f"   Environment: {settings.recipe_text_env}")
        console.print(f"   Log level: {settings.log_level}")
        console.print(f"   Max input chars: {settings.max_input_chars}")
        console.print("\n[green]All checks passed![/green]")
    except Exception as e:
        console.print(f"\n[red]FAIL Configuration error: {e}[/red]")
        console.print("[dim]Check the variables in your .env file.[/dim]")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from recipe_text import __version__

    console.print(f"Recipe Text version {__version__}")


@app.command()
def serve(
    port: int = typer.Option(8000, "--port", "-p", help="Port to run on"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload for development"),
) -> None:
    """Start the web API server."""
    import os

    import uvicorn

    from recipe_text.config import configure_logging

    configure_logging()

    # Hosting platforms set PORT
    actual_port = int(os.environ.get("PORT", port))

    console.print("\n[bold green]Recipe Text API[/bold green]")
    console.print(f"Starting server on http://localhost:{actual_port}")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    uvicorn.run(
        "recipe_text.web.app:app",
        host="0.0.0.0",
        port=actual_port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
