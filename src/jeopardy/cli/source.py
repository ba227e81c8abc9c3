"""Trivia source CLI commands."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from jeopardy.services.errors import JeopardyError
from jeopardy.services.trivia import TriviaClient

console = Console()
app = typer.Typer(help="Inspect the trivia source")


@app.command("categories")
def categories(
    count: int = typer.Option(20, "--count", "-c", help="Number of categories to list"),
    offset: int = typer.Option(0, "--offset", "-o", help="Offset into the category list"),
):
    """List categories available on the trivia source."""

    async def _categories():
        async with TriviaClient() as client:
            console.print(f"[dim]Fetching {count} categories from {client.base_url}...[/dim]")
            try:
                results = await client.list_categories(count=count, offset=offset)
            except JeopardyError as e:
                console.print(f"[red]Error:[/red] {e}")
                raise typer.Exit(1) from e

        if not results:
            console.print("[yellow]No categories found[/yellow]")
            return

        table = Table(title="Trivia categories")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Title", style="green")
        table.add_column("Clues", style="magenta", justify="right")

        for result in results:
            table.add_row(
                str(result.id),
                result.title,
                str(result.clues_count) if result.clues_count is not None else "-",
            )

        console.print(table)

    asyncio.run(_categories())


@app.command("category")
def category(
    category_id: int = typer.Argument(..., help="Category ID"),
    answers: bool = typer.Option(False, "--answers", "-a", help="Show answers"),
):
    """Show every clue in a category."""

    async def _category():
        async with TriviaClient() as client:
            try:
                detail = await client.get_category(category_id)
            except JeopardyError as e:
                console.print(f"[red]Error:[/red] {e}")
                raise typer.Exit(1) from e

        console.print(f"\n[bold]{detail.title}[/bold] ({len(detail.clues)} clues)")

        table = Table()
        table.add_column("Value", style="cyan", justify="right")
        table.add_column("Question", style="green")
        if answers:
            table.add_column("Answer", style="magenta")

        for clue in detail.clues:
            row = [str(clue.value) if clue.value else "-", clue.question]
            if answers:
                row.append(clue.answer)
            table.add_row(*row)

        console.print(table)

    asyncio.run(_category())
