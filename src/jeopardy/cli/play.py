"""Play a board in the terminal."""

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jeopardy.logging import setup_logging
from jeopardy.models import RevealStage
from jeopardy.services.errors import InvalidCellError, JeopardyError, RunError
from jeopardy.services.events import (
    BoardRendered,
    CellRevealed,
    GameEvent,
    LoadingChanged,
    RunFailed,
)
from jeopardy.services.game import GameController
from jeopardy.services.render import BoardGrid, render_board
from jeopardy.services.trivia import TriviaClient

console = Console()

STAGE_STYLES = {
    RevealStage.UNREVEALED: "bold yellow",
    RevealStage.QUESTION: "white",
    RevealStage.ANSWER: "green",
}

HELP_TEXT = "Enter a cell as [cyan]<category>-<clue>[/cyan] (e.g. 0-0), [cyan]r[/cyan] to restart, [cyan]q[/cyan] to quit"


def board_table(grid: BoardGrid) -> Table:
    """Draw a board grid as a rich table, one column per category."""
    table = Table(show_lines=True, expand=True)
    for index, title in enumerate(grid.headers):
        table.add_column(f"[dim]{index}[/dim] {escape(title)}", justify="center", overflow="fold")

    for row in grid.rows:
        table.add_row(*(f"[{STAGE_STYLES[cell.showing]}]{escape(cell.text)}[/]" for cell in row))
    return table


def _show(event: GameEvent) -> None:
    if isinstance(event, LoadingChanged) and event.loading:
        console.print("[dim]Loading a new board...[/dim]")
    elif isinstance(event, BoardRendered):
        console.print(board_table(render_board(event.board)))
    elif isinstance(event, CellRevealed):
        label = "Question" if event.stage is RevealStage.QUESTION else "Answer"
        console.print(f"[bold]{label}[/bold] ({event.category_index}-{event.clue_index}): {escape(event.text)}")
    elif isinstance(event, RunFailed):
        console.print(f"[red]Error:[/red] {escape(str(event.error))}")


def play(
    concurrent: bool = typer.Option(False, "--concurrent", help="Fetch categories concurrently"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Play a game in the terminal."""
    setup_logging("DEBUG" if verbose else "WARNING")

    async def _play():
        async with TriviaClient() as client:
            game = GameController(client, fetch_concurrently=concurrent)
            with game.subscribe(_show):
                try:
                    await game.start()
                except RunError:
                    raise typer.Exit(1) from None

                console.print(HELP_TEXT)
                while True:
                    command = console.input("[bold]> [/bold]").strip().lower()
                    if command in ("q", "quit", "exit"):
                        break
                    if command in ("r", "restart"):
                        try:
                            await game.start()
                        except RunError:
                            console.print("[dim]Press r to try again[/dim]")
                        continue
                    if command in ("b", "board"):
                        console.print(board_table(render_board(game.board)))
                        continue

                    try:
                        result = game.reveal_ref(command)
                    except InvalidCellError as e:
                        console.print(f"[yellow]{e}[/yellow]")
                        continue
                    except JeopardyError as e:
                        console.print(f"[red]Error:[/red] {e}")
                        continue

                    if not result.changed:
                        console.print("[dim]Already showing the answer[/dim]")

    try:
        asyncio.run(_play())
    except (KeyboardInterrupt, EOFError):
        console.print()
