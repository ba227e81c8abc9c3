"""CLI commands using Typer."""

import typer

from jeopardy.cli.play import play
from jeopardy.cli.source import app as source_app

app = typer.Typer(name="jeopardy", help="Jeopardy trivia board")

# Register sub-apps
app.add_typer(source_app, name="source")

app.command("play")(play)


@app.command()
def version():
    """Show version information."""
    from jeopardy import __version__

    typer.echo(f"Jeopardy v{__version__}")


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to bind to"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
):
    """Run the web server."""
    import uvicorn

    from jeopardy.logging import get_uvicorn_log_config

    uvicorn.run(
        "jeopardy.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=get_uvicorn_log_config(),
    )


if __name__ == "__main__":
    app()
