"""Command-line entry point for running the books service."""

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel

from bff_books.runtime.context import get_config

console = Console()

app = typer.Typer(
    name="bff-books",
    help="Books BFF service commands",
    rich_markup_mode="rich",
)


@app.command(name="serve")
def serve(
    host: str = typer.Option(None, help="Host to bind to, config app.host by default"),
    port: int = typer.Option(None, help="Port to bind to, config app.port by default"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the HTTP server."""
    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting books service[/bold green] on http://{host}:{port}",
            border_style="green",
        )
    )
    uvicorn.run(
        "bff_books.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,  # request logging happens in middleware
    )


@app.command(name="show-config")
def show_config() -> None:
    """Print the effective configuration."""
    config = get_config()
    dumped = config.model_dump(mode="json")
    if config.redis.password:
        dumped["redis"]["password"] = "***"
        dumped["redis"]["connection_string"] = config.redis.sanitized_connection_string
    console.print_json(data=dumped)


if __name__ == "__main__":
    app()
