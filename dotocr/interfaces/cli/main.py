"""
CLI Main - Typer-based command-line interface.

Usage:
    dotocr extract path/to/receipt.png
    dotocr serve
    dotocr version
"""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from dotocr.config import ConfigurationError, get_settings

app = typer.Typer(
    name="dotocr",
    help="DotOCR - Image text extraction with Google Gemini",
    add_completion=False,
)
console = Console()

NO_TEXT_MESSAGE = "No text found in the image."


def _configure_logging(level: str) -> None:
    """Route log records through Rich at the configured level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def extract(
    image_path: Path = typer.Argument(..., help="Path to image file"),
    mime_type: str | None = typer.Option(
        None, "--mime-type", "-m", help="Override MIME type (default: guessed from filename)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show log output"),
) -> None:
    """Extract text from a local image file."""
    if not image_path.exists():
        console.print(f"[red]Error:[/red] File not found: {image_path}")
        raise typer.Exit(1)

    mime_type = mime_type or mimetypes.guess_type(image_path.name)[0] or ""
    if not mime_type.startswith("image/"):
        console.print(
            f"[red]Error:[/red] Unsupported file type '{mime_type or 'unknown'}'. "
            "Please use an image (e.g., JPEG, PNG)."
        )
        raise typer.Exit(1)

    settings = get_settings()
    _configure_logging(settings.log_level if verbose else "WARNING")

    text = asyncio.run(_extract_async(image_path, mime_type))

    if not text:
        console.print(f"[yellow]{NO_TEXT_MESSAGE}[/yellow]")
        return

    console.print(Panel(text, title=image_path.name, expand=False))


async def _extract_async(image_path: Path, mime_type: str) -> str:
    """Async extraction implementation."""
    from dotocr.adapters.gemini import GeminiClient, GeminiConfig
    from dotocr.domains.ocr import GeminiTextExtractor

    settings = get_settings()

    try:
        client = GeminiClient(
            api_key=settings.require_api_key(),
            config=GeminiConfig(
                model=settings.gemini_model,
                base_url=settings.gemini_base_url,
            ),
        )
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    extractor = GeminiTextExtractor(client)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(f"Extracting text from {image_path.name}...", total=None)
            return await extractor.extract_text(image_path.read_bytes(), mime_type)
    finally:
        await client.close()


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port
    _configure_logging(settings.log_level)

    console.print("\n[green]Starting DotOCR API server[/green]")
    console.print(f"[dim]http://{host}:{port}[/dim]\n")

    uvicorn.run(
        "dotocr.interfaces.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_config=None,
    )


@app.command()
def version() -> None:
    """Show version information."""
    from dotocr import __version__

    console.print(f"DotOCR v{__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
