"""CLI interface for gh-update-checker."""

import asyncio
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from update_checker.checker import UpdateChecker
from update_checker.client import AccessDeniedError, UpdateCheckError
from update_checker.config import mask_token
from update_checker.version import InvalidVersionFormat

load_dotenv()

app = typer.Typer(
    name="update-check",
    help="Check whether a GitHub repository has a release newer than your version.",
)
console = Console()


def configure_logging(debug: bool = False) -> None:
    """Configure logging level based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console)],
        force=True,  # Allow reconfiguration
    )


def notification_logger() -> logging.Logger:
    """Logger that update notifications are sent to; always shows INFO."""
    notify_logger = logging.getLogger("update_checker.notify")
    notify_logger.setLevel(logging.INFO)
    return notify_logger


async def run_check(
    author: str,
    repo_name: str,
    current_version: str,
    token: str | None = None,
    message: str | None = None,
) -> UpdateChecker:
    """Run one check with auto-notify and print the outcome."""
    checker = UpdateChecker(
        author,
        repo_name,
        current_version,
        auto_notify=True,
        logger=notification_logger(),
        token=token,
    )
    if message:
        checker.set_message(message)

    mode = f"token {mask_token(token)}" if token else "public"
    console.print(Panel(f"Checking [bold]{author}/{repo_name}[/bold] ({mode})"))

    await checker.check()

    console.print(f"  Current version: [cyan]{checker.current}[/cyan]")
    console.print(f"  Latest version:  [cyan]{checker.latest_version}[/cyan]")
    console.print()
    if checker.update_available:
        console.print(
            f"[yellow]Update available: {checker.current} → {checker.latest_version}[/yellow]"
        )
    else:
        console.print("[green]✓ You are running the latest version[/green]")
    return checker


@app.command()
def check(
    author: str = typer.Argument(..., help="Owner of the GitHub repository"),
    repo_name: str = typer.Argument(..., help="Name of the GitHub repository"),
    current_version: str = typer.Argument(..., help="Version currently in use, e.g. v1.2.0"),
    token: str = typer.Option(
        None,
        "--token",
        "-t",
        envvar="GITHUB_TOKEN",
        help="GitHub token for the releases API (or set GITHUB_TOKEN env var)",
    ),
    message: str = typer.Option(
        None,
        "--message",
        "-m",
        help="Custom update message; supports @name, @latestVersion, @currentVersion",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging (shows HTTP requests, etc.)",
    ),
) -> None:
    """Check a repository for a newer release."""

    configure_logging(debug)

    try:
        asyncio.run(run_check(author, repo_name, current_version, token or None, message))
    except InvalidVersionFormat as e:
        console.print(f"[bold red]Invalid version:[/bold red] {e}")
        raise typer.Exit(1)
    except AccessDeniedError as e:
        console.print(f"[bold red]Access denied:[/bold red] {e}")
        raise typer.Exit(1)
    except UpdateCheckError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
