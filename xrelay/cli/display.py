"""Console messages printed around the raw-mode session."""

from rich.console import Console

console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    console.print(f"[bold red]error:[/bold red] {message}")


def print_session_start(host: str, username: str, display: str | None, forwarding: bool) -> None:
    """Announce the session before the terminal switches to raw mode."""
    if not forwarding:
        target = "[dim]X11 forwarding off[/dim]"
    elif display:
        target = f"X11 → [cyan]{display}[/cyan]"
    else:
        target = "[yellow]X11 requested but DISPLAY is not set[/yellow]"
    console.print(f"[bold]{username}@{host}[/bold]  {target}")


def print_session_end(host: str) -> None:
    console.print(f"[dim]Connection to {host} closed.[/dim]")
