"""Rich console output helpers for the CLI.

Status and error messages go to stderr through Rich. Rendered banners and
banner names are written to stdout as plain text.
"""

import typer
from rich.console import Console
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Bannerize[/bold] v{version}")
    console.print("─" * 44)


def print_art(art: str) -> None:
    """Print rendered art to stdout without markup or wrapping."""
    typer.echo(art, nl=False)


def print_banner_list(font_dir: str, names: list[str]) -> None:
    """Print the banners available in a directory.

    Args:
        font_dir: Directory that was searched
        names: Banner names found
    """
    line = Text("  ")
    line.append(font_dir, style="bold")
    console.print(line)
    if not names:
        console.print(f"  {SYM_DOT} no banners found")
        return
    for name in names:
        typer.echo(name)


def print_saved(output_path: str, rows: int) -> None:
    """Print confirmation that art was written to a file."""
    line = Text(f"{SYM_OK} ", style="bold green")
    line.append(output_path, style="bold")
    line.append(f" ({rows} rows)")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Messages can carry user input, so keep them out of markup parsing
    line = Text(f"{SYM_ERR} Error: ", style="bold red")
    line.append(message)
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
