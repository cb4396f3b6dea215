"""CLI application entry point for bannerize.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from bannerize import __version__
from bannerize.cli.output import (
    console,
    print_art,
    print_banner_list,
    print_error,
    print_header,
    print_saved,
)
from bannerize.config import BannerSettings, LibraryConfig, LoggingConfig
from bannerize.core import BannerRenderer
from bannerize.exceptions import (
    BannerError,
    FontFormatError,
    FontLoadError,
    FontNotFoundError,
)
from bannerize.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="bannerize",
    help="Render text as large ASCII block letters using banner fonts.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Bannerize[/bold blue] v{__version__}")
        raise typer.Exit()


def _read_text(text: str) -> str:
    """Resolve the TEXT argument, reading stdin for ``-``."""
    if text != "-":
        return text
    data = typer.get_text_stream("stdin").read()
    if data.endswith("\n"):
        data = data[:-1]
    if data.endswith("\r"):
        data = data[:-1]
    return data


@app.command()
def bannerize(
    text: Annotated[
        str,
        typer.Argument(
            help="Text to render (use '-' to read from stdin)",
            show_default=False,
        ),
    ] = "",
    banner: Annotated[
        str,
        typer.Option(
            "--banner",
            "-b",
            help="Banner font name",
            envvar="BANNERIZE_BANNER",
        ),
    ] = "standard",
    font_dir: Annotated[
        Path,
        typer.Option(
            "--font-dir",
            "-d",
            help="Directory containing banner font files",
            envvar="BANNERIZE_FONT_DIR",
        ),
    ] = Path("banners"),
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the rendered text to a file instead of stdout",
        ),
    ] = None,
    list_banners: Annotated[
        bool,
        typer.Option(
            "--list-banners",
            help="List available banners and exit",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render TEXT as block letters using a banner font.

    Each line of TEXT becomes a block of rows followed by a blank row.
    Characters the banner does not define are drawn as a single space.

    Example:
        bannerize "Hello" --banner shadow
    """
    settings = BannerSettings(
        library=LibraryConfig(
            font_dir=font_dir,
            default_banner=banner or "standard",
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    renderer = BannerRenderer(settings)

    if list_banners:
        if not quiet:
            print_header(__version__)
        try:
            names = renderer.library.names()
        except OSError as e:
            print_error(f"Could not list banners: {e}")
            raise typer.Exit(code=1)
        print_banner_list(str(font_dir), names)
        raise typer.Exit(code=0)

    # Same checks the form handler made before rendering
    text = _read_text(text)
    if text == "":
        print_error("Missing text", details="Please provide the text to render.")
        raise typer.Exit(code=1)
    if not banner:
        print_error("Missing banner", details="Please select a banner to render with.")
        raise typer.Exit(code=1)

    try:
        result = renderer.render(text, banner=banner)

        if output is not None:
            output.write_text(result, encoding="utf-8")
            if not quiet:
                print_saved(str(output), result.count("\n"))
        else:
            print_art(result)

    except FontNotFoundError as e:
        print_error(
            f"Banner not found: {e.name}",
            details=f"Available banners are listed by --list-banners (searched {font_dir}).",
        )
        raise typer.Exit(code=1)
    except FontFormatError as e:
        print_error("Internal error: malformed banner font", details=str(e))
        raise typer.Exit(code=1)
    except FontLoadError as e:
        print_error(f"Could not load banner: {e.reason}")
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write output: {e}")
        raise typer.Exit(code=1)
    except BannerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
