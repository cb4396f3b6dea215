"""Command-line interface for bannerize.

This module provides the CLI using Typer with rich output for
status and error reporting.

Key features:
- Render text given as an argument or on stdin
- Pick banners by name from a font directory
- List available banners
- Distinct messages for missing and malformed banners
"""

from bannerize.cli.app import cli, main

__all__ = ["cli", "main"]
