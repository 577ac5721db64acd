"""Console output helpers for the CLI."""

from __future__ import annotations

import typer


def render_banner() -> None:
    typer.secho("\nMarkdown Link Reporter\n", fg=typer.colors.GREEN, bold=True)


def render_progress(index: int, total: int, path: str) -> None:
    """Print ``[index/total] Checking <path>`` with a highlighted counter."""
    counter = typer.style(f"[{index}/{total}]", fg=typer.colors.GREEN, bold=True)
    message = typer.style(f"Checking {path}", fg=typer.colors.BRIGHT_BLACK)
    typer.echo(f"{counter} {message}")
