"""Markdown link reporter CLI.

Usage:
    markdown-link-reporter run
    python cli/main.py run

Scans the current working directory for markdown files, probes every
HTTP(S) URL found in them and writes ``tmp/markdown-link-report.json``.
Output location and probe timeout come from the environment (see
``linkreport.config``); the command itself takes no options.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkreport.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from cli.rendering import render_banner, render_progress
from linkreport.runner import RunConfig, run_and_write

__version__ = "1.0.0"

app = typer.Typer(
    name="markdown-link-reporter",
    help="Report on the quality of markdown files.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"markdown-link-reporter {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Check the HTTP(S) links in every markdown file of a project."""


@app.command("run")
def run_cmd() -> None:
    """Report on the quality of markdown files in the current directory."""
    config = RunConfig.from_settings(Path.cwd())
    render_banner()
    run_and_write(config, on_file=render_progress)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
