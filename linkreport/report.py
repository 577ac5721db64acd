"""Report writer: serialises the run's :data:`Report` to disk."""

from __future__ import annotations

from pathlib import Path

import typer

from linkreport.config import settings
from linkreport.models import Report, report_from_json, report_to_json


def write_report(
    root_dir: Path,
    output_dir: str,
    report: Report,
    filename: str | None = None,
) -> Path:
    """Write *report* to ``<root_dir>/<output_dir>/<filename>``.

    The output directory is created when missing and any previous report
    is deleted before the new one is written.  The two steps are not
    atomic: a crash in between leaves no report at all.

    Returns:
        The absolute path of the written report.
    """
    filename = filename or settings.report_filename
    output_root = Path(root_dir).absolute() / output_dir
    report_path = output_root / filename

    output_root.mkdir(parents=True, exist_ok=True)
    if report_path.exists():
        report_path.unlink()

    report_path.write_text(report_to_json(report), encoding="utf-8")

    typer.secho("\n Successfully generated the report: \n", fg=typer.colors.GREEN, bold=True)
    typer.secho(str(report_path), fg=typer.colors.BLUE)
    return report_path


def load_report(path: Path) -> Report:
    """Read a report previously written by :func:`write_report`."""
    return report_from_json(Path(path).read_text(encoding="utf-8"))
