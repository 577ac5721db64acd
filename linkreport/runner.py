"""High-level runner for a link report.

``run`` walks the markdown files under a root directory and probes every
URL it finds, one after another.  Its collaborators (git lookup, file
reading, probing, progress output) are plain callables so tests can swap
them for fakes; the defaults talk to git, the filesystem and the network.
``run_and_write`` adds the final report write used by the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import typer

from linkreport.config import settings
from linkreport.errors import ProbeError
from linkreport.models import Report, UrlDetails
from linkreport.prober import probe_url
from linkreport.report import write_report
from linkreport.scanner import discover_markdown_files, extract_urls, resolve_exclusions
from linkreport.scanner.exclusions import ListIgnored, list_ignored_paths

ProbeFn = Callable[[str], int]
ReadTextFn = Callable[[str], str]
ProgressFn = Callable[[int, int, str], None]


@dataclass(frozen=True)
class RunConfig:
    root_dir: Path
    output_dir: str = "tmp"
    report_filename: str = "markdown-link-report.json"

    @classmethod
    def from_settings(cls, root_dir: Path) -> RunConfig:
        return cls(
            root_dir=Path(root_dir).absolute(),
            output_dir=settings.output_dir,
            report_filename=settings.report_filename,
        )


def read_markdown(path: str) -> str:
    # Undecodable bytes become U+FFFD; the URLs around them still match.
    return Path(path).read_text(encoding="utf-8", errors="replace")


def run(
    config: RunConfig,
    *,
    list_ignored: Optional[ListIgnored] = None,
    probe: Optional[ProbeFn] = None,
    read_text: Optional[ReadTextFn] = None,
    on_file: Optional[ProgressFn] = None,
) -> Report:
    """Build the link report for every markdown file under ``config.root_dir``.

    Files and URLs are processed strictly in sequence.  A URL whose probe
    raises :class:`~linkreport.errors.ProbeError` is reported on stderr and
    left out of its file's list; HTTP error codes are recorded with
    ``succeeded=False``.  Errors from the git lookup propagate and abort
    the run before any file is read.

    Args:
        config: Where to scan.
        list_ignored: Returns the paths git ignores under a root
            (default: ``git check-ignore``).
        probe: Returns the HTTP status code for a URL (default: HEAD via httpx).
        read_text: Returns the contents of a markdown file.
        on_file: Called as ``on_file(index, total, path)`` (1-based index)
            before each file is processed.

    Returns:
        File path -> probe results, in discovery and extraction order.
    """
    list_ignored = list_ignored or list_ignored_paths
    probe = probe or probe_url
    read_text = read_text or read_markdown

    root = Path(config.root_dir).absolute()
    exclusions = resolve_exclusions(root, list_ignored=list_ignored)
    markdown_paths = discover_markdown_files(root, exclusions)

    report: Report = {}
    total = len(markdown_paths)
    for index, markdown_path in enumerate(markdown_paths, start=1):
        if on_file is not None:
            on_file(index, total, markdown_path)

        results = report.setdefault(markdown_path, [])
        for url in extract_urls(read_text(markdown_path)):
            try:
                status_code = probe(url)
            except ProbeError as exc:
                typer.echo(f"[probe] ✗ {exc}", err=True)
                continue
            results.append(UrlDetails.from_status(url, status_code))

    return report


def run_and_write(
    config: RunConfig,
    *,
    list_ignored: Optional[ListIgnored] = None,
    probe: Optional[ProbeFn] = None,
    read_text: Optional[ReadTextFn] = None,
    on_file: Optional[ProgressFn] = None,
) -> Path:
    """Run the scan and write the report, returning the report path.

    Nothing is written when the scan itself fails.
    """
    report = run(
        config,
        list_ignored=list_ignored,
        probe=probe,
        read_text=read_text,
        on_file=on_file,
    )
    return write_report(
        config.root_dir, config.output_dir, report, filename=config.report_filename
    )
