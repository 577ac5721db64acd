"""Scanner package — markdown discovery, git exclusions & URL extraction."""

from linkreport.scanner.discovery import discover_markdown_files
from linkreport.scanner.exclusions import list_ignored_paths, resolve_exclusions
from linkreport.scanner.extractor import extract_urls

__all__ = [
    "discover_markdown_files",
    "extract_urls",
    "list_ignored_paths",
    "resolve_exclusions",
]
