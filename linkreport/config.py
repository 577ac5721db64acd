"""Centralised settings for the markdown link reporter.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  The CLI itself takes
no flags, so the environment is the only way to change these.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_float(name: str) -> float | None:
    value = os.environ.get(name, "").strip()
    return float(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Report output
    # ------------------------------------------------------------------
    output_dir: str = field(
        default_factory=lambda: os.environ.get("REPORT_OUTPUT_DIR", "tmp")
    )
    report_filename: str = field(
        default_factory=lambda: os.environ.get(
            "REPORT_FILENAME", "markdown-link-report.json"
        )
    )

    # ------------------------------------------------------------------
    # Prober
    # ------------------------------------------------------------------
    # None means no timeout: a hanging endpoint stalls the run.
    probe_timeout: float | None = field(
        default_factory=lambda: _optional_float("PROBE_TIMEOUT")
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "PROBE_USER_AGENT",
            "Mozilla/5.0 (compatible; MarkdownLinkReporter/1.0)",
        )
    )


# Module-level singleton — import this everywhere:
#   from linkreport.config import settings
settings = Settings()
