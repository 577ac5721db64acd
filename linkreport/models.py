"""Data models for link probing and the JSON report."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

# Codes at or above this are recorded as failures.
FAILURE_THRESHOLD = 400


def is_success(status_code: int) -> bool:
    """Return ``True`` for 1xx/2xx/3xx responses."""
    return status_code < FAILURE_THRESHOLD


@dataclass(frozen=True)
class UrlDetails:
    """The outcome of probing a single URL found in a markdown file."""

    url: str
    status_code: int
    succeeded: bool

    @classmethod
    def from_status(cls, url: str, status_code: int) -> UrlDetails:
        return cls(url=url, status_code=status_code, succeeded=is_success(status_code))

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "statusCode": self.status_code,
            "succeeded": self.succeeded,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UrlDetails:
        return cls(
            url=data["url"],
            status_code=int(data["statusCode"]),
            succeeded=bool(data["succeeded"]),
        )


# File path -> probe results, both in the order they were encountered.
Report = dict[str, list[UrlDetails]]


def report_to_json(report: Report) -> str:
    """Serialise *report* as 4-space indented JSON, preserving key order."""
    payload = {
        path: [details.to_dict() for details in results]
        for path, results in report.items()
    }
    return json.dumps(payload, indent=4)


def report_from_json(data: str) -> Report:
    """Parse JSON produced by :func:`report_to_json` back into a :data:`Report`."""
    raw = json.loads(data)
    return {
        path: [UrlDetails.from_dict(item) for item in results]
        for path, results in raw.items()
    }
