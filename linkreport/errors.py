"""Exceptions raised by the link reporter."""


class LinkReportError(Exception):
    """Base class for all link reporter errors."""


class IgnoreLookupError(LinkReportError):
    """``git check-ignore`` could not list the ignored paths.

    Fatal: the run aborts before any file is scanned.
    """


class ProbeError(LinkReportError):
    """A URL could not be probed (DNS failure, refused connection, bad URL …).

    Recovered per URL: the URL is left out of the report.
    """

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"{url}: {cause}")
        self.url = url
        self.cause = cause
