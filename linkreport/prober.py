"""HTTP liveness probing: one HEAD request per URL."""

from __future__ import annotations

import httpx

from linkreport.config import settings
from linkreport.errors import ProbeError

def probe_url(url: str, timeout: float | None = None) -> int:
    """Send a HEAD request to *url* and return the response status code.

    Redirects are not followed, so a 3xx is reported as-is.  The status
    code is never raised on; a 404 is returned like any other code.  When
    *timeout* is ``None`` the ``settings.probe_timeout`` value applies,
    which is itself ``None`` (wait forever) unless configured.

    Raises:
        ProbeError: If the request cannot complete (DNS failure, refused
            connection, unsupported scheme, malformed URL, timeout).
    """
    if timeout is None:
        timeout = settings.probe_timeout

    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=timeout,
            follow_redirects=False,
        ) as client:
            response = client.head(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ProbeError(url, exc) from exc

    return response.status_code
