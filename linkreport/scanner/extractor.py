"""URL extraction from markdown text."""

from __future__ import annotations

import re
from typing import List

# Heuristic, not a URI grammar: the path may keep stray prose punctuation
# (a comma followed by a word character) and may lose legitimate endings
# such as a closing parenthesis.
_URL_PATTERN = re.compile(
    r"(?:http|https)://"
    r"[\w-]+(?:\.[\w-]+)+"
    r"[\w.,@?^=%&:/~+#-]*[\w@?^=%&/~+#-]",
    re.ASCII,
)


def extract_urls(text: str) -> List[str]:
    """Return every URL-shaped substring of *text* in order of appearance.

    Duplicates are kept and nothing is normalised.  Text without URLs
    yields an empty list.
    """
    return [m.group(0) for m in _URL_PATTERN.finditer(text)]
