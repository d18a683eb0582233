"""Link detection for cell content."""

import re
from typing import Callable, Dict, Optional
from reportlab.lib.colors import blue

LinkPredicate = Callable[[Optional[str]], bool]

# Text drawn in place of a detected link
LINK_PLACEHOLDER = "Link"
LINK_COLOR = blue

_URL_RE = re.compile(r"^\s*https?://\S+\s*$")


def contains_http(text: Optional[str]) -> bool:
    """Loose check: any non-blank text containing "http" (case-sensitive)."""
    if text is None or not text.strip():
        return False
    return "http" in text


def looks_like_url(text: Optional[str]) -> bool:
    """Strict check: the whole cell is a single http(s) URL."""
    if not text:
        return False
    return _URL_RE.match(text) is not None


LINK_PREDICATES: Dict[str, LinkPredicate] = {
    "http-substring": contains_http,
    "strict": looks_like_url,
}


def get_link_predicate(name: str) -> LinkPredicate:
    """Look up a link predicate by its config name."""
    try:
        return LINK_PREDICATES[name]
    except KeyError:
        raise ValueError(
            f"Unknown link detection {name!r}; expected one of {sorted(LINK_PREDICATES)}"
        ) from None
