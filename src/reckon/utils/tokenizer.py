"""Text normalization shared by corpus documents and queries."""

import re
from collections import Counter

_TERM_RE = re.compile(r"[^\W_]+")


def tokenize(text: str) -> list[str]:
    """Case-fold text and split it on non-alphanumeric boundaries.

    Examples:
        "Coffee Shop $12.50" -> ["coffee", "shop", "12", "50"]
        "AMZN*Mktp-US" -> ["amzn", "mktp", "us"]
    """
    if not text:
        return []
    return _TERM_RE.findall(text.casefold())


def term_frequencies(text: str) -> Counter:
    """Return term -> count for text, in first-seen order."""
    return Counter(tokenize(text))
