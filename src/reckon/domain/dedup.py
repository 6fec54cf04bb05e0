"""Approximate duplicate detection by date and signed amount."""

from datetime import date
from typing import Union


def fingerprint(when: Union[date, str], formatted_amount: str) -> str:
    """Return the "date|amount" key for a transaction.

    Dates are rendered as ISO strings; strings are used as given.
    """
    if isinstance(when, date):
        when = when.isoformat()
    return f"{when}|{formatted_amount}"


class DedupGuard:
    """Set of fingerprints already recorded in the journal.

    Two different transactions on the same day with the same amount share a
    fingerprint, so a hit only means "probably seen".
    """

    def __init__(self):
        self._seen: set[str] = set()

    def record_seen(self, when: Union[date, str], formatted_amount: str) -> None:
        self._seen.add(fingerprint(when, formatted_amount))

    def already_seen(self, when: Union[date, str], formatted_amount: str) -> bool:
        return fingerprint(when, formatted_amount) in self._seen

    def __contains__(self, key: str) -> bool:
        return key in self._seen

    def __len__(self) -> int:
        return len(self._seen)
