"""Parsing of Ledger journal text into entries and postings."""

import re
from datetime import date
from decimal import Decimal
from typing import Optional

from reckon.domain.entities import LedgerEntry, Posting
from reckon.domain.errors import ParseError, invalid_ledger_line
from reckon.utils.amount_parser import format_money, parse_amount

_HEADER_RE = re.compile(
    r"^(?P<date>\d{4}[-/.]\d{1,2}[-/.]\d{1,2})"
    r"(?:=\S+)?"
    r"(?: +[*!](?= ))?"
    r"(?: +\([^)]*\)(?= ))?"
    r"\s*(?P<desc>.*)$"
)
_POSTING_SPLIT_RE = re.compile(r"\t+|\s{2,}")
_COMMENT_CHARS = (";", "#", "%", "|", "*")
_CURRENCY_PREFIX_RE = re.compile(r"^([^\d\-+.,\s]*)\s*[-+]?\d")
_CURRENCY_SUFFIX_RE = re.compile(r"\d\s*([^\d\s.,]+)$")


def parse_ledger(text: str, comma_separates_cents: bool = False) -> list[LedgerEntry]:
    """Parse journal text into entries.

    Recognized layout::

        2020-01-01 * (42) Coffee Shop
            Expenses:Food          $12.50
            Assets:Bank:Checking

    Comment lines and directives (``account``, ``P``, automated transactions)
    are skipped. A single posting without an amount is balanced against the
    others. State and code markers are only recognized when separated from
    the date by spaces, so "DATE<tab>(POS) Shop" keeps its whole description.

    Args:
        text: Journal text
        comma_separates_cents: Amounts use "," as the decimal separator

    Returns:
        Entries in file order

    Raises:
        ParseError: If an entry header has an invalid date
    """
    entries = []
    header: Optional[tuple[date, str]] = None
    postings: list[tuple[str, Optional[str]]] = []

    def flush():
        if header is not None:
            entries.append(
                _build_entry(header[0], header[1], postings, comma_separates_cents)
            )

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            flush()
            header, postings = None, []
            continue

        if line[0] in " \t":
            if header is None:
                continue
            posting = _parse_posting(line)
            if posting is not None:
                postings.append(posting)
            continue

        if line.startswith(_COMMENT_CHARS):
            continue

        flush()
        header, postings = None, []

        if line[0].isdigit():
            match = _HEADER_RE.match(line.rstrip())
            if match is None:
                raise ParseError(invalid_ledger_line(line_number, line))
            try:
                entry_date = _parse_entry_date(match.group("date"))
            except ValueError:
                raise ParseError(invalid_ledger_line(line_number, line))
            header = (entry_date, match.group("desc").strip())

    flush()
    return entries


def _parse_entry_date(text: str) -> date:
    year, month, day = (int(part) for part in re.split(r"[-/.]", text))
    return date(year, month, day)


def _parse_posting(line: str) -> Optional[tuple[str, Optional[str]]]:
    stripped = line.strip()
    if stripped.startswith(";"):
        return None

    # Trailing comments
    stripped = stripped.split(";", 1)[0].rstrip()
    if stripped[:2] in ("* ", "! "):
        stripped = stripped[2:].lstrip()

    parts = _POSTING_SPLIT_RE.split(stripped, maxsplit=1)
    account = parts[0].strip()
    if not account:
        return None

    amount = None
    if len(parts) > 1:
        # Drop cost (@) and balance assertion (=) annotations
        amount = re.split(r"\s*[@=]", parts[1], maxsplit=1)[0].strip() or None
    return account, amount


def _parse_value(amount: Optional[str], comma_separates_cents: bool) -> Optional[Decimal]:
    if amount is None:
        return None
    try:
        return parse_amount(amount, comma_separates_cents)
    except ValueError:
        return None


def _build_entry(
    entry_date: date,
    description: str,
    raw_postings: list[tuple[str, Optional[str]]],
    comma_separates_cents: bool,
) -> LedgerEntry:
    values = [_parse_value(amount, comma_separates_cents) for _account, amount in raw_postings]
    missing = [i for i, (_account, amount) in enumerate(raw_postings) if amount is None]

    postings = [
        Posting(account=account, amount=amount or "", value=value)
        for (account, amount), value in zip(raw_postings, values)
    ]

    known = [
        (amount, value)
        for (_account, amount), value in zip(raw_postings, values)
        if amount is not None
    ]
    if len(missing) == 1 and known and all(value is not None for _amount, value in known):
        balance = -sum(value for _amount, value in known)
        currency, suffixed = _currency_of(known[0][0])
        index = missing[0]
        postings[index] = Posting(
            account=postings[index].account,
            amount=format_money(balance, currency, suffixed),
            value=balance,
        )

    return LedgerEntry(date=entry_date, description=description, postings=tuple(postings))


def _currency_of(amount: str) -> tuple[str, bool]:
    """Return (currency, suffixed) as written in amount."""
    amount = amount.strip()
    match = _CURRENCY_PREFIX_RE.match(amount)
    if match and match.group(1):
        return match.group(1), False
    match = _CURRENCY_SUFFIX_RE.search(amount)
    if match:
        return match.group(1), True
    return "", False
