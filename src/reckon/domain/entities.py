"""Domain model entities for reckon.

These are pure data classes shared between the classification core and the
statement/journal collaborators that feed it.
"""

import re
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Union


@dataclass(frozen=True)
class Transaction:
    """A single bank statement row, already normalized."""

    date: date
    formatted_date: str
    signed_amount: Decimal
    formatted_amount: str
    formatted_amount_negated: str
    description: str

    @property
    def is_income(self) -> bool:
        return self.signed_amount > 0


@dataclass(frozen=True)
class Rule:
    """Compiled `/pattern/flags` rule bound to an account path."""

    pattern: re.Pattern
    account: str
    source: str

    @property
    def ignore_case(self) -> bool:
        return bool(self.pattern.flags & re.IGNORECASE)

    @property
    def extended(self) -> bool:
        return bool(self.pattern.flags & re.VERBOSE)


@dataclass(frozen=True)
class Suggestion:
    """Account scored by the similarity corpus."""

    account: str
    score: float


@dataclass(frozen=True)
class Posting:
    """One account/amount line within a journal entry.

    ``amount`` keeps the text as written in the journal; ``value`` is the
    parsed number when the text could be parsed.
    """

    account: str
    amount: str
    value: Optional[Decimal] = None


@dataclass(frozen=True)
class LedgerEntry:
    """Journal entry with its postings."""

    date: date
    description: str
    postings: tuple[Posting, ...] = ()


@dataclass(frozen=True)
class TokenLeaf:
    """Leaf of the account tokens tree; ``tokens`` is None for an empty branch."""

    tokens: Optional[tuple[str, ...]]


@dataclass(frozen=True)
class TokenBranch:
    """Branch of the account tokens tree, keyed by account path segment."""

    children: dict[str, "TokenTree"] = field(default_factory=dict)


TokenTree = Union[TokenLeaf, TokenBranch]


def build_token_tree(data) -> TokenTree:
    """Convert loaded YAML data into a TokenTree.

    Mappings become branches (keys are converted to strings, order kept),
    lists become leaves and ``None`` becomes an empty leaf. A bare scalar is
    treated as a one-token list.

    Raises:
        ValueError: If a list contains a nested mapping or list
    """
    if data is None:
        return TokenLeaf(None)
    if isinstance(data, dict):
        return TokenBranch({str(key): build_token_tree(value) for key, value in data.items()})
    if isinstance(data, (list, tuple)):
        tokens = []
        for item in data:
            if isinstance(item, (dict, list, tuple)):
                raise ValueError(f"Unexpected nested value in token list: {item!r}")
            tokens.append(str(item))
        return TokenLeaf(tuple(tokens))
    return TokenLeaf((str(data),))
