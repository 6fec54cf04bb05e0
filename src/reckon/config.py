"""Session configuration for reckon.

All options a classification session needs are carried by one immutable
object that is passed explicitly; there is no process-wide state.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ReckonOptions:
    """Options for one classification session."""

    bank_account: str
    currency: str = "$"
    suffixed: bool = False
    comma_separates_cents: bool = False
    inverse: bool = False

    # Learning sources
    account_tokens_file: Optional[str] = None
    existing_ledger_file: Optional[str] = None

    # Suggestions
    unattended: bool = False
    default_into_account: Optional[str] = None
    default_outof_account: Optional[str] = None
    include_zero_scores: bool = False

    # Statement layout
    date_format: Optional[str] = None
    date_column: Optional[int] = None
    money_column: Optional[int] = None
    ignore_columns: tuple[int, ...] = ()
    contains_header: int = 0
    csv_separator: Optional[str] = None
    encoding: str = "utf-8-sig"

    @property
    def learns_from_answers(self) -> bool:
        """Accepted answers feed the corpus unless a tokens file drives it."""
        return self.account_tokens_file is None
