"""Classification session owning all learned state for one run."""

import logging
from pathlib import Path
from typing import Optional

from reckon.config import ReckonOptions
from reckon.domain.dedup import DedupGuard
from reckon.domain.entities import Transaction
from reckon.domain.entries import entry_lines, format_ledger_entry
from reckon.domain.errors import ConfigError, file_not_found, missing_bank_account
from reckon.domain.learner import Learner
from reckon.domain.rules import RuleMatcher
from reckon.domain.similarity import SimilarityCorpus
from reckon.domain.suggestions import SuggestionRanker
from reckon.utils.amount_parser import format_money

logger = logging.getLogger(__name__)

UNKNOWN_INCOME_ACCOUNT = "Income:Unknown"
UNKNOWN_EXPENSE_ACCOUNT = "Expenses:Unknown"


class ClassificationSession:
    """Service tying the learner, ranker and dedup guard together.

    State is built by learn() and grows with each accepted answer; it is
    never persisted.
    """

    def __init__(self, options: ReckonOptions):
        """Initialize an empty session.

        Args:
            options: Session options

        Raises:
            ConfigError: If no bank account is configured
        """
        if not options.bank_account:
            raise ConfigError(missing_bank_account())

        self.options = options
        self.rule_matcher = RuleMatcher()
        self.corpus = SimilarityCorpus(include_zero_scores=options.include_zero_scores)
        self.dedup = DedupGuard()
        self.learner = Learner(
            bank_account=options.bank_account,
            rule_matcher=self.rule_matcher,
            corpus=self.corpus,
            dedup=self.dedup,
            money_formatter=self.format_money,
            comma_separates_cents=options.comma_separates_cents,
        )
        self.ranker = SuggestionRanker(self.rule_matcher, self.corpus)

    def format_money(self, amount) -> str:
        return format_money(amount, self.options.currency, self.options.suffixed)

    def learn(self) -> None:
        """Learn from the configured tokens file and existing ledger.

        Both files are checked before any learning starts.

        Raises:
            ConfigError: If a configured file does not exist
            ParseError: If a rule or the ledger cannot be parsed
        """
        for filename in (self.options.account_tokens_file, self.options.existing_ledger_file):
            if filename and not Path(filename).exists():
                raise ConfigError(file_not_found(filename))

        if self.options.account_tokens_file:
            self.learner.learn_from_account_tokens_file(self.options.account_tokens_file)
        if self.options.existing_ledger_file:
            self.learner.learn_from_ledger_file(self.options.existing_ledger_file)

        logger.info(
            "Learned %d rules, %d accounts, %d seen transactions",
            len(self.rule_matcher),
            len(self.corpus),
            len(self.dedup),
        )

    def suggest(self, transaction: Transaction) -> list[str]:
        return self.ranker.suggest(transaction)

    def unique_suggestions(self, transaction: Transaction) -> list[str]:
        return self.ranker.unique_suggestions(transaction)

    def already_seen(self, transaction: Transaction) -> bool:
        return self.dedup.already_seen(transaction.formatted_date, transaction.formatted_amount)

    def guess_account(self, transaction: Transaction) -> str:
        """Pick an account without asking, for unattended runs."""
        default: Optional[str] = self.ranker.default_suggestion(transaction)
        if default:
            return default
        if transaction.is_income:
            return self.options.default_outof_account or UNKNOWN_INCOME_ACCOUNT
        return self.options.default_into_account or UNKNOWN_EXPENSE_ACCOUNT

    def record_answer(self, transaction: Transaction, account: str) -> str:
        """Build the journal entry for an accepted answer.

        The entry is learned from immediately, so later transactions in the
        same run see it, unless the session runs from a tokens file.

        Returns:
            Entry text
        """
        line1, line2 = entry_lines(transaction, self.options.bank_account, account)
        entry = format_ledger_entry(transaction, line1, line2)
        logger.info("ledger line: %s", entry)
        if self.options.learns_from_answers:
            self.learner.learn_from_answer(transaction, account)
        return entry
