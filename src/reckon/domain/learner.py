"""Learning rules, corpus documents and fingerprints from prior data."""

import logging
from pathlib import Path
from typing import Callable, Optional

import yaml

from reckon.domain.dedup import DedupGuard
from reckon.domain.entities import (
    Posting,
    TokenBranch,
    TokenLeaf,
    TokenTree,
    Transaction,
    build_token_tree,
)
from reckon.domain.errors import ConfigError, file_not_found
from reckon.domain.rules import RuleMatcher
from reckon.domain.similarity import SimilarityCorpus
from reckon.utils.amount_parser import format_money
from reckon.utils.ledger_parser import parse_ledger

logger = logging.getLogger(__name__)


class Learner:
    """Populate a session's matcher, corpus and dedup guard."""

    def __init__(
        self,
        bank_account: str,
        rule_matcher: RuleMatcher,
        corpus: SimilarityCorpus,
        dedup: DedupGuard,
        money_formatter: Optional[Callable] = None,
        comma_separates_cents: bool = False,
    ):
        """Initialize learner.

        Args:
            bank_account: Account path of the statement's bank account
            rule_matcher: Receives "/pattern/flags" tokens
            corpus: Receives phrase tokens and historical postings
            dedup: Receives fingerprints of bank account postings
            money_formatter: Renders a Decimal amount for fingerprints;
                defaults to dollars
            comma_separates_cents: Journal amounts use "," as the decimal
                separator
        """
        self.bank_account = bank_account
        self.rule_matcher = rule_matcher
        self.corpus = corpus
        self.dedup = dedup
        self.money_formatter = money_formatter or format_money
        self.comma_separates_cents = comma_separates_cents

    def learn_from_account_tokens(self, tree: TokenTree, account: Optional[str] = None) -> None:
        """Walk an account tokens tree and learn every token in it.

        Branch keys are joined with ":" into account paths. Tokens starting
        with "/" become rules, anything else becomes a corpus document.

        Plain loaded YAML data (nested dicts and lists) is accepted too.

        Raises:
            ParseError: If a rule token is malformed
        """
        if not isinstance(tree, (TokenBranch, TokenLeaf)):
            tree = build_token_tree(tree)

        if isinstance(tree, TokenBranch):
            for key, child in tree.children.items():
                path = f"{account}:{key}" if account else key
                self.learn_from_account_tokens(child, path)
            return

        if tree.tokens is None:
            logger.warning("empty %s tree", account)
            return

        if not account:
            logger.warning("ignoring tokens without an account: %s", list(tree.tokens))
            return

        for token in tree.tokens:
            if token.startswith("/"):
                self.rule_matcher.add_rule(account, token)
            else:
                self.corpus.add_document(account, token)

    def learn_from_account_tokens_file(self, filename: str) -> None:
        """Load a YAML account tokens file and learn from it.

        Raises:
            ConfigError: If the file does not exist or is not valid YAML
            ParseError: If a rule token is malformed
        """
        path = Path(filename)
        if not path.exists():
            raise ConfigError(file_not_found(filename))

        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Could not read account tokens from {filename}: {e}") from e

        try:
            tree = build_token_tree(data)
        except ValueError as e:
            raise ConfigError(f"Invalid account tokens in {filename}: {e}") from e

        self.learn_from_account_tokens(tree)

    def learn_from_ledger(self, ledger_text: str) -> None:
        """Learn from journal text.

        Postings to other accounts become "description amount" documents;
        postings to the bank account become duplicate fingerprints.

        Raises:
            ParseError: If the journal cannot be parsed
        """
        for entry in parse_ledger(ledger_text, self.comma_separates_cents):
            for posting in entry.postings:
                if posting.account == self.bank_account:
                    self.dedup.record_seen(entry.date.isoformat(), self._fingerprint_amount(posting))
                else:
                    self.corpus.add_document(posting.account, f"{entry.description} {posting.amount}")

    def learn_from_answer(self, transaction: Transaction, account: str) -> None:
        """Learn from a transaction the user just classified as account.

        Same effect as learning its journal entry, without parsing the entry
        text back, so the description is learned exactly as it was queried.
        """
        self.corpus.add_document(
            account, f"{transaction.description} {transaction.formatted_amount_negated}"
        )
        self.dedup.record_seen(transaction.formatted_date, transaction.formatted_amount)

    def learn_from_ledger_file(self, filename: str) -> None:
        """Read a journal file and learn from it.

        Raises:
            ConfigError: If the file does not exist
        """
        path = Path(filename)
        if not path.exists():
            raise ConfigError(file_not_found(filename))
        self.learn_from_ledger(path.read_text(encoding="utf-8"))

    def _fingerprint_amount(self, posting: Posting) -> str:
        if posting.value is None:
            return posting.amount
        return self.money_formatter(posting.value)
