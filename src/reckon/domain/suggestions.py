"""Ranking candidate accounts for a transaction."""

from typing import Optional, Union

from reckon.domain.entities import Transaction
from reckon.domain.rules import RuleMatcher
from reckon.domain.similarity import SimilarityCorpus


def _description(transaction: Union[Transaction, str]) -> str:
    if isinstance(transaction, Transaction):
        return transaction.description
    return transaction


class SuggestionRanker:
    """Rule matches first, then similarity matches."""

    def __init__(self, rule_matcher: RuleMatcher, corpus: SimilarityCorpus):
        self.rule_matcher = rule_matcher
        self.corpus = corpus

    def suggest(self, transaction: Union[Transaction, str]) -> list[str]:
        """Return candidate accounts, best first.

        Accounts may repeat: once per matching rule and once more if the
        corpus also scores them.
        """
        description = _description(transaction)
        return self.rule_matcher.match(description) + [
            suggestion.account for suggestion in self.corpus.find_similar(description)
        ]

    def unique_suggestions(self, transaction: Union[Transaction, str]) -> list[str]:
        """Return suggest() without repeats, keeping first occurrences."""
        unique = []
        seen = set()
        for account in self.suggest(transaction):
            if account not in seen:
                unique.append(account)
                seen.add(account)
        return unique

    def default_suggestion(self, transaction: Union[Transaction, str]) -> Optional[str]:
        suggestions = self.suggest(transaction)
        return suggestions[0] if suggestions else None
