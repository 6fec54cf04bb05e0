"""Term-frequency cosine similarity between text and learned accounts."""

import math
from collections import Counter

from reckon.domain.entities import Suggestion
from reckon.utils.tokenizer import term_frequencies


class SimilarityCorpus:
    """Per-account term-frequency vectors built from training documents.

    Vectors only ever grow. Accounts are kept in the order they were first
    registered, which is also the tie-break order for equal scores.
    """

    def __init__(self, include_zero_scores: bool = False):
        """Initialize an empty corpus.

        Args:
            include_zero_scores: Also return accounts with no term overlap
                (scored 0.0) from find_similar
        """
        self.include_zero_scores = include_zero_scores
        self._vectors: dict[str, Counter] = {}
        self._document_counts: dict[str, int] = {}

    def add_document(self, account: str, text: str) -> None:
        """Add the terms of text to the vector owned by account.

        Args:
            account: Account path the document belongs to
            text: Free text (a phrase, or "description amount")
        """
        terms = term_frequencies(text)
        if not terms:
            return

        vector = self._vectors.get(account)
        if vector is None:
            vector = self._vectors[account] = Counter()
            self._document_counts[account] = 0
        vector.update(terms)
        self._document_counts[account] += 1

    def find_similar(self, text: str) -> list[Suggestion]:
        """Rank learned accounts by cosine similarity to text.

        Args:
            text: Query text, usually a transaction description

        Returns:
            Suggestions in descending score order
        """
        query = term_frequencies(text)
        query_norm = _norm(query)

        scored = []
        for account, vector in self._vectors.items():
            score = 0.0
            if query_norm:
                dot = sum(count * vector[term] for term, count in query.items() if term in vector)
                if dot:
                    score = dot / (query_norm * _norm(vector))
            if score > 0 or self.include_zero_scores:
                scored.append(Suggestion(account=account, score=score))

        # sorted() is stable: equal scores keep registration order
        return sorted(scored, key=lambda suggestion: -suggestion.score)

    @property
    def accounts(self) -> list[str]:
        """Accounts with at least one term, in registration order."""
        return list(self._vectors)

    def document_count(self, account: str) -> int:
        return self._document_counts.get(account, 0)

    def terms_for(self, account: str) -> Counter:
        """Return a copy of the term vector for account (empty if unknown)."""
        return Counter(self._vectors.get(account, {}))

    def __contains__(self, account: str) -> bool:
        return account in self._vectors

    def __len__(self) -> int:
        return len(self._vectors)


def _norm(vector: Counter) -> float:
    return math.sqrt(sum(count * count for count in vector.values()))
