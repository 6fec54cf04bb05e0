"""Domain layer for reckon application."""

# Services are imported lazily: the parsers in reckon.utils import domain
# entities, and the learner imports those parsers.
_EXPORTS = {
    "ClassificationSession": "reckon.domain.session",
    "Learner": "reckon.domain.learner",
    "RuleMatcher": "reckon.domain.rules",
    "SimilarityCorpus": "reckon.domain.similarity",
    "SuggestionRanker": "reckon.domain.suggestions",
    "DedupGuard": "reckon.domain.dedup",
}

__all__ = list(_EXPORTS)


def __getattr__(name):
    if name in _EXPORTS:
        from importlib import import_module

        return getattr(import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
