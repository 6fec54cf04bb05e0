"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ConfigError(DomainError):
    """Missing or unusable configuration, such as a token or ledger file."""


class ParseError(DomainError):
    """Input text (rule, journal or statement) could not be parsed."""


def file_not_found(path: str) -> str:
    """Return message for a configured file that does not exist."""
    return f"{path} doesn't exist!"


def invalid_rule(rule_text: str) -> str:
    """Return message for a rule string not of the form /pattern/flags."""
    return f"failed to parse regexp {rule_text}"


def invalid_regex(rule_text: str, error: Exception) -> str:
    """Return message for a rule whose pattern does not compile."""
    return f"failed to compile regexp {rule_text}: {error}"


def invalid_ledger_line(line_number: int, line: str) -> str:
    """Return message for an unparseable journal line."""
    return f"Could not parse ledger line {line_number}: '{line}'"


def missing_bank_account() -> str:
    """Return message when no bank account was configured."""
    return "Please specify the bank account (--account)"
