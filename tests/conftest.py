"""Shared pytest fixtures for reckon tests."""

from datetime import date
from decimal import Decimal

import pytest

from reckon.config import ReckonOptions
from reckon.domain.dedup import DedupGuard
from reckon.domain.entities import Transaction
from reckon.domain.learner import Learner
from reckon.domain.rules import RuleMatcher
from reckon.domain.session import ClassificationSession
from reckon.domain.similarity import SimilarityCorpus
from reckon.utils.amount_parser import format_money

BANK_ACCOUNT = "Assets:Bank:Checking"

SAMPLE_LEDGER = (
    "2020-01-01 Coffee Shop\n"
    "\tExpenses:Food\t\t\t\t\t$12.50\n"
    "\tAssets:Bank:Checking\t\t\t\t\t$-12.50\n"
    "\n"
    "2020-01-03 Shell Gas Station\n"
    "\tExpenses:Auto:Fuel\t\t\t\t\t$40.00\n"
    "\tAssets:Bank:Checking\t\t\t\t\t$-40.00\n"
    "\n"
    "2020-01-15 Payroll Acme Corp\n"
    "\tAssets:Bank:Checking\t\t\t\t\t$2000.00\n"
    "\tIncome:Salary\t\t\t\t\t$-2000.00\n"
    "\n"
)

SAMPLE_TOKENS = """\
Expenses:
  Food:
    - coffee
    - '/^STARBUCKS/i'
  Auto:
    Fuel:
      - chevron
      - shell
  Unused:
Income:
  Salary:
    - payroll
"""

SAMPLE_CSV = (
    "Date,Description,Amount\n"
    "2020-01-05,STARBUCKS #123,-4.50\n"
    "2020-01-01,Coffee Shop,-12.50\n"
    "2020-01-31,Payroll Acme Corp,2000.00\n"
)


@pytest.fixture
def make_transaction():
    """Return a factory for statement transactions."""

    def _make(description="Coffee Shop", amount="-12.50", when=date(2020, 1, 1)):
        value = Decimal(amount)
        return Transaction(
            date=when,
            formatted_date=when.isoformat(),
            signed_amount=value,
            formatted_amount=format_money(value),
            formatted_amount_negated=format_money(-value),
            description=description,
        )

    return _make


@pytest.fixture
def rule_matcher():
    return RuleMatcher()


@pytest.fixture
def corpus():
    return SimilarityCorpus()


@pytest.fixture
def dedup():
    return DedupGuard()


@pytest.fixture
def learner(rule_matcher, corpus, dedup):
    """Create a Learner wired to fresh components."""
    return Learner(
        bank_account=BANK_ACCOUNT,
        rule_matcher=rule_matcher,
        corpus=corpus,
        dedup=dedup,
    )


@pytest.fixture
def ledger_file(tmp_path):
    path = tmp_path / "existing.ledger"
    path.write_text(SAMPLE_LEDGER, encoding="utf-8")
    return path


@pytest.fixture
def tokens_file(tmp_path):
    path = tmp_path / "tokens.yml"
    path.write_text(SAMPLE_TOKENS, encoding="utf-8")
    return path


@pytest.fixture
def statement_file(tmp_path):
    path = tmp_path / "statement.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def ledger_session(ledger_file):
    """Create a session that learned from the sample ledger."""
    session = ClassificationSession(
        ReckonOptions(bank_account=BANK_ACCOUNT, existing_ledger_file=str(ledger_file))
    )
    session.learn()
    return session


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
