"""Tests for the reckon command."""

import click
import pytest

from reckon import __version__
from reckon.cli.error_handling import domain_errors
from reckon.cli.main import cli
from reckon.cli.review import format_transaction_table
from reckon.domain.errors import ConfigError

BANK_ACCOUNT = "Assets:Bank:Checking"


def test_print_table(cli_runner, statement_file):
    result = cli_runner.invoke(cli, ["-f", str(statement_file), "-p", "--contains-header"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "      Date |  Amount |      Description |"
    assert lines[1] == "2020-01-01 | $-12.50 |      Coffee Shop |"
    assert len(lines) == 4


def test_unattended_with_ledger(cli_runner, statement_file, ledger_file, tmp_path):
    """Known rows are skipped; the rest are guessed and appended."""
    output = tmp_path / "out.ledger"

    result = cli_runner.invoke(
        cli,
        [
            "-f", str(statement_file),
            "-a", BANK_ACCOUNT,
            "-l", str(ledger_file),
            "-o", str(output),
            "--contains-header",
            "--unattended",
        ],
    )

    assert result.exit_code == 0
    assert output.read_text(encoding="utf-8") == (
        "2020-01-05\tSTARBUCKS #123\n"
        "\tExpenses:Unknown\t\t\t\t\t$4.50\n"
        "\tAssets:Bank:Checking\t\t\t\t\t$-4.50\n"
        "\n"
        "2020-01-31\tPayroll Acme Corp\n"
        "\tAssets:Bank:Checking\t\t\t\t\t$2000.00\n"
        "\tIncome:Salary\t\t\t\t\t$-2000.00\n"
        "\n"
    )


def test_interactive_accept_skip_quit(cli_runner, statement_file, tokens_file):
    result = cli_runner.invoke(
        cli,
        [
            "-f", str(statement_file),
            "-a", BANK_ACCOUNT,
            "-t", str(tokens_file),
            "--contains-header",
        ],
        input="\ns\nq\n",
    )

    assert result.exit_code == 0
    assert "To which account did this money go?" in result.output
    assert "Suggestions: Expenses:Food" in result.output
    assert "\tExpenses:Food\t\t\t\t\t$12.50\n" in result.output
    assert "Skipping" in result.output
    assert "Which account provided this income?" in result.output
    assert "Exiting." in result.output
    assert "Income:Salary\t" not in result.output


def test_interactive_describe(cli_runner, tmp_path):
    statement = tmp_path / "one.csv"
    statement.write_text("2020-02-01,XYZ*0042,-8.00\n", encoding="utf-8")

    result = cli_runner.invoke(
        cli,
        ["-f", str(statement), "-a", BANK_ACCOUNT],
        input="d\nCorner Bakery\nExpenses:Food\n",
    )

    assert result.exit_code == 0
    assert "2020-02-01\tCorner Bakery\n\tExpenses:Food\t\t\t\t\t$8.00\n" in result.output


def test_prompts_for_bank_account(cli_runner, statement_file):
    result = cli_runner.invoke(
        cli,
        ["-f", str(statement_file), "--contains-header"],
        input="\nExpenses:Food\nq\n",
    )

    assert result.exit_code == 0
    assert "What is the account name of this bank account in Ledger?" in result.output
    assert "\tAssets:Bank:Checking\t\t\t\t\t$-12.50\n" in result.output


def test_unattended_requires_account(cli_runner, statement_file, monkeypatch):
    monkeypatch.delenv("RECKON_BANK_ACCOUNT", raising=False)

    result = cli_runner.invoke(cli, ["-f", str(statement_file), "-u"])

    assert result.exit_code == 1
    assert "--account" in result.output
    assert "Error: Please specify the bank account" in result.output


def test_missing_ledger_file(cli_runner, statement_file, tmp_path):
    missing = tmp_path / "missing.ledger"

    result = cli_runner.invoke(
        cli, ["-f", str(statement_file), "-a", BANK_ACCOUNT, "-l", str(missing), "-u"]
    )

    assert result.exit_code == 1
    assert "doesn't exist" in result.output


def test_missing_statement(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, ["-f", str(tmp_path / "none.csv"), "-a", BANK_ACCOUNT])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_bad_rule_in_tokens(cli_runner, statement_file, tmp_path):
    tokens = tmp_path / "tokens.yml"
    tokens.write_text("Expenses:\n  Food:\n    - /oops\n", encoding="utf-8")

    result = cli_runner.invoke(
        cli, ["-f", str(statement_file), "-a", BANK_ACCOUNT, "-t", str(tokens), "-u"]
    )

    assert result.exit_code == 1
    assert "failed to parse regexp /oops" in result.output


def test_invalid_ignore_columns(cli_runner, statement_file):
    result = cli_runner.invoke(
        cli, ["-f", str(statement_file), "-p", "--ignore-columns", "a,b"]
    )

    assert result.exit_code == 2


def test_version(cli_runner):
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_format_transaction_table_empty():
    assert format_transaction_table([]) == "Date |Amount |Description |\n"


def test_domain_errors_exit_with_message(capsys):
    ctx = click.Context(cli)
    with pytest.raises(click.exceptions.Exit) as excinfo:
        with domain_errors(ctx):
            raise ConfigError("no account")

    assert excinfo.value.exit_code == 1
    assert capsys.readouterr().err == "Error: no account\n"


def test_domain_errors_let_other_errors_through():
    ctx = click.Context(cli)
    with pytest.raises(KeyError):
        with domain_errors(ctx):
            raise KeyError("bug")
