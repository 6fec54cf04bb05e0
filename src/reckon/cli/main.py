"""Main CLI entry point."""

import click

from reckon import __version__
from reckon.cli.error_handling import domain_errors
from reckon.cli.review import ReviewLoop, format_transaction_table
from reckon.config import ReckonOptions
from reckon.domain.errors import ConfigError, missing_bank_account
from reckon.domain.session import ClassificationSession
from reckon.logging_setup import configure_logging
from reckon.utils.statement_parser import StatementParser


def _parse_columns(ctx, param, value: str | None) -> tuple[int, ...]:
    if not value:
        return ()
    try:
        return tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError:
        raise click.BadParameter("expected a comma separated list of column numbers")


@click.command("reckon")
@click.option("-f", "--file", "csv_file", type=click.Path(), required=True, help="The CSV file to parse")
@click.option(
    "-a",
    "--account",
    "bank_account",
    envvar="RECKON_BANK_ACCOUNT",
    help="The Ledger Account this file is for",
)
@click.option("-v", "--verbose", is_flag=True, help="Run verbosely")
@click.option("-i", "--inverse", is_flag=True, help="Use the negative of each amount")
@click.option("-p", "--print-table", is_flag=True, help="Print out the parsed CSV in table form")
@click.option("-o", "--output-file", type=click.File("a"), help="The ledger file to append to")
@click.option("-l", "--learn-from", type=click.Path(), help="An existing ledger file to learn accounts from")
@click.option(
    "--ignore-columns",
    callback=_parse_columns,
    help="Columns to ignore in the CSV file, e.g. 1,2,5 - the first column is column 1",
)
@click.option("--money-column", type=int, help="Specify the money column - the first column is column 1")
@click.option("--date-column", type=int, help="Specify the date column - the first column is column 1")
@click.option(
    "--contains-header",
    type=int,
    is_flag=False,
    flag_value=1,
    default=0,
    help="The first row of the CSV is a header and should be skipped. Optionally the number of rows to skip.",
)
@click.option("--csv-separator", help="Separator for parsing the CSV - default is to detect it.")
@click.option(
    "--comma-separates-cents",
    is_flag=True,
    help="Use comma instead of period to delimit dollars from cents ($100,50 instead of $100.50)",
)
@click.option("--encoding", default="utf-8-sig", help="Specify an encoding for the CSV file")
@click.option("-c", "--currency", default="$", help="Currency symbol to use, defaults to $ (£, EUR)")
@click.option("--date-format", help="Force the date format, e.g. '%d/%m/%Y'")
@click.option(
    "-u",
    "--unattended",
    is_flag=True,
    help="Don't ask questions and guess all the accounts automatically.",
)
@click.option(
    "-t",
    "--account-tokens",
    type=click.Path(),
    help="YAML file with manually-assigned tokens for each account",
)
@click.option("--default-into-account", help="Default into account")
@click.option("--default-outof-account", help="Default 'out of' account")
@click.option("--suffixed", is_flag=True, help="Use --currency as a suffix")
@click.option(
    "--include-zero-scores",
    is_flag=True,
    help="Also suggest learned accounts that share no words with the description",
)
@click.version_option(__version__, prog_name="reckon")
@click.pass_context
def cli(
    ctx,
    csv_file: str,
    bank_account: str | None,
    verbose: bool,
    inverse: bool,
    print_table: bool,
    output_file,
    learn_from: str | None,
    ignore_columns: tuple[int, ...],
    money_column: int | None,
    date_column: int | None,
    contains_header: int,
    csv_separator: str | None,
    comma_separates_cents: bool,
    encoding: str,
    currency: str,
    date_format: str | None,
    unattended: bool,
    account_tokens: str | None,
    default_into_account: str | None,
    default_outof_account: str | None,
    suffixed: bool,
    include_zero_scores: bool,
):
    """Reckon - suggest Ledger accounts for bank statement transactions.

    Reads a bank statement CSV, learns from an existing ledger or an account
    tokens file, and writes a Ledger entry for every transaction you accept.
    """
    configure_logging("INFO" if verbose else None)

    if not bank_account and not print_table:
        if unattended:
            with domain_errors(ctx):
                raise ConfigError(missing_bank_account())
        bank_account = click.prompt(
            "What is the account name of this bank account in Ledger?",
            default="Assets:Bank:Checking",
        )

    options = ReckonOptions(
        bank_account=bank_account or "",
        currency=currency,
        suffixed=suffixed,
        comma_separates_cents=comma_separates_cents,
        inverse=inverse,
        account_tokens_file=account_tokens,
        existing_ledger_file=learn_from,
        unattended=unattended,
        default_into_account=default_into_account,
        default_outof_account=default_outof_account,
        include_zero_scores=include_zero_scores,
        date_format=date_format,
        date_column=date_column,
        money_column=money_column,
        ignore_columns=ignore_columns,
        contains_header=contains_header,
        csv_separator=csv_separator,
        encoding=encoding,
    )

    with domain_errors(ctx):
        transactions = StatementParser.from_file(csv_file, options).transactions()
        if print_table:
            click.echo(format_transaction_table(transactions), nl=False)
            return

        session = ClassificationSession(options)
        session.learn()

    def write(entry: str) -> None:
        if output_file is None:
            click.echo(entry, nl=False)
        else:
            output_file.write(entry)
            output_file.flush()

    ReviewLoop(session, write, unattended=unattended).run(transactions)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
