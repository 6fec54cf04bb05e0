"""Rendering of accepted transactions as journal entries."""

from reckon.domain.entities import Transaction


def format_ledger_entry(
    transaction: Transaction, line1: tuple[str, str], line2: tuple[str, str]
) -> str:
    """Return a two-posting journal entry.

    Args:
        transaction: Statement transaction
        line1: (account, amount) of the first posting
        line2: (account, amount) of the second posting

    Returns:
        Entry text, terminated by a blank line
    """
    out = f"{transaction.formatted_date}\t{transaction.description}\n"
    out += f"\t{line1[0]}\t\t\t\t\t{line1[1]}\n"
    out += f"\t{line2[0]}\t\t\t\t\t{line2[1]}\n\n"
    return out


def entry_lines(
    transaction: Transaction, bank_account: str, account: str
) -> tuple[tuple[str, str], tuple[str, str]]:
    """Return the two postings for a transaction classified as account.

    Income is written bank first; spending is written with the destination
    account first.
    """
    if transaction.is_income:
        return (
            (bank_account, transaction.formatted_amount),
            (account, transaction.formatted_amount_negated),
        )
    return (
        (account, transaction.formatted_amount_negated),
        (bank_account, transaction.formatted_amount),
    )
