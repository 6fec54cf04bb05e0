"""Interactive review of statement transactions."""

from dataclasses import replace
from typing import Callable, Iterable, Optional

import click

from reckon.domain.entities import Transaction
from reckon.domain.session import ClassificationSession

QUIT_ANSWERS = ("quit", "q")
SKIP_ANSWERS = ("skip", "s")
DESCRIBE_ANSWERS = ("describe", "d")
COMMAND_OPTIONS = "[account]/[q]uit/[s]kip/[d]escribe"
MAX_SHOWN_SUGGESTIONS = 5


def format_transaction_table(transactions: Iterable[Transaction]) -> str:
    """Render a Date/Amount/Description table with right-justified columns."""
    rows = [("Date", "Amount", "Description")]
    rows += [(t.formatted_date, t.formatted_amount, t.description) for t in transactions]
    widths = [max(len(row[i]) for row in rows) for i in range(3)]

    lines = []
    for row in rows:
        lines.append("".join(f"{cell:>{width}} |" for cell, width in zip(row, widths)))
    return "\n".join(lines) + "\n"


class ReviewLoop:
    """Walk transactions in date order, asking for (or guessing) accounts."""

    def __init__(
        self,
        session: ClassificationSession,
        write: Callable[[str], None],
        unattended: bool = False,
    ):
        """Initialize review loop.

        Args:
            session: Learned classification session
            write: Receives each finished journal entry
            unattended: Guess accounts instead of prompting
        """
        self.session = session
        self.write = write
        self.unattended = unattended

    def echo(self, message: str) -> None:
        if not self.unattended:
            click.echo(message)

    def run(self, transactions: Iterable[Transaction]) -> int:
        """Review transactions; return the number of entries written."""
        written = 0
        seen_anything_new = False

        for txn in transactions:
            self.echo(format_transaction_table([txn]))

            if self.session.already_seen(txn):
                self.echo("NOTE: This row is very similar to a previous one!")
                if not seen_anything_new:
                    self.echo("Skipping...")
                    continue
            else:
                seen_anything_new = True

            answer, txn = self.ask_account(txn)

            if answer in QUIT_ANSWERS:
                self.echo("Exiting.")
                break
            if answer in SKIP_ANSWERS:
                self.echo("Skipping")
                continue

            self.write(self.session.record_answer(txn, answer))
            written += 1

        return written

    def ask_account(self, txn: Transaction) -> tuple[str, Transaction]:
        """Ask which account the money came from or went to.

        Returns:
            (answer, transaction), where the transaction may carry a
            description edited by the user
        """
        if self.unattended:
            return self.session.guess_account(txn), txn

        if txn.is_income:
            question = f"Which account provided this income? ({COMMAND_OPTIONS})"
        else:
            question = f"To which account did this money go? ({COMMAND_OPTIONS})"

        while True:
            suggestions = self.session.unique_suggestions(txn)
            if suggestions:
                click.echo("Suggestions: " + ", ".join(suggestions[:MAX_SHOWN_SUGGESTIONS]))
            default: Optional[str] = suggestions[0] if suggestions else None

            answer = click.prompt(question, default=default).strip()
            if answer not in DESCRIBE_ANSWERS:
                return answer, txn

            description = click.prompt(
                "Enter a new description for this transaction (empty line aborts)",
                default="",
                show_default=False,
            ).strip()
            if description:
                txn = replace(txn, description=description)
            click.echo(format_transaction_table([txn]))
