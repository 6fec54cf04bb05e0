"""Bank statement CSV parsing into normalized transactions."""

import csv
import io
import logging
import re
from pathlib import Path
from typing import Optional

from reckon.config import ReckonOptions
from reckon.domain.entities import Transaction
from reckon.domain.errors import ConfigError, ParseError, file_not_found
from reckon.utils.amount_parser import format_money, parse_amount
from reckon.utils.date_parser import looks_like_date, parse_date

logger = logging.getLogger(__name__)

_SNIFF_DELIMITERS = ",;\t|"
_MONEY_SHAPE_RE = re.compile(r"[.,]\d{2}\)?-?$|^\(?-?[$€£¥]")


class StatementParser:
    """Turn the text of a bank statement CSV into transactions.

    Column numbers in options are 1-based, as typed on the command line.
    """

    def __init__(self, text: str, options: ReckonOptions):
        self.options = options
        self.rows = self._read_rows(text)
        self._ignored = {column - 1 for column in options.ignore_columns}
        self.date_index, self.money_index = self._resolve_columns()

    @classmethod
    def from_file(cls, path: str, options: ReckonOptions) -> "StatementParser":
        """Read and parse a statement file.

        Raises:
            ConfigError: If the file does not exist
        """
        csv_path = Path(path)
        if not csv_path.exists():
            raise ConfigError(file_not_found(path))
        return cls(csv_path.read_text(encoding=options.encoding), options)

    def _read_rows(self, text: str) -> list[list[str]]:
        delimiter = self.options.csv_separator
        if not delimiter:
            try:
                delimiter = csv.Sniffer().sniff(text[:4096], delimiters=_SNIFF_DELIMITERS).delimiter
            except csv.Error:
                delimiter = ","

        reader = csv.reader(io.StringIO(text), delimiter=delimiter)
        rows = [[cell.strip() for cell in row] for row in reader]
        rows = rows[self.options.contains_header:]
        return [row for row in rows if any(row)]

    def _column(self, index: int) -> list[str]:
        return [row[index] if index < len(row) else "" for row in self.rows]

    def _candidate_columns(self) -> list[int]:
        width = max((len(row) for row in self.rows), default=0)
        return [index for index in range(width) if index not in self._ignored]

    def _resolve_columns(self) -> tuple[int, int]:
        if not self.rows:
            return 0, 1

        candidates = self._candidate_columns()

        if self.options.date_column is not None:
            date_index = self.options.date_column - 1
        else:
            date_index = self._guess_date_column(candidates)

        if self.options.money_column is not None:
            money_index = self.options.money_column - 1
        else:
            money_index = self._guess_money_column(
                [index for index in candidates if index != date_index]
            )

        return date_index, money_index

    def _guess_date_column(self, candidates: list[int]) -> int:
        best, best_score = None, 0
        for index in candidates:
            score = sum(
                1 for cell in self._column(index) if looks_like_date(cell, self.options.date_format)
            )
            if score > best_score:
                best, best_score = index, score
        if best is None:
            raise ParseError("Could not find a date column in the statement (use --date-column)")
        return best

    def _guess_money_column(self, candidates: list[int]) -> int:
        best, best_score = None, 0
        for index in candidates:
            score = 0
            for cell in self._column(index):
                if self._parse_money(cell) is None:
                    continue
                score += 2 if _MONEY_SHAPE_RE.search(cell) else 1
            if score > best_score:
                best, best_score = index, score
        if best is None:
            raise ParseError("Could not find a money column in the statement (use --money-column)")
        return best

    def _parse_money(self, cell: str):
        try:
            return parse_amount(cell, self.options.comma_separates_cents)
        except ValueError:
            return None

    def description_for(self, row: list[str]) -> str:
        """Join every column that is neither date, money nor ignored."""
        parts = [
            cell
            for index, cell in enumerate(row)
            if index not in self._ignored
            and index not in (self.date_index, self.money_index)
            and cell
        ]
        return re.sub(r"\s+", " ", " ".join(parts)).strip()

    def _transaction_for(self, row_number: int, row: list[str]) -> Optional[Transaction]:
        date_cell = row[self.date_index] if self.date_index < len(row) else ""
        try:
            txn_date = parse_date(date_cell, self.options.date_format)
        except ValueError:
            logger.warning("Skipping row: '%s' that doesn't have a valid date", ",".join(row))
            return None

        money_cell = row[self.money_index] if self.money_index < len(row) else ""
        amount = self._parse_money(money_cell)
        if amount is None:
            raise ParseError(f"Row {row_number}: could not parse amount '{money_cell}'")
        if self.options.inverse:
            amount = -amount

        return Transaction(
            date=txn_date,
            formatted_date=txn_date.isoformat(),
            signed_amount=amount,
            formatted_amount=format_money(amount, self.options.currency, self.options.suffixed),
            formatted_amount_negated=format_money(
                -amount, self.options.currency, self.options.suffixed
            ),
            description=self.description_for(row),
        )

    def transactions(self) -> list[Transaction]:
        """Return the statement's transactions sorted by date.

        Raises:
            ParseError: If a dated row has an unparseable amount
        """
        result = []
        for row_number, row in enumerate(self.rows, start=self.options.contains_header + 1):
            txn = self._transaction_for(row_number, row)
            if txn is not None:
                result.append(txn)
        return sorted(result, key=lambda txn: txn.date)
