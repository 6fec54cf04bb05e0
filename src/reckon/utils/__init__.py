"""Utility functions for reckon."""

from reckon.utils.date_parser import parse_date
from reckon.utils.amount_parser import parse_amount, format_money
from reckon.utils.tokenizer import tokenize

__all__ = ["parse_date", "parse_amount", "format_money", "tokenize"]
