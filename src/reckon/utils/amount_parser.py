"""Amount parsing and formatting utilities."""

from decimal import Decimal, InvalidOperation
import re

_CENTS = Decimal("0.01")


def parse_amount(amount_str: str, comma_separates_cents: bool = False) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45", "$-123.45", "-$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)
    - "123.45-" (trailing minus)
    - "12.50 EUR"
    - "100,50" when comma_separates_cents is set

    Args:
        amount_str: Amount string
        comma_separates_cents: Treat "," as the decimal separator

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    original = amount_str
    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1].strip()

    if amount_str.endswith("-"):
        is_negative = not is_negative
        amount_str = amount_str[:-1]

    # Drop currency symbols, codes and whitespace
    amount_str = re.sub(r"[^0-9.,+\-]", "", amount_str)

    if comma_separates_cents:
        amount_str = amount_str.replace(".", "").replace(",", ".")
    else:
        amount_str = amount_str.replace(",", "")

    if not re.search(r"\d", amount_str):
        raise ValueError(f"Could not parse amount '{original}'")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{original}': {e}") from e

    return -amount if is_negative else amount


def format_money(amount: Decimal, currency: str = "$", suffixed: bool = False) -> str:
    """Render an amount the way it is written into the journal.

    Examples:
        Decimal("-12.5") -> "$-12.50"
        Decimal("3") with currency "EUR", suffixed -> "3.00 EUR"
    """
    value = amount.quantize(_CENTS)
    if value == 0:
        value = abs(value)
    text = f"{value:.2f}"
    if suffixed:
        return f"{text} {currency}"
    return f"{currency}{text}"
