"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from famledger.domain.errors import InvalidInputError

# "1,234.56": commas group thousands, the dot (if any) marks decimals
_COMMA_THOUSANDS_RE = re.compile(r"^\d{1,3}(,\d{3})+(\.\d+)?$")
# "12,50" or "1.234,56": the comma marks decimals, dots group thousands
_COMMA_DECIMAL_RE = re.compile(r"^(\d+|\d{1,3}(\.\d{3})+),\d{1,2}$")


def _normalize_separators(cleaned: str, amount_str: str) -> str:
    if "," not in cleaned:
        return cleaned
    if _COMMA_DECIMAL_RE.match(cleaned):
        return cleaned.replace(".", "").replace(",", ".")
    if _COMMA_THOUSANDS_RE.match(cleaned):
        return cleaned.replace(",", "")
    raise InvalidInputError(
        f"Ambiguous amount '{amount_str}'. Use '1234.56', '1,234.56' or '1.234,56'"
    )


def parse_amount(amount_str: str) -> Decimal:
    """Parse a user-entered amount string into a positive Decimal.

    Handles various formats:
    - "123.45"
    - "R$ 123.45"
    - "$123.45"
    - "1,234.56"
    - "R$ 12,50" and "1.234,56" (comma as decimal separator)

    A comma followed by one or two final digits is the decimal separator.
    Any other comma must group thousands in threes, otherwise the amount is
    rejected. The sign of a transaction comes from its type, so negative or
    zero amounts are rejected.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount greater than zero

    Raises:
        InvalidInputError: If amount string cannot be parsed or is not positive
    """
    if amount_str is None or not str(amount_str).strip():
        raise InvalidInputError("Empty amount string")

    # Remove currency symbols
    cleaned = re.sub(r"R\$|[$€£¥]", "", str(amount_str).strip()).strip()
    cleaned = _normalize_separators(cleaned, amount_str)

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidInputError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise InvalidInputError(f"Could not parse amount '{amount_str}'")
    if amount <= 0:
        raise InvalidInputError(f"Amount must be greater than zero, got '{amount_str}'")
    return amount
