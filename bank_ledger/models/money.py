"""
Amount parsing and formatting.

All balances and amounts are Decimal. Inputs arriving as
int, float or str are converted through str() so that a
float like 0.1 becomes Decimal("0.1") rather than its
binary approximation.
"""

from decimal import Decimal, InvalidOperation

from bank_ledger.errors import InvalidAmount


def to_amount(value) -> Decimal:
    """Convert a caller-supplied number to a finite Decimal."""
    if isinstance(value, bool):
        raise InvalidAmount(f"Invalid amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidAmount(f"Invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise InvalidAmount(f"Invalid amount: {value!r}")
    return amount


def format_money(amount: Decimal) -> str:
    """Format an amount for notification messages, e.g. $5200.00."""
    return f"${Decimal(amount):.2f}"
