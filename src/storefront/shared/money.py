"""Exact money arithmetic.

Amounts are persisted as integer cents. Conversions to and from decimal
amounts round half-up to the cent.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from protean.exceptions import ValidationError

CENT = Decimal("0.01")


def to_cents(amount) -> int:
    """Convert a decimal amount (``Decimal``, ``str``, ``int`` or ``float``) to integer cents."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise ValidationError({"amount": [f"Invalid monetary amount: {amount!r}"]}) from None
    if not value.is_finite():
        raise ValidationError({"amount": [f"Invalid monetary amount: {amount!r}"]})
    return int((value / CENT).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert integer cents to a ``Decimal`` amount with two decimal places."""
    return (Decimal(cents) * CENT).quantize(CENT)


def line_total(unit_price_cents: int, quantity: int) -> int:
    return unit_price_cents * quantity
