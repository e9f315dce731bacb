"""Billing service utilities: invoice totals and paid status."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable

FILS = Decimal("0.001")
ZERO = Decimal("0.000")

PAID_STATUSES = ("unpaid", "partial", "paid")


@dataclass(frozen=True)
class InvoiceTotals:
    total: Decimal
    paid: Decimal
    balance: Decimal
    paid_status: str


def coerce_amount(value) -> Decimal:
    """Parse a currency amount to 3 decimal places; anything unparseable counts as zero."""
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return ZERO
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return ZERO
    if not amount.is_finite():
        return ZERO
    return amount.quantize(FILS, rounding=ROUND_HALF_UP)


def derive_paid_status(total: Decimal, paid: Decimal) -> str:
    balance = total - paid
    if balance <= 0 and total > 0:
        return "paid"
    if paid > 0:
        return "partial"
    return "unpaid"


def compute_invoice_totals(amounts: Iterable, paid=None, paid_status: str | None = None) -> InvoiceTotals:
    """Derive total, balance and paid status from line-item amounts and the paid amount.

    An explicit ``paid_status`` wins over the derived one; blank values are ignored.
    """
    total = sum((coerce_amount(amount) for amount in amounts), ZERO).quantize(FILS, rounding=ROUND_HALF_UP)
    paid_amount = coerce_amount(paid)
    balance = total - paid_amount
    status = paid_status if paid_status else derive_paid_status(total, paid_amount)
    if status not in PAID_STATUSES:
        raise ValueError(f"Unknown paid status: {status}")
    return InvoiceTotals(total=total, paid=paid_amount, balance=balance, paid_status=status)
