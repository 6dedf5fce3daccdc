"""Invoice totals engine

Derives line amounts, subtotal and total of an invoice:

    amount         = quantity * rate                 (per item)
    subtotal       = sum(amount)
    after_discount = subtotal - discount             (may be negative)
    tax            = after_discount * tax_rate / 100
    total_amount   = after_discount + tax + shipping

All arithmetic is Decimal. Line amounts and tax are quantized to the
storage scale (6 places), so the stored total always equals the sum of
the stored components.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable, Tuple

MONEY_SCALE = Decimal("0.000001")
HUNDRED = Decimal(100)


class InvoiceTotalsError(ValueError):
    """Invalid invoice input (negative numbers, blank description, non-numeric values)"""
    pass


@dataclass(frozen=True)
class PricedItem:
    description: str
    quantity: Decimal
    rate: Decimal
    amount: Decimal


@dataclass(frozen=True)
class InvoiceTotals:
    items: Tuple[PricedItem, ...]
    subtotal: Decimal
    discount: Decimal
    after_discount: Decimal
    tax_rate: Decimal
    tax: Decimal
    shipping: Decimal
    total_amount: Decimal


def _to_decimal(value: Any, field: str) -> Decimal:
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, float):
        number = Decimal(str(value))
    else:
        try:
            number = Decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            raise InvoiceTotalsError(f"{field} must be a number, got {value!r}")

    if not number.is_finite():
        raise InvoiceTotalsError(f"{field} must be a finite number")
    if number < 0:
        raise InvoiceTotalsError(f"{field} must be >= 0, got {number}")
    return number


def _quantize(value: Decimal) -> Decimal:
    return value.quantize(MONEY_SCALE, rounding=ROUND_HALF_UP)


def price_item(description: str, quantity: Any, rate: Any, position: int = 0) -> PricedItem:
    if description is None or not str(description).strip():
        raise InvoiceTotalsError(f"items[{position}].description is required")

    qty = _to_decimal(quantity, f"items[{position}].quantity")
    unit_rate = _to_decimal(rate, f"items[{position}].rate")
    return PricedItem(
        description=str(description).strip(),
        quantity=qty,
        rate=unit_rate,
        amount=_quantize(qty * unit_rate),
    )


def recompute_totals(
    items: Iterable[Any],
    discount: Any = 0,
    tax_rate: Any = 0,
    shipping: Any = 0,
) -> InvoiceTotals:
    """
    Compute canonical invoice totals

    Args:
        items: Objects exposing description, quantity and rate
        discount: Absolute discount
        tax_rate: Tax rate in percent
        shipping: Absolute shipping charge

    Returns:
        InvoiceTotals with priced items and derived amounts

    Raises:
        InvoiceTotalsError: On negative or non-numeric inputs or blank descriptions
    """
    priced = tuple(
        price_item(item.description, item.quantity, item.rate, position)
        for position, item in enumerate(items)
    )

    discount_value = _to_decimal(discount, "discount")
    tax_rate_value = _to_decimal(tax_rate, "tax_rate")
    shipping_value = _to_decimal(shipping, "shipping")

    subtotal = sum((item.amount for item in priced), Decimal("0"))
    after_discount = subtotal - discount_value
    tax = _quantize(after_discount * tax_rate_value / HUNDRED)
    total_amount = _quantize(after_discount + tax + shipping_value)

    return InvoiceTotals(
        items=priced,
        subtotal=_quantize(subtotal),
        discount=discount_value,
        after_discount=_quantize(after_discount),
        tax_rate=tax_rate_value,
        tax=tax,
        shipping=shipping_value,
        total_amount=total_amount,
    )
