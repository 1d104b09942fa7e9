"""
Checked conversions across the domain/persistence boundary.

The domain uses Python ints and floats; the schema uses 32-bit and
16-bit integers and Numeric(19, 4) money. Values that do not fit raise
ValidationError instead of being truncated.
"""
import math
from decimal import Decimal, InvalidOperation
from numbers import Real

from northwind.domain.exceptions import ValidationError

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
SMALLINT_MAX = 2 ** 15 - 1

MONEY_SCALE = Decimal("0.0001")
# Numeric(19, 4): 15 integer digits
MONEY_LIMIT = Decimal(10) ** 15


def to_int32(value, field: str) -> int:
    """Narrow an identity to a signed 32-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{field} must be an integer, got: {type(value).__name__}",
            field=field,
        )

    if not INT32_MIN <= value <= INT32_MAX:
        raise ValidationError(
            f"{field} is out of range for a 32-bit integer: {value}",
            field=field,
        )

    return value


def to_quantity(value, field: str = "quantity") -> int:
    """Check a line quantity: a positive integer that fits a SMALLINT."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{field} must be an integer, got: {type(value).__name__}",
            field=field,
        )

    if value <= 0:
        raise ValidationError(
            f"OrderDetail quantity must be greater than 0. Got: {value}",
            field=field,
        )

    if value > SMALLINT_MAX:
        raise ValidationError(
            f"{field} is out of range (max {SMALLINT_MAX}): {value}",
            field=field,
        )

    return value


def to_money(value, field: str) -> Decimal:
    """Convert a float amount to Numeric(19, 4)."""
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValidationError(
            f"{field} must be a number, got: {type(value).__name__}",
            field=field,
        )

    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"{field} must be finite, got: {value}", field=field)

    try:
        amount = Decimal(str(value)).quantize(MONEY_SCALE)
    except InvalidOperation as e:
        raise ValidationError(f"{field} is not a valid amount: {value}", field=field) from e

    if not amount.is_finite() or abs(amount) >= MONEY_LIMIT:
        raise ValidationError(f"{field} is out of range for money: {value}", field=field)

    return amount


def to_discount(value, field: str = "discount") -> float:
    """Convert a discount fraction. Range is the caller's concern."""
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValidationError(
            f"{field} must be a number, got: {type(value).__name__}",
            field=field,
        )

    discount = float(value)
    if not math.isfinite(discount):
        raise ValidationError(f"{field} must be finite, got: {value}", field=field)

    return discount


def from_money(value) -> float:
    """Widen a stored Numeric amount to the domain float. Missing is 0.0."""
    if value is None:
        return 0.0
    return float(value)
