from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any

CENT = Decimal("0.01")
ZERO = Decimal("0")

# Amounts past 10**64 are not prices; they count as malformed.
MAX_EXPONENT = 64
# Enough digits to keep fee and tax arithmetic on capped amounts exact.
MONEY_PRECISION = 200


def to_decimal(value: Any, default: Decimal = ZERO) -> Decimal:
    """Coerce ``value`` to a finite Decimal, returning ``default`` otherwise.

    Booleans, NaN, infinities and absurd magnitudes count as malformed. Inputs
    come from loosely typed form fields, so ``"12.50"`` and ``12.5`` both work.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            return default
    if not result.is_finite() or result.adjusted() > MAX_EXPONENT:
        return default
    return result


def to_non_negative(value: Any) -> Decimal:
    amount = to_decimal(value)
    return amount if amount > ZERO else ZERO


def to_cents(amount: Decimal) -> Decimal:
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the two cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def money_context():
    """Decimal context for summing and scaling money without losing cents."""
    return localcontext(prec=MONEY_PRECISION)


def to_count(value: Any) -> int:
    """Whole, non-negative count (guests, units); malformed input is 0."""
    count = to_decimal(value)
    return int(count) if count > ZERO else 0
