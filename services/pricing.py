"""Price-per-period normalization for subscription offers.

Spreads a product price over another time unit (e.g. a yearly price shown
"per month") and splices the result back into the platform-localized price
string, so currency symbol, spacing and sign placement stay as the store
rendered them.

Rounding is always toward +inf so a per-unit price is never under-quoted.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, ROUND_CEILING, Context, Decimal, localcontext

import structlog

from models.products import ProductOffer
from paywall.constants import (
    CONVERTIBLE_SOURCE_UNITS,
    DAYS_PER_UNIT,
    DISPLAY_SCALE,
    PER_DAY_SCALE,
    TargetUnit,
)

log = structlog.get_logger()

# Headroom above the integer digits of the amount: fraction digits kept per
# day plus the digits added by multiplying with a day count.
_PRECISION_MARGIN = PER_DAY_SCALE + 10
_MIN_PRECISION = 28


def _exponent(scale: int) -> Decimal:
    return Decimal(1).scaleb(-scale)


def _context_for(amount: Decimal) -> Context:
    """Ceiling context wide enough to hold ``amount`` at PER_DAY_SCALE digits.

    Independent of the caller's thread-local context; a division rounded up at
    this precision and then quantized up equals an exact division rounded up.
    """
    precision = max(_MIN_PRECISION, amount.adjusted() + _PRECISION_MARGIN)
    return Context(prec=precision, rounding=ROUND_CEILING, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _divide_up(amount: Decimal, divisor: int, scale: int) -> Decimal:
    return (amount / Decimal(divisor)).quantize(_exponent(scale), rounding=ROUND_CEILING)


def compute_price_per_unit(
    amount: Decimal,
    source_unit: str,
    number_of_units: int,
    target_unit: str,
) -> Decimal | None:
    """Price per ``target_unit`` rounded up to DISPLAY_SCALE digits.

    Returns None for sources that cannot be converted (DAY, UNKNOWN,
    non-positive unit count) and for non-finite amounts.
    """
    if source_unit not in CONVERTIBLE_SOURCE_UNITS or number_of_units <= 0:
        return None
    if target_unit not in DAYS_PER_UNIT or not amount.is_finite():
        return None

    with localcontext(_context_for(amount)):
        if source_unit == target_unit:
            per_unit = _divide_up(amount, number_of_units, PER_DAY_SCALE)
        else:
            per_day = _divide_up(amount, DAYS_PER_UNIT[source_unit] * number_of_units, PER_DAY_SCALE)
            per_unit = per_day * DAYS_PER_UNIT[target_unit]
        result = per_unit.quantize(_exponent(DISPLAY_SCALE), rounding=ROUND_CEILING)

    # ceiling of a small negative price is -0.00
    if result.is_zero():
        return result.copy_abs()
    return result


def format_plain(value: Decimal) -> str:
    """Render without grouping or exponent, '.' as decimal point."""
    return format(value, "f")


def splice_digits(localized: str, replacement: str) -> str:
    """Replace the first-to-last digit span of ``localized`` with ``replacement``.

    Everything between the first and last digit (decimal and grouping
    separators included) is replaced. Without digits the replacement is
    returned alone.
    """
    digit_positions = [i for i, ch in enumerate(localized) if ch.isdecimal()]
    if not digit_positions:
        return replacement
    start, end = digit_positions[0], digit_positions[-1]
    return localized[:start] + replacement + localized[end + 1 :]


def derive_price_per_unit(offer: ProductOffer, target_unit: TargetUnit) -> str | None:
    """Localized price of ``offer`` per ``target_unit``, or None if unavailable.

    A one-unit period already expressed in ``target_unit`` returns the
    localized price string untouched.
    """
    period = offer.subscription_period
    if period is None:
        log.debug("price_per_unit_unavailable", reason="no_period", target_unit=target_unit)
        return None
    if period.unit not in CONVERTIBLE_SOURCE_UNITS:
        log.debug("price_per_unit_unavailable", reason="unit", unit=period.unit, target_unit=target_unit)
        return None
    if period.number_of_units <= 0:
        log.debug(
            "price_per_unit_unavailable",
            reason="number_of_units",
            number_of_units=period.number_of_units,
            target_unit=target_unit,
        )
        return None

    localized = offer.price.localized_string
    if period.unit == target_unit and period.number_of_units == 1:
        return localized

    per_unit = compute_price_per_unit(offer.price.amount, period.unit, period.number_of_units, target_unit)
    if per_unit is None:
        log.debug("price_per_unit_unavailable", reason="target_unit", target_unit=target_unit)
        return None
    return splice_digits(localized, format_plain(per_unit))
