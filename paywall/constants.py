"""Shared constants for the paywall offer core.

Centralizes placeholder names, period units and rounding scales so the
pricing, placeholder and templating modules agree on the same literals.
"""

from typing import Literal

# Billing period units as delivered by the product catalog
PeriodUnit = Literal["DAY", "WEEK", "MONTH", "YEAR", "UNKNOWN"]
TargetUnit = Literal["DAY", "WEEK", "MONTH", "YEAR"]

PERIOD_DAY: str = "DAY"
PERIOD_WEEK: str = "WEEK"
PERIOD_MONTH: str = "MONTH"
PERIOD_YEAR: str = "YEAR"

# Only these source units can be spread over another unit
CONVERTIBLE_SOURCE_UNITS: frozenset[str] = frozenset({PERIOD_WEEK, PERIOD_MONTH, PERIOD_YEAR})

# Day-count approximation used for cross-unit conversion
DAYS_PER_UNIT: dict[str, int] = {
    PERIOD_YEAR: 365,
    PERIOD_MONTH: 30,
    PERIOD_WEEK: 7,
    PERIOD_DAY: 1,  # target side only
}

# Fractional digits (always rounded toward +inf)
PER_DAY_SCALE = 4
DISPLAY_SCALE = 2

# Discount phase payment modes
PaymentMode = Literal["FREE_TRIAL", "PAY_AS_YOU_GO", "PAY_UPFRONT"]

PAYMENT_FREE_TRIAL: str = "FREE_TRIAL"
PAYMENT_PAY_AS_YOU_GO: str = "PAY_AS_YOU_GO"
PAYMENT_PAY_UPFRONT: str = "PAY_UPFRONT"

# Placeholder identifiers, in the order the templating layer receives them
PH_TITLE: str = "TITLE"
PH_PRICE: str = "PRICE"
PH_PRICE_PER_DAY: str = "PRICE_PER_DAY"
PH_PRICE_PER_WEEK: str = "PRICE_PER_WEEK"
PH_PRICE_PER_MONTH: str = "PRICE_PER_MONTH"
PH_PRICE_PER_YEAR: str = "PRICE_PER_YEAR"
PH_OFFER_PRICE: str = "OFFER_PRICE"
PH_OFFER_PERIOD: str = "OFFER_PERIOD"
PH_OFFER_NUMBER_OF_PERIOD: str = "OFFER_NUMBER_OF_PERIOD"

PLACEHOLDER_NAMES: tuple[str, ...] = (
    PH_TITLE,
    PH_PRICE,
    PH_PRICE_PER_DAY,
    PH_PRICE_PER_WEEK,
    PH_PRICE_PER_MONTH,
    PH_PRICE_PER_YEAR,
    PH_OFFER_PRICE,
    PH_OFFER_PERIOD,
    PH_OFFER_NUMBER_OF_PERIOD,
)

# Placeholders whose value is an amount of money in the product currency
CURRENCY_PLACEHOLDERS: frozenset[str] = frozenset(
    {
        PH_PRICE,
        PH_PRICE_PER_DAY,
        PH_PRICE_PER_WEEK,
        PH_PRICE_PER_MONTH,
        PH_PRICE_PER_YEAR,
        PH_OFFER_PRICE,
    }
)
