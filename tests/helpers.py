"""Factories for product offers used across the unit tests."""

from __future__ import annotations

from decimal import Decimal

from models.products import BillingPeriod, DiscountPhase, Money, ProductOffer


def make_offer(
    amount: str = "29.99",
    localized: str = "$29.99",
    unit: str | None = "YEAR",
    number_of_units: int = 1,
    discount: DiscountPhase | None = None,
    title: str = "Premium",
) -> ProductOffer:
    """Build a USD offer; pass unit=None for a product without a period."""
    period = BillingPeriod(unit=unit, number_of_units=number_of_units) if unit else None
    return ProductOffer(
        localized_title=title,
        price=Money(
            amount=Decimal(amount),
            currency_code="USD",
            currency_symbol="$",
            localized_string=localized,
        ),
        subscription_period=period,
        first_discount_phase=discount,
    )


def make_discount(payment_mode: str = "FREE_TRIAL", localized: str = "$0.00") -> DiscountPhase:
    return DiscountPhase(
        payment_mode=payment_mode,
        price=Money(amount=Decimal("0"), currency_code="USD", currency_symbol="$", localized_string=localized),
        localized_period="1 week",
        localized_number_of_periods="1",
    )
