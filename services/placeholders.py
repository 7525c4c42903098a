"""Placeholder tokens injected into paywall text blocks.

``build_placeholders`` always returns the nine tokens in PLACEHOLDER_NAMES
order. Each token is one of:

- ``Bound`` — plain value (title, offer period texts);
- ``BoundWithCurrency`` — money value plus the product currency, so the
  renderer can style the currency part;
- ``Absent`` — no value; the consumer drops the whole fragment that
  mentions the placeholder instead of showing the raw token.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from models.products import ProductOffer
from paywall.config import Settings, get_settings
from paywall.constants import (
    CURRENCY_PLACEHOLDERS,
    PERIOD_DAY,
    PERIOD_MONTH,
    PERIOD_WEEK,
    PERIOD_YEAR,
    PH_OFFER_NUMBER_OF_PERIOD,
    PH_OFFER_PERIOD,
    PH_OFFER_PRICE,
    PH_PRICE,
    PH_PRICE_PER_DAY,
    PH_PRICE_PER_MONTH,
    PH_PRICE_PER_WEEK,
    PH_PRICE_PER_YEAR,
    PH_TITLE,
    PLACEHOLDER_NAMES,
)
from services.pricing import derive_price_per_unit


@dataclass(frozen=True, slots=True)
class Bound:
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class BoundWithCurrency:
    name: str
    value: str
    currency_code: str
    currency_symbol: str


@dataclass(frozen=True, slots=True)
class Absent:
    name: str


PlaceholderToken = Union[Bound, BoundWithCurrency, Absent]


def placeholder_literal(name: str, settings: Settings | None = None) -> str:
    """Literal token as written in templates, ``</PRICE/>`` by default."""
    settings = settings or get_settings()
    return f"{settings.placeholder_prefix}{name}{settings.placeholder_suffix}"


def _token(name: str, value: str | None, offer: ProductOffer) -> PlaceholderToken:
    if value is None:
        return Absent(name)
    if name in CURRENCY_PLACEHOLDERS:
        return BoundWithCurrency(
            name=name,
            value=value,
            currency_code=offer.price.currency_code,
            currency_symbol=offer.price.currency_symbol,
        )
    return Bound(name, value)


def _placeholder_values(offer: ProductOffer) -> dict[str, str | None]:
    phase = offer.first_discount_phase
    return {
        PH_TITLE: offer.localized_title,
        PH_PRICE: offer.price.localized_string,
        PH_PRICE_PER_DAY: derive_price_per_unit(offer, PERIOD_DAY),
        PH_PRICE_PER_WEEK: derive_price_per_unit(offer, PERIOD_WEEK),
        PH_PRICE_PER_MONTH: derive_price_per_unit(offer, PERIOD_MONTH),
        PH_PRICE_PER_YEAR: derive_price_per_unit(offer, PERIOD_YEAR),
        PH_OFFER_PRICE: phase.price.localized_string if phase else None,
        PH_OFFER_PERIOD: phase.localized_period if phase else None,
        PH_OFFER_NUMBER_OF_PERIOD: phase.localized_number_of_periods if phase else None,
    }


def build_placeholders(offer: ProductOffer) -> tuple[PlaceholderToken, ...]:
    """Create the full token set for one product, in PLACEHOLDER_NAMES order."""
    values = _placeholder_values(offer)
    return tuple(_token(name, values[name], offer) for name in PLACEHOLDER_NAMES)
