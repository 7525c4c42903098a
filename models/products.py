"""Pydantic v2 models for purchasable subscription products.

Snapshots are built by the product catalog and never mutated afterwards.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from paywall.constants import PaymentMode, PeriodUnit
from paywall.exceptions import OfferPayloadError


class Money(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Decimal
    currency_code: str
    currency_symbol: str
    localized_string: str  # platform rendering of amount, e.g. "$29.99"

    @field_validator("amount", mode="before")
    @classmethod
    def _float_via_str(cls, v: Any) -> Any:
        # Decimal(0.1) keeps the binary error, Decimal("0.1") does not
        if isinstance(v, float):
            return str(v)
        return v


class BillingPeriod(BaseModel):
    model_config = ConfigDict(frozen=True)

    unit: PeriodUnit
    number_of_units: int  # may be <= 0 in bad catalog data


class DiscountPhase(BaseModel):
    model_config = ConfigDict(frozen=True)

    payment_mode: PaymentMode
    price: Money
    localized_period: str
    localized_number_of_periods: str


class ProductOffer(BaseModel):
    """Read-only product snapshot consumed by pricing and placeholder services."""

    model_config = ConfigDict(frozen=True)

    localized_title: str
    price: Money
    subscription_period: BillingPeriod | None = None
    first_discount_phase: DiscountPhase | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProductOffer":
        """Build an offer from a raw catalog mapping.

        Raises OfferPayloadError if the payload does not match the schema.
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise OfferPayloadError(f"Invalid product offer payload: {exc.error_count()} error(s)") from exc
