"""Value models: product offers and layout components."""

from models.components import (
    ButtonComponent,
    Component,
    ShapeComponent,
    TextComponent,
    parse_component,
    parse_components,
)
from models.products import BillingPeriod, DiscountPhase, Money, ProductOffer

__all__ = [
    "BillingPeriod",
    "ButtonComponent",
    "Component",
    "DiscountPhase",
    "Money",
    "ProductOffer",
    "ShapeComponent",
    "TextComponent",
    "parse_component",
    "parse_components",
]
