"""Product cell layout: subtitle variants and the products block.

The subtitle shown under a product depends on its first discount phase
(free trial, pay as you go, pay upfront). Layouts may define any subset of
the four variants; the default one is the fallback for everything else.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal, TypeVar

from models.components import ButtonComponent, ShapeComponent, TextComponent
from models.products import ProductOffer
from paywall.constants import PAYMENT_FREE_TRIAL, PAYMENT_PAY_AS_YOU_GO, PAYMENT_PAY_UPFRONT
from paywall.exceptions import UnsupportedBlockTypeError

_C = TypeVar("_C", TextComponent, ShapeComponent, ButtonComponent)

# ---------------------------------------------------------------------------
# Subtitle variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SubtitleVariantSet:
    default: TextComponent | None = None
    pay_upfront: TextComponent | None = None
    pay_as_you_go: TextComponent | None = None
    free_trial: TextComponent | None = None

    def slots(self) -> tuple[TextComponent | None, ...]:
        """Slots in lookup order: default, pay upfront, pay as you go, free trial."""
        return (self.default, self.pay_upfront, self.pay_as_you_go, self.free_trial)


def resolve_subtitle(variants: SubtitleVariantSet, offer: ProductOffer) -> TextComponent | None:
    """Pick the subtitle for the offer's discount phase, falling back to default."""
    phase = offer.first_discount_phase
    payment_mode = phase.payment_mode if phase else None

    if payment_mode == PAYMENT_FREE_TRIAL:
        selected = variants.free_trial
    elif payment_mode == PAYMENT_PAY_AS_YOU_GO:
        selected = variants.pay_as_you_go
    elif payment_mode == PAYMENT_PAY_UPFRONT:
        selected = variants.pay_upfront
    else:
        selected = variants.default

    return selected if selected is not None else variants.default


def has_any_subtitle(variants: SubtitleVariantSet) -> bool:
    return any(slot is not None for slot in variants.slots())


# ---------------------------------------------------------------------------
# Product cell schema
# ---------------------------------------------------------------------------


def _pick(components: Mapping[str, Any], key: str, expected: type[_C]) -> _C | None:
    """Component under ``key`` if it has the expected type, else None."""
    value = components.get(key)
    return value if isinstance(value, expected) else None


@dataclass(frozen=True, slots=True)
class ProductInfo:
    """Components of one product cell, keyed by their layout names."""

    title: TextComponent | None
    subtitles: SubtitleVariantSet
    second_title: TextComponent | None
    second_subtitle: TextComponent | None
    button: ButtonComponent | None
    tag_text: TextComponent | None
    tag_shape: ShapeComponent | None

    @classmethod
    def from_components(cls, components: Mapping[str, Any], *, is_main_product: bool) -> ProductInfo:
        """Read the known keys; missing or mistyped entries become None.

        The tag (text and shape) is only shown on the main product.
        """
        return cls(
            title=_pick(components, "title", TextComponent),
            subtitles=SubtitleVariantSet(
                default=_pick(components, "subtitle", TextComponent),
                pay_upfront=_pick(components, "subtitle_payupfront", TextComponent),
                pay_as_you_go=_pick(components, "subtitle_payasyougo", TextComponent),
                free_trial=_pick(components, "subtitle_freetrial", TextComponent),
            ),
            second_title=_pick(components, "second_title", TextComponent),
            second_subtitle=_pick(components, "second_subtitle", TextComponent),
            button=_pick(components, "button", ButtonComponent),
            tag_text=_pick(components, "tag_text", TextComponent) if is_main_product else None,
            tag_shape=_pick(components, "tag_shape", ShapeComponent) if is_main_product else None,
        )

    @property
    def has_subtitle(self) -> bool:
        return has_any_subtitle(self.subtitles)

    def subtitle_for(self, offer: ProductOffer) -> TextComponent | None:
        return resolve_subtitle(self.subtitles, offer)


# ---------------------------------------------------------------------------
# Products block
# ---------------------------------------------------------------------------

BlockType = Literal["single", "vertical", "horizontal"]

BLOCK_TYPES: tuple[str, ...] = ("single", "vertical", "horizontal")
_MULTIPLE_BLOCK_TYPES = frozenset({"vertical", "horizontal"})


def parse_block_type(value: str) -> BlockType:
    """Normalize a layout block type name.

    Raises ``UnsupportedBlockTypeError`` for unknown names.
    """
    normalized = value.strip().lower()
    if normalized not in BLOCK_TYPES:
        raise UnsupportedBlockTypeError(f"Unsupported products block type: {value!r}")
    return normalized  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class ProductsBlock:
    products: tuple[ProductInfo, ...]
    block_type: BlockType

    @property
    def is_multiple(self) -> bool:
        """Vertical and horizontal blocks list several products side by side."""
        return self.block_type in _MULTIPLE_BLOCK_TYPES


def build_products_block(
    cells: Sequence[Mapping[str, Any]],
    block_type: str,
    *,
    main_product_index: int | None = 0,
) -> ProductsBlock:
    """Assemble a products block from per-cell component mappings."""
    products = tuple(
        ProductInfo.from_components(cell, is_main_product=index == main_product_index)
        for index, cell in enumerate(cells)
    )
    return ProductsBlock(products=products, block_type=parse_block_type(block_type))
