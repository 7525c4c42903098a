"""Apply placeholder tokens to paywall text fragments.

A fragment that mentions an absent placeholder is dropped as a whole, so a
line like "then </OFFER_PRICE/> per month" disappears for products without
an offer instead of showing the raw token.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import structlog

from models.components import TextComponent
from paywall.config import Settings, get_settings
from services.placeholders import Absent, PlaceholderToken, placeholder_literal

log = structlog.get_logger()


def render_fragment(
    fragment: str,
    tokens: Iterable[PlaceholderToken],
    settings: Settings | None = None,
) -> str | None:
    """Substitute bound tokens in ``fragment``; None if it must be dropped.

    Values are inserted verbatim in a single pass, so a value that happens to
    contain a placeholder literal is not expanded again.
    """
    settings = settings or get_settings()

    values: dict[str, str] = {}
    for token in tokens:
        literal = placeholder_literal(token.name, settings)
        if isinstance(token, Absent):
            if literal in fragment:
                log.debug("fragment_dropped", placeholder=token.name)
                return None
            continue
        values[literal] = token.value

    if not values:
        return fragment
    # longest first so a literal never shadows a longer one sharing its prefix
    pattern = re.compile("|".join(re.escape(literal) for literal in sorted(values, key=len, reverse=True)))
    return pattern.sub(lambda m: values[m.group(0)], fragment)


def render_text(
    text: TextComponent,
    tokens: Iterable[PlaceholderToken],
    settings: Settings | None = None,
) -> str:
    """Render every fragment of a text block, skipping dropped ones."""
    settings = settings or get_settings()
    tokens = tuple(tokens)
    rendered = (render_fragment(item, tokens, settings) for item in text.items)
    return "".join(part for part in rendered if part is not None)
