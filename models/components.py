"""Layout components handed over by the paywall layout collaborator.

Only the fields this core reads are modeled; everything else in the layout
payload is ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

log = structlog.get_logger()


class TextComponent(BaseModel):
    """Formatted text block. ``items`` are the fragments placeholders live in."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    items: tuple[str, ...] = ()
    font: str | None = None
    size: float | None = None
    color: str | None = None


class ShapeComponent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["shape"] = "shape"
    background: str | None = None
    corner_radius: float | None = None


class ButtonComponent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["button"] = "button"
    title: TextComponent | None = None
    shape: ShapeComponent | None = None


Component = Annotated[
    Union[TextComponent, ShapeComponent, ButtonComponent],
    Field(discriminator="type"),
]

_COMPONENT_ADAPTER: TypeAdapter[Component] = TypeAdapter(Component)


def parse_component(raw: Any) -> Component | None:
    """Validate one layout entry. Returns None if it is not a known component."""
    if isinstance(raw, (TextComponent, ShapeComponent, ButtonComponent)):
        return raw
    try:
        return _COMPONENT_ADAPTER.validate_python(raw)
    except ValidationError:
        return None


def parse_components(raw: Mapping[str, Any]) -> dict[str, Component]:
    """Validate a key -> component mapping, skipping entries that do not parse."""
    components: dict[str, Component] = {}
    for key, value in raw.items():
        component = parse_component(value)
        if component is None:
            log.warning("component_skipped", key=key)
            continue
        components[key] = component
    return components
