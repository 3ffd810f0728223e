"""
Token models - the read-only snapshot of a host variable store.

A token store contains:
- Collections (named groups of tokens sharing a set of modes)
- Modes (named variant axes within a collection, e.g. day/dusk/night)
- Tokens (named values, one per mode of the owning collection)

Token values are an explicit tagged union discriminated on ``type``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from chuk_mcp_tokens.constants import ValueType


class NumberValue(BaseModel):
    """A numeric token value (sizes, spacing, font weights)."""

    type: Literal["FLOAT"] = "FLOAT"
    value: float

    model_config = {"frozen": True}


class StringValue(BaseModel):
    """A string token value (font families, keywords)."""

    type: Literal["STRING"] = "STRING"
    value: str

    model_config = {"frozen": True}


class ColorValue(BaseModel):
    """
    An RGBA color with channels between 0 and 1.

    Channels are not range-checked here; malformed channels surface
    when the color is rendered.
    """

    type: Literal["COLOR"] = "COLOR"
    r: float
    g: float
    b: float
    a: float = 1.0

    model_config = {"frozen": True}


class AliasValue(BaseModel):
    """A reference to another token, possibly in another collection."""

    type: Literal["VARIABLE_ALIAS"] = "VARIABLE_ALIAS"
    id: str = Field(..., description="Target token id")

    model_config = {"frozen": True}


TokenValue = Annotated[
    NumberValue | StringValue | ColorValue | AliasValue,
    Field(discriminator="type"),
]

_token_value_adapter: TypeAdapter[Any] = TypeAdapter(TokenValue)

_TAGGED_TYPES = {ValueType.NUMBER.value, ValueType.STRING.value, ValueType.COLOR.value}


def parse_token_value(raw: Any) -> NumberValue | StringValue | ColorValue | AliasValue:
    """
    Convert a host payload into a tagged token value.

    Accepts the host's untagged shapes (bare numbers, bare strings,
    ``{"r", "g", "b", "a"}`` colors, ``{"type": "VARIABLE_ALIAS", "id"}``
    aliases) as well as already tagged values.

    Raises:
        ValueError: If the payload is not one of the supported variants
    """
    if isinstance(raw, NumberValue | StringValue | ColorValue | AliasValue):
        return raw
    # bool is an int subclass, and boolean tokens have no CSS rendering
    if isinstance(raw, bool):
        raise ValueError(f"Unsupported token value: {raw!r}")
    if isinstance(raw, int | float):
        return NumberValue(value=raw)
    if isinstance(raw, str):
        return StringValue(value=raw)
    if isinstance(raw, dict):
        kind = raw.get("type")
        if kind == ValueType.ALIAS.value:
            token_id = raw.get("id")
            if not isinstance(token_id, str):
                raise ValueError(f"Alias without a token id: {raw!r}")
            return AliasValue(id=token_id)
        if kind in _TAGGED_TYPES:
            return _token_value_adapter.validate_python(raw)
        if {"r", "g", "b"} <= raw.keys():
            return ColorValue(r=raw["r"], g=raw["g"], b=raw["b"], a=raw.get("a", 1.0))
    raise ValueError(f"Unsupported token value: {raw!r}")


class Mode(BaseModel):
    """A named variant axis of a collection."""

    mode_id: str = Field(..., alias="modeId")
    name: str

    model_config = {"frozen": True, "populate_by_name": True}


class Collection(BaseModel):
    """
    A named group of tokens sharing a set of modes.

    The first mode is the implicit default when the collection has
    only one mode.
    """

    id: str
    name: str
    modes: list[Mode] = Field(..., min_length=1)

    model_config = {"frozen": True, "populate_by_name": True}

    def get_mode_by_id(self, mode_id: str) -> Mode | None:
        """Find a mode by id."""
        return next((m for m in self.modes if m.mode_id == mode_id), None)

    def get_mode_by_name(self, name: str) -> Mode | None:
        """Find a mode by its display name."""
        return next((m for m in self.modes if m.name == name), None)

    @property
    def mode_names(self) -> list[str]:
        return [m.name for m in self.modes]


class Token(BaseModel):
    """
    A named design value with one value per mode.

    Remote tokens live in a linked library: they can be fetched by id
    but are not part of the local token listing.
    """

    id: str
    name: str
    collection_id: str = Field(..., alias="variableCollectionId")
    values_by_mode: dict[str, TokenValue] = Field(default_factory=dict, alias="valuesByMode")
    remote: bool = False

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("values_by_mode", mode="before")
    @classmethod
    def parse_values(cls, v: Any) -> Any:
        """Accept untagged host payloads."""
        if isinstance(v, dict):
            return {mode_id: parse_token_value(raw) for mode_id, raw in v.items()}
        return v

    def value_for_mode(self, mode_id: str) -> NumberValue | StringValue | ColorValue | AliasValue | None:
        """Get the value for a mode, or None if the token has none."""
        return self.values_by_mode.get(mode_id)
