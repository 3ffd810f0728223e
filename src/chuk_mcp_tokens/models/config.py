"""
Generator configuration models.

A config bundles the policy the generator applies to one token store:
which mode to read from multi-mode collections, which collections are
never resolved, and which collections become primitive and palette blocks.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import CATEGORICAL_COLLECTION


class PaletteConfig(BaseModel):
    """Settings for the theme-scoped palette blocks."""

    collection: str = Field(
        default="Palette",
        description="Name of the collection flattened to literal values",
    )
    theme_attribute: str = Field(
        default="data-theme",
        description="Attribute selecting the theme on :root",
    )
    default_theme: str = Field(
        default="day",
        description="Mode (lower-cased) that also applies to bare :root",
    )

    model_config = {"frozen": True}


class ModeBlockSet(BaseModel):
    """A primitive collection emitted as one class block per mode."""

    collection: str
    css_prefix: str = Field(..., description="Selector prefix, the lower-cased mode name is appended")
    root_mode: str = Field(
        default="regular",
        description="Mode (lower-cased) that also applies to bare :root",
    )

    model_config = {"frozen": True}


class PinnedSet(BaseModel):
    """A primitive collection flattened at a single mode."""

    collection: str
    mode: str = Field(..., description="Mode name used when the collection has several modes")

    model_config = {"frozen": True}


class PrimitivesConfig(BaseModel):
    """Size and typography collections rendered as var() references."""

    mode_blocks: list[ModeBlockSet] = Field(default_factory=list)
    pinned: list[PinnedSet] = Field(default_factory=list)

    model_config = {"frozen": True}


class GeneratorConfig(BaseModel):
    """
    Policy for one generation run.

    The named mode defaults are injected into the mode selector. The
    bundled table lives in ``config/library/default.yaml``; a config built
    without one selects modes by override only.
    """

    schema_version: str = Field("config/v1", alias="schema")
    name: str = Field(..., description="Config name")
    description: str = Field("", description="Config description")

    mode_defaults: dict[str, str] = Field(
        default_factory=dict,
        description="Collection name to preferred mode name",
    )
    suppressed_collections: list[str] = Field(
        default_factory=lambda: [CATEGORICAL_COLLECTION],
        description="Collections whose aliases are omitted instead of resolved",
    )
    palette: PaletteConfig = Field(default_factory=PaletteConfig)
    primitives: PrimitivesConfig = Field(default_factory=PrimitivesConfig)
    max_alias_depth: int = Field(
        default=32,
        ge=1,
        description="Longest alias chain followed before it is treated as a cycle",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "mode_defaults": dict(self.mode_defaults),
            "suppressed_collections": list(self.suppressed_collections),
            "palette": self.palette.model_dump(),
            "primitives": {
                "mode_blocks": [b.model_dump() for b in self.primitives.mode_blocks],
                "pinned": [p.model_dump() for p in self.primitives.pinned],
            },
            "max_alias_depth": self.max_alias_depth,
        }


class ConfigMetadata(BaseModel):
    """Lightweight metadata for listing configs."""

    name: str
    description: str
    palette_collection: str
    mode_default_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> ConfigMetadata:
        """Create metadata from a config."""
        return cls(
            name=config.name,
            description=config.description,
            palette_collection=config.palette.collection,
            mode_default_count=len(config.mode_defaults),
        )
