"""
Scene models - the part of a host document tree the generator reads.

Nodes expose children, fill and stroke paints, the host's computed CSS,
and the variable modes the host resolved for the node.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import SOLID_PAINT
from chuk_mcp_tokens.models.token import AliasValue


class Paint(BaseModel):
    """A fill or stroke paint, optionally bound to color tokens."""

    type: str = Field(..., description="Paint type (SOLID, GRADIENT_LINEAR, IMAGE, ...)")
    bound_variables: dict[str, AliasValue] = Field(
        default_factory=dict,
        alias="boundVariables",
        description="Paint field to bound token alias",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def bound_color_id(self) -> str | None:
        """Token id bound to the color of a solid paint."""
        if self.type != SOLID_PAINT:
            return None
        alias = self.bound_variables.get("color")
        return alias.id if alias else None


class SceneNode(BaseModel):
    """A node of the host document tree."""

    id: str = ""
    name: str = ""
    type: str = "FRAME"
    children: list[SceneNode] | None = None
    fills: list[Paint] | None = None
    strokes: list[Paint] | None = None
    css: dict[str, str] = Field(
        default_factory=dict,
        description="Host computed CSS properties for this node",
    )
    resolved_variable_modes: dict[str, str] = Field(
        default_factory=dict,
        alias="resolvedVariableModes",
        description="Collection id to mode id chosen by the host for this node",
    )

    model_config = {"frozen": True, "populate_by_name": True}
