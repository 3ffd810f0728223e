"""
Pydantic models for the token system.

This module provides:
- Token, Collection, Mode: The read-only token store snapshot
- TokenValue variants: NumberValue, StringValue, ColorValue, AliasValue
- TokenDocument: A complete exported store
- SceneNode, Paint: The host document tree
- GeneratorConfig: Mode defaults and block layout policy
- GenerationRequest, CodegenResult: The codegen surface
"""

from chuk_mcp_tokens.models.codegen import CodegenResult, GenerationRequest
from chuk_mcp_tokens.models.config import (
    ConfigMetadata,
    GeneratorConfig,
    ModeBlockSet,
    PaletteConfig,
    PinnedSet,
    PrimitivesConfig,
)
from chuk_mcp_tokens.models.document import TokenDocument
from chuk_mcp_tokens.models.scene import Paint, SceneNode
from chuk_mcp_tokens.models.token import (
    AliasValue,
    Collection,
    ColorValue,
    Mode,
    NumberValue,
    StringValue,
    Token,
    TokenValue,
    parse_token_value,
)

__all__ = [
    "AliasValue",
    "CodegenResult",
    "Collection",
    "ColorValue",
    "ConfigMetadata",
    "GenerationRequest",
    "GeneratorConfig",
    "Mode",
    "ModeBlockSet",
    "NumberValue",
    "Paint",
    "PaletteConfig",
    "PinnedSet",
    "PrimitivesConfig",
    "SceneNode",
    "StringValue",
    "Token",
    "TokenDocument",
    "TokenValue",
    "parse_token_value",
]
