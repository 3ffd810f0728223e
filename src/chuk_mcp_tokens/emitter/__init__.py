"""
Output emitters - token graph to CSS and JSON text.

The pipeline:
    TokenStore (host snapshot)
    → CssEmitter (collections, modes, tokens)
    → AliasResolver / ValueFormatter (per declaration)
    → CSS text, composed fragment by fragment
"""

from chuk_mcp_tokens.emitter.css import CssEmitter, StoreSnapshot
from chuk_mcp_tokens.emitter.passthrough import render_css, rewrite_references
from chuk_mcp_tokens.emitter.report import GenerationReport
from chuk_mcp_tokens.emitter.scene import (
    build_variable_map,
    collect_color_token_ids,
    render_variable_map,
)

__all__ = [
    "CssEmitter",
    "GenerationReport",
    "StoreSnapshot",
    "build_variable_map",
    "collect_color_token_ids",
    "render_css",
    "render_variable_map",
    "rewrite_references",
]
