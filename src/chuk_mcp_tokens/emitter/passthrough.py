"""
Pass-through CSS - cleans up the host's computed CSS for a node.

The host writes token references as ``var(--Palette/Primary, #fff)``.
These are rewritten to normalized names without the fallback value,
so the output matches the generated stylesheet. The token graph is not
consulted.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from chuk_mcp_tokens.tokens.naming import normalize_name

# var(<name>, <fallback>) with at most one nested (...) group in the fallback
CSS_CUSTOM_PROPERTY_PATTERN = re.compile(r"var\(([^)(]*?),([^)(]*?)(\(.*?\))?\)")


def rewrite_references(value: str) -> str:
    """Rename var() references and drop their fallback values."""

    def replace(match: re.Match[str]) -> str:
        name = match.group(1).replace("--", "")
        return f"var({normalize_name(name)})"

    return CSS_CUSTOM_PROPERTY_PATTERN.sub(replace, value)


def render_css(properties: Mapping[str, str]) -> str:
    """
    Render a host CSS property map as declaration lines.

    Args:
        properties: Property name to host value, in host order

    Returns:
        ``key: value;`` lines joined by newlines
    """
    return "\n".join(f"{key}: {rewrite_references(value)};" for key, value in properties.items())
