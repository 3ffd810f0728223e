"""
Scene token collector - which color tokens a node tree actually uses.
"""

from __future__ import annotations

import json
import logging

from chuk_mcp_tokens.models.scene import SceneNode
from chuk_mcp_tokens.tokens.naming import normalize_name, strip_custom_property_prefix
from chuk_mcp_tokens.tokens.store import TokenCache

logger = logging.getLogger(__name__)


def collect_color_token_ids(node: SceneNode) -> list[str]:
    """
    Collect ids of tokens bound to solid fill or stroke colors.

    Walks the whole subtree; ids are deduplicated in first-seen order.
    """
    found: list[str] = []

    def visit(current: SceneNode) -> None:
        for child in current.children or []:
            visit(child)
        for paint in [*(current.fills or []), *(current.strokes or [])]:
            token_id = paint.bound_color_id
            if token_id is not None:
                found.append(token_id)

    visit(node)
    return list(dict.fromkeys(found))


async def build_variable_map(node: SceneNode, cache: TokenCache) -> dict[str, str]:
    """
    Map each color token id used under a node to its normalized name.

    Token lookups run concurrently. Ids the store cannot resolve are
    dropped.

    Returns:
        Token id to custom property name without the leading ``--``
    """
    ids = collect_color_token_ids(node)
    tokens = await cache.get_tokens(ids)

    variable_map: dict[str, str] = {}
    for token_id, token in zip(ids, tokens, strict=True):
        if token is None:
            logger.debug("Dropping unknown token %s", token_id)
            continue
        variable_map[token_id] = strip_custom_property_prefix(normalize_name(token.name))
    return variable_map


async def render_variable_map(node: SceneNode, cache: TokenCache) -> str:
    """Render the variable map as pretty-printed JSON."""
    return json.dumps(await build_variable_map(node, cache), indent=2)
