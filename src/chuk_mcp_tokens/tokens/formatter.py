"""
Value formatter - renders token values as CSS declarations.

Two rendering paths exist for aliases:
- Palette tokens are flattened by the AliasResolver first and reach the
  formatter as literals.
- Primitive tokens keep their aliases and render as ``var(--name)``
  so they stay late-bindable.
"""

from __future__ import annotations

import logging
import math

from chuk_mcp_tokens.constants import FONT_NAME_SUBSTITUTIONS
from chuk_mcp_tokens.models.token import AliasValue, ColorValue, NumberValue, StringValue
from chuk_mcp_tokens.tokens.errors import MalformedValueError
from chuk_mcp_tokens.tokens.naming import normalize_name
from chuk_mcp_tokens.tokens.store import TokenCache

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Render a number the way a host script prints it (8.0 -> '8')."""
    if not math.isfinite(value):
        raise MalformedValueError(f"Non-finite number: {value}")
    if value == int(value):
        return str(int(value))
    return repr(value)


def _channel(value: float) -> int:
    # Round half up, matching the host's Math.round
    return math.floor(value * 255 + 0.5)


def color_to_css(color: ColorValue) -> str:
    """
    Convert a color to a CSS ``rgb()`` literal.

    Channels are scaled to 0-255 and rounded. Translucent colors carry
    their raw fractional alpha as a fourth component.

    Raises:
        MalformedValueError: If any channel is not a finite number
    """
    channels = (color.r, color.g, color.b, color.a)
    if not all(math.isfinite(c) for c in channels):
        raise MalformedValueError(f"NaN: {color.model_dump_json()}")

    r, g, b = _channel(color.r), _channel(color.g), _channel(color.b)
    if color.a < 1:
        return f"rgb({r}, {g}, {b}, {format_number(color.a)})"
    return f"rgb({r}, {g}, {b})"


def declaration(css_name: str, literal: str) -> str:
    """Render one indented declaration line."""
    return f"  {css_name}: {literal};\n"


class ValueFormatter:
    """Renders one token value as a CSS declaration line."""

    def __init__(self, cache: TokenCache):
        """
        Initialize the formatter.

        Args:
            cache: Token lookups for rendering aliases as var() references
        """
        self.cache = cache

    async def format(
        self,
        value: NumberValue | StringValue | ColorValue | AliasValue | None,
        css_name: str,
    ) -> str:
        """
        Render a declaration for a value.

        Args:
            value: Value to render; None renders nothing
            css_name: Normalized custom property name

        Returns:
            ``"  <css_name>: <literal>;\\n"`` or an empty string

        Raises:
            MalformedValueError: For non-finite numbers or color channels
        """
        match value:
            case None:
                logger.warning("Value is null or undefined %s", css_name)
                return ""
            case NumberValue(value=number):
                if "font-weight" in css_name:
                    return declaration(css_name, format_number(number))
                return declaration(css_name, f"{format_number(number)}px")
            case StringValue(value=text):
                text = FONT_NAME_SUBSTITUTIONS.get(text, text)
                return declaration(css_name, f"'{text}'")
            case ColorValue():
                return declaration(css_name, color_to_css(value))
            case AliasValue(id=target_id):
                return await self._format_reference(target_id, css_name)

    async def _format_reference(self, target_id: str, css_name: str) -> str:
        """Render an alias as a var() reference to its target."""
        token = await self.cache.get_token(target_id)
        if token is None:
            logger.warning("Variable not found %s", target_id)
            return ""
        return declaration(css_name, f"var({normalize_name(token.name)})")
