"""
Tests for value formatting.

Tests cover:
- Number and color literals
- Font substitutions
- Aliases rendered as var() references
"""

import pytest

from chuk_mcp_tokens.models import AliasValue, ColorValue, NumberValue, StringValue
from chuk_mcp_tokens.tokens import MalformedValueError, TokenCache, ValueFormatter, color_to_css, format_number


class TestFormatNumber:
    """Tests for format_number."""

    def test_integral(self):
        assert format_number(8.0) == "8"
        assert format_number(0.0) == "0"

    def test_fractional(self):
        assert format_number(0.55) == "0.55"
        assert format_number(1.5) == "1.5"

    def test_non_finite(self):
        with pytest.raises(MalformedValueError):
            format_number(float("inf"))


class TestColorToCss:
    """Tests for color_to_css."""

    def test_opaque(self):
        assert color_to_css(ColorValue(r=1, g=0, b=0)) == "rgb(255, 0, 0)"

    def test_translucent(self):
        assert color_to_css(ColorValue(r=1, g=1, b=1, a=0.55)) == "rgb(255, 255, 255, 0.55)"

    def test_rounds_half_up(self):
        assert color_to_css(ColorValue(r=0.5, g=0.2, b=0)) == "rgb(128, 51, 0)"

    def test_nan_channel(self):
        with pytest.raises(MalformedValueError):
            color_to_css(ColorValue(r=float("nan"), g=0, b=0))

    def test_nan_alpha(self):
        with pytest.raises(MalformedValueError):
            color_to_css(ColorValue(r=0, g=0, b=0, a=float("nan")))


class TestValueFormatter:
    """Tests for ValueFormatter.format."""

    @pytest.mark.asyncio
    async def test_size_gets_px(self, cache: TokenCache):
        line = await ValueFormatter(cache).format(NumberValue(value=8), "--spacing-08")
        assert line == "  --spacing-08: 8px;\n"

    @pytest.mark.asyncio
    async def test_zero_gets_px(self, cache: TokenCache):
        line = await ValueFormatter(cache).format(NumberValue(value=0), "--border-width")
        assert line == "  --border-width: 0px;\n"

    @pytest.mark.asyncio
    async def test_font_weight_is_unitless(self, cache: TokenCache):
        line = await ValueFormatter(cache).format(NumberValue(value=400), "--body-font-weight")
        assert line == "  --body-font-weight: 400;\n"

    @pytest.mark.asyncio
    async def test_font_substitution(self, cache: TokenCache):
        line = await ValueFormatter(cache).format(StringValue(value="noto-sans"), "--font-family")
        assert line == "  --font-family: 'Noto Sans';\n"

    @pytest.mark.asyncio
    async def test_other_strings_quoted(self, cache: TokenCache):
        line = await ValueFormatter(cache).format(StringValue(value="Arial"), "--font-family")
        assert line == "  --font-family: 'Arial';\n"

    @pytest.mark.asyncio
    async def test_color(self, cache: TokenCache):
        line = await ValueFormatter(cache).format(ColorValue(r=0, g=0, b=1), "--blue")
        assert line == "  --blue: rgb(0, 0, 255);\n"

    @pytest.mark.asyncio
    async def test_alias_renders_var(self, cache: TokenCache):
        line = await ValueFormatter(cache).format(AliasValue(id="t:spacing"), "--button-padding")
        assert line == "  --button-padding: var(--spacing-08);\n"

    @pytest.mark.asyncio
    async def test_missing_alias_target(self, cache: TokenCache):
        line = await ValueFormatter(cache).format(AliasValue(id="t:missing"), "--button-padding")
        assert line == ""

    @pytest.mark.asyncio
    async def test_none(self, cache: TokenCache):
        assert await ValueFormatter(cache).format(None, "--anything") == ""

    @pytest.mark.asyncio
    async def test_malformed_color_propagates(self, cache: TokenCache):
        with pytest.raises(MalformedValueError):
            await ValueFormatter(cache).format(ColorValue(r=float("nan"), g=0, b=0), "--bad")
