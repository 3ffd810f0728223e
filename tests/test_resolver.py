"""
Tests for alias resolution.

Tests cover:
- Cross-collection hops through the mode selector
- Same-collection hops keeping the current mode
- Suppression, missing references and mode failures
- Cycle detection
"""

import pytest
from conftest import alias, collection, host_export, rgb, variable

from chuk_mcp_tokens.constants import SelectionOutcome
from chuk_mcp_tokens.models import AliasValue, ColorValue, NumberValue, TokenDocument
from chuk_mcp_tokens.tokens import (
    AliasCycleError,
    AliasResolver,
    InMemoryTokenStore,
    MissingReferenceError,
    MissingValueError,
    ModeNotFoundError,
    ModeSelector,
    TokenCache,
)

MODE_DEFAULTS = {"Color-primitives-day": "WCAG"}


def make_resolver(document: TokenDocument, overrides=None, max_depth: int = 32) -> AliasResolver:
    palette = document.get_collection_by_name("Palette")
    return AliasResolver(
        TokenCache(InMemoryTokenStore(document)),
        ModeSelector(MODE_DEFAULTS),
        scope=palette,
        overrides=overrides,
        max_depth=max_depth,
    )


def palette_mode(document: TokenDocument, name: str):
    return document.get_collection_by_name("Palette").get_mode_by_name(name)


class TestAliasResolver:
    """Tests for AliasResolver.resolve."""

    @pytest.mark.asyncio
    async def test_literal_unchanged(self, document: TokenDocument):
        value = NumberValue(value=4)
        assert await make_resolver(document).resolve(value, palette_mode(document, "Day")) == value

    @pytest.mark.asyncio
    async def test_cross_collection_uses_named_default(self, document: TokenDocument):
        """Color-primitives-day reads its WCAG mode."""
        value = await make_resolver(document).resolve(AliasValue(id="t:blue"), palette_mode(document, "Day"))
        assert value == ColorValue(r=0, g=0, b=1)

    @pytest.mark.asyncio
    async def test_override_beats_named_default(self, document: TokenDocument):
        resolver = make_resolver(document, overrides={"col:primitives": "c-def"})
        value = await resolver.resolve(AliasValue(id="t:blue"), palette_mode(document, "Day"))
        assert value == ColorValue(r=0.2, g=0.4, b=0.8)

    @pytest.mark.asyncio
    async def test_same_collection_keeps_mode(self, document: TokenDocument):
        """A palette alias into the palette reads the same mode."""
        value = await make_resolver(document).resolve(AliasValue(id="t:background"), palette_mode(document, "Night"))
        assert value == ColorValue(r=0, g=0, b=0)

    @pytest.mark.asyncio
    async def test_suppressed(self, document: TokenDocument):
        value = await make_resolver(document).resolve(AliasValue(id="t:cat-1"), palette_mode(document, "Day"))
        assert value is SelectionOutcome.SUPPRESSED

    @pytest.mark.asyncio
    async def test_mode_not_found(self, document: TokenDocument):
        with pytest.raises(ModeNotFoundError) as exc:
            await make_resolver(document).resolve(AliasValue(id="t:other"), palette_mode(document, "Day"))
        assert exc.value.collection == "Color-primitives-other"
        assert exc.value.modes == ["A", "B"]
        assert exc.value.code == "MODE_NOT_FOUND"
        assert str(exc.value) == "Collection mode not found: Color-primitives-other ['A', 'B']"

    @pytest.mark.asyncio
    async def test_missing_token(self, document: TokenDocument):
        with pytest.raises(MissingReferenceError) as exc:
            await make_resolver(document).resolve(AliasValue(id="t:nope"), palette_mode(document, "Day"))
        assert exc.value.reference == "t:nope"
        assert str(exc.value) == "Variable not found: t:nope"

    @pytest.mark.asyncio
    async def test_missing_value_in_selected_mode(self, document: TokenDocument):
        """An overridden mode the target has no value for."""
        data = host_export()
        data["collections"].append(collection("col:sparse", "Sparse", ("sp-a", "A"), ("sp-b", "B")))
        data["variables"].append(variable("t:sparse", "Sparse/Value", "col:sparse", {"sp-a": 1}))
        doc = TokenDocument.from_host_dict(data)
        resolver = make_resolver(doc, overrides={"col:sparse": "sp-b"})
        with pytest.raises(MissingValueError) as exc:
            await resolver.resolve(AliasValue(id="t:sparse"), palette_mode(doc, "Day"))
        assert exc.value.code == "MISSING_VALUE"

    @pytest.mark.asyncio
    async def test_none_value(self, document: TokenDocument):
        with pytest.raises(MissingValueError):
            await make_resolver(document).resolve(None, palette_mode(document, "Day"))

    @pytest.mark.asyncio
    async def test_two_hops(self):
        """Palette -> primitives -> single-mode base resolves to the base literal."""
        data = host_export()
        data["collections"].append(collection("col:base", "Base", ("b-only", "Only")))
        data["variables"].append(variable("t:base", "Base/Blue", "col:base", {"b-only": rgb(0, 0, 0.5)}))
        data["variables"].append(
            variable(
                "t:blue-link",
                "Blue/Link",
                "col:primitives",
                {"c-def": alias("t:base"), "c-wcag": alias("t:base")},
            )
        )
        doc = TokenDocument.from_host_dict(data)
        value = await make_resolver(doc).resolve(AliasValue(id="t:blue-link"), palette_mode(doc, "Dusk"))
        assert value == ColorValue(r=0, g=0, b=0.5)

    @pytest.mark.asyncio
    async def test_remote_token_resolves(self):
        """Remote tokens are not listed but can be followed by id."""
        data = host_export()
        data["variables"].append(
            variable("t:remote", "Red/700", "col:primitives", {"c-def": rgb(1, 0, 0), "c-wcag": rgb(0.5, 0, 0)}, remote=True)
        )
        doc = TokenDocument.from_host_dict(data)
        store = InMemoryTokenStore(doc)
        assert "t:remote" not in [t.id for t in await store.list_all_tokens()]

        value = await make_resolver(doc).resolve(AliasValue(id="t:remote"), palette_mode(doc, "Day"))
        assert value == ColorValue(r=0.5, g=0, b=0)

    @pytest.mark.asyncio
    async def test_unknown_collection(self):
        data = host_export()
        data["variables"].append(variable("t:lost", "Lost/Token", "col:gone", {"x": 1}))
        doc = TokenDocument.from_host_dict(data)
        with pytest.raises(MissingReferenceError) as exc:
            await make_resolver(doc).resolve(AliasValue(id="t:lost"), palette_mode(doc, "Day"))
        assert exc.value.reference == "col:gone"


class TestCycles:
    """Tests for alias cycle detection."""

    @pytest.mark.asyncio
    async def test_self_alias(self):
        data = host_export()
        data["variables"].append(
            variable(
                "t:self",
                "Loop/Self",
                "col:palette",
                {"p-day": alias("t:self"), "p-dusk": alias("t:self"), "p-night": alias("t:self")},
            )
        )
        doc = TokenDocument.from_host_dict(data)
        with pytest.raises(AliasCycleError) as exc:
            await make_resolver(doc).resolve(AliasValue(id="t:self"), palette_mode(doc, "Day"))
        assert exc.value.chain == ["t:self", "t:self"]

    @pytest.mark.asyncio
    async def test_cross_collection_cycle(self):
        data = host_export()
        data["collections"].append(collection("col:loop", "Loop", ("l-only", "Only")))
        data["variables"].append(variable("t:ping", "Loop/Ping", "col:loop", {"l-only": alias("t:pong")}))
        data["variables"].append(variable("t:pong", "Loop/Pong", "col:loop", {"l-only": alias("t:ping")}))
        doc = TokenDocument.from_host_dict(data)
        with pytest.raises(AliasCycleError):
            await make_resolver(doc).resolve(AliasValue(id="t:ping"), palette_mode(doc, "Day"))

    @pytest.mark.asyncio
    async def test_depth_limit(self, document: TokenDocument):
        """Chains longer than max_depth are rejected as cycles."""
        resolver = make_resolver(document, max_depth=1)
        with pytest.raises(AliasCycleError):
            await resolver.resolve(AliasValue(id="t:on-surface"), palette_mode(document, "Day"))

    def test_cycle_is_malformed_data(self):
        """Cycles are fatal, not per-token resolution failures."""
        from chuk_mcp_tokens.tokens import MalformedValueError, ResolutionError

        assert issubclass(AliasCycleError, MalformedValueError)
        assert not issubclass(AliasCycleError, ResolutionError)
