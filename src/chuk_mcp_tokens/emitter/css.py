"""
CSS emitter - assembles themed custom property stylesheets.

The stylesheet is composed from independent fragments, in cascade order:

    per-mode primitive class blocks
    * { pinned primitives + shadow variables }
    palette theme blocks (one per palette mode)
    blink animation

Palette tokens are flattened to literals through the AliasResolver.
Primitive tokens keep their aliases as var() references.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from chuk_mcp_tokens.constants import SelectionOutcome
from chuk_mcp_tokens.emitter.boilerplate import BLINK_ANIMATION, SHADOW_VARIABLES, THEME_ICONS
from chuk_mcp_tokens.emitter.report import GenerationReport
from chuk_mcp_tokens.models.config import GeneratorConfig, ModeBlockSet, PinnedSet
from chuk_mcp_tokens.models.token import Collection, Mode, Token
from chuk_mcp_tokens.tokens.errors import MissingValueError, ModeNotFoundError, ResolutionError
from chuk_mcp_tokens.tokens.formatter import ValueFormatter
from chuk_mcp_tokens.tokens.modes import ModeSelector
from chuk_mcp_tokens.tokens.naming import normalize_name
from chuk_mcp_tokens.tokens.resolver import AliasResolver
from chuk_mcp_tokens.tokens.store import TokenCache, TokenStore

logger = logging.getLogger(__name__)

MISSING_COLLECTION = "MISSING_COLLECTION"


@dataclass
class StoreSnapshot:
    """Local tokens and the collections they belong to."""

    tokens: list[Token] = field(default_factory=list)
    collections: list[Collection] = field(default_factory=list)

    def find_collection(self, name: str) -> Collection | None:
        """Get the first collection with a given name."""
        return next((c for c in self.collections if c.name == name), None)

    def tokens_in(self, collection: Collection) -> list[Token]:
        """Tokens owned by a collection, in store order."""
        return [t for t in self.tokens if t.collection_id == collection.id]


class CssEmitter:
    """
    Generates CSS for one run.

    An emitter holds the read-through cache and the report of a single
    generation; create a new one per request.
    """

    def __init__(self, store: TokenStore, config: GeneratorConfig):
        """
        Initialize the emitter.

        Args:
            store: Host token store
            config: Mode defaults and block layout
        """
        self.config = config
        self.cache = TokenCache(store)
        self.selector = ModeSelector(config.mode_defaults, config.suppressed_collections)
        self.formatter = ValueFormatter(self.cache)
        self.report = GenerationReport()
        self._snapshot: StoreSnapshot | None = None

    async def snapshot(self) -> StoreSnapshot:
        """
        List local tokens and fetch their collections.

        Collection lookups are independent and issued concurrently.
        """
        if self._snapshot is None:
            tokens = await self.cache.store.list_all_tokens()
            self.cache.add_tokens(tokens)
            collections = await self.cache.get_collections(t.collection_id for t in tokens)
            self._snapshot = StoreSnapshot(tokens=tokens, collections=collections)
        return self._snapshot

    async def emit_stylesheet(self, overrides: Mapping[str, str] | None = None) -> str:
        """
        Generate the complete themed stylesheet.

        Args:
            overrides: Collection id to mode id chosen explicitly

        Returns:
            CSS text
        """
        primitives = self.config.primitives

        out = ""
        for block_set in primitives.mode_blocks:
            out += await self.emit_mode_blocks(block_set)
        out += "* {\n"
        for pinned in primitives.pinned:
            out += await self.emit_pinned(pinned)
        out += SHADOW_VARIABLES
        out += "} \n"
        out += "\n\n" + await self.emit_palette(overrides)
        out += BLINK_ANIMATION
        return out

    async def emit_palette(self, overrides: Mapping[str, str] | None = None) -> str:
        """
        Generate one theme block per palette mode.

        Every palette token is flattened to a literal. Suppressed tokens
        are omitted silently; unresolvable tokens are logged, recorded
        and omitted.
        """
        snapshot = await self.snapshot()
        palette_config = self.config.palette
        palette = snapshot.find_collection(palette_config.collection)
        if palette is None:
            return self._missing_collection(palette_config.collection)

        resolver = AliasResolver(
            self.cache,
            self.selector,
            scope=palette,
            overrides=overrides,
            max_depth=self.config.max_alias_depth,
        )
        tokens = snapshot.tokens_in(palette)

        out = ""
        for mode in palette.modes:
            theme = mode.name.lower()
            if theme == palette_config.default_theme:
                out += ":root, "
            out += f":root[{palette_config.theme_attribute}='{theme}'] {{\n"
            out += THEME_ICONS.get(theme, "")
            for token in tokens:
                out += await self._palette_declaration(resolver, palette, token, mode)
            out += "}\n"
        return out

    async def emit_mode_blocks(self, block_set: ModeBlockSet) -> str:
        """
        Generate one class block per mode of a primitive collection.

        Aliases render as var() references.
        """
        snapshot = await self.snapshot()
        collection = snapshot.find_collection(block_set.collection)
        if collection is None:
            return self._missing_collection(block_set.collection)

        tokens = snapshot.tokens_in(collection)
        out = ""
        for mode in collection.modes:
            mode_key = mode.name.lower()
            if mode_key == block_set.root_mode:
                out += ":root, "
            out += f"{block_set.css_prefix}{mode_key} {{\n"
            for token in tokens:
                out += await self._reference_declaration(collection, token, mode)
            out += "}\n"
        return out

    async def emit_pinned(self, pinned: PinnedSet) -> str:
        """
        Generate flattened declarations for a primitive collection at one mode.

        Single-mode collections use their only mode regardless of the
        configured name.
        """
        snapshot = await self.snapshot()
        collection = snapshot.find_collection(pinned.collection)
        if collection is None:
            return self._missing_collection(pinned.collection)

        if len(collection.modes) > 1:
            mode = collection.get_mode_by_name(pinned.mode)
        else:
            mode = collection.modes[0]
        if mode is None:
            error = ModeNotFoundError(collection.name, collection.mode_names)
            logger.warning("%s", error)
            self.report.record(error, f"{collection.name}/{pinned.mode}")
            return ""

        out = ""
        for token in snapshot.tokens_in(collection):
            out += await self._reference_declaration(collection, token, mode)
        return out

    async def _palette_declaration(
        self,
        resolver: AliasResolver,
        palette: Collection,
        token: Token,
        mode: Mode,
    ) -> str:
        """Resolve and render one palette token, recovering per-token failures."""
        location = f"{palette.name}/{mode.name}/{token.name}"
        try:
            raw = token.value_for_mode(mode.mode_id)
            if raw is None:
                raise MissingValueError(token.name, mode.name)
            value = await resolver.resolve(raw, mode)
        except ResolutionError as e:
            logger.warning("Variable not found %s %s: %s", token.name, mode.name, e)
            self.report.record(e, location)
            return ""

        if value is SelectionOutcome.SUPPRESSED:
            return ""
        return await self.formatter.format(value, normalize_name(token.name))

    async def _reference_declaration(self, collection: Collection, token: Token, mode: Mode) -> str:
        """Render one primitive token, keeping aliases as var() references."""
        raw = token.value_for_mode(mode.mode_id)
        if raw is None:
            self.report.record(
                MissingValueError(token.name, mode.name),
                f"{collection.name}/{mode.name}/{token.name}",
            )
        return await self.formatter.format(raw, normalize_name(token.name))

    def _missing_collection(self, name: str) -> str:
        """Record a missing collection and leave a marker in the output."""
        logger.warning("%s collection not found", name)
        self.report.skip(MISSING_COLLECTION, f"{name} collection not found", name)
        return f"/* {name} collection not found */\n"
