"""
Alias resolver - flattens alias chains to terminal values.

A palette token usually aliases a primitive in another collection,
which may alias again. The resolver follows the chain hop by hop:

- An alias into the scope collection (the palette being generated)
  keeps the current mode, since both sides vary along the same axis.
- An alias into any other collection asks the ModeSelector which of
  that collection's modes applies.

Hops are strictly sequential: the next target is unknown until the
current one has been fetched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from chuk_mcp_tokens.constants import ErrorMessages, SelectionOutcome
from chuk_mcp_tokens.models.token import (
    AliasValue,
    Collection,
    ColorValue,
    Mode,
    NumberValue,
    StringValue,
)
from chuk_mcp_tokens.tokens.errors import (
    AliasCycleError,
    MissingReferenceError,
    MissingValueError,
    ModeNotFoundError,
)
from chuk_mcp_tokens.tokens.modes import ModeSelector
from chuk_mcp_tokens.tokens.store import TokenCache

logger = logging.getLogger(__name__)

ResolvedValue = NumberValue | StringValue | ColorValue


class AliasResolver:
    """
    Resolves token values within one scope collection.

    The resolver:
    - Returns non-alias values unchanged
    - Follows aliases through the read-through token cache
    - Applies the mode selection policy at every cross-collection hop
    - Propagates suppression without treating it as a failure
    - Rejects cycles and chains longer than ``max_depth``
    """

    def __init__(
        self,
        cache: TokenCache,
        selector: ModeSelector,
        scope: Collection,
        overrides: Mapping[str, str] | None = None,
        max_depth: int = 32,
    ):
        """
        Initialize the resolver.

        Args:
            cache: Token and collection lookups
            selector: Mode selection policy
            scope: Collection the resolution happens under (the palette)
            overrides: Collection id to mode id chosen explicitly
            max_depth: Longest alias chain followed
        """
        self.cache = cache
        self.selector = selector
        self.scope = scope
        self.overrides = dict(overrides or {})
        self.max_depth = max_depth

    async def resolve(
        self,
        value: NumberValue | StringValue | ColorValue | AliasValue | None,
        mode: Mode,
        _chain: tuple[str, ...] = (),
    ) -> ResolvedValue | SelectionOutcome:
        """
        Resolve a value to a terminal literal.

        Args:
            value: Value to resolve, possibly an alias
            mode: Mode of the scope collection being generated

        Returns:
            A number, string or color value, or SelectionOutcome.SUPPRESSED

        Raises:
            MissingReferenceError: A token, collection or value is missing
            ModeNotFoundError: No mode could be selected for a collection
            AliasCycleError: The chain loops or exceeds max_depth
        """
        if value is None:
            raise MissingValueError(_chain[-1] if _chain else "<root>", mode.name)

        match value:
            case NumberValue() | StringValue() | ColorValue():
                return value
            case AliasValue(id=target_id):
                return await self._follow(target_id, mode, _chain)

    async def _follow(
        self,
        target_id: str,
        mode: Mode,
        _chain: tuple[str, ...],
    ) -> ResolvedValue | SelectionOutcome:
        """Dereference one alias hop and resolve what it points at."""
        if target_id in _chain or len(_chain) >= self.max_depth:
            raise AliasCycleError([*_chain, target_id])
        chain = (*_chain, target_id)

        token = await self.cache.get_token(target_id)
        if token is None:
            raise MissingReferenceError(
                ErrorMessages.TOKEN_NOT_FOUND.format(token_id=target_id), target_id
            )

        if token.collection_id == self.scope.id:
            next_value = token.value_for_mode(mode.mode_id)
            if next_value is None:
                raise MissingValueError(token.name, mode.name)
            return await self.resolve(next_value, mode, chain)

        collection = await self.cache.get_collection(token.collection_id)
        if collection is None:
            raise MissingReferenceError(
                ErrorMessages.COLLECTION_NOT_FOUND.format(collection_id=token.collection_id),
                token.collection_id,
            )

        selected = self.selector.select(collection, self.overrides)
        if selected is SelectionOutcome.SUPPRESSED:
            logger.debug("Suppressed %s from %s", token.name, collection.name)
            return selected
        if selected is SelectionOutcome.NOT_FOUND:
            raise ModeNotFoundError(collection.name, collection.mode_names)

        next_value = token.value_for_mode(selected.mode_id)
        if next_value is None:
            raise MissingValueError(token.name, selected.name)
        return await self.resolve(next_value, mode, chain)
