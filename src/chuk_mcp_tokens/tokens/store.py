"""
Token stores - read-only access to tokens and collections.

The host store is asynchronous: lookups by id may be requests. The
TokenCache in front of it is a read-through cache shared by every
resolution of one generation run.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Protocol

from chuk_mcp_tokens.models.document import TokenDocument
from chuk_mcp_tokens.models.token import Collection, Token

logger = logging.getLogger(__name__)


class TokenStore(Protocol):
    """The host's variable store, as consumed by the generator."""

    async def get_token_by_id(self, token_id: str) -> Token | None: ...

    async def get_collection_by_id(self, collection_id: str) -> Collection | None: ...

    async def list_all_tokens(self) -> list[Token]: ...


class InMemoryTokenStore:
    """
    A TokenStore backed by a loaded TokenDocument.

    Remote tokens are reachable by id but not listed, the same way a
    host lists only local variables.
    """

    def __init__(self, document: TokenDocument):
        """
        Initialize the store.

        Args:
            document: Document snapshot to serve
        """
        self.document = document
        self._tokens = {t.id: t for t in document.tokens}
        self._collections = {c.id: c for c in document.collections}

    async def get_token_by_id(self, token_id: str) -> Token | None:
        return self._tokens.get(token_id)

    async def get_collection_by_id(self, collection_id: str) -> Collection | None:
        return self._collections.get(collection_id)

    async def list_all_tokens(self) -> list[Token]:
        return [t for t in self.document.tokens if not t.remote]


class TokenCache:
    """
    Read-through cache over a TokenStore.

    Concurrent lookups for the same id may both reach the store; the
    last one to finish wins, which is harmless because the store is
    read-only for the duration of a run.
    """

    def __init__(self, store: TokenStore):
        self.store = store
        self._tokens: dict[str, Token] = {}
        self._collections: dict[str, Collection] = {}

    def add_tokens(self, tokens: Iterable[Token]) -> None:
        """Seed the cache with already listed tokens."""
        for token in tokens:
            self._tokens[token.id] = token

    async def get_token(self, token_id: str) -> Token | None:
        """
        Get a token by id, asking the store on a cache miss.

        Returns:
            The token, or None if the store does not know it
        """
        token = self._tokens.get(token_id)
        if token is None:
            token = await self.store.get_token_by_id(token_id)
            if token is None:
                return None
            self._tokens[token_id] = token
        return token

    async def get_collection(self, collection_id: str) -> Collection | None:
        """
        Get a collection by id, asking the store on a cache miss.

        Returns:
            The collection, or None if the store does not know it
        """
        collection = self._collections.get(collection_id)
        if collection is None:
            collection = await self.store.get_collection_by_id(collection_id)
            if collection is None:
                return None
            logger.debug("Collection found %s %s", collection.name, collection.mode_names)
            self._collections[collection_id] = collection
        return collection

    async def get_tokens(self, token_ids: Iterable[str]) -> list[Token | None]:
        """Fetch several tokens concurrently, preserving order."""
        return list(await asyncio.gather(*(self.get_token(i) for i in token_ids)))

    async def get_collections(self, collection_ids: Iterable[str]) -> list[Collection]:
        """
        Fetch several collections concurrently.

        Ids are deduplicated in first-seen order; unknown ids are skipped.
        """
        unique_ids = list(dict.fromkeys(collection_ids))
        found = await asyncio.gather(*(self.get_collection(i) for i in unique_ids))
        return [c for c in found if c is not None]
