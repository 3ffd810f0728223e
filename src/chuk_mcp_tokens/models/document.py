"""
Token document - a snapshot of one host variable store.

Documents are what the host exports: a list of collections with their
modes and a list of variables with their per-mode values. They are
loaded once per generation run and never mutated.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_tokens.models.token import (
    AliasValue,
    Collection,
    ColorValue,
    Mode,
    NumberValue,
    StringValue,
    Token,
    parse_token_value,
)

logger = logging.getLogger(__name__)


def _value_to_host(value: NumberValue | StringValue | ColorValue | AliasValue) -> Any:
    """Convert a tagged value back to the host's untagged shape."""
    match value:
        case NumberValue(value=number):
            return number
        case StringValue(value=text):
            return text
        case ColorValue(r=r, g=g, b=b, a=a):
            return {"r": r, "g": g, "b": b, "a": a}
        case AliasValue(id=token_id):
            return {"type": "VARIABLE_ALIAS", "id": token_id}


class TokenDocument(BaseModel):
    """
    A complete token store snapshot.

    Holds every collection and every token, local and remote.
    """

    schema_version: str = Field("tokens/v1", description="Schema version")
    name: str = Field(..., description="Document name")
    description: str = Field("", description="Document description")
    collections: list[Collection] = Field(default_factory=list)
    tokens: list[Token] = Field(default_factory=list)

    model_config = {"frozen": True}

    def get_collection(self, collection_id: str) -> Collection | None:
        """Get a collection by id."""
        for collection in self.collections:
            if collection.id == collection_id:
                return collection
        return None

    def get_collection_by_name(self, name: str) -> Collection | None:
        """Get the first collection with a given name."""
        for collection in self.collections:
            if collection.name == name:
                return collection
        return None

    def get_token(self, token_id: str) -> Token | None:
        """Get a token by id."""
        for token in self.tokens:
            if token.id == token_id:
                return token
        return None

    def get_token_by_name(self, name: str) -> Token | None:
        """Get the first token with a given name."""
        for token in self.tokens:
            if token.name == name:
                return token
        return None

    def tokens_in(self, collection_id: str) -> list[Token]:
        """Get the tokens owned by a collection, in document order."""
        return [t for t in self.tokens if t.collection_id == collection_id]

    def to_host_dict(self) -> dict[str, Any]:
        """
        Convert to the host export format.

        This is the canonical on-disk format for token documents.
        """
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "collections": [
                {
                    "id": c.id,
                    "name": c.name,
                    "modes": [{"modeId": m.mode_id, "name": m.name} for m in c.modes],
                }
                for c in self.collections
            ],
            "variables": [
                {
                    "id": t.id,
                    "name": t.name,
                    "variableCollectionId": t.collection_id,
                    "remote": t.remote,
                    "valuesByMode": {
                        mode_id: _value_to_host(v) for mode_id, v in t.values_by_mode.items()
                    },
                }
                for t in self.tokens
            ],
        }

    @classmethod
    def from_host_dict(cls, data: dict[str, Any]) -> TokenDocument:
        """
        Create a TokenDocument from a host export dict.

        Values the generator cannot render (booleans, expressions) are
        dropped with a warning; the rest of the token is kept.
        """
        collections = [
            Collection(
                id=c["id"],
                name=c["name"],
                modes=[Mode(mode_id=m["modeId"], name=m["name"]) for m in c.get("modes", [])],
            )
            for c in data.get("collections", [])
        ]

        tokens = []
        for vdata in data.get("variables", []):
            values = {}
            for mode_id, raw in vdata.get("valuesByMode", {}).items():
                try:
                    values[mode_id] = parse_token_value(raw)
                except ValueError:
                    logger.warning("Dropping unsupported value for %s in mode %s", vdata["name"], mode_id)
            tokens.append(
                Token(
                    id=vdata["id"],
                    name=vdata["name"],
                    collection_id=vdata["variableCollectionId"],
                    values_by_mode=values,
                    remote=vdata.get("remote", False),
                )
            )

        return cls(
            schema_version=data.get("schema", "tokens/v1"),
            name=data["name"],
            description=data.get("description", ""),
            collections=collections,
            tokens=tokens,
        )
