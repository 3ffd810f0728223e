"""
Token resolution engine.

Design tokens alias each other across collections, and each collection
may expose several live modes. This package turns one raw token value
into a CSS declaration:

- naming: token names to ``--custom-property`` identifiers
- modes: which mode of a collection an alias reads
- resolver: following alias chains to terminal values
- formatter: terminal values and var() references as CSS
- store: read-through access to the host token store
"""

from chuk_mcp_tokens.tokens.errors import (
    AliasCycleError,
    MalformedValueError,
    MissingReferenceError,
    MissingValueError,
    ModeNotFoundError,
    ResolutionError,
    TokenError,
    UnsupportedRequestError,
)
from chuk_mcp_tokens.tokens.formatter import ValueFormatter, color_to_css, format_number
from chuk_mcp_tokens.tokens.modes import ModeSelector
from chuk_mcp_tokens.tokens.naming import normalize_name, strip_custom_property_prefix
from chuk_mcp_tokens.tokens.resolver import AliasResolver
from chuk_mcp_tokens.tokens.store import InMemoryTokenStore, TokenCache, TokenStore

__all__ = [
    "AliasCycleError",
    "AliasResolver",
    "InMemoryTokenStore",
    "MalformedValueError",
    "MissingReferenceError",
    "MissingValueError",
    "ModeNotFoundError",
    "ModeSelector",
    "ResolutionError",
    "TokenCache",
    "TokenError",
    "TokenStore",
    "UnsupportedRequestError",
    "ValueFormatter",
    "color_to_css",
    "format_number",
    "normalize_name",
    "strip_custom_property_prefix",
]
