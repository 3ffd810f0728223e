"""
Token resolution errors.

Two families:
- ResolutionError: one token cannot be resolved in one mode. Callers
  recover by skipping that declaration.
- UnsupportedRequestError, MalformedValueError: the run cannot produce
  trustworthy output and fails as a whole.
"""

from __future__ import annotations

from chuk_mcp_tokens.constants import ErrorMessages


class TokenError(Exception):
    """Base class for token system errors."""


class UnsupportedRequestError(TokenError, ValueError):
    """The requested output kind is not known."""

    def __init__(self, kind: str):
        super().__init__(ErrorMessages.UNSUPPORTED_KIND.format(kind=kind))
        self.kind = kind


class ResolutionError(TokenError):
    """A single token could not be resolved."""

    code = "RESOLUTION_FAILED"


class MissingReferenceError(ResolutionError):
    """An alias names a token, collection or value the store does not have."""

    code = "MISSING_REFERENCE"

    def __init__(self, message: str, reference: str | None = None):
        super().__init__(message)
        self.reference = reference


class MissingValueError(MissingReferenceError):
    """A token has no value for the mode being read."""

    code = "MISSING_VALUE"

    def __init__(self, token: str, mode: str):
        super().__init__(f"Value is missing: {token} ({mode})", token)
        self.mode = mode


class ModeNotFoundError(ResolutionError):
    """The mode selection policy found no mode for a collection."""

    code = "MODE_NOT_FOUND"

    def __init__(self, collection: str, modes: list[str]):
        super().__init__(ErrorMessages.MODE_NOT_FOUND.format(collection=collection, modes=modes))
        self.collection = collection
        self.modes = modes


class MalformedValueError(TokenError, ValueError):
    """A value indicates corrupted upstream data."""


class AliasCycleError(MalformedValueError):
    """An alias chain refers back to itself or never terminates."""

    def __init__(self, chain: list[str]):
        super().__init__(f"Alias cycle: {' -> '.join(chain)}")
        self.chain = chain
