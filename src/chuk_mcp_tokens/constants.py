"""
Constants and enums for the token system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class OutputKind(str, Enum):
    """
    Output kinds understood by the code generator.

    Mirrors the languages a host codegen panel can ask for.
    """

    VARIABLES = "variables"  # JSON id -> name map for a node
    CSS_VARIABLES = "cssvariables"  # Full themed stylesheet
    CSS = "css"  # Post-processed host CSS for a node
    DEFAULT = "default"  # Legacy palette-only stylesheet


class ValueType(str, Enum):
    """Discriminator for token payloads."""

    NUMBER = "FLOAT"
    STRING = "STRING"
    COLOR = "COLOR"
    ALIAS = "VARIABLE_ALIAS"


class SelectionOutcome(str, Enum):
    """Non-mode results of mode selection."""

    SUPPRESSED = "suppressed"  # Deliberately unresolvable, omit silently
    NOT_FOUND = "not_found"  # Policy exhausted, resolution failure


# Paint type that can carry a bound color token
SOLID_PAINT = "SOLID"

# Collection whose values are per-instance choices, never resolved
CATEGORICAL_COLLECTION = "Color-categorical"

# Raw font slugs mapped to display names
FONT_NAME_SUBSTITUTIONS: dict[str, str] = {
    "noto-sans": "Noto Sans",
    "open-sans": "Open Sans",
}

# Title attached to every codegen result
RESULT_TITLE = "Codegen Plugin"

# Schema versions - frozen for v1
SchemaVersion = Literal[
    "tokens/v1",
    "config/v1",
]

# Result languages reported to the host
ResultLanguage = Literal["CSS", "JSON"]


class ErrorMessages:
    """Standardized error messages."""

    UNSUPPORTED_KIND = "Unsupported language: {kind}"
    DOCUMENT_NOT_FOUND = "Document not found: {name}"
    CONFIG_NOT_FOUND = "Config not found: {name}"
    TOKEN_NOT_FOUND = "Variable not found: {token_id}"
    COLLECTION_NOT_FOUND = "Collection not found: {collection_id}"
    MODE_NOT_FOUND = "Collection mode not found: {collection} {modes}"
    NODE_REQUIRED = "Output kind '{kind}' needs a node."
