"""
Token document management.

This module provides:
- DocumentManager: Loading and caching host variable exports
- DocumentValidator: Structure and alias graph validation
"""

from chuk_mcp_tokens.documents.manager import DocumentListing, DocumentManager
from chuk_mcp_tokens.documents.validator import (
    DocumentValidator,
    ValidationResult,
    validate_document,
)

__all__ = [
    "DocumentListing",
    "DocumentManager",
    "DocumentValidator",
    "ValidationResult",
    "validate_document",
]
