"""
Document Validator - validates token document structure.

Validates:
- Collection and token ids are unique
- Tokens belong to known collections
- Token values are keyed by modes of their own collection
- Aliases point at known tokens
- Alias chains do not loop
"""

from __future__ import annotations

from chuk_mcp_tokens.issues import IssueLog, IssueSeverity
from chuk_mcp_tokens.models.document import TokenDocument
from chuk_mcp_tokens.models.token import AliasValue

ERROR = IssueSeverity.ERROR
WARNING = IssueSeverity.WARNING
INFO = IssueSeverity.INFO


class ValidationResult(IssueLog):
    """Findings for one document; valid while none is an error."""

    empty_message = "Validation passed: no issues found"

    @property
    def is_valid(self) -> bool:
        return bool(self)


class DocumentValidator:
    """Validates token document structure and alias graph."""

    def validate(self, document: TokenDocument) -> ValidationResult:
        """
        Validate a document.

        Args:
            document: The document to validate

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        self._validate_ids(document, result)
        self._validate_tokens(document, result)
        self._validate_aliases(document, result)

        return result

    def _validate_ids(self, document: TokenDocument, result: ValidationResult) -> None:
        """Check for duplicate collection and token ids."""
        seen: set[str] = set()
        for collection in document.collections:
            if collection.id in seen:
                result.add(
                    ERROR,
                    "DUPLICATE_COLLECTION",
                    f"Collection id '{collection.id}' is used more than once",
                    collection.name,
                )
            seen.add(collection.id)

        seen = set()
        for token in document.tokens:
            if token.id in seen:
                result.add(
                    ERROR,
                    "DUPLICATE_TOKEN",
                    f"Token id '{token.id}' is used more than once",
                    token.name,
                )
            seen.add(token.id)

    def _validate_tokens(self, document: TokenDocument, result: ValidationResult) -> None:
        """Check token ownership and per-mode values."""
        for token in document.tokens:
            collection = document.get_collection(token.collection_id)
            if collection is None:
                result.add(
                    ERROR,
                    "UNKNOWN_COLLECTION",
                    f"Token belongs to unknown collection '{token.collection_id}'",
                    token.name,
                )
                continue

            mode_ids = {m.mode_id for m in collection.modes}
            for mode_id in token.values_by_mode:
                if mode_id not in mode_ids:
                    result.add(
                        WARNING,
                        "FOREIGN_MODE",
                        f"Value for mode '{mode_id}' which is not a mode of '{collection.name}'",
                        token.name,
                    )

            for mode in collection.modes:
                if mode.mode_id not in token.values_by_mode:
                    result.add(
                        INFO,
                        "MISSING_VALUE",
                        f"No value for mode '{mode.name}'",
                        f"{collection.name}/{token.name}",
                    )

    def _validate_aliases(self, document: TokenDocument, result: ValidationResult) -> None:
        """Check alias targets exist and that no alias chain loops."""
        targets: dict[str, set[str]] = {}
        for token in document.tokens:
            for mode_id, value in token.values_by_mode.items():
                if not isinstance(value, AliasValue):
                    continue
                if document.get_token(value.id) is None:
                    result.add(
                        WARNING,
                        "DANGLING_ALIAS",
                        f"Alias in mode '{mode_id}' points at unknown token '{value.id}'",
                        token.name,
                    )
                    continue
                targets.setdefault(token.id, set()).add(value.id)

        # Any cycle in the token-level alias graph can loop at resolution time
        reported: set[str] = set()
        for start in targets:
            cycle = self._find_cycle(start, targets)
            if cycle and not reported.intersection(cycle):
                reported.update(cycle)
                names = [self._token_name(document, token_id) for token_id in cycle]
                result.add(
                    ERROR,
                    "ALIAS_CYCLE",
                    f"Alias cycle: {' -> '.join(names)}",
                    names[0],
                )

    def _find_cycle(self, start: str, targets: dict[str, set[str]]) -> list[str] | None:
        """Depth-first search for a path from start back to itself."""
        stack: list[tuple[str, list[str]]] = [(start, [start])]
        visited: set[str] = set()
        while stack:
            current, path = stack.pop()
            for target in sorted(targets.get(current, ())):
                if target == start:
                    return [*path, start]
                if target not in visited:
                    visited.add(target)
                    stack.append((target, [*path, target]))
        return None

    def _token_name(self, document: TokenDocument, token_id: str) -> str:
        token = document.get_token(token_id)
        return token.name if token else token_id


def validate_document(document: TokenDocument) -> ValidationResult:
    """
    Convenience function to validate a document.

    Args:
        document: The document to validate

    Returns:
        ValidationResult
    """
    return DocumentValidator().validate(document)
