"""
Document Manager - handles token document discovery and loading.

Token documents are host variable exports saved as
``<name>.tokens.json`` or ``<name>.tokens.yaml``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_tokens.models.document import TokenDocument

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".tokens.json", ".tokens.yaml", ".tokens.yml")


class DocumentListing:
    """Lightweight metadata for listing documents on disk."""

    def __init__(
        self,
        name: str,
        path: Path,
        collection_count: int,
        token_count: int,
        modified: datetime,
    ):
        self.name = name
        self.path = path
        self.collection_count = collection_count
        self.token_count = token_count
        self.modified = modified

    def __repr__(self) -> str:
        return f"DocumentListing({self.name!r}, {self.collection_count} collections, {self.token_count} tokens)"


def _read_data(path: Path) -> dict[str, Any]:
    """Read a document file as JSON or YAML depending on its suffix."""
    with open(path) as f:
        if path.name.endswith(".json"):
            return json.load(f)
        return yaml.safe_load(f)


class DocumentManager:
    """
    Manages token documents with file persistence.

    Documents are immutable once loaded; the manager only caches them.
    """

    def __init__(self, documents_dir: Path):
        """
        Initialize the manager.

        Args:
            documents_dir: Directory holding token document files
        """
        self.documents_dir = documents_dir
        self._cache: dict[str, TokenDocument] = {}

    def register(self, document: TokenDocument) -> TokenDocument:
        """Make an in-memory document available by name."""
        self._cache[document.name] = document
        return document

    async def get(self, name: str) -> TokenDocument | None:
        """
        Get a document by name.

        Checks cache first, then loads from file if not cached.

        Args:
            name: Document name

        Returns:
            The TokenDocument or None if not found
        """
        if name in self._cache:
            return self._cache[name]

        path = self._find_path(name)
        if path is not None:
            return await self.load(path)

        return None

    async def load(self, path: Path) -> TokenDocument:
        """
        Load a document from a file.

        Args:
            path: Path to the document file

        Returns:
            The loaded TokenDocument
        """
        document = TokenDocument.from_host_dict(_read_data(path))
        self._cache[document.name] = document
        logger.info("Loaded %s: %d collections, %d tokens", document.name, len(document.collections), len(document.tokens))
        return document

    async def save(self, document: TokenDocument) -> Path:
        """
        Save a document to disk as YAML.

        Args:
            document: The document to save

        Returns:
            Path to the saved file
        """
        self.documents_dir.mkdir(parents=True, exist_ok=True)
        path = self.documents_dir / f"{self._safe_name(document.name)}.tokens.yaml"

        with open(path, "w") as f:
            yaml.safe_dump(document.to_host_dict(), f, default_flow_style=False, sort_keys=False)

        self._cache[document.name] = document
        return path

    async def list_documents(self) -> list[DocumentListing]:
        """
        List all documents in the directory.

        Returns:
            List of document metadata, most recently modified first
        """
        if not self.documents_dir.exists():
            return []

        result = []
        for path in self.documents_dir.iterdir():
            if not path.name.endswith(DOCUMENT_SUFFIXES):
                continue
            try:
                data = _read_data(path)
                result.append(
                    DocumentListing(
                        name=data.get("name", path.name.split(".")[0]),
                        path=path,
                        collection_count=len(data.get("collections", [])),
                        token_count=len(data.get("variables", [])),
                        modified=datetime.fromtimestamp(path.stat().st_mtime),
                    )
                )
            except (OSError, ValueError, yaml.YAMLError, AttributeError) as e:
                logger.warning("Skipping unreadable document %s: %s", path, e)
                continue

        return sorted(result, key=lambda m: m.modified, reverse=True)

    def _find_path(self, name: str) -> Path | None:
        """Find the file for a document name."""
        safe_name = self._safe_name(name)
        for suffix in DOCUMENT_SUFFIXES:
            path = self.documents_dir / f"{safe_name}{suffix}"
            if path.exists():
                return path
        return None

    def _safe_name(self, name: str) -> str:
        """Sanitize a document name for use as a filename."""
        return name.replace(" ", "_").replace("/", "_")
