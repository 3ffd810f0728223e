"""
Document tools - MCP tools for token document discovery and inspection.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.documents import DocumentManager, validate_document
from chuk_mcp_tokens.issues import IssueSeverity

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_document_tools(
    mcp: ChukMCPServer,
    manager: DocumentManager,
) -> dict[str, Any]:
    """
    Register token document tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The document manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_documents() -> str:
        """
        List token documents in the documents directory.

        Returns:
            JSON string with list of document summaries

        Example:
            tokens_list_documents()
        """
        try:
            documents = await manager.list_documents()
            return json.dumps(
                {
                    "status": "success",
                    "documents": [
                        {
                            "name": d.name,
                            "path": str(d.path),
                            "collections": d.collection_count,
                            "tokens": d.token_count,
                            "modified": d.modified.isoformat(),
                        }
                        for d in documents
                    ],
                    "count": len(documents),
                }
            )
        except Exception as e:
            logger.exception("Failed to list documents")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_documents"] = tokens_list_documents

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe_document(name: str) -> str:
        """
        Get an overview of a token document.

        Returns every collection with its modes and token count.

        Args:
            name: Document name

        Returns:
            JSON string with document details

        Example:
            tokens_describe_document(name="openbridge")
        """
        try:
            document = await manager.get(name)
            if document is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.DOCUMENT_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "document": {
                        "name": document.name,
                        "description": document.description,
                        "collections": [
                            {
                                "id": c.id,
                                "name": c.name,
                                "modes": c.mode_names,
                                "tokens": len(document.tokens_in(c.id)),
                            }
                            for c in document.collections
                        ],
                        "tokens": len(document.tokens),
                        "remote_tokens": sum(1 for t in document.tokens if t.remote),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe document")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_describe_document"] = tokens_describe_document

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_collections(document: str) -> str:
        """
        List the collections of a document with their modes.

        Args:
            document: Document name

        Returns:
            JSON string with collections and mode ids

        Example:
            tokens_list_collections(document="openbridge")
        """
        try:
            doc = await manager.get(document)
            if doc is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.DOCUMENT_NOT_FOUND.format(name=document)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "collections": [
                        {
                            "id": c.id,
                            "name": c.name,
                            "modes": [{"id": m.mode_id, "name": m.name} for m in c.modes],
                        }
                        for c in doc.collections
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list collections")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_collections"] = tokens_list_collections

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_validate_document(name: str) -> str:
        """
        Validate a token document.

        Checks ids, collection ownership, per-mode values, dangling
        aliases and alias cycles.

        Args:
            name: Document name

        Returns:
            JSON string with validation results

        Example:
            tokens_validate_document(name="openbridge")
        """
        try:
            document = await manager.get(name)
            if document is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.DOCUMENT_NOT_FOUND.format(name=name)}
                )

            result = validate_document(document)
            return json.dumps(
                {
                    "status": "success",
                    "valid": result.is_valid,
                    "errors": [i.to_dict() for i in result.errors],
                    "warnings": [i.to_dict() for i in result.warnings],
                    "info": [i.to_dict() for i in result.of(IssueSeverity.INFO)],
                }
            )
        except Exception as e:
            logger.exception("Failed to validate document")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_validate_document"] = tokens_validate_document

    return tools
