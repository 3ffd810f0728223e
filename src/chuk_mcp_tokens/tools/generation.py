"""
Generation tools - MCP tools for CSS and variable map generation.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.constants import ErrorMessages, SelectionOutcome
from chuk_mcp_tokens.documents import DocumentManager
from chuk_mcp_tokens.generator import CodeGenerator
from chuk_mcp_tokens.models.codegen import GenerationRequest
from chuk_mcp_tokens.models.scene import SceneNode
from chuk_mcp_tokens.tokens import (
    AliasResolver,
    InMemoryTokenStore,
    ModeSelector,
    ResolutionError,
    TokenCache,
    UnsupportedRequestError,
    ValueFormatter,
    normalize_name,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_generation_tools(
    mcp: ChukMCPServer,
    manager: DocumentManager,
    config_loader: ConfigLoader,
) -> dict[str, Any]:
    """
    Register generation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The document manager
        config_loader: The config loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_generate(
        document: str,
        kind: str,
        node: dict[str, Any] | None = None,
        config: str = "default",
    ) -> str:
        """
        Generate code from a token document.

        Kinds:
        - 'cssvariables': full themed stylesheet
        - 'variables': JSON map of color tokens used by the node
        - 'css': the node's host CSS with normalized var() names
        - 'default': palette theme blocks only

        Args:
            document: Document name
            kind: Output kind
            node: Optional host node (children, fills, strokes, css, resolvedVariableModes)
            config: Generator config name (default: 'default')

        Returns:
            JSON string with generated code and skipped declarations

        Example:
            tokens_generate(document="openbridge", kind="cssvariables")
        """
        try:
            doc = await manager.get(document)
            if doc is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.DOCUMENT_NOT_FOUND.format(name=document)}
                )

            config_obj = config_loader.get_config(config)
            if config_obj is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.CONFIG_NOT_FOUND.format(name=config)}
                )

            request = GenerationRequest(
                kind=kind,
                node=SceneNode.model_validate(node) if node is not None else None,
            )
            generator = CodeGenerator(InMemoryTokenStore(doc), config_obj)
            results = await generator.generate(request)

            return json.dumps(
                {
                    "status": "success",
                    "results": [r.model_dump() for r in results],
                    "skipped": [i.to_dict() for i in generator.last_report.errors],
                }
            )
        except UnsupportedRequestError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate code")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_generate"] = tokens_generate

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_normalize_name(name: str) -> str:
        """
        Show the custom property name a token name maps to.

        Args:
            name: Token name (e.g., 'Color/Primary/On-Surface')

        Returns:
            JSON string with the normalized name

        Example:
            tokens_normalize_name(name="Color/Primary/On-Surface")
        """
        return json.dumps({"status": "success", "name": name, "css_name": normalize_name(name)})

    tools["tokens_normalize_name"] = tokens_normalize_name

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_resolve_token(
        document: str,
        token: str,
        mode: str,
        config: str = "default",
    ) -> str:
        """
        Resolve one token of a collection in one of its modes.

        Follows the alias chain the way palette generation does and
        returns the declaration it would emit.

        Args:
            document: Document name
            token: Token name or id
            mode: Mode name of the token's collection
            config: Generator config name (default: 'default')

        Returns:
            JSON string with the resolved declaration

        Example:
            tokens_resolve_token(document="openbridge", token="Color/Primary/On-Surface", mode="Day")
        """
        try:
            doc = await manager.get(document)
            if doc is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.DOCUMENT_NOT_FOUND.format(name=document)}
                )

            config_obj = config_loader.get_config(config)
            if config_obj is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.CONFIG_NOT_FOUND.format(name=config)}
                )

            token_obj = doc.get_token(token) or doc.get_token_by_name(token)
            if token_obj is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TOKEN_NOT_FOUND.format(token_id=token)}
                )

            collection = doc.get_collection(token_obj.collection_id)
            if collection is None:
                message = ErrorMessages.COLLECTION_NOT_FOUND.format(collection_id=token_obj.collection_id)
                return json.dumps({"status": "error", "message": message})
            mode_obj = collection.get_mode_by_name(mode)
            if mode_obj is None:
                message = ErrorMessages.MODE_NOT_FOUND.format(collection=collection.name, modes=collection.mode_names)
                return json.dumps({"status": "error", "message": message})

            cache = TokenCache(InMemoryTokenStore(doc))
            resolver = AliasResolver(
                cache,
                ModeSelector(config_obj.mode_defaults, config_obj.suppressed_collections),
                scope=collection,
                max_depth=config_obj.max_alias_depth,
            )
            css_name = normalize_name(token_obj.name)
            try:
                value = await resolver.resolve(token_obj.value_for_mode(mode_obj.mode_id), mode_obj)
            except ResolutionError as e:
                return json.dumps({"status": "error", "code": e.code, "message": str(e)})

            if value is SelectionOutcome.SUPPRESSED:
                return json.dumps({"status": "success", "css_name": css_name, "suppressed": True})

            line = await ValueFormatter(cache).format(value, css_name)
            return json.dumps(
                {
                    "status": "success",
                    "css_name": css_name,
                    "suppressed": False,
                    "declaration": line.strip(),
                }
            )
        except Exception as e:
            logger.exception("Failed to resolve token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_resolve_token"] = tokens_resolve_token

    return tools
