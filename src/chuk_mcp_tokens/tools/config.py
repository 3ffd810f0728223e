"""
Config tools - MCP tools for generator config discovery.

Tools for listing configs, inspecting mode defaults, and copying a
library config into the project for customization.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.constants import ErrorMessages

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_config_tools(
    mcp: ChukMCPServer,
    config_loader: ConfigLoader,
) -> dict[str, Any]:
    """
    Register config tools with the MCP server.

    Args:
        mcp: The MCP server instance
        config_loader: The config loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_configs() -> str:
        """
        List available generator configs.

        Returns:
            JSON string with list of config summaries

        Example:
            tokens_list_configs()
        """
        try:
            configs = config_loader.list_configs()
            return json.dumps(
                {
                    "status": "success",
                    "configs": [
                        {
                            "name": c.name,
                            "description": c.description,
                            "palette": c.palette_collection,
                            "mode_defaults": c.mode_default_count,
                        }
                        for c in configs
                    ],
                    "count": len(configs),
                }
            )
        except Exception as e:
            logger.exception("Failed to list configs")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_configs"] = tokens_list_configs

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe_config(name: str) -> str:
        """
        Get the full contents of a generator config.

        Args:
            name: Config name

        Returns:
            JSON string with mode defaults, palette and primitive sets

        Example:
            tokens_describe_config(name="default")
        """
        try:
            config = config_loader.get_config(name)
            if config is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.CONFIG_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "config": config.to_yaml_dict()})
        except Exception as e:
            logger.exception("Failed to describe config")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_describe_config"] = tokens_describe_config

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_copy_config_to_project(name: str) -> str:
        """
        Copy a library config to the project for customization.

        Args:
            name: Config name

        Returns:
            JSON string with path to copied config

        Example:
            tokens_copy_config_to_project(name="default")
        """
        try:
            path = config_loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.CONFIG_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": "Config copied to project",
                    "path": str(path),
                    "hint": "You can now add mode defaults by editing the YAML file",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy config")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_copy_config_to_project"] = tokens_copy_config_to_project

    return tools
