#!/usr/bin/env python3
"""
Async Tokens MCP Server using chuk-mcp-server

This server turns design token documents (host variable exports) into
themed CSS custom properties. Tokens alias each other across
collections and modes; the server flattens palette aliases to literal
values and keeps primitive aliases as var() references.

The server provides tools for:
- Listing, inspecting and validating token documents
- Generating stylesheets, variable maps and cleaned-up node CSS
- Resolving single tokens and normalizing names
- Listing and customizing generator configs
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.documents import DocumentManager
from chuk_mcp_tokens.tools import (
    register_config_tools,
    register_document_tools,
    register_generation_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tokens")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
DOCUMENTS_DIR = BASE_PATH / "tokens"
CONFIGS_DIR = BASE_PATH / "configs"
CONFIG_LIBRARY_PATH = Path(__file__).parent / "config" / "library"

# Create managers
document_manager = DocumentManager(DOCUMENTS_DIR)
config_loader = ConfigLoader(
    library_path=CONFIG_LIBRARY_PATH,
    project_path=CONFIGS_DIR,
)

# Register all tools
document_tools = register_document_tools(mcp, document_manager)
generation_tools = register_generation_tools(mcp, document_manager, config_loader)
config_tools = register_config_tools(mcp, config_loader)

# Export tool functions for direct access
tokens_list_documents = document_tools["tokens_list_documents"]
tokens_describe_document = document_tools["tokens_describe_document"]
tokens_list_collections = document_tools["tokens_list_collections"]
tokens_validate_document = document_tools["tokens_validate_document"]

tokens_generate = generation_tools["tokens_generate"]
tokens_normalize_name = generation_tools["tokens_normalize_name"]
tokens_resolve_token = generation_tools["tokens_resolve_token"]

tokens_list_configs = config_tools["tokens_list_configs"]
tokens_describe_config = config_tools["tokens_describe_config"]
tokens_copy_config_to_project = config_tools["tokens_copy_config_to_project"]

logger.info("CHUK Tokens MCP Server initialized")
logger.info(f"  Documents dir: {DOCUMENTS_DIR}")
logger.info(f"  Config library: {CONFIG_LIBRARY_PATH}")
