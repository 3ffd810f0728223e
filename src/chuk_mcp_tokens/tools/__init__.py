"""
MCP tool implementations.

Tools are organized by domain:
- documents - Token document discovery and validation
- generation - CSS and variable map generation
- config - Generator config discovery
"""

from chuk_mcp_tokens.tools.config import register_config_tools
from chuk_mcp_tokens.tools.documents import register_document_tools
from chuk_mcp_tokens.tools.generation import register_generation_tools

__all__ = [
    "register_config_tools",
    "register_document_tools",
    "register_generation_tools",
]
