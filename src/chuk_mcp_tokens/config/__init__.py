"""
Generator configs - mode defaults and stylesheet layout.

Configs are policy, not data: they say which mode a multi-mode
collection is read in and which collections become which blocks.
"""

from chuk_mcp_tokens.config.loader import ConfigLoader

__all__ = [
    "ConfigLoader",
]
