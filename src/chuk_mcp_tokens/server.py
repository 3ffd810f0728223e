#!/usr/bin/env python3
"""
Entry point for the CHUK Tokens MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http), and a one-shot
``generate`` command that writes generated code to stdout or a file.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def generate_once(
    document_path: Path,
    kind: str,
    config_name: str,
    configs_dir: Path | None,
    node_path: Path | None,
) -> str:
    """Generate code for one document file and return it."""
    from chuk_mcp_tokens.config import ConfigLoader
    from chuk_mcp_tokens.constants import ErrorMessages
    from chuk_mcp_tokens.documents import DocumentManager
    from chuk_mcp_tokens.generator import CodeGenerator
    from chuk_mcp_tokens.models.codegen import GenerationRequest
    from chuk_mcp_tokens.models.scene import SceneNode
    from chuk_mcp_tokens.tokens import InMemoryTokenStore

    manager = DocumentManager(document_path.parent)
    document = await manager.load(document_path)

    config = ConfigLoader(project_path=configs_dir).get_config(config_name)
    if config is None:
        raise ValueError(ErrorMessages.CONFIG_NOT_FOUND.format(name=config_name))

    node = SceneNode.model_validate_json(node_path.read_text()) if node_path else None
    generator = CodeGenerator(InMemoryTokenStore(document), config)
    results = await generator.generate(GenerationRequest(kind=kind, node=node))

    for issue in generator.last_report.issues:
        logger.warning("%s", issue)
    return "\n".join(r.code for r in results)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Tokens MCP Server")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command")

    serve = commands.add_parser("serve", help="Run the MCP server (default)")
    serve.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )

    generate = commands.add_parser("generate", help="Generate code from a token document")
    generate.add_argument("document", type=Path, help="Path to a .tokens.json or .tokens.yaml file")
    generate.add_argument(
        "--kind",
        default="cssvariables",
        help="Output kind: cssvariables, variables, css, default (default: cssvariables)",
    )
    generate.add_argument("--config", default="default", help="Config name (default: default)")
    generate.add_argument("--configs-dir", type=Path, help="Project configs directory")
    generate.add_argument("--node", type=Path, help="JSON file with the host node")
    generate.add_argument("--output", "-o", type=Path, help="Write to a file instead of stdout")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "generate":
        code = asyncio.run(
            generate_once(args.document, args.kind, args.config, args.configs_dir, args.node)
        )
        if args.output:
            args.output.write_text(code)
            logger.info(f"Wrote {args.output}")
        else:
            sys.stdout.write(code)
        return

    # Import after argument parsing to avoid issues
    from chuk_mcp_tokens.async_server import mcp

    transport = getattr(args, "transport", "stdio")
    if transport == "stdio":
        logger.info("Starting CHUK Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
