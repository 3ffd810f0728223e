#!/usr/bin/env python3
"""
Example: Generating themed CSS from a token document.

This loads the bridge token export, validates it, and generates the
themed stylesheet plus a variable map for one node. Palette tokens are
flattened per theme; primitive tokens stay as var() references.

Usage:
    python examples/generate_css.py
"""

import asyncio
from pathlib import Path

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.documents import DocumentManager, validate_document
from chuk_mcp_tokens.generator import CodeGenerator
from chuk_mcp_tokens.models import GenerationRequest, SceneNode
from chuk_mcp_tokens.tokens import InMemoryTokenStore


async def main() -> None:
    """Demonstrate stylesheet generation."""
    print("CHUK Tokens CSS Generation Demo")
    print("=" * 40)
    print()

    manager = DocumentManager(Path(__file__).parent / "documents")
    document = await manager.get("bridge")
    if not document:
        print("Failed to load document")
        return

    print(f"Document: {document.name}")
    for collection in document.collections:
        print(f"  {collection.name}: {', '.join(collection.mode_names)}")
    print()

    print("Validation:")
    print(validate_document(document))
    print()

    config = ConfigLoader().get_config("default")
    if not config:
        print("Failed to load config")
        return

    generator = CodeGenerator(InMemoryTokenStore(document), config)

    # Full stylesheet
    results = await generator.generate(GenerationRequest(kind="cssvariables"))
    print("Stylesheet:")
    print(results[0].code)
    print()

    print("Skipped declarations:")
    print(generator.last_report)
    print()

    # Variable map for a node filled with the on-surface color
    node = SceneNode.model_validate(
        {
            "fills": [
                {
                    "type": "SOLID",
                    "boundVariables": {"color": {"type": "VARIABLE_ALIAS", "id": "VariableID:10:1"}},
                }
            ],
        }
    )
    results = await generator.generate(GenerationRequest(kind="variables", node=node))
    print("Variable map:")
    print(results[0].code)
    print()

    print("Done! Paste the stylesheet into your app and switch themes with data-theme.")


if __name__ == "__main__":
    asyncio.run(main())
