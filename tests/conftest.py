"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_tokens.models import GeneratorConfig, TokenDocument
from chuk_mcp_tokens.tokens import InMemoryTokenStore, TokenCache

EXAMPLES_DIR = Path(__file__).parent.parent / "examples" / "documents"


def alias(token_id: str) -> dict[str, str]:
    """Host alias payload."""
    return {"type": "VARIABLE_ALIAS", "id": token_id}


def rgb(r: float, g: float, b: float, a: float = 1.0) -> dict[str, float]:
    """Host color payload."""
    return {"r": r, "g": g, "b": b, "a": a}


def variable(token_id: str, name: str, collection_id: str, values: dict[str, Any], **extra: Any) -> dict[str, Any]:
    """Host variable payload."""
    return {
        "id": token_id,
        "name": name,
        "variableCollectionId": collection_id,
        "valuesByMode": values,
        **extra,
    }


def collection(collection_id: str, name: str, *modes: tuple[str, str]) -> dict[str, Any]:
    """Host collection payload."""
    return {
        "id": collection_id,
        "name": name,
        "modes": [{"modeId": mode_id, "name": mode_name} for mode_id, mode_name in modes],
    }


def host_export() -> dict[str, Any]:
    """
    A small store covering each resolution path.

    Palette tokens alias a multi-mode primitive collection (resolved via
    named defaults), the palette itself, a suppressed categorical
    collection, and a collection with no default mode.
    """
    return {
        "name": "bridge",
        "description": "Test bridge tokens",
        "collections": [
            collection("col:palette", "Palette", ("p-day", "Day"), ("p-dusk", "Dusk"), ("p-night", "Night")),
            collection("col:primitives", "Color-primitives-day", ("c-def", "Default"), ("c-wcag", "WCAG")),
            collection("col:other", "Color-primitives-other", ("x-a", "A"), ("x-b", "B")),
            collection("col:categorical", "Color-categorical", ("k-one", "One"), ("k-two", "Two")),
            collection("col:size", "Component-size", ("s-reg", "Regular"), ("s-lg", "Large")),
            collection("col:typography", ".typography-primitives", ("t-reg", "Regular")),
            collection("col:components", "component-primitives", ("v-val", "Value"), ("v-cmp", "Compact")),
        ],
        "variables": [
            variable(
                "t:on-surface",
                "Color/Primary/On-Surface",
                "col:palette",
                {"p-day": alias("t:blue"), "p-dusk": rgb(1, 1, 1, 0.55), "p-night": alias("t:background")},
            ),
            variable(
                "t:background",
                "Container/Background",
                "col:palette",
                {"p-day": rgb(1, 1, 1), "p-dusk": rgb(0.2, 0.2, 0.2), "p-night": rgb(0, 0, 0)},
            ),
            variable(
                "t:accent",
                "Categorical/Accent",
                "col:palette",
                {"p-day": alias("t:cat-1"), "p-dusk": alias("t:cat-1"), "p-night": alias("t:cat-1")},
            ),
            variable(
                "t:orphan",
                "Alert/Orphan",
                "col:palette",
                {"p-day": alias("t:other"), "p-dusk": alias("t:other"), "p-night": alias("t:other")},
            ),
            variable(
                "t:blue",
                "Blue/500",
                "col:primitives",
                {"c-def": rgb(0.2, 0.4, 0.8), "c-wcag": rgb(0, 0, 1)},
            ),
            variable("t:cat-1", "Categorical/Accent-1", "col:categorical", {"k-one": rgb(1, 0, 0)}),
            variable("t:other", "Other/Red", "col:other", {"x-a": rgb(1, 0, 0), "x-b": rgb(0, 1, 0)}),
            variable("t:height", "Button/Height", "col:size", {"s-reg": 40, "s-lg": 48}),
            variable(
                "t:padding",
                "Button/Padding",
                "col:size",
                {"s-reg": alias("t:spacing"), "s-lg": alias("t:spacing")},
            ),
            variable("t:font", "Styles/Font family", "col:typography", {"t-reg": "noto-sans"}),
            variable("t:weight", "Body/Font-weight", "col:typography", {"t-reg": 400}),
            variable("t:spacing", "Spacing/08", "col:components", {"v-val": 8, "v-cmp": 6}),
        ],
    }


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def document() -> TokenDocument:
    """The shared test token document."""
    return TokenDocument.from_host_dict(host_export())


@pytest.fixture
def store(document: TokenDocument) -> InMemoryTokenStore:
    """Token store over the shared document."""
    return InMemoryTokenStore(document)


@pytest.fixture
def cache(store: InMemoryTokenStore) -> TokenCache:
    """Read-through cache over the shared store."""
    return TokenCache(store)


@pytest.fixture
def config() -> GeneratorConfig:
    """Config matching the built-in default layout."""
    from chuk_mcp_tokens.config import ConfigLoader

    loaded = ConfigLoader().get_config("default")
    assert loaded is not None
    return loaded


@pytest.fixture
def example_document_path() -> Path:
    """Path to the shipped example document."""
    return EXAMPLES_DIR / "bridge.tokens.yaml"
