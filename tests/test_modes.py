"""
Tests for the mode selection policy.
"""

from chuk_mcp_tokens.constants import SelectionOutcome
from chuk_mcp_tokens.models import Collection, Mode
from chuk_mcp_tokens.tokens import ModeSelector

MODE_DEFAULTS = {
    "Color-primitives-dusk": "WCAG 6.1",
    "Color-primitives-day": "WCAG",
}


def make_collection(name: str, *mode_names: str) -> Collection:
    return Collection(
        id=f"col:{name}",
        name=name,
        modes=[Mode(mode_id=f"{name}:{i}", name=mode_name) for i, mode_name in enumerate(mode_names)],
    )


class TestModeSelector:
    """Tests for ModeSelector.select."""

    def test_single_mode_always_wins(self):
        """A single-mode collection ignores suppression and defaults."""
        collection = make_collection("Color-categorical", "Only")
        selector = ModeSelector({"Color-categorical": "Other"})
        assert selector.select(collection) == collection.modes[0]

    def test_suppressed(self):
        collection = make_collection("Color-categorical", "One", "Two")
        assert ModeSelector().select(collection) is SelectionOutcome.SUPPRESSED

    def test_suppressed_before_override(self):
        """Suppression applies even when an override names a mode."""
        collection = make_collection("Color-categorical", "One", "Two")
        overrides = {collection.id: collection.modes[1].mode_id}
        assert ModeSelector().select(collection, overrides) is SelectionOutcome.SUPPRESSED

    def test_override_by_id(self):
        collection = make_collection("Color-primitives-day", "Default", "WCAG")
        selector = ModeSelector(MODE_DEFAULTS)
        overrides = {collection.id: collection.modes[0].mode_id}
        assert selector.select(collection, overrides).name == "Default"

    def test_override_with_unknown_mode(self):
        """An override naming a missing mode does not fall back to defaults."""
        collection = make_collection("Color-primitives-day", "Default", "WCAG")
        selector = ModeSelector(MODE_DEFAULTS)
        assert selector.select(collection, {collection.id: "nope"}) is SelectionOutcome.NOT_FOUND

    def test_named_default(self):
        collection = make_collection("Color-primitives-dusk", "Default", "WCAG 6.1")
        assert ModeSelector(MODE_DEFAULTS).select(collection).name == "WCAG 6.1"

    def test_named_default_missing_mode(self):
        collection = make_collection("Color-primitives-day", "Default", "High contrast")
        assert ModeSelector(MODE_DEFAULTS).select(collection) is SelectionOutcome.NOT_FOUND

    def test_nothing_applies(self):
        collection = make_collection("Unconfigured", "A", "B")
        assert ModeSelector(MODE_DEFAULTS).select(collection) is SelectionOutcome.NOT_FOUND

    def test_custom_suppression(self):
        collection = make_collection("Brand-variants", "A", "B")
        selector = ModeSelector(suppressed=["Brand-variants"])
        assert selector.select(collection) is SelectionOutcome.SUPPRESSED

    def test_defaults_table_is_copied(self):
        """Later changes to the source table do not leak into the selector."""
        table = {"Unconfigured": "A"}
        selector = ModeSelector(table)
        table["Unconfigured"] = "B"
        assert selector.select(make_collection("Unconfigured", "A", "B")).name == "A"
