"""
Tests for generator configs.

Tests cover:
- GeneratorConfig defaults
- ConfigLoader discovery, precedence and copying
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.models import ConfigMetadata, GeneratorConfig

LIBRARY_MODE_DEFAULTS = {
    "Palette-night-config": "Default",
    "Palette-dusk-configuration": "v2",
    "Palette-day-configuration": "Regular",
    "Color-primitives-dusk": "WCAG 6.1",
    "Color-primitives-day": "WCAG",
    "Color-primitives-night": "WCAG",
    "dusk-configuration": "v2",
}


class TestGeneratorConfig:
    """Tests for GeneratorConfig model."""

    def test_defaults(self):
        config = GeneratorConfig(name="bare")
        assert config.mode_defaults == {}
        assert config.suppressed_collections == ["Color-categorical"]
        assert config.palette.collection == "Palette"
        assert config.palette.default_theme == "day"
        assert config.primitives.mode_blocks == []
        assert config.max_alias_depth == 32

    def test_defaults_not_shared(self):
        first = GeneratorConfig(name="a")
        first.mode_defaults["Palette"] = "Day"
        assert GeneratorConfig(name="b").mode_defaults == {}

    def test_depth_must_be_positive(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(name="bad", max_alias_depth=0)

    def test_yaml_dict_round_trip(self):
        config = ConfigLoader().get_config("default")
        assert ConfigLoader().parse_config(config.to_yaml_dict()) == config

    def test_metadata(self):
        meta = ConfigMetadata.from_config(GeneratorConfig(name="bare"))
        assert meta.palette_collection == "Palette"
        assert meta.mode_default_count == 0
        assert ConfigMetadata.from_config(ConfigLoader().get_config("default")).mode_default_count == 7


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_list_library_configs(self, temp_dir: Path):
        loader = ConfigLoader(project_path=temp_dir)
        assert "default" in [c.name for c in loader.list_configs()]

    def test_default_config(self):
        config = ConfigLoader().get_config("default")
        assert config is not None
        assert config.mode_defaults == LIBRARY_MODE_DEFAULTS
        assert config.palette.theme_attribute == "data-theme"
        assert [b.collection for b in config.primitives.mode_blocks] == ["Component-size"]
        assert [p.collection for p in config.primitives.pinned] == [
            ".typography-primitives",
            "Set-component-corners",
            "component-primitives",
        ]

    def test_get_nonexistent(self):
        assert ConfigLoader().get_config("nonexistent") is None

    def test_project_overrides_library(self, temp_dir: Path):
        (temp_dir / "default.yaml").write_text(
            yaml.safe_dump({"name": "default", "palette": {"theme_attribute": "data-obc-theme"}})
        )
        config = ConfigLoader(project_path=temp_dir).get_config("default")
        assert config.palette.theme_attribute == "data-obc-theme"
        # The library table is not merged into a project config
        assert config.mode_defaults == {}

    def test_invalid_project_config_skipped(self, temp_dir: Path):
        (temp_dir / "broken.yaml").write_text("max_alias_depth: 5\n")
        loader = ConfigLoader(project_path=temp_dir)
        assert loader.get_config("broken") is None
        assert "broken" not in [c.name for c in loader.list_configs()]

    @pytest.mark.parametrize("text", ["", "- a\n- b\n", "just a string\n"])
    def test_non_mapping_project_config_skipped(self, temp_dir: Path, text: str):
        (temp_dir / "empty.yaml").write_text(text)
        loader = ConfigLoader(project_path=temp_dir)
        assert "default" in [c.name for c in loader.list_configs()]
        assert loader.get_config("empty") is None

    def test_parse_non_mapping(self):
        with pytest.raises(TypeError):
            ConfigLoader().parse_config(None)

    def test_copy_to_project(self, temp_dir: Path):
        loader = ConfigLoader(project_path=temp_dir)
        path = loader.copy_to_project("default")
        assert path == temp_dir / "default.yaml"
        assert path.exists()
        assert loader.get_config("default") is not None

    def test_copy_twice(self, temp_dir: Path):
        loader = ConfigLoader(project_path=temp_dir)
        loader.copy_to_project("default")
        with pytest.raises(ValueError):
            loader.copy_to_project("default")

    def test_copy_nonexistent(self, temp_dir: Path):
        assert ConfigLoader(project_path=temp_dir).copy_to_project("nonexistent") is None

    def test_copy_without_project(self):
        with pytest.raises(ValueError):
            ConfigLoader().copy_to_project("default")
