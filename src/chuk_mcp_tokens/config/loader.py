"""
Config loader - discovers and loads generator configs.

Configs can come from:
1. Built-in library (shipped with package)
2. Project configs (user's project/configs directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_tokens.models.config import (
    ConfigMetadata,
    GeneratorConfig,
    ModeBlockSet,
    PaletteConfig,
    PinnedSet,
    PrimitivesConfig,
)

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Discovers and loads generator configs.

    Configs are loaded from YAML files in the library and project directories.
    Project configs override library configs with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the config loader.

        Args:
            library_path: Path to built-in config library
            project_path: Path to project configs directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, GeneratorConfig] = {}

    def list_configs(self) -> list[ConfigMetadata]:
        """
        List all available configs.

        Returns configs from both library and project, with project
        configs taking precedence.
        """
        configs: dict[str, ConfigMetadata] = {}

        # Load library configs
        if self.library_path.exists():
            for path in self.library_path.glob("*.yaml"):
                config = self._load_config_file(path)
                if config:
                    configs[config.name] = ConfigMetadata.from_config(config)

        # Load project configs (override library)
        if self.project_path and self.project_path.exists():
            for path in self.project_path.glob("*.yaml"):
                config = self._load_config_file(path)
                if config:
                    configs[config.name] = ConfigMetadata.from_config(config)

        return list(configs.values())

    def get_config(self, name: str) -> GeneratorConfig | None:
        """
        Get a config by name.

        Project configs take precedence over library configs.

        Args:
            name: Config name

        Returns:
            GeneratorConfig if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        candidates = []
        if self.project_path:
            candidates.append(self.project_path / f"{name}.yaml")
        candidates.append(self.library_path / f"{name}.yaml")

        for path in candidates:
            if path.exists():
                config = self._load_config_file(path)
                if config:
                    self._cache[name] = config
                    return config

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library config to the project for customization.

        Args:
            name: Config name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Config already exists in project: {name}")

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def _load_config_file(self, path: Path) -> GeneratorConfig | None:
        """Load a config from a YAML file, or None if it is unreadable."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self.parse_config(data)
        except (OSError, yaml.YAMLError, ValidationError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Skipping config %s: %s", path, e)
            return None

    def parse_config(self, data: dict[str, Any]) -> GeneratorConfig:
        """Parse a config from YAML data."""
        if not isinstance(data, dict):
            raise TypeError(f"Config must be a mapping, got {type(data).__name__}")

        palette_data = data.get("palette", {})
        palette = PaletteConfig(**palette_data)

        primitives_data = data.get("primitives", {})
        primitives = PrimitivesConfig(
            mode_blocks=[ModeBlockSet(**b) for b in primitives_data.get("mode_blocks", [])],
            pinned=[PinnedSet(**p) for p in primitives_data.get("pinned", [])],
        )

        fields: dict[str, Any] = {
            "name": data["name"],
            "description": data.get("description", ""),
            "palette": palette,
            "primitives": primitives,
        }
        # An absent mode_defaults table means no preferred modes
        if "mode_defaults" in data:
            fields["mode_defaults"] = {str(k): str(v) for k, v in data["mode_defaults"].items()}
        if "suppressed_collections" in data:
            fields["suppressed_collections"] = list(data["suppressed_collections"])
        if "max_alias_depth" in data:
            fields["max_alias_depth"] = data["max_alias_depth"]

        return GeneratorConfig(schema_version=data.get("schema", "config/v1"), **fields)

    def clear_cache(self) -> None:
        """Clear the config cache."""
        self._cache.clear()
