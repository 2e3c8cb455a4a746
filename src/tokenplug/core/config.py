"""
Project configuration for token builds.

Reads ``tokens.config.yaml``:

    tokens: ./_input/design.tokens.json
    outDir: ./_output/
    plugins:
      - name: xaml
        options:
          filename: theme.xaml
          excludePatterns: ["^colorbase"]
    postprocess:
      - stylesheet: index.scss
        group: colorbase

Relative paths resolve against the directory holding the config file.
Postprocess stylesheets resolve against ``outDir``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError, ErrorContext

logger = logging.getLogger(__name__)

CONFIG_FILE = "tokens.config.yaml"
DEFAULT_STRIP_GROUP = "colorbase"


class PluginConfig(BaseModel):
    """One plugin entry: registry name plus its raw options."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    options: dict[str, Any] = Field(default_factory=dict)


class PostprocessConfig(BaseModel):
    """A stylesheet to strip a reserved token group from after the build."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    stylesheet: str
    group: str = DEFAULT_STRIP_GROUP


class ProjectConfig(BaseModel):
    """Validated build configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    tokens: Path = Field(description="Token JSON file")
    out_dir: Path = Field(default=Path("."), alias="outDir")
    plugins: list[PluginConfig] = Field(default_factory=list)
    postprocess: list[PostprocessConfig] = Field(default_factory=list)

    def resolved(self, root: Path) -> ProjectConfig:
        """Copy with ``tokens`` and ``out_dir`` made absolute against ``root``."""
        return self.model_copy(
            update={
                "tokens": (root / self.tokens).resolve(),
                "out_dir": (root / self.out_dir).resolve(),
            }
        )


def get_config_path(project_root: Path) -> Path:
    """Get the tokens.config.yaml path for a project directory."""
    return project_root / CONFIG_FILE


def parse_project_config(data: Any, source: Path | None = None) -> ProjectConfig:
    """Validate raw config data.

    Raises:
        ConfigError: If the data does not describe a valid config.
    """
    context = ErrorContext(file=source) if source else None
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping", context)
    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}", context) from e


def load_project_config(path: Path) -> ProjectConfig:
    """Load a config file; a directory means its tokens.config.yaml.

    Raises:
        ConfigError: If the file is missing, is not YAML, or is invalid.
    """
    if path.is_dir():
        path = get_config_path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", ErrorContext(file=path)) from e

    config = parse_project_config(data, path).resolved(path.parent.resolve())
    logger.debug("Loaded config from %s", path)
    return config
