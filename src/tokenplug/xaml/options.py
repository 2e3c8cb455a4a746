"""
Options for the XAML plugin.

Accepts the camelCase keys used in token pipeline configs
(``excludePatterns``, ``outputDirectory``, ``filename``/``outputFilename``)
as well as the snake_case field names.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import PurePosixPath
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.errors import ConfigError
from ..core.grouping import compile_patterns

DEFAULT_FILENAME = "theme.xaml"


def _path_safe(name: str) -> str:
    # Collection names from the design tool may contain path separators
    return name.replace("/", "-").replace("\\", "-")


class XamlOptions(BaseModel):
    """Validated XAML plugin options."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    exclude_patterns: list[str] = Field(
        default_factory=list,
        alias="excludePatterns",
        description="Regular expressions; tokens whose id matches any are skipped",
    )
    output_directory: str = Field(
        default=".",
        alias="outputDirectory",
        description="Directory, relative to the build output dir, for generated files",
    )
    filename: str = Field(
        default=DEFAULT_FILENAME,
        validation_alias=AliasChoices("filename", "outputFilename"),
        description="File name of the base dictionary; mode files derive from it",
    )
    font_weight_suffix: bool = Field(
        default=False,
        alias="fontWeightSuffix",
        description="Append the weight name to typography font families",
    )

    @field_validator("exclude_patterns")
    @classmethod
    def _patterns_compile(cls, value: list[str]) -> list[str]:
        try:
            compile_patterns(value)
        except ConfigError as e:
            raise ValueError(e.message) from e
        return value

    @field_validator("filename")
    @classmethod
    def _filename_not_empty(cls, value: str) -> str:
        if not value.strip() or not PurePosixPath(value).name:
            raise ValueError("filename must not be empty")
        return value

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> XamlOptions:
        """Validate a raw options mapping.

        Raises:
            ConfigError: If the options have the wrong shape or a pattern
                does not compile.
        """
        if options is None:
            return cls()
        if not isinstance(options, Mapping):
            raise ConfigError(f"Invalid options: expected a mapping, got {type(options).__name__}")
        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            raise ConfigError(f"Invalid options: {e}") from e

    def compiled_patterns(self) -> list[re.Pattern[str]]:
        return compile_patterns(self.exclude_patterns)

    def base_filename(self) -> str:
        """Path of the base dictionary, relative to the build output dir."""
        return (PurePosixPath(self.output_directory) / self.filename).as_posix()

    def mode_filename(self, collection: str, mode: str) -> str:
        """``<base>.<collection>.<mode>.<ext>`` next to the base dictionary."""
        base = PurePosixPath(self.output_directory) / self.filename
        name = f"{base.stem}.{_path_safe(collection)}.{_path_safe(mode)}{base.suffix}"
        return base.with_name(name).as_posix()
