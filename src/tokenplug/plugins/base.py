"""
Plugin base class and registry.

A plugin turns the loaded token list into output files. It returns them
in a BuildResult and leaves writing to the build orchestrator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from ..core.errors import BuildError, ConfigError
from ..core.ir.tokens import Token
from ..core.results import BuildResult


@dataclass
class PluginCapabilities:
    """
    Describes what a plugin generates.

    Used for CLI listings.
    """

    name: str
    description: str
    output_formats: list[str]


class Plugin(ABC):
    """
    Abstract base class for token plugins.

    Subclasses validate their options in ``__init__`` so configuration
    errors surface before any token is read.
    """

    name: str = "unnamed"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self.raw_options: dict[str, Any] = dict(options or {})

    @abstractmethod
    def build(self, tokens: Sequence[Token], raw_schema: Mapping[str, Any]) -> BuildResult:
        """
        Generate output files from tokens.

        Args:
            tokens: Flattened tokens, in document order
            raw_schema: The parsed token document the tokens came from

        Returns:
            BuildResult with generated files and recovered warnings

        Raises:
            BuildError: If the token collection has the wrong shape
        """
        pass

    def get_capabilities(self) -> PluginCapabilities:
        return PluginCapabilities(
            name=self.name,
            description="No description provided",
            output_formats=["unknown"],
        )


def coerce_tokens(tokens: Any) -> list[Token]:
    """Validate the token collection handed to a plugin.

    Raw mappings are accepted and validated into ``Token`` models.

    Raises:
        BuildError: If ``tokens`` is not a list or an entry is not a token.
    """
    if not isinstance(tokens, list | tuple):
        raise BuildError(f"Invalid input: 'tokens' must be a list, got {type(tokens).__name__}")
    result: list[Token] = []
    for index, item in enumerate(tokens):
        if isinstance(item, Token):
            result.append(item)
            continue
        try:
            result.append(Token.model_validate(item))
        except ValidationError as e:
            raise BuildError(f"Invalid token at index {index}: {e}") from e
    return result


class PluginRegistry:
    """
    Registry of plugin classes by name.

    Plugins are instantiated with their options on lookup.
    """

    def __init__(self) -> None:
        self._plugins: dict[str, type[Plugin]] = {}

    def register(self, name: str, plugin_class: type[Plugin]) -> None:
        """
        Register a plugin class.

        Raises:
            ConfigError: If the name is taken or the class is not a Plugin
        """
        if name in self._plugins:
            raise ConfigError(
                f"Plugin '{name}' is already registered. Cannot register {plugin_class.__name__}."
            )
        if not issubclass(plugin_class, Plugin):
            raise ConfigError(f"Plugin class {plugin_class.__name__} must extend Plugin")
        self._plugins[name] = plugin_class

    def get(self, name: str) -> type[Plugin]:
        """
        Look up a registered plugin class.

        Raises:
            ConfigError: If no plugin has that name
        """
        if name not in self._plugins:
            available = self.list_plugins()
            raise ConfigError(f"Plugin '{name}' not found. Available plugins: {available}")
        return self._plugins[name]

    def create(self, name: str, options: Mapping[str, Any] | None = None) -> Plugin:
        """
        Instantiate a registered plugin with its options.

        Raises:
            ConfigError: If no plugin has that name, or the options are invalid
        """
        return self.get(name)(options)

    def list_plugins(self) -> list[str]:
        return sorted(self._plugins)

    def has_plugin(self, name: str) -> bool:
        return name in self._plugins
