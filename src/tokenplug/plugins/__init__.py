"""
Token plugin system.

Plugins generate platform files from the flattened token list.
"""

from .base import Plugin, PluginCapabilities, PluginRegistry, coerce_tokens
from .xaml import XamlPlugin


def get_default_registry() -> PluginRegistry:
    """A registry holding the built-in plugins."""
    registry = PluginRegistry()
    registry.register(XamlPlugin.name, XamlPlugin)
    return registry


__all__ = [
    "Plugin",
    "PluginCapabilities",
    "PluginRegistry",
    "XamlPlugin",
    "coerce_tokens",
    "get_default_registry",
]
