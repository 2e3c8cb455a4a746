"""
Error types for tokenplug loading, configuration, and builds.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokenPlugError(Exception):
    """Base exception for all tokenplug errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(TokenPlugError):
    """
    Raised when configuration or plugin options are invalid.

    Examples:
    - Options of the wrong shape (excludePatterns not a list)
    - Invalid regular expression in excludePatterns
    - Missing or malformed tokens.config.yaml
    - Unknown or duplicate plugin names
    """

    pass


class TokenLoadError(TokenPlugError):
    """
    Raised when a token document cannot be turned into tokens.

    Examples:
    - Unreadable or non-JSON token file
    - Duplicate token ids
    - Alias referencing a token that does not exist
    - Circular alias chain
    """

    pass


class BuildError(TokenPlugError):
    """
    Raised when a build cannot produce output.

    Examples:
    - Token collection is not a list
    - A plugin failed with an unexpected exception
    """

    pass


@dataclass
class ErrorContext:
    """
    Where an error was found.

    Attributes:
        file: Path to the token or config file
        token_id: Optional id of the offending token
        plugin: Optional name of the plugin that was running
    """

    file: Path | None = None
    token_id: str | None = None
    plugin: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens.json: token 'color.base' (plugin xaml)"
        """
        parts: list[str] = []
        if self.file:
            parts.append(str(self.file))
        if self.token_id:
            parts.append(f"token '{self.token_id}'")
        location = ": ".join(parts) if parts else "<unknown>"
        if self.plugin:
            location += f" (plugin {self.plugin})"
        return location


def make_load_error(
    message: str,
    file: Path | None = None,
    token_id: str | None = None,
) -> TokenLoadError:
    """
    Helper to create a TokenLoadError with optional context.

    Args:
        message: Error description
        file: Optional token file path
        token_id: Optional id of the offending token

    Returns:
        TokenLoadError with context if a location is provided
    """
    if file or token_id:
        return TokenLoadError(message, ErrorContext(file=file, token_id=token_id))
    return TokenLoadError(message)
