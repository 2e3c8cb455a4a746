"""
tokenplug - build-time plugins for a design token pipeline.

Turns a design-tool token export into XAML ResourceDictionary files and
cleans reserved token groups out of generated stylesheets.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import BuildError, ConfigError, TokenLoadError, TokenPlugError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "BuildError",
    "ConfigError",
    "TokenLoadError",
    "TokenPlugError",
]
