"""
XAML ResourceDictionary plugin.

Generates ``theme.xaml`` with every token that is not excluded, plus one
``theme.<collection>.<mode>.xaml`` per collection for each mode present
in the token set.

Example options, excluding tokens whose id starts with ``colorbase`` or
ends with ``temporary``::

    plugins:
      - name: xaml
        options:
          filename: theme.xaml
          excludePatterns: ["^colorbase", "temporary$"]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..core.diagnostics import Diagnostics
from ..core.ir.tokens import Token
from ..core.results import BuildResult
from ..xaml.assembler import assemble
from ..xaml.options import XamlOptions
from .base import Plugin, PluginCapabilities, coerce_tokens

logger = logging.getLogger(__name__)


class XamlPlugin(Plugin):
    """Design tokens -> XAML ResourceDictionary files."""

    name = "xaml"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self.options = XamlOptions.from_options(options)
        super().__init__(options)

    def build(self, tokens: Sequence[Token], raw_schema: Mapping[str, Any]) -> BuildResult:
        token_list = coerce_tokens(tokens)
        diagnostics = Diagnostics()

        logger.debug(
            "Building XAML for %d token(s), excluding %s",
            len(token_list),
            self.options.exclude_patterns or "nothing",
        )
        outputs = assemble(token_list, self.options, diagnostics)
        logger.info("Generated %d XAML file(s)", len(outputs))

        return BuildResult(outputs=outputs, warnings=list(diagnostics.warnings))

    def get_capabilities(self) -> PluginCapabilities:
        return PluginCapabilities(
            name=self.name,
            description="XAML ResourceDictionary with per-collection mode dictionaries",
            output_formats=["xaml"],
        )
