"""
ResourceDictionary document assembly.

Produces the base dictionary (all non-excluded tokens, one commented
section per token type) and one extra dictionary per collection for every
mode found in the token set.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from ..core.diagnostics import Diagnostics
from ..core.grouping import (
    detect_modes,
    filter_excluded,
    group_by_collection_and_mode,
    group_by_type,
)
from ..core.ir.tokens import Token
from ..core.results import OutputFile
from .converter import convert_token
from .options import XamlOptions

logger = logging.getLogger(__name__)

XAML_NAMESPACE = "http://schemas.microsoft.com/winfx/2006/xaml/presentation"
XAML_X_NAMESPACE = "http://schemas.microsoft.com/winfx/2006/xaml"
XAML_SYS_NAMESPACE = "clr-namespace:System;assembly=mscorlib"

DICTIONARY_OPEN = (
    f'<ResourceDictionary xmlns="{XAML_NAMESPACE}"\n'
    f'                    xmlns:x="{XAML_X_NAMESPACE}"\n'
    f'                    xmlns:sys="{XAML_SYS_NAMESPACE}">\n'
)
DICTIONARY_CLOSE = "</ResourceDictionary>\n"


def section_header(token_type: str) -> str:
    return f"\n  <!-- {token_type.upper()} Tokens -->\n"


def render_base_document(
    tokens: Sequence[Token],
    patterns: Sequence[re.Pattern[str]],
    diagnostics: Diagnostics,
    *,
    font_weight_suffix: bool = False,
) -> str:
    """The base dictionary: every non-excluded token, sectioned by type."""
    parts = [DICTIONARY_OPEN]
    groups = group_by_type(filter_excluded(tokens, patterns))
    for token_type, group in groups.items():
        if group[0].kind is None:
            logger.debug("Skipping %d token(s) of unsupported type %r", len(group), token_type)
            continue
        parts.append(section_header(token_type))
        parts.extend(
            convert_token(t, diagnostics, font_weight_suffix=font_weight_suffix) for t in group
        )
    parts.append("\n")
    parts.append(DICTIONARY_CLOSE)
    return "".join(parts)


def render_mode_documents(
    tokens: Sequence[Token],
    patterns: Sequence[re.Pattern[str]],
    mode: str,
    options: XamlOptions,
    diagnostics: Diagnostics,
) -> list[OutputFile]:
    """One dictionary per collection holding that collection's ``mode`` values."""
    outputs: list[OutputFile] = []
    groups = group_by_collection_and_mode(tokens, mode, patterns, diagnostics)
    for collection, group in groups.items():
        body = "".join(
            convert_token(t, diagnostics, font_weight_suffix=options.font_weight_suffix)
            for t in group
        )
        outputs.append(
            OutputFile(
                filename=options.mode_filename(collection, mode),
                contents=DICTIONARY_OPEN + body + DICTIONARY_CLOSE,
            )
        )
    return outputs


def assemble(
    tokens: Sequence[Token],
    options: XamlOptions,
    diagnostics: Diagnostics,
) -> list[OutputFile]:
    """Every output file for a token set: the base dictionary, then mode files."""
    patterns = options.compiled_patterns()
    outputs = [
        OutputFile(
            filename=options.base_filename(),
            contents=render_base_document(
                tokens,
                patterns,
                diagnostics,
                font_weight_suffix=options.font_weight_suffix,
            ),
        )
    ]
    for mode in detect_modes(tokens):
        outputs.extend(render_mode_documents(tokens, patterns, mode, options, diagnostics))
    return outputs
