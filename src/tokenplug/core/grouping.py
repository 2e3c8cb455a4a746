"""
Token grouping and filtering.

Exclusion by id pattern, partitioning by type, and the mode/collection
split used to produce one document per collection and mode.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .diagnostics import Diagnostics
from .errors import ConfigError
from .ir.tokens import Token

DEFAULT_COLLECTION = "default"


def compile_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile exclusion patterns, failing on the first invalid one.

    Raises:
        ConfigError: If any pattern is not a valid regular expression.
    """
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except (re.error, TypeError) as e:
            raise ConfigError(f"Invalid regex pattern: {pattern!r} ({e})") from e
    return compiled


def is_excluded(token: Token, patterns: Sequence[re.Pattern[str]]) -> bool:
    """True if the token id matches any pattern anywhere in the id."""
    return any(p.search(token.id) for p in patterns)


def filter_excluded(tokens: Iterable[Token], patterns: Sequence[re.Pattern[str]]) -> list[Token]:
    """Keep tokens whose id matches none of the patterns, in order."""
    return [t for t in tokens if not is_excluded(t, patterns)]


def group_by_type(tokens: Iterable[Token]) -> dict[str, list[Token]]:
    """Partition tokens by declared type.

    Groups appear in the order their type is first seen; tokens keep their
    relative order inside each group.
    """
    groups: dict[str, list[Token]] = {}
    for token in tokens:
        groups.setdefault(token.type, []).append(token)
    return groups


def detect_modes(tokens: Iterable[Token]) -> list[str]:
    """Distinct mode names across all tokens, in first-seen order."""
    seen: dict[str, None] = {}
    for token in tokens:
        for mode in token.modes:
            seen.setdefault(mode, None)
    return list(seen)


def group_by_collection_and_mode(
    tokens: Iterable[Token],
    mode: str,
    patterns: Sequence[re.Pattern[str]] = (),
    diagnostics: Diagnostics | None = None,
) -> dict[str, list[Token]]:
    """Mode tokens for ``mode``, partitioned by collection name.

    Only tokens with a (truthy) override for ``mode`` that are not excluded
    take part. Each is replaced by a copy carrying the override as its value.
    Tokens with no collection go to ``DEFAULT_COLLECTION``.
    """
    groups: dict[str, list[Token]] = {}
    for token in tokens:
        override = token.mode_value(mode)
        if not override or is_excluded(token, patterns):
            continue
        collection = token.extensions.collection
        if not collection:
            if diagnostics is not None:
                with diagnostics.for_token(token.id):
                    diagnostics.warn(
                        f"No collection for mode '{mode}', using '{DEFAULT_COLLECTION}'"
                    )
            collection = DEFAULT_COLLECTION
        groups.setdefault(collection, []).append(token.with_override(override))
    return groups
