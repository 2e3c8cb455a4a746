"""
Warning collection for token conversion.

Formatters recover from malformed leaf values by substituting a default.
Each recovery is recorded here and logged at DEBUG, so a build still returns its
output together with the list of values that needed a fallback.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildWarning:
    """A recovered problem with a single token value."""

    message: str
    token_id: str | None = None

    def __str__(self) -> str:
        if self.token_id:
            return f"{self.token_id}: {self.message}"
        return self.message


@dataclass
class Diagnostics:
    """
    Collects warnings raised while converting tokens.

    Attributes:
        warnings: Warnings in the order they were recorded
    """

    warnings: list[BuildWarning] = field(default_factory=list)
    _token_id: str | None = field(default=None, repr=False)

    def warn(self, message: str) -> None:
        """Record a warning against the token currently being converted."""
        warning = BuildWarning(message=message, token_id=self._token_id)
        self.warnings.append(warning)
        logger.debug("%s", warning)

    @contextmanager
    def for_token(self, token_id: str) -> Iterator[Diagnostics]:
        """Attribute warnings recorded inside the block to ``token_id``."""
        previous = self._token_id
        self._token_id = token_id
        try:
            yield self
        finally:
            self._token_id = previous

    def merge(self, other: Diagnostics) -> None:
        """Append another collector's warnings to this one."""
        self.warnings.extend(other.warnings)
