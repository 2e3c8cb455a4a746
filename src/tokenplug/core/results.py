"""
Plugin output records.

Plugins never write files. They return ``OutputFile`` records inside a
``BuildResult`` and the build orchestrator writes them under the output
directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .diagnostics import BuildWarning


@dataclass(frozen=True)
class OutputFile:
    """A generated file: path relative to the output directory, and text."""

    filename: str
    contents: str


@dataclass
class BuildResult:
    """
    Result from a plugin build.

    Attributes:
        outputs: Generated files, in the order they should be written
        warnings: Values that needed a fallback during conversion
    """

    outputs: list[OutputFile] = field(default_factory=list)
    warnings: list[BuildWarning] = field(default_factory=list)

    @property
    def filenames(self) -> list[str]:
        return [o.filename for o in self.outputs]

    def add_output(self, filename: str, contents: str) -> None:
        """Record a generated file."""
        self.outputs.append(OutputFile(filename=filename, contents=contents))

    def merge(self, other: BuildResult) -> None:
        """Merge another result into this one."""
        self.outputs.extend(other.outputs)
        self.warnings.extend(other.warnings)
