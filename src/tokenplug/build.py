"""
Build orchestration.

Loads the token file named by the project config, runs each configured
plugin, writes the returned files under ``outDir``, then runs the
stylesheet post-processing steps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .core.config import ProjectConfig
from .core.diagnostics import BuildWarning
from .core.errors import BuildError, ErrorContext, TokenPlugError
from .core.loader import load_tokens
from .core.results import OutputFile
from .plugins import PluginRegistry, get_default_registry
from .postprocess import strip_stylesheet

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """
    What a build did.

    Attributes:
        files_written: Absolute paths of written files, in write order
        warnings: Recovered value problems, per plugin
        stylesheets_stripped: Stylesheets changed by post-processing
    """

    files_written: list[Path] = field(default_factory=list)
    warnings: dict[str, list[BuildWarning]] = field(default_factory=dict)
    stylesheets_stripped: list[Path] = field(default_factory=list)

    @property
    def warning_count(self) -> int:
        return sum(len(w) for w in self.warnings.values())


def ensure_dir(path: Path) -> None:
    """Ensure a directory exists, creating it if necessary."""
    path.mkdir(parents=True, exist_ok=True)


def write_output(out_dir: Path, output: OutputFile) -> Path:
    """Write one plugin output under ``out_dir``, creating parent dirs."""
    target = (out_dir / output.filename).resolve()
    ensure_dir(target.parent)
    target.write_text(output.contents, encoding="utf-8")
    logger.debug("Wrote %s", target)
    return target


def run_build(config: ProjectConfig, registry: PluginRegistry | None = None) -> BuildReport:
    """Run a full build.

    Plugins are created (and their options validated) before the token file
    is read, and every plugin runs before anything is written, so a fatal
    error leaves no partial output.

    Raises:
        TokenPlugError: On configuration, loading or plugin failure.
    """
    registry = registry or get_default_registry()
    plugins = [registry.create(p.name, p.options) for p in config.plugins]
    if not plugins:
        logger.warning("No plugins configured, nothing to generate")

    document = load_tokens(config.tokens)

    results = []
    for plugin in plugins:
        try:
            result = plugin.build(document.tokens, document.raw_schema)
        except TokenPlugError:
            raise
        except Exception as e:
            logger.exception("Plugin %s failed", plugin.name)
            raise BuildError(
                f"Plugin failed with an internal error: {e}", ErrorContext(plugin=plugin.name)
            ) from e
        results.append((plugin.name, result))

    report = BuildReport()
    for name, result in results:
        report.warnings[name] = list(result.warnings)
        for output in result.outputs:
            report.files_written.append(write_output(config.out_dir, output))

    for step in config.postprocess:
        stylesheet = config.out_dir / step.stylesheet
        if strip_stylesheet(stylesheet, step.group):
            report.stylesheets_stripped.append(stylesheet)

    logger.info(
        "Build finished: %d file(s), %d warning(s)",
        len(report.files_written),
        report.warning_count,
    )
    return report
