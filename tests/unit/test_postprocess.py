"""Tests for stylesheet token-group stripping."""

from __future__ import annotations

from pathlib import Path

import pytest

from tokenplug.core.errors import BuildError
from tokenplug.postprocess import strip_stylesheet, strip_token_group

SCSS = "\n".join(
    [
        "$__token-values: (",
        '  "color.primary": (',
        "    default: #1e63e9,",
        "  ),",
        "",
        '  "colorbase.blue.500": (',
        "    default: (",
        "      value: #1e63e9,",
        "    ),",
        "  ),",
        "",
        '  "spacing.sm": (',
        "    default: 4px,",
        "  ),",
        ");",
        "",
    ]
)

EXPECTED = "\n".join(
    [
        "$__token-values: (",
        '  "color.primary": (',
        "    default: #1e63e9,",
        "  ),",
        "",
        "",
        '  "spacing.sm": (',
        "    default: 4px,",
        "  ),",
        ");",
        "",
    ]
)


class TestStripTokenGroup:
    def test_removes_multiline_block(self) -> None:
        assert strip_token_group(SCSS) == EXPECTED

    def test_removes_every_block(self) -> None:
        text = '  "colorbase.a": (\n    x: 1,\n  ),\nkeep\n  "colorbase.b": (\n  ),\n'
        assert strip_token_group(text) == "keep\n"

    def test_single_line_block(self) -> None:
        text = 'a\n  "colorbase.black": #000,\nb'
        assert strip_token_group(text) == "a\nb"

    def test_other_group(self) -> None:
        text = '  "internal.x": (\n  ),\n  "colorbase.y": 1,'
        assert strip_token_group(text, "internal") == '  "colorbase.y": 1,'

    def test_unquoted_name_kept(self) -> None:
        text = "// colorbase comes first\n$colorbase: 1;"
        assert strip_token_group(text) == text

    def test_no_block_is_identity(self) -> None:
        assert strip_token_group(EXPECTED) == EXPECTED


class TestStripStylesheet:
    def test_in_place(self, tmp_path: Path) -> None:
        path = tmp_path / "index.scss"
        path.write_text(SCSS, encoding="utf-8")

        assert strip_stylesheet(path) is True
        assert path.read_text(encoding="utf-8") == EXPECTED
        assert strip_stylesheet(path) is False

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(BuildError, match="Cannot read"):
            strip_stylesheet(tmp_path / "missing.scss")
