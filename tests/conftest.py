"""Shared pytest fixtures for tokenplug tests."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from tokenplug.core.diagnostics import Diagnostics
from tokenplug.core.ir import Token


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "unit" / "fixtures"


@pytest.fixture
def diagnostics() -> Diagnostics:
    return Diagnostics()


@pytest.fixture
def color_token() -> Token:
    return Token(id="color.primary", type="color", value="#1E63E9")


@pytest.fixture
def mode_token() -> Token:
    """A color with light/dark overrides in the Base collection."""
    return Token.model_validate(
        {
            "id": "color.surface",
            "$type": "color",
            "$value": "#FFFFFF",
            "$extensions": {
                "mode": {"light": "#FFFFFF", "dark": "#000000"},
                "figma": {"collection": {"name": "Base"}},
            },
        }
    )


@pytest.fixture
def mixed_tokens(color_token: Token, mode_token: Token) -> list[Token]:
    return [
        color_token,
        Token(id="spacing.sm", type="dimension", value="4px"),
        Token(id="colorbase.blue.500", type="color", value="#1E63E9"),
        mode_token,
        Token(id="font.body", type="fontFamily", value="Inter"),
        Token(id="spacing.md", type="dimension", value="8px"),
    ]


@pytest.fixture
def project_dir(tmp_path: Path, fixtures_dir: Path) -> Path:
    """A project with a token export and a tokens.config.yaml."""
    (tmp_path / "_input").mkdir()
    shutil.copy(fixtures_dir / "design.tokens.json", tmp_path / "_input" / "design.tokens.json")
    config = {
        "tokens": "./_input/design.tokens.json",
        "outDir": "./_output/",
        "plugins": [
            {
                "name": "xaml",
                "options": {"filename": "theme.xaml", "excludePatterns": ["^colorbase"]},
            }
        ],
    }
    # JSON is valid YAML
    (tmp_path / "tokens.config.yaml").write_text(json.dumps(config), encoding="utf-8")
    return tmp_path
