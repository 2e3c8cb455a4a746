"""Tests for token document loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tokenplug.core.errors import TokenLoadError
from tokenplug.core.ir import TokenType
from tokenplug.core.loader import load_tokens, parse_tokens


class TestFlatten:
    def test_dotted_ids_and_inherited_type(self) -> None:
        data = {
            "color": {
                "$type": "color",
                "$description": "Palette",
                "brand": {"primary": {"$value": "#1E63E9"}},
            },
            "spacing": {"sm": {"$type": "dimension", "$value": "4px"}},
        }
        tokens = parse_tokens(data)

        assert [t.id for t in tokens] == ["color.brand.primary", "spacing.sm"]
        assert tokens[0].kind is TokenType.COLOR
        assert tokens[1].kind is TokenType.DIMENSION

    def test_token_type_overrides_group_type(self) -> None:
        data = {"misc": {"$type": "color", "gap": {"$type": "dimension", "$value": "2px"}}}
        assert parse_tokens(data)[0].type == "dimension"

    def test_untyped_token_is_kept_without_kind(self) -> None:
        tokens = parse_tokens({"loose": {"$value": 3}})
        assert tokens[0].type == ""
        assert tokens[0].kind is None

    def test_array_document(self) -> None:
        data = [
            {"id": "a", "$type": "color", "$value": "#000000"},
            {"id": "b", "type": "dimension", "value": "2px"},
        ]
        tokens = parse_tokens(data)
        assert [t.id for t in tokens] == ["a", "b"]
        assert tokens[1].value == "2px"

    def test_duplicate_ids(self) -> None:
        data = [
            {"id": "a", "$type": "color", "$value": "#000000"},
            {"id": "a", "$type": "color", "$value": "#FFFFFF"},
        ]
        with pytest.raises(TokenLoadError, match="Duplicate token id"):
            parse_tokens(data)

    def test_scalar_document(self) -> None:
        with pytest.raises(TokenLoadError, match="object or an array"):
            parse_tokens("tokens")


class TestAliases:
    def test_value_alias(self) -> None:
        data = {
            "base": {"$type": "color", "blue": {"$value": "#0000FF"}},
            "brand": {"$type": "color", "primary": {"$value": "{base.blue}"}},
        }
        tokens = parse_tokens(data)
        assert tokens[1].value == "#0000FF"

    def test_alias_chain_and_type(self) -> None:
        data = {
            "a": {"$type": "color", "$value": "#FFFFFF"},
            "b": {"$value": "{a}"},
            "c": {"$value": "{b}"},
        }
        tokens = parse_tokens(data)
        assert tokens[2].value == "#FFFFFF"
        assert tokens[2].kind is TokenType.COLOR

    def test_alias_inside_composite(self) -> None:
        data = {
            "black": {"$type": "color", "$value": "#000000"},
            "card": {
                "$type": "shadow",
                "$value": [{"color": "{black}", "blur": "4px"}],
            },
        }
        assert parse_tokens(data)[1].value == [{"color": "#000000", "blur": "4px"}]

    def test_mode_alias(self) -> None:
        data = {
            "black": {"$type": "color", "$value": "#000000"},
            "bg": {
                "$type": "color",
                "$value": "#FFFFFF",
                "$extensions": {
                    "mode": {"dark": "{black}"},
                    "figma": {"collection": {"name": "Base"}},
                },
            },
        }
        bg = parse_tokens(data)[1]
        assert bg.mode_value("dark") == "#000000"
        assert bg.extensions.collection == "Base"

    def test_unknown_alias(self) -> None:
        with pytest.raises(TokenLoadError, match="unknown token") as exc:
            parse_tokens({"a": {"$type": "color", "$value": "{missing}"}})
        assert "token 'a'" in str(exc.value)

    def test_circular_alias(self) -> None:
        data = {
            "a": {"$type": "color", "$value": "{b}"},
            "b": {"$type": "color", "$value": "{a}"},
        }
        with pytest.raises(TokenLoadError, match="Circular alias"):
            parse_tokens(data)

    def test_self_alias(self) -> None:
        with pytest.raises(TokenLoadError, match="Circular alias"):
            parse_tokens({"a": {"$type": "color", "$value": "{a}"}})

    def test_braces_inside_text_are_not_aliases(self) -> None:
        tokens = parse_tokens({"a": {"$type": "fontFamily", "$value": "Inter {bold}"}})
        assert tokens[0].value == "Inter {bold}"


class TestLoadTokens:
    def test_fixture(self, fixtures_dir: Path) -> None:
        document = load_tokens(fixtures_dir / "design.tokens.json")
        ids = [t.id for t in document.tokens]

        assert ids[:3] == ["colorbase.blue.500", "colorbase.black", "colorbase.white"]
        assert document.get("color.primary").value == "#1E63E9"  # type: ignore[union-attr]
        assert document.get("color.surface").mode_value("dark") == "#000000"  # type: ignore[union-attr]
        assert isinstance(document.raw_schema, dict)
        assert document.source == fixtures_dir / "design.tokens.json"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TokenLoadError, match="Cannot read"):
            load_tokens(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "tokens.json"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(TokenLoadError, match="Invalid JSON"):
            load_tokens(path)

    def test_roundtrip_through_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tokens.json"
        path.write_text(json.dumps({"s": {"$type": "dimension", "$value": "2px"}}), encoding="utf-8")
        assert load_tokens(path).tokens[0].id == "s"
