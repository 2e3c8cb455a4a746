"""
Token document loading.

Reads a DTCG-style token export and flattens it into ``Token`` models:

- nested groups become dotted ids (``color.brand.primary``)
- ``$type`` is inherited from the nearest enclosing group declaring one
- whole-string aliases (``"{color.base.blue}"``) are resolved in values
  and in mode overrides

A document that is already a JSON array of token records is used as is
(aliases are still resolved).
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import make_load_error
from .ir.tokens import Token

logger = logging.getLogger(__name__)

_ALIAS = re.compile(r"^\{([^{}]+)\}$")


@dataclass
class TokenDocument:
    """Tokens flattened from one export, with the parsed document itself."""

    tokens: list[Token] = field(default_factory=list)
    raw_schema: Any = None
    source: Path | None = None

    def get(self, token_id: str) -> Token | None:
        for token in self.tokens:
            if token.id == token_id:
                return token
        return None


# =============================================================================
# Flattening
# =============================================================================


def _flatten_tree(
    node: dict[str, Any],
    path: str,
    inherited_type: str | None,
    out: list[dict[str, Any]],
) -> None:
    for key, child in node.items():
        if key.startswith("$") or not isinstance(child, dict):
            continue
        child_path = f"{path}.{key}" if path else key
        child_type = child.get("$type", inherited_type)
        if "$value" in child:
            record = {k: v for k, v in child.items() if k.startswith("$")}
            record["id"] = child_path
            if child_type is not None:
                record["$type"] = child_type
            out.append(record)
        else:
            _flatten_tree(child, child_path, child_type, out)


def _records_from(data: Any, source: Path | None) -> list[dict[str, Any]]:
    records: list[dict[str, Any]] = []
    if isinstance(data, list):
        for index, item in enumerate(data):
            if not isinstance(item, dict) or "id" not in item:
                raise make_load_error(f"Token record {index} must be an object with an 'id'", source)
            record = dict(item)
            for plain in ("type", "value", "extensions"):
                if plain in record and f"${plain}" not in record:
                    record[f"${plain}"] = record.pop(plain)
            records.append(record)
        return records
    if isinstance(data, dict):
        _flatten_tree(data, "", data.get("$type"), records)
        return records
    raise make_load_error(
        f"Token document must be an object or an array, got {type(data).__name__}", source
    )


# =============================================================================
# Alias resolution
# =============================================================================


class _AliasResolver:
    def __init__(self, records: dict[str, dict[str, Any]], source: Path | None):
        self.records = records
        self.source = source

    def target(self, value: Any) -> str | None:
        if isinstance(value, str):
            match = _ALIAS.match(value.strip())
            if match:
                return match.group(1).strip()
        return None

    def resolve(self, value: Any, owner: str, chain: tuple[str, ...] = ()) -> Any:
        ref = self.target(value)
        if ref is not None:
            if ref in chain or ref == owner:
                cycle = " -> ".join((owner, *chain, ref))
                raise make_load_error(f"Circular alias: {cycle}", self.source, owner)
            target = self.records.get(ref)
            if target is None:
                raise make_load_error(f"Alias {value!r} points to an unknown token", self.source, owner)
            return self.resolve(target.get("$value"), owner, (*chain, ref))
        if isinstance(value, list):
            return [self.resolve(v, owner, chain) for v in value]
        if isinstance(value, dict):
            return {k: self.resolve(v, owner, chain) for k, v in value.items()}
        return value

    def resolve_type(self, record: dict[str, Any]) -> str:
        """Declared type, or the type of the aliased token when undeclared."""
        seen: set[str] = set()
        current = record
        while current.get("$type") is None:
            ref = self.target(current.get("$value"))
            if ref is None or ref in seen or ref not in self.records:
                return ""
            seen.add(ref)
            current = self.records[ref]
        return str(current["$type"])


def parse_tokens(data: Any, source: Path | None = None) -> list[Token]:
    """Flatten a parsed token document into tokens, in document order.

    Raises:
        TokenLoadError: On duplicate ids, bad aliases or malformed records.
    """
    records = _records_from(data, source)

    by_id: dict[str, dict[str, Any]] = {}
    for record in records:
        token_id = str(record["id"])
        if token_id in by_id:
            raise make_load_error("Duplicate token id", source, token_id)
        by_id[token_id] = record

    resolver = _AliasResolver(by_id, source)
    tokens: list[Token] = []
    for token_id, record in by_id.items():
        resolved = dict(record)
        resolved["$type"] = resolver.resolve_type(record)
        resolved["$value"] = resolver.resolve(record.get("$value"), token_id)

        extensions = record.get("$extensions")
        if isinstance(extensions, dict) and isinstance(extensions.get("mode"), dict):
            extensions = dict(extensions)
            extensions["mode"] = {
                mode: resolver.resolve(value, token_id)
                for mode, value in extensions["mode"].items()
            }
            resolved["$extensions"] = extensions

        if not resolved["$type"]:
            logger.debug("Token %s has no type and will not be rendered", token_id)

        try:
            tokens.append(Token.model_validate(resolved))
        except ValidationError as e:
            raise make_load_error(f"Malformed token: {e}", source, token_id) from e

    return tokens


def load_tokens(path: Path) -> TokenDocument:
    """Read and flatten a token JSON file.

    Raises:
        TokenLoadError: If the file cannot be read or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise make_load_error(f"Cannot read token file: {e}", path) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise make_load_error(f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}", path) from e

    tokens = parse_tokens(data, path)
    logger.info("Loaded %d token(s) from %s", len(tokens), path)
    return TokenDocument(tokens=tokens, raw_schema=data, source=path)
