"""
Design token IR types.

Tokens arrive from the design-tool export in DTCG shape (``$type``,
``$value``, ``$extensions``) and are held here as frozen pydantic models.
The value payload is left untyped on ``Token`` because its shape depends on
the token type; typography and shadow payloads are read through the lenient
``TypographyValue`` and ``ShadowLayer`` views at conversion time.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Enums
# =============================================================================


class TokenType(StrEnum):
    """Token types with a platform rendering."""

    COLOR = "color"
    DIMENSION = "dimension"
    TYPOGRAPHY = "typography"
    SHADOW = "shadow"


# =============================================================================
# Token
# =============================================================================


class TokenExtensions(BaseModel):
    """Side-channel metadata attached to a token by the design tool."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    mode: dict[str, Any] = Field(
        default_factory=dict, description="Mode name -> full override value"
    )
    collection: str | None = Field(
        default=None, description="Name of the variable collection owning the token"
    )

    @model_validator(mode="before")
    @classmethod
    def _read_collection(cls, data: Any) -> Any:
        """Pull the collection name out of the nested export shape.

        The design-tool export nests it as ``figma.collection.name``; a bare
        ``collection.name`` (or plain string) is accepted too.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        collection = data.get("collection")
        figma = data.get("figma")
        if isinstance(figma, dict) and isinstance(figma.get("collection"), dict):
            collection = figma["collection"].get("name", collection)
        if isinstance(collection, dict):
            collection = collection.get("name")
        data["collection"] = collection
        if data.get("mode") is None:
            data["mode"] = {}
        return data


class Token(BaseModel):
    """A single named design value."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    type: str = Field(default="", alias="$type")
    value: Any = Field(alias="$value")
    extensions: TokenExtensions = Field(
        default_factory=TokenExtensions, alias="$extensions"
    )

    @model_validator(mode="before")
    @classmethod
    def _default_extensions(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = {
                k: v
                for k, v in data.items()
                if not (k in ("$extensions", "extensions") and v is None)
            }
        return data

    @property
    def kind(self) -> TokenType | None:
        """The recognized token type, or None for types with no rendering."""
        try:
            return TokenType(self.type)
        except ValueError:
            return None

    @property
    def modes(self) -> list[str]:
        """Mode names this token carries an override for."""
        return list(self.extensions.mode)

    def mode_value(self, mode: str) -> Any:
        """Return the override for ``mode`` or None."""
        return self.extensions.mode.get(mode)

    def with_override(self, value: Any) -> Token:
        """Return a copy of this token with ``value`` replaced entirely."""
        return self.model_copy(update={"value": value})


# =============================================================================
# Composite value views
# =============================================================================


class TypographyValue(BaseModel):
    """Typography payload. Leaf fields stay untyped; formatters validate them."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    font_family: Any = Field(default=None, alias="fontFamily")
    font_weight: Any = Field(default=None, alias="fontWeight")
    font_size: Any = Field(default=None, alias="fontSize")
    line_height: Any = Field(default=None, alias="lineHeight")
    letter_spacing: Any = Field(default=None, alias="letterSpacing")
    text_decoration: Any = Field(default=None, alias="textDecoration")
    text_case: Any = Field(default=None, alias="textCase")


class ShadowLayer(BaseModel):
    """One layer of a shadow token."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    color: Any = None
    blur: Any = None
    spread: Any = None
    offset_x: Any = Field(default=None, alias="offsetX")
    offset_y: Any = Field(default=None, alias="offsetY")
    inset: Any = False
