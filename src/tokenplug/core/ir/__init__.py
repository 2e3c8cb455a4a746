"""
tokenplug Intermediate Representation (IR) types.
"""

from .tokens import (
    ShadowLayer,
    Token,
    TokenExtensions,
    TokenType,
    TypographyValue,
)

__all__ = [
    "ShadowLayer",
    "Token",
    "TokenExtensions",
    "TokenType",
    "TypographyValue",
]
