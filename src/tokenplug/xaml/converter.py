"""
Token to XAML fragment conversion.

One token in, one markup fragment out. Every fragment ends with a newline
so fragments can be concatenated directly into a ResourceDictionary body.
Tokens of unrecognized types convert to an empty string.
"""

from __future__ import annotations

from typing import Any, assert_never
from xml.sax.saxutils import escape, quoteattr

from ..core.diagnostics import Diagnostics
from ..core.ir.tokens import ShadowLayer, Token, TokenType, TypographyValue
from .formatters import (
    format_color,
    format_dimension,
    format_font_weight,
    format_letter_spacing,
    format_text_case,
    format_text_decoration,
    parse_font_size,
    parse_inset,
)

INDENT = "  "


def convert_token(
    token: Token,
    diagnostics: Diagnostics,
    *,
    font_weight_suffix: bool = False,
) -> str:
    """Render one token as a XAML fragment.

    Args:
        token: Token to render (a mode token already carries its override).
        diagnostics: Collector for recovered value problems.
        font_weight_suffix: Append the weight name to typography font
            families (``Inter`` -> ``Inter-Bold``) for fonts registered
            once per weight.

    Returns:
        The fragment, or ``""`` for unrecognized token types.
    """
    with diagnostics.for_token(token.id):
        match token.kind:
            case TokenType.COLOR:
                return _convert_color(token)
            case TokenType.DIMENSION:
                return _convert_dimension(token, diagnostics)
            case TokenType.TYPOGRAPHY:
                return _convert_typography(token, diagnostics, font_weight_suffix)
            case TokenType.SHADOW:
                return _convert_shadow(token, diagnostics)
            case None:
                return ""
            case _ as unreachable:
                assert_never(unreachable)


def _key(key: str) -> str:
    return f"x:Key={quoteattr(key)}"


def _convert_color(token: Token) -> str:
    color = escape(str(format_color(token.value)))
    return f"{INDENT}<Color {_key(token.id)}>{color}</Color>\n"


def _convert_dimension(token: Token, diagnostics: Diagnostics) -> str:
    number = format_dimension(token.value, diagnostics)
    return f"{INDENT}<sys:Double {_key(token.id)}>{number}</sys:Double>\n"


# =============================================================================
# Typography
# =============================================================================


def _convert_typography(token: Token, diagnostics: Diagnostics, font_weight_suffix: bool) -> str:
    if isinstance(token.value, dict):
        style = TypographyValue.model_validate(token.value)
    else:
        diagnostics.warn(f"Typography value must be an object, got {type(token.value).__name__}")
        style = TypographyValue()

    font_size = format_dimension(style.font_size, diagnostics)
    font_size_px = parse_font_size(font_size, diagnostics)
    weight = format_font_weight(style.font_weight, diagnostics)

    family = style.font_family
    if isinstance(family, list):
        family = family[0] if family else None
    if not isinstance(family, str) or not family.strip():
        diagnostics.warn(f"Missing fontFamily {family!r}")
        family = ""
    elif font_weight_suffix:
        family = f"{family.strip()}-{weight}"

    setters = [
        ("FontFamily", family),
        ("FontSize", font_size),
        ("FontWeight", weight),
        ("LineHeight", format_dimension(style.line_height, diagnostics)),
        (
            "CharacterSpacing",
            str(format_letter_spacing(style.letter_spacing, font_size_px, diagnostics)),
        ),
        ("TextDecorations", format_text_decoration(style.text_decoration, diagnostics)),
        ("TextTransform", format_text_case(style.text_case, diagnostics)),
    ]

    lines = [f'{INDENT}<Style {_key(token.id)} TargetType="Label">']
    for prop, value in setters:
        lines.append(f'{INDENT * 2}<Setter Property="{prop}" Value={quoteattr(value)} />')
    lines.append(f"{INDENT}</Style>")
    return "\n".join(lines) + "\n"


# =============================================================================
# Shadow
# =============================================================================

INSET_NOTE = (
    "Inset shadow: apply inside a Border that clips its content, inner Margin={margin}"
)
DROP_NOTE = (
    "Drop shadow: render on a separate backing Frame behind the element, Margin={margin}"
)


def _shadow_layers(value: Any, diagnostics: Diagnostics) -> list[ShadowLayer]:
    raw_layers = value if isinstance(value, list) else [value]
    layers: list[ShadowLayer] = []
    for raw in raw_layers:
        if not isinstance(raw, dict):
            diagnostics.warn(f"Skipping shadow layer {raw!r}, expected an object")
            continue
        layers.append(ShadowLayer.model_validate(raw))
    return layers


def _negate(number: str) -> str:
    if number.startswith("-"):
        return number[1:]
    if float(number) == 0:
        return number
    return f"-{number}"


def _convert_shadow(token: Token, diagnostics: Diagnostics) -> str:
    layers = _shadow_layers(token.value, diagnostics)
    lines: list[str] = []
    for index, layer in enumerate(layers, start=1):
        key = f"{token.id}-{index}" if len(layers) > 1 else token.id
        spread = format_dimension(layer.spread if layer.spread is not None else "0px", diagnostics)

        if parse_inset(layer.inset, diagnostics):
            note = INSET_NOTE.format(margin=spread)
        else:
            note = DROP_NOTE.format(margin=_negate(spread))
        lines.append(f"{INDENT}<!-- {note} -->")

        color = str(format_color(layer.color)) if layer.color is not None else ""
        lines.append(
            f"{INDENT}<Shadow {_key(key)}"
            f" Color={quoteattr(color)}"
            f' Radius="{format_dimension(layer.blur, diagnostics)}"'
            ' Opacity="1"'
            f' OffsetX="{format_dimension(layer.offset_x, diagnostics)}"'
            f' OffsetY="{format_dimension(layer.offset_y, diagnostics)}" />'
        )
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
