"""
XAML ResourceDictionary generation from design tokens.

- formatters.py: leaf value formatting (dimensions, weights, colors, ...)
- converter.py: one token -> one markup fragment
- assembler.py: fragments -> base and per-mode dictionaries
- options.py: plugin options
"""

from .assembler import assemble, render_base_document, render_mode_documents
from .converter import convert_token
from .options import XamlOptions

__all__ = [
    "XamlOptions",
    "assemble",
    "convert_token",
    "render_base_document",
    "render_mode_documents",
]
