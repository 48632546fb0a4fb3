"""
Chromazone Color Parsing
========================

Normalizes heterogeneous color values into alpha-bearing CSS strings.

>>> from chromazone.colors import normalize_color
>>> normalize_color("rgb(10,20,30)", 0.25)
'rgba(10,20,30,0.25)'
>>> normalize_color("hsl(120 50% 40%)", 0.5)
'hsla(120,50%,40%,0.5)'
"""

from .color_parser import ColorParser, ParsedColor, format_number, normalize_color, parse_color

__all__ = ["ColorParser", "ParsedColor", "format_number", "normalize_color", "parse_color"]
