"""
CSS-style color parsing with alpha injection.

Accepted textual formats, tried in this order:

1. ``rgb()`` / ``rgba()`` with comma or space separated channels and an
   optional alpha (plain number or percentage, optionally after ``/``)
2. ``hsl()`` / ``hsla()`` with an optional ``deg``/``grad``/``rad`` hue
   unit, percentage saturation and lightness, and an optional alpha
3. ``#rgb`` / ``#rgba`` shorthand hex
4. ``#rrggbb`` / ``#rrggbbaa`` hex

Anything else (named colors, ``currentColor``, malformed strings) is
returned unchanged by :func:`normalize_color`. Non-string values (pattern
or gradient objects owned by the renderer) are stringified.
"""
from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple, Optional, Tuple

from ..types.color_types import Color, ColorFamily, Scalar

logger = logging.getLogger(__name__)

_NUM = r"\d{1,3}(?:\.\d+)?"
_SIGNED = r"[-+]?\d{1,3}(?:\.\d+)?"
_SEP = r"\s*(?:,\s*|\s+)\s*"
_ALPHA = r"(?:,\s*|\s+)?(?:\s*/?\s*(?P<alpha>[\d.]+%?)\s*)?"

RGB_RE = re.compile(
    rf"^rgba?\(\s*(?P<c0>{_NUM}){_SEP}(?P<c1>{_NUM}){_SEP}(?P<c2>{_NUM})\s*{_ALPHA}\)$",
    re.IGNORECASE,
)
HSL_RE = re.compile(
    rf"^hsla?\(\s*(?P<c0>{_SIGNED})(?P<unit>deg|grad|rad)?{_SEP}(?P<c1>{_SIGNED})%{_SEP}"
    rf"(?P<c2>{_SIGNED})%\s*{_ALPHA}\)$",
    re.IGNORECASE,
)
HEX34_RE = re.compile(
    r"^#(?P<c0>[a-f\d])(?P<c1>[a-f\d])(?P<c2>[a-f\d])(?P<alpha>[a-f\d])?$",
    re.IGNORECASE,
)
HEX68_RE = re.compile(
    r"^#(?P<c0>[a-f\d]{2})(?P<c1>[a-f\d]{2})(?P<c2>[a-f\d]{2})(?P<alpha>[a-f\d]{2})?$",
    re.IGNORECASE,
)


NUMBER_PRECISION = 6


def format_number(value: Scalar) -> str:
    """
    Format a number the way CSS serializers do: ``1`` not ``1.0``.

    Values are fixed to ``NUMBER_PRECISION`` decimals, so float32 noise and
    exponent notation never reach the output.
    """
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    text = f"{value:.{NUMBER_PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class ParsedColor(NamedTuple):
    """Result of matching a color string against one of the known formats."""

    family: ColorFamily
    components: Tuple[str, str, str]
    alpha: Optional[str] = None
    hue_unit: str = ""

    def to_string(self, alpha: Scalar = 1) -> str:
        """Serialize, preferring the embedded alpha over ``alpha``."""
        a = self.alpha if self.alpha is not None else format_number(alpha)
        c0, c1, c2 = self.components
        if self.family == "hsla":
            return f"hsla({c0}{self.hue_unit},{c1}%,{c2}%,{a})"
        return f"rgba({c0},{c1},{c2},{a})"


def _expand_hex(digits: str) -> int:
    return int(digits * 2 if len(digits) == 1 else digits, 16)


def _parse_hex(match: re.Match) -> ParsedColor:
    components = tuple(str(_expand_hex(match.group(f"c{i}"))) for i in range(3))
    alpha = match.group("alpha")
    if alpha is not None:
        alpha = format_number(round(_expand_hex(alpha) / 255, 3))
    return ParsedColor("rgba", components, alpha)  # type: ignore[arg-type]


def parse_color(color: str) -> Optional[ParsedColor]:
    """
    Match ``color`` against the supported formats.

    Args:
        color: Color string, surrounding whitespace is ignored

    Returns:
        ParsedColor for the first matching format, or None when no format
        matches.
    """
    text = color.strip()

    match = RGB_RE.match(text)
    if match:
        return ParsedColor("rgba", (match["c0"], match["c1"], match["c2"]), match["alpha"])

    match = HSL_RE.match(text)
    if match:
        return ParsedColor(
            "hsla",
            (match["c0"], match["c1"], match["c2"]),
            match["alpha"],
            (match["unit"] or "").lower(),
        )

    for pattern in (HEX34_RE, HEX68_RE):
        match = pattern.match(text)
        if match:
            return _parse_hex(match)
    return None


def normalize_color(color: Color, alpha: Scalar = 1) -> str:
    """
    Convert a color to an ``rgba(...)`` or ``hsla(...)`` string with alpha.

    An alpha already present in ``color`` wins over ``alpha``. Unparseable
    strings come back unchanged and non-string colors are stringified
    without alpha applied.

    Args:
        color: Any color accepted by the renderer
        alpha: Alpha to inject when ``color`` carries none

    Returns:
        Canonical color string

    Examples:
        >>> normalize_color("#ff0000", 0.5)
        'rgba(255,0,0,0.5)'
        >>> normalize_color("rgba(1,2,3,0.9)", 0.2)
        'rgba(1,2,3,0.9)'
        >>> normalize_color("red", 0.5)
        'red'
    """
    if not isinstance(color, str):
        return str(color)
    parsed = parse_color(color)
    if parsed is None:
        logger.debug("Color %r not recognized, passing through", color)
        return color
    return parsed.to_string(alpha)


class ColorParser:
    """Namespace kept for hosts that expect a parser object."""

    normalize = staticmethod(normalize_color)
    parse = staticmethod(parse_color)
