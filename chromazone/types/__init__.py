from .color_types import Color, ColorFamily, ValueToPixel, Scalar

__all__ = ["Color", "ColorFamily", "ValueToPixel", "Scalar"]
