from __future__ import annotations
from typing import Any, Callable, Literal, Union
import numpy as np

Scalar = int | float
# Strings are parsed; anything else is handed to the renderer as-is.
Color = Union[str, Any]
ColorFamily = Literal["rgba", "hsla"]
ValueToPixel = Callable[[Union[Scalar, np.ndarray]], Union[Scalar, np.ndarray]]
