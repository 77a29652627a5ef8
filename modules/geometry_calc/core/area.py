"""Areas of common plane shapes.

    >>> area_circle(12.0)
    452.3893421169302
    >>> area_trapezoid(15, 15, 10)
    150
"""

from __future__ import annotations

import math
from typing import Any

from modules.geometry_calc.core.numeric import evaluate


def area_circle(radius: Any) -> Any:
    return evaluate(lambda r: math.pi * (r * r), radius)


def area_parallelogram(base: Any, height: Any) -> Any:
    return evaluate(lambda b, h: b * h, base, height)


def area_rectangle(length: Any, width: Any) -> Any:
    return evaluate(lambda x, y: x * y, length, width)


def area_square(side: Any) -> Any:
    return evaluate(lambda s: s * s, side)


def area_trapezoid(base1: Any, base2: Any, height: Any) -> Any:
    return evaluate(lambda b1, b2, h: 0.5 * (b1 + b2) * h, base1, base2, height)


def area_triangle(base: Any, height: Any) -> Any:
    return evaluate(lambda b, h: 0.5 * b * h, base, height)


def area_triangle_right(leg1: Any, leg2: Any) -> Any:
    """Area from the two legs adjacent to the right angle."""
    return evaluate(lambda a, o: 0.5 * a * o, leg1, leg2)
