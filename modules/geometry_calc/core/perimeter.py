from __future__ import annotations

from typing import Any

from modules.geometry_calc.core.numeric import evaluate


def perimeter_parallelogram(a: Any, b: Any) -> Any:
    return evaluate(lambda x, y: (2.0 * x) + (2.0 * y), a, b)


def perimeter_rectangle(length: Any, width: Any) -> Any:
    return evaluate(lambda x, y: (2.0 * x) + (2.0 * y), length, width)


def perimeter_square(side: Any) -> Any:
    return evaluate(lambda s: 4.0 * s, side)


def perimeter_trapezoid(base1: Any, base2: Any, leg1: Any, leg2: Any) -> Any:
    return evaluate(lambda b1, b2, s1, s2: b1 + b2 + s1 + s2, base1, base2, leg1, leg2)


def perimeter_triangle(a: Any, b: Any, c: Any) -> Any:
    return evaluate(lambda x, y, z: x + y + z, a, b, c)
