"""Float evaluation for the geometry formulas.

Every formula converts its inputs to ``float``, evaluates in float and hands
the result back in the inputs' own numeric type. ``int`` inputs are truncated
toward zero; mixed input types keep the float result.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable


class GeometryError(TypeError, ValueError):
    """Raised when a dimension is not a real number or a result cannot be converted back."""


def to_float(value: Any, label: str = "Value") -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise GeometryError(f"{label} must be a real number, got {type(value).__name__}.")
    try:
        return float(value)
    except OverflowError as exc:
        raise GeometryError(f"{label} is too large for a float.") from exc


def restore(result: float, *inputs: Any) -> Any:
    kinds = {type(value) for value in inputs}
    if len(kinds) != 1:
        return result
    kind = kinds.pop()
    if kind is float:
        return result
    try:
        return kind(result)
    except (OverflowError, ValueError) as exc:
        raise GeometryError(f"Result {result} cannot be expressed as {kind.__name__}.") from exc


def evaluate(formula: Callable[..., float], *values: Any) -> Any:
    floats = [to_float(value) for value in values]
    return restore(formula(*floats), *values)
