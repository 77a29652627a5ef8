from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Callable, Dict, Mapping, Tuple

from modules.geometry_calc.core.area import (
    area_circle,
    area_parallelogram,
    area_rectangle,
    area_square,
    area_trapezoid,
    area_triangle,
    area_triangle_right,
)
from modules.geometry_calc.core.circumference import circumference
from modules.geometry_calc.core.numeric import GeometryError
from modules.geometry_calc.core.perimeter import (
    perimeter_parallelogram,
    perimeter_rectangle,
    perimeter_square,
    perimeter_trapezoid,
    perimeter_triangle,
)

logger = logging.getLogger(__name__)

Shape = Tuple[Callable[..., Any], Tuple[str, ...]]

AREA_SHAPES: Dict[str, Shape] = {
    "circle": (area_circle, ("radius",)),
    "parallelogram": (area_parallelogram, ("base", "height")),
    "rectangle": (area_rectangle, ("length", "width")),
    "square": (area_square, ("side",)),
    "trapezoid": (area_trapezoid, ("base1", "base2", "height")),
    "triangle": (area_triangle, ("base", "height")),
    "triangle_right": (area_triangle_right, ("leg1", "leg2")),
}

PERIMETER_SHAPES: Dict[str, Shape] = {
    "parallelogram": (perimeter_parallelogram, ("a", "b")),
    "rectangle": (perimeter_rectangle, ("length", "width")),
    "square": (perimeter_square, ("side",)),
    "trapezoid": (perimeter_trapezoid, ("base1", "base2", "leg1", "leg2")),
    "triangle": (perimeter_triangle, ("a", "b", "c")),
}


def _parse_decimal(value: Any, *, label: str) -> Tuple[Decimal | None, str | None]:
    if value is None:
        return None, f"{label} is required."
    raw = str(value).strip()
    if not raw:
        return None, f"{label} is required."

    compact = raw.replace(" ", "")
    if "," in compact and "." in compact:
        last_comma = compact.rfind(",")
        last_dot = compact.rfind(".")
        if last_comma > last_dot:
            compact = compact.replace(".", "")
            compact = compact.replace(",", ".")
        else:
            compact = compact.replace(",", "")
    elif "," in compact:
        compact = compact.replace(",", ".")

    try:
        parsed = Decimal(compact)
    except (InvalidOperation, ValueError):
        return None, f"{label} must be a number."
    if not parsed.is_finite():
        return None, f"{label} must be a number."
    if not math.isfinite(float(parsed)):
        return None, f"{label} is too large."
    if parsed < Decimal("0"):
        return None, f"{label} must be zero or higher."
    return parsed, None


def _quantize(value: float, decimals: int = 2) -> str:
    decimals = max(0, min(int(decimals), 6))
    quant = Decimal("1") if decimals == 0 else Decimal("1." + "0" * decimals)
    with localcontext() as ctx:
        ctx.prec = 400
        return str(Decimal(repr(value)).quantize(quant, rounding=ROUND_HALF_UP))


def _label(name: str) -> str:
    return name.replace("_", " ").capitalize()


def _measure(
    kind: str,
    shapes: Mapping[str, Shape],
    shape: object,
    dimensions: Mapping[str, Any],
    decimals: int,
) -> Tuple[Dict[str, object] | None, str | None]:
    key = str(shape or "").strip().lower().replace("-", "_").replace(" ", "_")
    if key not in shapes:
        options = ", ".join(sorted(shapes))
        return None, f"Shape must be one of: {options}."

    formula, fields = shapes[key]
    values: Dict[str, float] = {}
    for field in fields:
        parsed, error = _parse_decimal(dimensions.get(field), label=_label(field))
        if error or parsed is None:
            return None, error
        values[field] = float(parsed)

    try:
        result = formula(*(values[field] for field in fields))
    except GeometryError as exc:
        logger.debug("%s of %s rejected: %s", kind, key, exc)
        return None, str(exc)

    if not math.isfinite(result):
        return None, "Result is too large."

    return {
        "kind": kind,
        "shape": key,
        "dimensions": values,
        "value": result,
        "rounded": _quantize(result, decimals),
    }, None


def calculate_area(
    shape: object,
    dimensions: Mapping[str, Any],
    *,
    decimals: int = 2,
) -> Tuple[Dict[str, object] | None, str | None]:
    return _measure("area", AREA_SHAPES, shape, dimensions, decimals)


def calculate_perimeter(
    shape: object,
    dimensions: Mapping[str, Any],
    *,
    decimals: int = 2,
) -> Tuple[Dict[str, object] | None, str | None]:
    return _measure("perimeter", PERIMETER_SHAPES, shape, dimensions, decimals)


def calculate_circumference(
    radius: Any,
    *,
    decimals: int = 2,
) -> Tuple[Dict[str, object] | None, str | None]:
    return _measure(
        "circumference",
        {"circle": (circumference, ("radius",))},
        "circle",
        {"radius": radius},
        decimals,
    )
