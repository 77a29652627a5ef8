from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from modules.fraction_calc.core.fraction import Fraction, FractionError, gcd, lcm

logger = logging.getLogger(__name__)

OPERATORS: Dict[str, Callable[[Fraction, Fraction], Fraction]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": lambda left, right: left / right,
}

OPERATOR_ALIASES = {
    "add": "+",
    "sub": "-",
    "mul": "*",
    "div": "/",
    "x": "*",
    ":": "/",
}


def _parse_int(value: object, *, label: str) -> Tuple[int | None, str | None]:
    if value is None:
        return None, f"{label} is required."
    raw = str(value).strip()
    if not raw:
        return None, f"{label} is required."
    compact = raw.replace(" ", "")
    try:
        return int(compact), None
    except ValueError:
        return None, f"{label} must be a whole number."


def _parse_fraction(
    numerator: object, denominator: object, *, label: str = ""
) -> Tuple[Fraction | None, str | None]:
    prefix = f"{label} " if label else ""
    num, error = _parse_int(numerator, label=f"{prefix}numerator".capitalize())
    if error or num is None:
        return None, error
    den, error = _parse_int(denominator, label=f"{prefix}denominator".capitalize())
    if error or den is None:
        return None, error
    try:
        return Fraction(num, den), None
    except FractionError as exc:
        logger.debug("Rejected fraction %s/%s: %s", num, den, exc)
        return None, str(exc)


def _parse_flag(value: object) -> bool:
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _describe(frac: Fraction) -> Dict[str, object]:
    simplified = Fraction(frac.numerator, frac.denominator)
    simplified.simplify()
    return {
        "numerator": frac.numerator,
        "denominator": frac.denominator,
        "fraction": str(frac),
        "simplified": str(simplified),
        "decimal": frac.to_decimal(),
    }


def simplify_fraction(
    numerator: object, denominator: object
) -> Tuple[Dict[str, object] | None, str | None]:
    frac, error = _parse_fraction(numerator, denominator)
    if error or frac is None:
        return None, error

    original = str(frac)
    frac.simplify()
    payload = _describe(frac)
    payload["original"] = original
    return payload, None


def reciprocal_fraction(
    numerator: object, denominator: object
) -> Tuple[Dict[str, object] | None, str | None]:
    frac, error = _parse_fraction(numerator, denominator)
    if error or frac is None:
        return None, error

    try:
        result = frac.reciprocal()
    except FractionError as exc:
        logger.debug("Reciprocal of %s rejected: %s", frac, exc)
        if frac.numerator == 0:
            return None, "Zero has no reciprocal."
        return None, str(exc)

    payload = _describe(result)
    payload["original"] = str(frac)
    return payload, None


def calculate_fractions(
    left_numerator: object,
    left_denominator: object,
    operator: object,
    right_numerator: object,
    right_denominator: object,
    *,
    simplify: object = False,
) -> Tuple[Dict[str, object] | None, str | None]:
    symbol = str(operator or "").strip().lower()
    symbol = OPERATOR_ALIASES.get(symbol, symbol)
    if symbol not in OPERATORS:
        return None, "Operator must be one of + - * /."

    left, error = _parse_fraction(left_numerator, left_denominator, label="left")
    if error or left is None:
        return None, error
    right, error = _parse_fraction(right_numerator, right_denominator, label="right")
    if error or right is None:
        return None, error

    expression = f"{left} {symbol} {right}"
    try:
        result = OPERATORS[symbol](left, right)
    except FractionError as exc:
        logger.debug("Operation %s rejected: %s", expression, exc)
        if symbol == "/" and right.numerator == 0:
            return None, "Cannot divide by a zero fraction."
        return None, str(exc)

    if _parse_flag(simplify):
        result.simplify()

    payload = _describe(result)
    payload["operator"] = symbol
    payload["expression"] = f"{expression} = {result}"
    return payload, None


def compute_gcd_lcm(a: object, b: object) -> Tuple[Dict[str, object] | None, str | None]:
    first, error = _parse_int(a, label="First number")
    if error or first is None:
        return None, error
    second, error = _parse_int(b, label="Second number")
    if error or second is None:
        return None, error

    if first < 0 or second < 0:
        return None, "Numbers must be zero or higher."

    try:
        gcd_value = gcd(first, second)
        lcm_value = lcm(first, second)
    except FractionError as exc:
        return None, str(exc)

    return {
        "a": first,
        "b": second,
        "gcd": gcd_value,
        "lcm": lcm_value,
    }, None
