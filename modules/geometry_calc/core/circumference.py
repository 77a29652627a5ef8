from __future__ import annotations

import math
from typing import Any

from modules.geometry_calc.core.numeric import evaluate


def circumference(radius: Any) -> Any:
    return evaluate(lambda r: 2.0 * math.pi * r, radius)
