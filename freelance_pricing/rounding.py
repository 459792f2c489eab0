"""Currency-aware price rounding, shared by the engine, packages and renderers."""

import math

USD_ROUNDING_STEP = 5
DEFAULT_ROUNDING_STEP = 10


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_price(value: float, currency: str = "USD") -> int:
    """Round to the nearest 5 for USD, to the nearest 10 for any other currency."""
    step = USD_ROUNDING_STEP if currency == "USD" else DEFAULT_ROUNDING_STEP
    return round_half_up(value / step) * step
