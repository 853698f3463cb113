import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with .5 going away from zero (2.5 -> 3, -2.5 -> -3)."""
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded) if value >= 0 else -int(rounded)
