# utils/helpers.py

import math

def clamp(value, min_value, max_value):
    """
    Clamps the value between min_value and max_value.

    Args:
        value (int): The value to clamp.
        min_value (int): The minimum allowed value.
        max_value (int): The maximum allowed value.

    Returns:
        int: The clamped value.
    """
    return max(min_value, min(value, max_value))

def round_half_up(value: float) -> int:
    """
    Rounds to the nearest integer, with halves going towards positive infinity.

    round_half_up(2.5) == 3, round_half_up(-2.5) == -2, round_half_up(-5.625) == -6
    """
    return int(math.floor(value + 0.5))
