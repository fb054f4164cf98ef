import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going towards +infinity.

    The built-in ``round`` uses banker's rounding (``round(2.5) == 2``), which
    would shift displayed prices by a unit on exact halves.
    """
    return int(math.floor(value + 0.5))
