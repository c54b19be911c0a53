import math


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp `value` into the closed interval [lower, upper]."""
    return min(max(value, lower), upper)


def floor_magnitude(value: float, floor: float) -> float:
    """Replace magnitudes below `floor` by `floor`, keeping the sign (0 -> +floor)."""
    if abs(value) < floor:
        return -floor if value < 0 else floor
    return value


def integer_sqrt(n: int) -> int:
    """Return N if n == N*N, otherwise raise ValueError."""
    root = math.isqrt(n)
    if root * root != n:
        raise ValueError(f"{n} is not a perfect square.")
    return root
