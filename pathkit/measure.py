"""Scalar rounding and betweenness tests used by the break engine."""
import math

from .types import Point, Line
from .constants import POINT_ACCURACY, BETWEEN_ACCURACY

def round_to(n: float, accuracy: float = POINT_ACCURACY) -> float:
    """Round n to the nearest multiple of accuracy, e.g. round_to(3.14159, .001) == 3.142."""
    places = 1 / accuracy
    return round(n * places) / places

def is_between(value: float, limit_a: float, limit_b: float, exclusive: bool) -> bool:
    """True when value lies between the two limits, in either order."""
    lo, hi = min(limit_a, limit_b), max(limit_a, limit_b)
    if exclusive:
        return lo < value < hi
    return lo <= value <= hi

def is_between_points(p: Point, line: Line, exclusive: bool,
                      accuracy: float = POINT_ACCURACY) -> bool:
    """True when p lies on the segment from line.origin to line.end.

    Each axis the line actually spans is range-checked after rounding; an axis
    it does not span is left to the collinearity test. The
    point must also sit on the carrier line within accuracy, so an off-line
    point inside the bounding box is rejected.
    """
    one_dimension = False
    for i in (0, 1):
        if round_to(line.origin[i] - line.end[i], BETWEEN_ACCURACY) == 0:
            if one_dimension:
                return False  # zero-length line
            one_dimension = True
            continue
        if not is_between(round_to(p[i], accuracy), round_to(line.origin[i], accuracy),
                          round_to(line.end[i], accuracy), exclusive):
            return False
    dx = line.end[0]-line.origin[0]; dy = line.end[1]-line.origin[1]
    cross = dx*(p[1]-line.origin[1]) - dy*(p[0]-line.origin[0])
    return abs(cross) / math.hypot(dx, dy) <= accuracy
