"""Point arithmetic over (x, y) tuples. Every function returns a new point."""
import math

from .types import Point, Line, Arc
from .measure import round_to
from .constants import POINT_ACCURACY
from . import angle

# ============================================================
# Vector Arithmetic
# ============================================================
def add(a: Point, b: Point, subtract: bool = False) -> Point:
    """a + b, or a - b when subtract is set."""
    if subtract:
        return (a[0]-b[0], a[1]-b[1])
    return (a[0]+b[0], a[1]+b[1])

def subtract(a: Point, b: Point) -> Point:
    return add(a, b, True)

def scale(p: Point, factor: float) -> Point:
    return (p[0]*factor, p[1]*factor)

def mirror(p: Point, mirror_x: bool, mirror_y: bool) -> Point:
    """Negate x when mirror_x, negate y when mirror_y."""
    return (-p[0] if mirror_x else p[0], -p[1] if mirror_y else p[1])

def rotate(p: Point, degrees: float, center: Point) -> Point:
    """Rotate p counter-clockwise about center."""
    a = math.radians(degrees); c = math.cos(a); s = math.sin(a)
    dx = p[0]-center[0]; dy = p[1]-center[1]
    return (center[0]+dx*c-dy*s, center[1]+dx*s+dy*c)

def from_polar(radians: float, radius: float) -> Point:
    return (radius*math.cos(radians), radius*math.sin(radians))

def rounded(p: Point, accuracy: float = POINT_ACCURACY) -> Point:
    return (round_to(p[0], accuracy), round_to(p[1], accuracy))

def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0]-a[0], b[1]-a[1])

# ============================================================
# Path Points
# ============================================================
def middle(path: Line | Arc, ratio: float = 0.5) -> Point:
    """Point a fraction of the way along a line chord or an arc sweep.

    For a Bezier this is the chord between origin and end, not the curve.
    """
    if isinstance(path, Arc):
        a = math.radians(angle.of_arc_middle(path, ratio))
        return add(path.origin, from_polar(a, path.radius))
    return (path.origin[0] + (path.end[0]-path.origin[0])*ratio,
            path.origin[1] + (path.end[1]-path.origin[1])*ratio)

# ============================================================
# Comparison
# ============================================================
def are_equal(a: Point, b: Point, tolerance: float | None = None) -> bool:
    """Point equality.

    Without a tolerance each axis difference, rounded to POINT_ACCURACY,
    must be zero. With a tolerance the Euclidean distance must not exceed it.
    """
    if tolerance is None:
        return round_to(a[0]-b[0]) == 0 and round_to(a[1]-b[1]) == 0
    return distance(a, b) <= tolerance
