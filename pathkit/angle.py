"""Degree-based angle arithmetic: normalization, mirroring, arc end angles."""
import math

from .types import Point, Arc
from .constants import ANGLE_TOLERANCE, FULL_CIRCLE

def normalize(degrees: float) -> float:
    """Map any angle into [0, 360)."""
    revolutions = math.floor(degrees / FULL_CIRCLE)
    if revolutions == 0:
        return degrees
    result = degrees - FULL_CIRCLE * revolutions
    return 0.0 if result >= FULL_CIRCLE else result

def mirror(degrees: float, mirror_x: bool, mirror_y: bool) -> float:
    """Reflect an angle the same way point.mirror reflects a point.

    mirror_x negates x (reflection across the y axis), mirror_y negates y.
    """
    if mirror_y:
        degrees = FULL_CIRCLE - degrees
    if mirror_x:
        degrees = (180.0 if degrees < 180.0 else 540.0) - degrees
    return degrees

def are_equal(a1: float, a2: float, tolerance: float = ANGLE_TOLERANCE) -> bool:
    """Angle equality modulo full revolutions."""
    d = normalize(a2 - a1)
    return min(d, FULL_CIRCLE - d) <= tolerance

def of_point_in_degrees(origin: Point, p: Point) -> float:
    """Polar angle of p seen from origin, in [0, 360)."""
    deg = math.degrees(math.atan2(p[1]-origin[1], p[0]-origin[0]))
    return normalize(deg)

def of_arc_end(arc: Arc) -> float:
    """End angle of an arc, unwrapped so it is never less than the start angle."""
    if arc.end_angle < arc.start_angle:
        revolutions = math.ceil((arc.start_angle - arc.end_angle) / FULL_CIRCLE)
        return revolutions * FULL_CIRCLE + arc.end_angle
    return arc.end_angle

def of_arc_span(arc: Arc) -> float:
    """Total counter-clockwise sweep of an arc in degrees."""
    return of_arc_end(arc) - arc.start_angle

def of_arc_middle(arc: Arc, ratio: float = 0.5) -> float:
    """Angle at a fraction of the way along an arc's sweep."""
    return arc.start_angle + of_arc_span(arc) * ratio
