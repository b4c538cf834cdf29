"""Structural path equality under tolerance."""
from .types import Path, Line, Circle, Arc, Bezier
from .constants import ANGLE_TOLERANCE
from . import point, angle


def _same_points(a: list, b: list, tolerance: float | None) -> bool:
    return len(a) == len(b) and all(point.are_equal(p, q, tolerance) for p, q in zip(a, b))

def are_equal(path1: Path, path2: Path, tolerance: float | None = None) -> bool:
    """True when two paths describe the same geometry.

    Lines and beziers compare undirected: a path equals its own reversal.
    Circle and arc radii compare exactly; arc angles use ANGLE_TOLERANCE
    regardless of the point tolerance passed in.
    """
    if path1 is None or path2 is None or type(path1) is not type(path2):
        return False
    if isinstance(path1, Arc):
        return (point.are_equal(path1.origin, path2.origin, tolerance)
                and path1.radius == path2.radius
                and angle.are_equal(path1.start_angle, path2.start_angle, ANGLE_TOLERANCE)
                and angle.are_equal(path1.end_angle, path2.end_angle, ANGLE_TOLERANCE))
    if isinstance(path1, Circle):
        return point.are_equal(path1.origin, path2.origin, tolerance) and path1.radius == path2.radius
    if isinstance(path1, Bezier):
        pts1 = [path1.origin, *path1.controls, path1.end]
        pts2 = [path2.origin, *path2.controls, path2.end]
        return _same_points(pts1, pts2, tolerance) or _same_points(pts1, pts2[::-1], tolerance)
    if isinstance(path1, Line):
        return ((point.are_equal(path1.origin, path2.origin, tolerance)
                 and point.are_equal(path1.end, path2.end, tolerance))
                or (point.are_equal(path1.origin, path2.end, tolerance)
                    and point.are_equal(path1.end, path2.origin, tolerance)))
    return False
