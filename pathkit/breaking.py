"""Break a path in two at a point (or, for beziers, a curve parameter).

The source path is mutated to become the front half. A second path for the
back half is returned inside a BreakResult, together with an outcome that
tells a successful split, an in-place circle conversion and a refusal apart.
"""
import logging
from enum import Enum
from typing import NamedTuple

from .types import Point, Path, Line, Circle, Arc, Bezier
from .constants import BEZIER_ON_CURVE, FULL_CIRCLE
from . import angle, point, measure, bezier

logger = logging.getLogger(__name__)


class BreakOutcome(Enum):
    NO_SPLIT = "no_split"        # path untouched
    CONVERTED = "converted"      # circle re-tagged as a full arc, no second piece
    SPLIT = "split"              # source is the front half, piece is the back half


class BreakResult(NamedTuple):
    outcome: BreakOutcome
    piece: Path | None = None
    reason: str | None = None

    @property
    def split(self) -> bool:
        return self.outcome is BreakOutcome.SPLIT


def _refuse(reason: str) -> BreakResult:
    logger.debug("no split: %s", reason)
    return BreakResult(BreakOutcome.NO_SPLIT, None, reason)

# ============================================================
# Per-variant Breaks
# ============================================================
def _break_line(line: Line, p: Point) -> BreakResult:
    if not measure.is_between_points(p, line, False):
        return _refuse("point is not on the line")
    saved_end = line.end
    line.end = p
    return BreakResult(BreakOutcome.SPLIT, Line(p, saved_end))

def _break_circle(circle: Circle, p: Point) -> BreakResult:
    """Re-tag the circle itself as a full arc starting at p; callers see the new variant on the same object."""
    start = angle.of_point_in_degrees(circle.origin, p)
    circle.__class__ = Arc
    circle.start_angle = start
    circle.end_angle = start + FULL_CIRCLE
    return BreakResult(BreakOutcome.CONVERTED)

def _sweep(start: float, end: float) -> float:
    return angle.of_arc_end(Arc((0, 0), 1, start, end)) - start

def _angle_strictly_inside(arc: Arc, angle_at_break: float) -> float | None:
    """Representation of angle_at_break inside the arc's sweep, in the arc's own frame."""
    start = angle.normalize(arc.start_angle)
    end = start + angle.of_arc_end(arc) - arc.start_angle
    for tries in (0, 1, -1):
        candidate = angle_at_break + FULL_CIRCLE * tries
        if measure.is_between(candidate, start, end, True):
            return arc.start_angle + candidate - start
    return None

def _break_arc(arc: Arc, p: Point, angle_of_break: float | None) -> BreakResult:
    if angle_of_break is None:
        angle_of_break = angle.of_point_in_degrees(arc.origin, p)
    if angle.are_equal(angle_of_break, arc.start_angle) or angle.are_equal(angle_of_break, arc.end_angle):
        return _refuse("break angle is at an arc end")

    inside = _angle_strictly_inside(arc, angle_of_break)
    if inside is None:
        return _refuse("break angle is outside the arc sweep")

    # Prefer [0, 360) as long as neither half changes its sweep.
    resolved = angle.normalize(inside)
    front, back = inside - arc.start_angle, angle.of_arc_end(arc) - inside
    if (abs(_sweep(arc.start_angle, resolved) - front) > 1e-9
            or abs(_sweep(resolved, arc.end_angle) - back) > 1e-9):
        resolved = inside

    saved_end = arc.end_angle
    arc.end_angle = resolved
    return BreakResult(BreakOutcome.SPLIT, Arc(arc.origin, arc.radius, resolved, saved_end))

def _break_bezier(bez: Bezier, p: Point | None, t: float | None) -> BreakResult:
    if t is None:
        if p is None:
            return _refuse("no break point or parameter for bezier")
        t = bezier.nearest_t(bez, p)
        if point.distance(bezier.point_at(bez, t), p) > BEZIER_ON_CURVE:
            return _refuse("point is not on the bezier")
    if not 0 < t < 1:
        return _refuse(f"bezier parameter {t} is not strictly inside (0, 1)")
    return BreakResult(BreakOutcome.SPLIT, bezier.split_bezier(bez, t))

# ============================================================
# Entry Point
# ============================================================
def break_at_point(path: Path | None, p: Point | None,
                   angle_of_break: float | None = None, t: float | None = None) -> BreakResult:
    """Break path at p.

    Line and arc: the source ends at p and the returned piece runs from p to
    the source's former end. Circle: converted in place to an arc starting and
    ending at p, outcome CONVERTED. Bezier: split at t, or at the parameter
    nearest p when t is omitted. angle_of_break, when given, is used for arcs
    in place of the angle of p. The piece inherits the source's layer.
    """
    if path is None:
        return _refuse("no path")
    if isinstance(path, Bezier):
        result = _break_bezier(path, p, t)
    elif p is None:
        return _refuse("no break point")
    elif isinstance(path, Arc):
        result = _break_arc(path, p, angle_of_break)
    elif isinstance(path, Circle):
        result = _break_circle(path, p)
    elif isinstance(path, Line):
        result = _break_line(path, p)
    else:
        return _refuse(f"unsupported path {type(path).__name__}")

    if result.piece is not None and path.layer is not None:
        result.piece.layer = path.layer
    logger.debug("break %s: %s", type(path).__name__, result.outcome.value)
    return result
