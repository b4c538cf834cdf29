"""Path transforms: copying (clone, mirror) and in-place (move, rotate, scale).

Copying transforms allocate a new path, copy the source's layer and never
touch the source. In-place transforms mutate their argument, return the same
object for chaining, and never touch layer.
"""
import logging
from typing import Callable, Sequence

from .types import Point, Path, Line, Circle, Arc, Bezier
from . import point, angle

logger = logging.getLogger(__name__)


def _copy_layer(source: Path, target: Path | None) -> None:
    if target is not None and source.layer is not None:
        target.layer = source.layer

def _skip(op: str, path) -> None:
    logger.debug("%s: unsupported path %r left unchanged", op, type(path).__name__)

# ============================================================
# Copying Transforms
# ============================================================
def clone(path: Path | None) -> Path | None:
    """Structural copy of a path, including its layer."""
    if path is None:
        return None
    if isinstance(path, Arc):
        result = Arc(path.origin, path.radius, path.start_angle, path.end_angle)
    elif isinstance(path, Circle):
        result = Circle(path.origin, path.radius)
    elif isinstance(path, Bezier):
        result = Bezier(path.origin, path.end, list(path.controls))
    elif isinstance(path, Line):
        result = Line(path.origin, path.end)
    else:
        _skip("clone", path)
        return None
    _copy_layer(path, result)
    return result

def mirror(path: Path | None, mirror_x: bool, mirror_y: bool) -> Path | None:
    """New path mirrored on the x and/or y axis.

    A single-axis mirror reverses the winding of an arc, so the mirrored
    start and end angles trade places to keep the sweep counter-clockwise.
    """
    if path is None:
        return None
    origin = point.mirror(path.origin, mirror_x, mirror_y)
    if isinstance(path, Arc):
        start = angle.mirror(path.start_angle, mirror_x, mirror_y)
        end = angle.mirror(angle.of_arc_end(path), mirror_x, mirror_y)
        xor = mirror_x != mirror_y
        result = Arc(origin, path.radius, end if xor else start, start if xor else end)
    elif isinstance(path, Circle):
        result = Circle(origin, path.radius)
    elif isinstance(path, Bezier):
        result = Bezier(origin, point.mirror(path.end, mirror_x, mirror_y),
                        [point.mirror(c, mirror_x, mirror_y) for c in path.controls])
    elif isinstance(path, Line):
        result = Line(origin, point.mirror(path.end, mirror_x, mirror_y))
    else:
        _skip("mirror", path)
        return None
    _copy_layer(path, result)
    return result

# ============================================================
# In-place Transforms
# ============================================================
def _move_point(p: Point, old_origin: Point, new_origin: Point) -> Point:
    return point.add(new_origin, point.subtract(p, old_origin))

def move(path: Path | None, origin: Point | None) -> Path | None:
    """Move a path so its origin lands on an absolute point. In place."""
    if path is None or origin is None:
        return path
    if isinstance(path, Line):
        old = path.origin
        path.end = _move_point(path.end, old, origin)
        if isinstance(path, Bezier):
            path.controls = [_move_point(c, old, origin) for c in path.controls]
    elif not isinstance(path, Circle):
        _skip("move", path)
        return path
    path.origin = origin
    return path

def move_relative(path: Path | None, delta: Point | None, subtract: bool = False) -> Path | None:
    """Shift a path by delta (or by -delta when subtract is set). In place."""
    if path is None or delta is None:
        return path
    if not isinstance(path, (Line, Circle)):
        _skip("move_relative", path)
        return path
    path.origin = point.add(path.origin, delta, subtract)
    if isinstance(path, Line):
        path.end = point.add(path.end, delta, subtract)
        if isinstance(path, Bezier):
            path.controls = [point.add(c, delta, subtract) for c in path.controls]
    return path

def move_temporary(paths: Sequence[Path], deltas: Sequence[Point | None], task: Callable):
    """Shift paths by deltas while task runs, then shift them back.

    Paths without a matching delta stay put. The deltas are captured on
    entry and the same values undo the move, even if task raises.
    Returns whatever task returns.
    """
    deltas = deltas or []
    captured = [deltas[i] if i < len(deltas) else None for i in range(len(paths))]
    for p, d in zip(paths, captured):
        move_relative(p, d)
    try:
        return task()
    finally:
        for p, d in zip(paths, captured):
            move_relative(p, d, True)

def rotate(path: Path | None, degrees: float, center: Point | None) -> Path | None:
    """Rotate a path about center. In place.

    Arc angles are shifted and each normalized to [0, 360) on its own.
    """
    if path is None or center is None or degrees == 0:
        return path
    if not isinstance(path, (Line, Circle)):
        _skip("rotate", path)
        return path
    path.origin = point.rotate(path.origin, degrees, center)
    if isinstance(path, Arc):
        path.start_angle = angle.normalize(path.start_angle + degrees)
        path.end_angle = angle.normalize(path.end_angle + degrees)
    elif isinstance(path, Line):
        path.end = point.rotate(path.end, degrees, center)
        if isinstance(path, Bezier):
            path.controls = [point.rotate(c, degrees, center) for c in path.controls]
    return path

def scale(path: Path | None, factor: float) -> Path | None:
    """Scale a path about the global origin (0, 0). In place."""
    if path is None or factor == 1:
        return path
    if not isinstance(path, (Line, Circle)):
        _skip("scale", path)
        return path
    path.origin = point.scale(path.origin, factor)
    if isinstance(path, Circle):
        path.radius *= factor
    else:
        path.end = point.scale(path.end, factor)
        if isinstance(path, Bezier):
            path.controls = [point.scale(c, factor) for c in path.controls]
    return path
