"""Path variant model: points, the four path types, and capability predicates."""
import math
from dataclasses import dataclass, field

Point = tuple[float, float]


class GeometryError(ValueError):
    """Raised for structurally impossible path construction or subdivision."""


@dataclass
class Line:
    """Straight segment; origin is the start point."""
    origin: Point
    end: Point
    layer: str | None = field(default=None, kw_only=True)


@dataclass
class Circle:
    """Full circle; origin is the center."""
    origin: Point
    radius: float
    layer: str | None = field(default=None, kw_only=True)


@dataclass
class Arc(Circle):
    """Counter-clockwise arc from start_angle to end_angle, in degrees.

    end_angle may be numerically smaller than start_angle when the sweep
    crosses 0 degrees.
    """
    start_angle: float
    end_angle: float


@dataclass
class Bezier(Line):
    """Bezier curve from origin to end.

    One control point makes a quadratic curve, two a cubic, and so on.
    """
    controls: list[Point]

    def __post_init__(self):
        if not self.controls:
            raise GeometryError("Bezier needs at least one control point")
        self.controls = list(self.controls)

    @property
    def degree(self) -> int:
        return len(self.controls) + 1


Path = Line | Circle | Arc | Bezier

# ============================================================
# Capability Predicates
# ============================================================
def is_point(item) -> bool:
    """True for a 2-element sequence of real, non-NaN numbers."""
    if not isinstance(item, (tuple, list)) or len(item) != 2:
        return False
    try:
        return not (math.isnan(item[0]) or math.isnan(item[1]))
    except TypeError:
        return False

def is_path(item) -> bool:
    return isinstance(item, (Line, Circle)) and is_point(item.origin)

def is_path_line(item) -> bool:
    """Exact Line variant; a Bezier is not reported as a line."""
    return type(item) is Line and is_point(item.end)

def is_path_circle(item) -> bool:
    """Exact Circle variant; an Arc is not reported as a circle."""
    return type(item) is Circle and bool(item.radius)

def is_path_arc(item) -> bool:
    return isinstance(item, Arc) and bool(item.radius)

def is_path_bezier(item) -> bool:
    return isinstance(item, Bezier) and is_point(item.end) and len(item.controls) > 0
