"""2D path kernel: lines, circles, arcs and beziers with transforms, equality and breaking."""

from .types import (
    Point, Path, Line, Circle, Arc, Bezier, GeometryError,
    is_point, is_path, is_path_line, is_path_circle, is_path_arc, is_path_bezier,
)
from . import point, angle, measure, bezier
from .transform import clone, mirror, move, move_relative, move_temporary, rotate, scale
from .equal import are_equal
from .breaking import BreakOutcome, BreakResult, break_at_point
from .bezier import split_bezier
from .render import fix_point, fix_path, make_output_transform, group_by_layer
from .log import setup_logging
