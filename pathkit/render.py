"""Remap paths from the model frame (y up) to an output frame (y down).

Renderers such as an SVG emitter call these before writing drawing
commands. Nothing here mutates the model's own paths.
"""
from typing import Callable, Iterable

from .types import Point, Path
from . import point, transform


def fix_point(p: Point, scale: float = 1, origin: Point = (0, 0)) -> Point:
    """Flip y, scale, then offset a single point into the output frame."""
    return point.add(point.scale(point.mirror(p, False, True), scale), origin)

def fix_path(path: Path, scale: float = 1, origin: Point = (0, 0)) -> Path:
    """Output-frame copy of a path; the source path is left as is."""
    flipped = transform.mirror(path, False, True)
    return transform.move_relative(transform.scale(flipped, scale), origin)

def make_output_transform(scale: float = 1, origin: Point = (0, 0)) -> Callable[[Point], Point]:
    """Create a to_output closure for a fixed scale and page origin."""
    def to_output(p: Point) -> Point:
        return fix_point(p, scale, origin)
    return to_output

def group_by_layer(paths: Iterable[Path]) -> dict[str | None, list[Path]]:
    """Paths grouped by layer in first-seen order; unlayered paths under None."""
    groups: dict[str | None, list[Path]] = {}
    for p in paths:
        groups.setdefault(p.layer, []).append(p)
    return groups
