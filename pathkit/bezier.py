"""Bezier subdivision: de Casteljau evaluation and splitting, nearest parameter."""
import numpy as np
from scipy.optimize import least_squares

from .types import Point, Bezier, GeometryError
from .constants import BEZIER_SAMPLES


def control_points(bez: Bezier) -> np.ndarray:
    """(n+1, 2) array of origin, controls and end."""
    return np.array([bez.origin, *bez.controls, bez.end], dtype=float)

def _de_casteljau(pts: np.ndarray, t: float) -> tuple[np.ndarray, np.ndarray]:
    """Split a control polygon at t into head and tail control polygons."""
    head = [pts[0]]; tail = [pts[-1]]
    level = pts
    while len(level) > 1:
        level = (1 - t) * level[:-1] + t * level[1:]
        head.append(level[0]); tail.append(level[-1])
    return np.array(head), np.array(tail[::-1])

def point_at(bez: Bezier, t: float) -> Point:
    """Point on the curve at parameter t in [0, 1]."""
    head, _ = _de_casteljau(control_points(bez), t)
    return (float(head[-1][0]), float(head[-1][1]))

def _to_point(row) -> Point:
    return (float(row[0]), float(row[1]))

def split_bezier(bez: Bezier, t: float) -> Bezier:
    """Split a bezier at t.

    The source keeps the head (origin up to t) and the tail is returned with
    the same number of control points and the source's layer.
    """
    if not 0 <= t <= 1:
        raise GeometryError(f"Bezier parameter out of range: t={t}")
    head, tail = _de_casteljau(control_points(bez), t)
    split = _to_point(head[-1])
    result = Bezier(split, bez.end, [_to_point(c) for c in tail[1:-1]], layer=bez.layer)
    bez.controls = [_to_point(c) for c in head[1:-1]]
    bez.end = split
    return result

def nearest_t(bez: Bezier, p: Point) -> float:
    """Curve parameter whose point is closest to p.

    A coarse sample picks the starting guess, least squares refines it
    within [0, 1].
    """
    pts = control_points(bez)
    target = np.asarray(p, dtype=float)
    samples = np.linspace(0.0, 1.0, BEZIER_SAMPLES + 1)
    dists = [np.linalg.norm(_de_casteljau(pts, s)[0][-1] - target) for s in samples]
    best = int(np.argmin(dists))
    t0 = float(samples[best])

    def residual(x):
        return _de_casteljau(pts, x[0])[0][-1] - target

    sol = least_squares(residual, [t0], bounds=([0.0], [1.0]), xtol=1e-12, ftol=1e-12)
    # The seed wins ties, which keeps exact hits on the sample grid and the ends.
    if np.linalg.norm(sol.fun) < dists[best]:
        return float(sol.x[0])
    return t0
