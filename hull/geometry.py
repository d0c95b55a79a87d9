"""Geometry faults, vector helpers, segment evaluation and length integration."""
import math

import numpy as np
from scipy.integrate import simpson

from .types import Point, Direction, LineSeg, BezierSeg, ArcSeg, Segment, PathData
from .constants import ANGLE_TOLERANCE, FULL_TURN, LENGTH_SUBDIVISIONS

# ============================================================
# Error Types
# ============================================================
class GeometryFault(ValueError):
    """Raised when the inputs admit no valid tangent hull."""

    @property
    def kind(self) -> str:
        return type(self).__name__

class DegenerateCenters(GeometryFault):
    """Two adjacent circles share a center."""

class TangentInfeasible(GeometryFault):
    """No common tangent exists for the requested directions."""

class EmptyInput(GeometryFault):
    """Nothing to wrap."""

class InvalidPathOrder(GeometryFault):
    """Path order references unknown or duplicate ids."""

class InvalidParameter(GeometryFault):
    """A circle or setting is outside its allowed range."""

# ============================================================
# Vector Utilities
# ============================================================
def travel_sign(direction: Direction) -> int:
    """+1 for cw (increasing angle in y-down coordinates), -1 for ccw."""
    if direction == "cw":
        return 1
    if direction == "ccw":
        return -1
    raise InvalidParameter(f"Unknown direction: {direction!r}")

def dist(p1: Point, p2: Point) -> float:
    return math.hypot(p2[0]-p1[0], p2[1]-p1[1])

def angle_to(p1: Point, p2: Point) -> float:
    """Angle of the vector p1 → p2."""
    return math.atan2(p2[1]-p1[1], p2[0]-p1[0])

def point_on_circle(c: Point, r: float, ang: float) -> Point:
    return (c[0]+r*math.cos(ang), c[1]+r*math.sin(ang))

def travel_dir(ang: float, sign: int) -> Point:
    """Unit tangent at boundary angle *ang* when travelling with *sign*."""
    return (-sign*math.sin(ang), sign*math.cos(ang))

def signed_sweep(start: float, end: float, sign: int) -> float:
    """Sweep from *start* to *end* travelling with *sign*.

    Direction alone picks which of the two arcs is meant; the magnitude is in
    (0, 2π]. Coincident angles give a full turn.
    """
    sweep = ((end - start) * sign) % FULL_TURN
    if sweep < ANGLE_TOLERANCE or sweep > FULL_TURN - ANGLE_TOLERANCE:
        sweep = FULL_TURN
    return sign * sweep

def reflect_point(p: Point, axis: str) -> Point:
    """Reflect across x = 0 ("vertical") or y = 0 ("horizontal")."""
    if axis == "vertical":
        return (-p[0], p[1])
    if axis == "horizontal":
        return (p[0], -p[1])
    raise InvalidParameter(f"Unknown mirror axis: {axis!r}")

def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 60) -> list[Point]:
    """Generate n+1 points along a circular arc from angle sa to ea (radians)."""
    return [(cx+r*math.cos(sa+(ea-sa)*i/n), cy+r*math.sin(sa+(ea-sa)*i/n))
            for i in range(n+1)]

# ============================================================
# Curve Lengths
# ============================================================
def _bezier_points(start: Point, cp1: Point, cp2: Point, end: Point, t: np.ndarray) -> np.ndarray:
    mt = 1.0 - t
    coef = np.stack([mt**3, 3*mt**2*t, 3*mt*t**2, t**3], axis=-1)
    return coef @ np.array([start, cp1, cp2, end], dtype=float)

def bezier_length(start: Point, cp1: Point, cp2: Point, end: Point,
                  n: int = LENGTH_SUBDIVISIONS) -> float:
    """Length of a cubic Bezier as an n-piece polyline."""
    pts = _bezier_points(start, cp1, cp2, end, np.linspace(0.0, 1.0, n+1))
    return float(np.sum(np.hypot(*np.diff(pts, axis=0).T)))

def ellipse_arc_length(rx: float, ry: float, sa: float, ea: float,
                       n: int = LENGTH_SUBDIVISIONS) -> float:
    """Length of an elliptical arc between parametric angles sa and ea.

    Simpson's rule over n intervals of the parametric speed.
    """
    phi = np.linspace(sa, ea, n+1)
    speed = np.hypot(rx*np.sin(phi), ry*np.cos(phi))
    return abs(float(simpson(speed, x=phi)))

# ============================================================
# Segment Evaluation
# ============================================================
def _rotate(rotation: float, dx: float, dy: float) -> Point:
    cr = math.cos(rotation); sr = math.sin(rotation)
    return (cr*dx - sr*dy, sr*dx + cr*dy)

def seg_point(seg: Segment, t: float) -> Point:
    """Point at parameter t in [0, 1] along a segment."""
    if isinstance(seg, LineSeg):
        return (seg.start[0]+(seg.end[0]-seg.start[0])*t, seg.start[1]+(seg.end[1]-seg.start[1])*t)
    if isinstance(seg, BezierSeg):
        x, y = _bezier_points(seg.start, seg.cp1, seg.cp2, seg.end, np.array([t]))[0]
        return (float(x), float(y))
    ang = seg.start_angle + (seg.end_angle - seg.start_angle)*t
    if isinstance(seg, ArcSeg):
        return point_on_circle(seg.center, seg.radius, ang)
    ox, oy = _rotate(seg.rotation, seg.radius_x*math.cos(ang), seg.radius_y*math.sin(ang))
    return (seg.center[0]+ox, seg.center[1]+oy)

def seg_start(seg: Segment) -> Point:
    if isinstance(seg, (LineSeg, BezierSeg)):
        return seg.start
    return seg_point(seg, 0.0)

def seg_end(seg: Segment) -> Point:
    if isinstance(seg, (LineSeg, BezierSeg)):
        return seg.end
    return seg_point(seg, 1.0)

def seg_tangent(seg: Segment, t: float) -> Point:
    """Unit direction of travel at parameter t."""
    if isinstance(seg, LineSeg):
        dx = seg.end[0]-seg.start[0]; dy = seg.end[1]-seg.start[1]
    elif isinstance(seg, BezierSeg):
        p0, p1, p2, p3 = seg.start, seg.cp1, seg.cp2, seg.end
        mt = 1.0 - t
        dx = 3*mt*mt*(p1[0]-p0[0]) + 6*mt*t*(p2[0]-p1[0]) + 3*t*t*(p3[0]-p2[0])
        dy = 3*mt*mt*(p1[1]-p0[1]) + 6*mt*t*(p2[1]-p1[1]) + 3*t*t*(p3[1]-p2[1])
    else:
        span = seg.end_angle - seg.start_angle
        ang = seg.start_angle + span*t
        s = 1.0 if span >= 0 else -1.0
        if isinstance(seg, ArcSeg):
            dx, dy = -s*math.sin(ang), s*math.cos(ang)
        else:
            dx, dy = _rotate(seg.rotation, -s*seg.radius_x*math.sin(ang), s*seg.radius_y*math.cos(ang))
    n = math.hypot(dx, dy)
    return (dx/n, dy/n)

# ============================================================
# Path Operations
# ============================================================
def segment_polyline(seg: Segment, n: int = LENGTH_SUBDIVISIONS) -> list[Point]:
    """Convert any segment to n+1 sample points (2 for lines)."""
    if isinstance(seg, LineSeg):
        return [seg.start, seg.end]
    if isinstance(seg, BezierSeg):
        pts = _bezier_points(seg.start, seg.cp1, seg.cp2, seg.end, np.linspace(0.0, 1.0, n+1))
        return [(float(x), float(y)) for x, y in pts]
    if isinstance(seg, ArcSeg):
        return arc_poly(seg.center[0], seg.center[1], seg.radius, seg.start_angle, seg.end_angle, n)
    return [seg_point(seg, i/n) for i in range(n+1)]

def path_polygon(path: PathData, n: int = LENGTH_SUBDIVISIONS) -> list[Point]:
    """Dense polyline of a whole path; joints are not repeated."""
    polygon = []
    for i, seg in enumerate(path.segments):
        poly = segment_polyline(seg, n)
        if i > 0 and not seg.needs_move_to:
            poly = poly[1:]
        polygon.extend(poly)
    return polygon
