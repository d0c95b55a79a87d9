"""Arc builder: circular arcs, stretched elliptical arcs and full turns.

A stretched arc keeps both contact points and the circle's tangent at each,
so connectors join it without a kink. In the frame where the chord between
the contacts lies on the x axis and the arc bulges toward +y, the circle has
its center at (0, cy) and the two tangent lines meet at (0, t) with
t = cy - r²/cy. Every axis-aligned ellipse through (±a, 0) with those
tangents has its center at (0, y0) with

    rx² = (y0 - t)·cy,   ry² = y0·(y0 - t),

and fixing the apex height y0 + ry = h' gives y0 = h'²/(2h' - t). The
circle itself is the member with h' = r + cy; stretch scales that height.

The requested height h·(1 + stretch) is not always reachable. On a minor
arc (t > 0) the family turns into a parabola at h' = t/2 and into
hyperbolas beyond it, so positive stretch is capped at
h + ELLIPSE_LIMIT·(t/2 - h). A quarter turn at stretch 1 therefore rises
only a little above the circle. Negative stretch is floored at
MIN_SAGITTA_RATIO·h. When the room between h and its cap is below
FLAT_ARC_TOLERANCE·r, which happens on very short arcs, the plain circular
arc is returned instead.
"""
import logging
import math

from .types import Point, Shape, ArcSeg, EllipseArcSeg, Segment
from .geometry import (
    angle_to, dist, point_on_circle, signed_sweep, travel_sign, ellipse_arc_length,
)
from .constants import (
    ELLIPSE_LIMIT, FLAT_ARC_TOLERANCE, FULL_TURN, MIN_SAGITTA_RATIO, MIN_STRETCH,
)

logger = logging.getLogger(__name__)

__all__ = ["signed_sweep", "build_arc", "build_full_circle", "is_stretched"]


def is_stretched(stretch: float) -> bool:
    return abs(stretch) >= MIN_STRETCH


def _ellipse(center: Point, rx: float, ry: float, rotation: float,
             start: float, sweep: float) -> EllipseArcSeg:
    return EllipseArcSeg(
        center=center, radius_x=rx, radius_y=ry, rotation=rotation,
        start_angle=start, end_angle=start + sweep, ccw=sweep < 0,
        length=ellipse_arc_length(rx, ry, start, start + sweep),
    )


def _touching_ellipse(shape: Shape, angle: float, sign: int, stretch: float) -> EllipseArcSeg:
    """Full ellipse touching *shape* at *angle* from the inside (zero-chord limit)."""
    r = shape.radius
    h = max(2*r*(1 + stretch), MIN_SAGITTA_RATIO*2*r)
    ry = h / 2
    rx = math.sqrt(ry*r)
    nx = math.cos(angle); ny = math.sin(angle)
    center = (shape.center[0] + nx*(r - ry), shape.center[1] + ny*(r - ry))
    start = -math.pi/2
    return _ellipse(center, rx, ry, angle + math.pi/2, start, sign*FULL_TURN)


def _circular_arc(shape: Shape, entry_angle: float, sweep: float, sign: int) -> ArcSeg:
    return ArcSeg(
        center=shape.center, radius=shape.radius,
        start_angle=entry_angle, end_angle=entry_angle + sweep,
        ccw=sign < 0, length=shape.radius*abs(sweep),
    )


def _stretched_arc(shape: Shape, entry_angle: float, sweep: float,
                   sign: int, stretch: float) -> Segment:
    r = shape.radius; c = shape.center
    exit_angle = entry_angle + sweep
    e = point_on_circle(c, r, entry_angle)
    x = point_on_circle(c, r, exit_angle)
    a = dist(e, x) / 2
    beta = angle_to(e, x)
    m = ((e[0]+x[0])/2, (e[1]+x[1])/2)
    px = -math.sin(beta); py = math.cos(beta)

    # the center lies opposite the bulge on a minor arc, behind it on a major one
    dc = (c[0]-m[0])*px + (c[1]-m[1])*py
    cy = -abs(dc) if abs(sweep) < math.pi else abs(dc)
    side = 1.0 if dc*cy >= 0 else -1.0
    h = r + cy
    target = max(h*(1 + stretch), MIN_SAGITTA_RATIO*h)

    if abs(cy) < 1e-12*r:
        # half turn: the chord is a diameter
        y0 = 0.0; ry = target; rx = a
    else:
        t = cy - r*r/cy
        if t > 0:
            room = t/2 - h if target > h else h
            if room < FLAT_ARC_TOLERANCE*r:
                logger.debug("%s: arc of %.3g rad too short to stretch, kept circular",
                             shape.id, abs(sweep))
                return _circular_arc(shape, entry_angle, sweep, sign)
            target = min(target, h + ELLIPSE_LIMIT*(t/2 - h))
        y0 = target*target / (2*target - t)
        ry = target - y0
        rx = math.sqrt((y0 - t)*cy)
    if target != h*(1 + stretch):
        logger.debug("%s: apex clamped to %.6f (requested %.6f)", shape.id, target, h*(1 + stretch))

    center = (m[0] + side*y0*px, m[1] + side*y0*py)
    start = math.atan2(-side*y0/ry, -a/rx)
    end = math.atan2(-side*y0/ry, a/rx)
    return _ellipse(center, rx, ry, beta, start, signed_sweep(start, end, sign))


def build_arc(shape: Shape, entry_angle: float, exit_angle: float, stretch: float) -> Segment:
    """Arc on *shape* from its entry contact to its exit contact, in travel direction.

    |stretch| below MIN_STRETCH gives an ArcSeg with the true radius;
    otherwise an EllipseArcSeg whose height over the chord is scaled by
    (1 + stretch), within the limits in the module docstring. Coincident
    contacts give a full turn.
    """
    sign = travel_sign(shape.direction)
    sweep = signed_sweep(entry_angle, exit_angle, sign)
    if is_stretched(stretch):
        if abs(sweep) == FULL_TURN:
            return _touching_ellipse(shape, entry_angle, sign, stretch)
        return _stretched_arc(shape, entry_angle, sweep, sign, stretch)
    return _circular_arc(shape, entry_angle, sweep, sign)


def build_full_circle(shape: Shape, stretch: float) -> Segment:
    """Closed loop around a lone shape, starting at angle 0."""
    sign = travel_sign(shape.direction)
    r = shape.radius
    if is_stretched(stretch):
        ry = max(r*(1 + stretch), MIN_SAGITTA_RATIO*r)
        return _ellipse(shape.center, r, ry, 0.0, 0.0, sign*FULL_TURN)
    return ArcSeg(
        center=shape.center, radius=r, start_angle=0.0, end_angle=sign*FULL_TURN,
        ccw=sign < 0, length=FULL_TURN*r,
    )
