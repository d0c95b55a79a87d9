"""Offset & continuity: rotated contact points and the connector between circles."""
from .types import Shape, LineSeg, BezierSeg, Segment
from .geometry import dist, point_on_circle, travel_dir, travel_sign, bezier_length
from .constants import BEZIER_REACH


def offset_angle(shape: Shape, base_angle: float, offset: float) -> float:
    """Contact angle rotated by *offset* radians along the direction of travel."""
    if offset == 0:
        return base_angle
    return base_angle + travel_sign(shape.direction)*offset


def build_connector(a: Shape, exit_angle: float, b: Shape, entry_angle: float) -> Segment:
    """Connector from a's exit contact to b's entry contact.

    Angles are the already-offset contact angles. The connector stays a
    straight LineSeg unless a's exit or b's entry is offset; then it becomes a
    cubic whose control points follow each circle's travel tangent, reaching
    BEZIER_REACH of the chord times the tangent-length multiplier, so the
    joins with the neighbouring arcs stay tangent-continuous.
    """
    start = point_on_circle(a.center, a.radius, exit_angle)
    end = point_on_circle(b.center, b.radius, entry_angle)
    chord = dist(start, end)
    if a.exit_offset == 0 and b.entry_offset == 0:
        return LineSeg(start, end, chord)

    reach = chord * BEZIER_REACH
    t1 = travel_dir(exit_angle, travel_sign(a.direction))
    t2 = travel_dir(entry_angle, travel_sign(b.direction))
    r1 = reach * a.exit_tangent_length
    r2 = reach * b.entry_tangent_length
    cp1 = (start[0]+t1[0]*r1, start[1]+t1[1]*r1)
    cp2 = (end[0]-t2[0]*r2, end[1]-t2[1]*r2)
    return BezierSeg(start, cp1, cp2, end, bezier_length(start, cp1, cp2, end))
