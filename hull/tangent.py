"""Bitangent solver: the connecting line between two consecutive circles."""
import math
from typing import NamedTuple

from .types import Point, Shape
from .geometry import (
    DegenerateCenters, TangentInfeasible,
    dist, angle_to, point_on_circle, travel_sign,
)
from .constants import CENTER_TOLERANCE, FEASIBILITY_TOLERANCE


class Tangent(NamedTuple):
    p1: Point; p2: Point      # contact on the first / second shape
    angle1: float; angle2: float  # boundary angles of p1 / p2


def solve_tangent(a: Shape, b: Shape) -> Tangent:
    """Line tangent to *a* and *b*, leaving a and reaching b along their travel.

    Same directions give the external tangent, opposite directions the
    internal one. With n the unit left normal of the line, each contact sits
    at c - sign*r*n, so the line's offset from the center line is
    k = sign_b*r_b - sign_a*r_a. Written with the usual asin forms this is
    asin((r2-r1)/d) for external and asin((r1+r2)/d) for internal tangents.

    Raises DegenerateCenters when the centers coincide and TangentInfeasible
    when |k| > d (internal: r1+r2 > d, external: one circle inside the other).
    """
    sa = travel_sign(a.direction); sb = travel_sign(b.direction)
    d = dist(a.center, b.center)
    if d < CENTER_TOLERANCE:
        raise DegenerateCenters(f"{a.id!r} and {b.id!r} share center {a.center}")

    k = sb*b.radius - sa*a.radius
    if abs(k) > d + FEASIBILITY_TOLERANCE:
        kind = "external" if sa == sb else "internal"
        raise TangentInfeasible(
            f"No {kind} tangent from {a.id!r} to {b.id!r}: "
            f"d={d:.6f}, required {abs(k):.6f}")

    theta = angle_to(a.center, b.center)
    # psi: angle of the line's left normal
    psi = theta + math.pi/2 - math.asin(max(-1.0, min(1.0, k/d)))
    angle1 = psi + math.pi if sa > 0 else psi
    angle2 = psi + math.pi if sb > 0 else psi
    return Tangent(
        p1=point_on_circle(a.center, a.radius, angle1),
        p2=point_on_circle(b.center, b.radius, angle2),
        angle1=angle1, angle2=angle2,
    )
