"""Mirror expansion: virtual reflected circles for symmetric designs."""
import logging
from typing import Sequence

from .types import Circle, MirrorAxis
from .geometry import InvalidPathOrder, reflect_point
from .constants import MIRROR_SUFFIX, POSITION_TOLERANCE

logger = logging.getLogger(__name__)

_FLIP = {"cw": "ccw", "ccw": "cw"}


def mirror_circle(circle: Circle, axis: MirrorAxis) -> Circle:
    """Virtual twin of *circle* reflected across *axis*.

    Reflection reverses local orientation, so the direction flips and the
    entry/exit roles swap with their offsets negated.
    """
    return circle._replace(
        id=circle.id + MIRROR_SUFFIX,
        center=reflect_point(circle.center, axis),
        direction=_FLIP[circle.direction],
        entry_offset=-circle.exit_offset,
        exit_offset=-circle.entry_offset,
        entry_tangent_length=circle.exit_tangent_length,
        exit_tangent_length=circle.entry_tangent_length,
        mirrored=False,
    )


def _same_position(a: Circle, b: Circle) -> bool:
    return (abs(a.center[0]-b.center[0]) < POSITION_TOLERANCE
            and abs(a.center[1]-b.center[1]) < POSITION_TOLERANCE)


def expand_mirrored(
    circles: Sequence[Circle], path_order: Sequence[str],
    mirror_axis: MirrorAxis | None = "vertical",
) -> tuple[tuple[Circle, ...], tuple[str, ...]]:
    """Expand circles and path order with virtual mirror twins.

    Twins of the mirrored circles are appended after every original entry in
    reverse path order, so original-then-mirrored forms one loop. A twin
    landing on its predecessor (or, at the end, on the first circle) is
    dropped; that happens when a circle sits on the axis.

    Returns (expanded circles, expanded order). Inputs are not modified.
    """
    circles = tuple(circles); path_order = tuple(path_order)
    if mirror_axis is None:
        return circles, path_order

    by_id = {c.id: c for c in circles}
    sources = [by_id[cid] for cid in path_order if cid in by_id and by_id[cid].mirrored]
    if not sources:
        return circles, path_order

    twins = [mirror_circle(c, mirror_axis) for c in reversed(sources)]
    for twin in twins:
        if twin.id in by_id:
            raise InvalidPathOrder(f"Mirror id {twin.id!r} collides with an existing circle")
    expanded = circles + tuple(twins)
    lookup = {c.id: c for c in expanded}

    order = list(path_order)
    for twin in twins:
        if order and _same_position(lookup[order[-1]], twin):
            logger.debug("Dropping %s: coincides with %s", twin.id, order[-1])
            continue
        order.append(twin.id)
    if len(order) > 1 and order[-1] not in by_id and _same_position(lookup[order[-1]], lookup[order[0]]):
        logger.debug("Dropping %s: closes onto %s", order[-1], order[0])
        order.pop()

    logger.debug("Mirror expansion (%s): %d -> %d circles in order",
                 mirror_axis, len(path_order), len(order))
    return expanded, tuple(order)
