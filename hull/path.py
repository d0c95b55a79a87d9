"""Path assembler: compute_tangent_hull, from circles and order to segments."""
import logging
import math
from typing import Sequence

from .types import Circle, MirrorAxis, PathData, Segment
from .geometry import EmptyInput, InvalidPathOrder, InvalidParameter, travel_sign
from .mirror import expand_mirrored
from .tangent import Tangent, solve_tangent
from .connector import build_connector, offset_angle
from .arcs import build_arc, build_full_circle
from .constants import STRETCH_RANGE

logger = logging.getLogger(__name__)

_AXES = ("vertical", "horizontal", None)


# ============================================================
# Validation
# ============================================================
def _check_stretch(value: float, what: str):
    lo, hi = STRETCH_RANGE
    if not (math.isfinite(value) and lo <= value <= hi):
        raise InvalidParameter(f"{what} stretch {value!r} outside [{lo}, {hi}]")

def _validate_circle(c: Circle):
    if not (math.isfinite(c.radius) and c.radius > 0):
        raise InvalidParameter(f"Circle {c.id!r}: radius must be positive, got {c.radius!r}")
    if not all(math.isfinite(v) for v in c.center):
        raise InvalidParameter(f"Circle {c.id!r}: center must be finite, got {c.center!r}")
    travel_sign(c.direction)
    if c.stretch is not None:
        _check_stretch(c.stretch, f"Circle {c.id!r}:")
    for name in ("entry_offset", "exit_offset"):
        if not math.isfinite(getattr(c, name)):
            raise InvalidParameter(f"Circle {c.id!r}: {name} must be finite")
    for name in ("entry_tangent_length", "exit_tangent_length"):
        v = getattr(c, name)
        if not (math.isfinite(v) and v > 0):
            raise InvalidParameter(f"Circle {c.id!r}: {name} must be positive, got {v!r}")

def validate_inputs(circles: Sequence[Circle], path_order: Sequence[str],
                    global_stretch: float, mirror_axis) -> None:
    """Raise the first GeometryFault found in the raw inputs."""
    if not path_order:
        raise EmptyInput("Path order is empty")
    ids = [c.id for c in circles]
    if len(set(ids)) != len(ids):
        dup = next(i for i in ids if ids.count(i) > 1)
        raise InvalidPathOrder(f"Duplicate circle id {dup!r}")
    known = set(ids); seen = set()
    for cid in path_order:
        if cid not in known:
            raise InvalidPathOrder(f"Path order references unknown id {cid!r}")
        if cid in seen:
            raise InvalidPathOrder(f"Path order lists {cid!r} twice")
        seen.add(cid)
    for c in circles:
        if c.id in seen:
            _validate_circle(c)
    _check_stretch(global_stretch, "Global")
    if mirror_axis not in _AXES:
        raise InvalidParameter(f"Unknown mirror axis: {mirror_axis!r}")


# ============================================================
# Assembly
# ============================================================
def effective_stretch(c: Circle, global_stretch: float) -> float:
    return global_stretch if c.stretch is None else c.stretch

def _flag_first(segments: list[Segment]) -> list[Segment]:
    if segments:
        segments[0] = segments[0]._replace(needs_move_to=True)
    return segments

def _closed_segments(chain, tangents: list[Tangent], global_stretch) -> list[Segment]:
    n = len(chain)
    segments = []
    for i, c in enumerate(chain):
        prev = chain[i-1]
        t_in = tangents[i-1]; t_out = tangents[i]
        exit_prev = offset_angle(prev, t_in.angle1, prev.exit_offset)
        entry = offset_angle(c, t_in.angle2, c.entry_offset)
        exit_ = offset_angle(c, t_out.angle1, c.exit_offset)
        segments.append(build_connector(prev, exit_prev, c, entry))
        segments.append(build_arc(c, entry, exit_, effective_stretch(c, global_stretch)))
    logger.debug("Closed loop: %d circles, %d segments", n, len(segments))
    return segments

def _open_segments(chain, tangents: list[Tangent], global_stretch,
                   use_start_point: bool, use_end_point: bool) -> list[Segment]:
    n = len(chain)
    segments = []
    for i, c in enumerate(chain):
        first = i == 0; last = i == n-1
        if not first:
            prev = chain[i-1]; t_in = tangents[i-1]
            segments.append(build_connector(
                prev, offset_angle(prev, t_in.angle1, prev.exit_offset),
                c, offset_angle(c, t_in.angle2, c.entry_offset)))
        if first and not use_start_point:
            continue
        if last and not use_end_point:
            continue
        # the free end of the first/last circle sits opposite its tangent contact
        entry_base = tangents[i].angle1 + math.pi if first else tangents[i-1].angle2
        exit_base = tangents[i-1].angle2 + math.pi if last else tangents[i].angle1
        entry = offset_angle(c, entry_base, c.entry_offset)
        exit_ = offset_angle(c, exit_base, c.exit_offset)
        segments.append(build_arc(c, entry, exit_, effective_stretch(c, global_stretch)))
    logger.debug("Open chain: %d circles, %d segments (start=%s, end=%s)",
                 n, len(segments), use_start_point, use_end_point)
    return _flag_first(segments)


def compute_tangent_hull(
    circles: Sequence[Circle], path_order: Sequence[str],
    global_stretch: float = 0.0, closed_path: bool = True,
    use_start_point: bool = True, use_end_point: bool = True,
    mirror_axis: MirrorAxis | None = "vertical",
) -> PathData:
    """Wrap the circles in *path_order* with one continuous tangent path.

    Mirrored circles are expanded first, then each adjacent pair gets its
    tangent line and each circle the arc between its entry and exit contacts.
    A closed path starts with the connector from the last circle into the
    first. Raises a GeometryFault subclass on invalid or infeasible input;
    no partial result is returned.
    """
    circles = tuple(circles); path_order = tuple(path_order)
    validate_inputs(circles, path_order, global_stretch, mirror_axis)

    expanded, order = expand_mirrored(circles, path_order, mirror_axis)
    by_id = {c.id: c for c in expanded}
    chain = [by_id[cid] for cid in order]
    n = len(chain)
    logger.debug("Hull over %d circles (%d after mirror expansion)", len(path_order), n)

    if n == 1:
        seg = build_full_circle(chain[0], effective_stretch(chain[0], global_stretch))
        segments = [seg] if closed_path else _flag_first([seg])
        return PathData(tuple(segments), seg.length)

    pairs = n if closed_path else n-1
    tangents = [solve_tangent(chain[i], chain[(i+1) % n]) for i in range(pairs)]

    if closed_path:
        segments = _closed_segments(chain, tangents, global_stretch)
    else:
        segments = _open_segments(chain, tangents, global_stretch, use_start_point, use_end_point)
    total = sum(s.length for s in segments)
    logger.debug("Hull total length %.3f", total)
    return PathData(tuple(segments), total)
