"""SVG export: path data, bounds and a standalone document for a hull."""
import math
from typing import Sequence

from .types import Circle, LineSeg, BezierSeg, ArcSeg, EllipseArcSeg, Segment, PathData, BBox
from .geometry import seg_point, seg_start
from .constants import (
    ANGLE_TOLERANCE, FULL_TURN, SVG_PADDING, SVG_PRECISION,
    SVG_STROKE, SVG_STROKE_WIDTH, SVG_GUIDE_STROKE, SVG_ARC_SAMPLES,
)


def _fmt(v: float) -> str:
    s = f"{v:.{SVG_PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s

def _pt(p) -> str:
    return f"{_fmt(p[0])} {_fmt(p[1])}"

# ============================================================
# Path Data
# ============================================================
def _arc_command(seg: ArcSeg | EllipseArcSeg, t0: float, t1: float) -> str:
    span = (seg.end_angle - seg.start_angle) * (t1 - t0)
    large = 1 if abs(span) > math.pi else 0
    sweep = 0 if seg.ccw else 1
    if isinstance(seg, ArcSeg):
        rx = ry = seg.radius; rot = 0.0
    else:
        rx = seg.radius_x; ry = seg.radius_y; rot = math.degrees(seg.rotation)
    return (f"A {_fmt(rx)} {_fmt(ry)} {_fmt(rot)} {large} {sweep} "
            f"{_pt(seg_point(seg, t1))}")

def segment_to_svg(seg: Segment) -> list[str]:
    """Drawing commands for one segment, without the leading move."""
    if isinstance(seg, LineSeg):
        return [f"L {_pt(seg.end)}"]
    if isinstance(seg, BezierSeg):
        return [f"C {_pt(seg.cp1)} {_pt(seg.cp2)} {_pt(seg.end)}"]
    if abs(seg.end_angle - seg.start_angle) >= FULL_TURN - ANGLE_TOLERANCE:
        # SVG cannot draw a closed arc in one command
        return [_arc_command(seg, 0.0, 0.5), _arc_command(seg, 0.5, 1.0)]
    return [_arc_command(seg, 0.0, 1.0)]

def path_to_svg_d(path: PathData, closed: bool) -> str:
    """SVG path "d" attribute for a hull."""
    cmds = []
    for i, seg in enumerate(path.segments):
        if i == 0 or seg.needs_move_to:
            cmds.append(f"M {_pt(seg_start(seg))}")
        cmds.extend(segment_to_svg(seg))
    if closed and cmds:
        cmds.append("Z")
    return " ".join(cmds)

# ============================================================
# Bounds
# ============================================================
def segment_bounds(seg: Segment) -> BBox:
    if isinstance(seg, LineSeg):
        pts = [seg.start, seg.end]
    elif isinstance(seg, BezierSeg):
        pts = [seg.start, seg.cp1, seg.cp2, seg.end]
    else:
        pts = [seg_point(seg, i/SVG_ARC_SAMPLES) for i in range(SVG_ARC_SAMPLES+1)]
    xs = [p[0] for p in pts]; ys = [p[1] for p in pts]
    return BBox(min(xs), min(ys), max(xs), max(ys))

def path_bounds(path: PathData) -> BBox:
    if not path.segments:
        return BBox(0.0, 0.0, 0.0, 0.0)
    boxes = [segment_bounds(s) for s in path.segments]
    return BBox(min(b.min_x for b in boxes), min(b.min_y for b in boxes),
                max(b.max_x for b in boxes), max(b.max_y for b in boxes))

# ============================================================
# Document
# ============================================================
def _union(box: BBox, c: Circle) -> BBox:
    (cx, cy), r = c.center, c.radius
    return BBox(min(box.min_x, cx-r), min(box.min_y, cy-r),
                max(box.max_x, cx+r), max(box.max_y, cy+r))

def render_svg(path: PathData, closed: bool, circles: Sequence[Circle] | None = None,
               padding: float = SVG_PADDING) -> str:
    """Standalone SVG document: the hull path plus optional circle guides."""
    if path.segments or not circles:
        box = path_bounds(path)
    else:
        box = BBox(math.inf, math.inf, -math.inf, -math.inf)
    for c in circles or ():
        box = _union(box, c)
    x0 = box.min_x - padding; y0 = box.min_y - padding
    w = box.max_x - box.min_x + 2*padding; h = box.max_y - box.min_y + 2*padding

    lines = [f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{_fmt(x0)} {_fmt(y0)} {_fmt(w)} {_fmt(h)}"'
             f' width="{_fmt(w)}" height="{_fmt(h)}">']
    if circles:
        lines.append(f'<g fill="none" stroke="{SVG_GUIDE_STROKE}" stroke-width="1">')
        for c in circles:
            (cx, cy), r = c.center, c.radius
            lines.append(f'<circle cx="{_fmt(cx)}" cy="{_fmt(cy)}" r="{_fmt(r)}" stroke-dasharray="4,3"/>')
            lines.append(f'<line x1="{_fmt(cx-4)}" y1="{_fmt(cy)}" x2="{_fmt(cx+4)}" y2="{_fmt(cy)}"/>')
            lines.append(f'<line x1="{_fmt(cx)}" y1="{_fmt(cy-4)}" x2="{_fmt(cx)}" y2="{_fmt(cy+4)}"/>')
        lines.append('</g>')
    if path.segments:
        lines.append(f'<path d="{path_to_svg_d(path, closed)}" fill="none" stroke="{SVG_STROKE}"'
                     f' stroke-width="{_fmt(SVG_STROKE_WIDTH)}" stroke-linejoin="round"/>')
    lines.append('</svg>')
    return "\n".join(lines) + "\n"
