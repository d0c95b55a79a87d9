"""Serpentine tangent-hull engine: wrap ordered circles with one continuous path."""

from .types import (
    Point, Direction, MirrorAxis, Circle, Shape,
    LineSeg, BezierSeg, ArcSeg, EllipseArcSeg, Segment,
    PathData, BBox, HullSettings,
)
from .geometry import (
    GeometryFault, DegenerateCenters, TangentInfeasible,
    EmptyInput, InvalidPathOrder, InvalidParameter,
    signed_sweep, seg_point, seg_start, seg_end, seg_tangent,
    segment_polyline, path_polygon,
)
from .mirror import mirror_circle, expand_mirrored
from .tangent import Tangent, solve_tangent
from .connector import offset_angle, build_connector
from .arcs import build_arc, build_full_circle
from .path import compute_tangent_hull
from .svg import path_to_svg_d, path_bounds, render_svg
from .document import (
    Document, DocumentError,
    parse_document, load_document, document_to_dict, save_document, document_hull,
)
