"""Shared type definitions for the tangent-hull engine.

World coordinates are y-down (screen/SVG). Angles are atan2(dy, dx) in
world coordinates, so "cw" travel means increasing angle.
"""
from typing import Literal, NamedTuple

Point = tuple[float, float]
Direction = Literal["cw", "ccw"]
MirrorAxis = Literal["vertical", "horizontal"]

class Circle(NamedTuple):
    id: str
    center: Point
    radius: float
    direction: Direction = "cw"
    stretch: float | None = None          # None inherits the global stretch
    entry_offset: float = 0.0             # radians, + = further along travel
    exit_offset: float = 0.0
    entry_tangent_length: float = 1.0     # Bezier control-point reach multipliers
    exit_tangent_length: float = 1.0
    mirrored: bool = False

# Only circles exist today; new shape kinds join this union.
Shape = Circle

class LineSeg(NamedTuple):
    start: Point; end: Point
    length: float
    needs_move_to: bool = False

class BezierSeg(NamedTuple):
    start: Point; cp1: Point; cp2: Point; end: Point
    length: float
    needs_move_to: bool = False

class ArcSeg(NamedTuple):
    center: Point; radius: float
    start_angle: float; end_angle: float
    ccw: bool                             # True = sweeps with decreasing angle
    length: float
    needs_move_to: bool = False

class EllipseArcSeg(NamedTuple):
    center: Point; radius_x: float; radius_y: float
    rotation: float                       # angle of the local x axis
    start_angle: float; end_angle: float  # parametric angles in the local frame
    ccw: bool
    length: float
    needs_move_to: bool = False

Segment = LineSeg | BezierSeg | ArcSeg | EllipseArcSeg

class PathData(NamedTuple):
    segments: tuple[Segment, ...]
    total_length: float

class BBox(NamedTuple):
    min_x: float; min_y: float; max_x: float; max_y: float

class HullSettings(NamedTuple):
    """Document-wide settings consumed by compute_tangent_hull."""
    global_stretch: float = 0.0
    closed_path: bool = True
    use_start_point: bool = True
    use_end_point: bool = True
    mirror_axis: MirrorAxis | None = "vertical"
