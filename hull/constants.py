"""Named tolerances and tuning constants for the tangent-hull engine.

Lengths are in world units (the same units as circle centers and radii).
"""
import math

# Tolerances
CENTER_TOLERANCE = 1e-9           # centers closer than this are "the same"
POSITION_TOLERANCE = 0.01         # virtual mirror circles this close are merged
ANGLE_TOLERANCE = 1e-9            # sweeps below this are treated as zero
FEASIBILITY_TOLERANCE = 1e-9      # slack on |k| <= d before a tangent is infeasible

# Offset & continuity
BEZIER_REACH = 1.0 / 3.0          # control-point reach as a fraction of the chord
DEFAULT_TANGENT_LENGTH = 1.0

# Lengths
LENGTH_SUBDIVISIONS = 16          # Bezier polyline pieces / ellipse Simpson intervals

# Stretch
MIN_STRETCH = 0.01                # |stretch| below this keeps the arc circular
MIN_SAGITTA_RATIO = 0.01          # flattest allowed ellipse height, fraction of the circular sagitta
ELLIPSE_LIMIT = 0.95              # share of the gap between circular apex and parabola limit
FLAT_ARC_TOLERANCE = 1e-9         # stretch room below this fraction of the radius keeps the circle
STRETCH_RANGE = (-1.0, 1.0)

# Mirror
MIRROR_SUFFIX = "_mirror"
DEFAULT_MIRROR_AXIS = "vertical"

# Circle defaults
DEFAULT_DIRECTION = "cw"
FULL_TURN = 2 * math.pi

# SVG output
SVG_PADDING = 10.0                # viewBox padding around the path bounds
SVG_PRECISION = 3                 # decimals in path data and viewBox
SVG_STROKE = "#222"
SVG_STROKE_WIDTH = 2.0
SVG_GUIDE_STROKE = "#90a4ae"
SVG_ARC_SAMPLES = 32              # polyline points per arc for bounds
