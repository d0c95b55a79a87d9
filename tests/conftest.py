"""Shared test fixtures for the tangent-hull engine."""
import os
import pytest
from hull import Circle, compute_tangent_hull

DESIGNS = os.path.join(os.path.dirname(__file__), "..", "designs")


@pytest.fixture(scope="session")
def designs_dir():
    return os.path.abspath(DESIGNS)


@pytest.fixture(scope="session")
def pair_cw():
    """Two r=50 cw circles at (0,0) and (300,0)."""
    return (Circle("a", (0.0, 0.0), 50.0, "cw"),
            Circle("b", (300.0, 0.0), 50.0, "cw"))


@pytest.fixture(scope="session")
def track_circles():
    """Four-circle loop mixing directions and radii."""
    return (
        Circle("a", (0.0, 0.0), 60.0, "cw"),
        Circle("b", (300.0, 0.0), 60.0, "cw"),
        Circle("c", (300.0, 250.0), 80.0, "cw"),
        Circle("d", (0.0, 250.0), 40.0, "ccw"),
    )


@pytest.fixture(scope="session")
def track_order():
    return ("a", "b", "c", "d")


@pytest.fixture(scope="session")
def track_path(track_circles, track_order):
    """Closed hull over track_circles, no offsets or stretch."""
    return compute_tangent_hull(track_circles, track_order)


@pytest.fixture(scope="session")
def shaped_circles(track_circles):
    """track_circles with offsets, multipliers and per-circle stretch."""
    a, b, c, d = track_circles
    return (
        a._replace(exit_offset=0.2, exit_tangent_length=1.3),
        b._replace(stretch=0.4),
        c._replace(entry_offset=-0.15, stretch=-0.3),
        d._replace(entry_offset=0.1, exit_offset=0.1, entry_tangent_length=0.7),
    )
