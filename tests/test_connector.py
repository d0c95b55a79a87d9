"""Tests for hull/connector.py: offsets and Line/Bezier connectors."""
import math
import pytest
from hull import Circle, LineSeg, BezierSeg
from hull.connector import offset_angle, build_connector
from hull.geometry import dist, point_on_circle, seg_tangent, travel_dir


A = Circle("a", (0.0, 0.0), 50.0, "cw")
B = Circle("b", (300.0, 0.0), 50.0, "cw")
TOP = -math.pi/2   # contact angle of the y = -50 line on both circles


class TestOffsetAngle:
    def test_zero_is_identity(self):
        assert offset_angle(A, 1.25, 0.0) == 1.25

    def test_cw_adds(self):
        assert abs(offset_angle(A, 1.0, 0.2) - 1.2) < 1e-12

    def test_ccw_subtracts(self):
        assert abs(offset_angle(A._replace(direction="ccw"), 1.0, 0.2) - 0.8) < 1e-12


class TestBuildConnector:
    def test_zero_offsets_line(self):
        seg = build_connector(A, TOP, B, TOP)
        assert isinstance(seg, LineSeg)
        assert abs(seg.length - 300) < 1e-9
        assert abs(seg.start[1] + 50) < 1e-9 and abs(seg.end[1] + 50) < 1e-9

    def test_multiplier_alone_keeps_line(self):
        a = A._replace(exit_tangent_length=2.5)
        assert isinstance(build_connector(a, TOP, B, TOP), LineSeg)

    @pytest.mark.parametrize("exit_off,entry_off", [(0.3, 0.0), (0.0, -0.2), (0.1, 0.1)])
    def test_offset_gives_bezier(self, exit_off, entry_off):
        a = A._replace(exit_offset=exit_off); b = B._replace(entry_offset=entry_off)
        seg = build_connector(a, offset_angle(a, TOP, exit_off), b, offset_angle(b, TOP, entry_off))
        assert isinstance(seg, BezierSeg)

    def test_bezier_endpoints_on_circles(self):
        a = A._replace(exit_offset=0.3); b = B._replace(entry_offset=-0.2)
        ea = offset_angle(a, TOP, 0.3); eb = offset_angle(b, TOP, -0.2)
        seg = build_connector(a, ea, b, eb)
        assert abs(dist(seg.start, point_on_circle(A.center, 50, ea))) < 1e-12
        assert abs(dist(seg.end, point_on_circle(B.center, 50, eb))) < 1e-12

    def test_bezier_tangent_continuity(self):
        a = A._replace(exit_offset=0.3); b = B._replace(entry_offset=-0.2, direction="ccw")
        ea = offset_angle(a, TOP, 0.3); eb = offset_angle(b, math.pi/2, -0.2)
        seg = build_connector(a, ea, b, eb)
        for t, angle, sign in ((0.0, ea, 1), (1.0, eb, -1)):
            want = travel_dir(angle, sign); got = seg_tangent(seg, t)
            assert abs(got[0] - want[0]) < 1e-9 and abs(got[1] - want[1]) < 1e-9

    def test_control_point_reach(self):
        a = A._replace(exit_offset=0.3, exit_tangent_length=1.5)
        b = B._replace(entry_offset=0.1, entry_tangent_length=0.5)
        seg = build_connector(a, offset_angle(a, TOP, 0.3), b, offset_angle(b, TOP, 0.1))
        chord = dist(seg.start, seg.end)
        assert abs(dist(seg.start, seg.cp1) - chord/3*1.5) < 1e-9
        assert abs(dist(seg.end, seg.cp2) - chord/3*0.5) < 1e-9

    def test_bezier_length_exceeds_chord(self):
        a = A._replace(exit_offset=0.4)
        seg = build_connector(a, offset_angle(a, TOP, 0.4), B, TOP)
        assert seg.length > dist(seg.start, seg.end)
