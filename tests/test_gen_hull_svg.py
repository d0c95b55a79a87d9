"""Tests for the gen_hull_svg.py command-line generator."""
import json
import logging
import os
import pytest

from gen_hull_svg import build_parser, main
from hull.logging_config import setup_logging, verbosity_level


@pytest.fixture(autouse=True)
def _reset_hull_logger():
    yield
    logger = logging.getLogger("hull")
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["doc.json"])
        assert args.document == "doc.json"
        assert args.output is None
        assert args.padding == 10.0
        assert not args.show_circles
        assert args.verbose == 0 and not args.quiet
        assert args.log_file is None

    def test_options(self):
        args = build_parser().parse_args(["d.json", "-o", "x.svg", "--padding", "4", "--show-circles", "-v"])
        assert args.output == "x.svg" and args.padding == 4.0
        assert args.show_circles and args.verbose == 1

    def test_repeated_verbose_and_quiet(self):
        assert build_parser().parse_args(["d.json", "-vv"]).verbose == 2
        args = build_parser().parse_args(["d.json", "-q", "--log-file", "run.log"])
        assert args.quiet and args.log_file == "run.log"

    def test_verbose_and_quiet_conflict(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["d.json", "-v", "-q"])


class TestMain:
    def test_writes_svg_and_summary(self, designs_dir, tmp_path, capsys):
        out = tmp_path / "track.svg"
        rc = main([os.path.join(designs_dir, "racetrack.json"), "-o", str(out), "--show-circles"])
        assert rc == 0
        svg = out.read_text()
        assert svg.startswith("<svg") and svg.count("<circle") == 4
        stdout = capsys.readouterr().out
        assert f"SVG written to {out}" in stdout
        assert "Document: Racetrack  (4 circles, closed path)" in stdout
        assert "BezierSeg" in stdout and "EllipseArcSeg" in stdout
        assert "Total length:" in stdout

    def test_default_output_name(self, tmp_path, capsys):
        src = tmp_path / "one.json"
        src.write_text(json.dumps({"name": "One", "shapes": [
            {"id": "o", "center": {"x": 0, "y": 0}, "radius": 5}], "pathOrder": ["o"]}))
        assert main([str(src)]) == 0
        assert (tmp_path / "one.svg").exists()
        assert "ArcSeg         1" in capsys.readouterr().out

    def test_geometry_fault_exit_code(self, tmp_path, capsys):
        src = tmp_path / "bad.json"
        src.write_text(json.dumps({"name": "Bad", "shapes": [
            {"id": "a", "center": {"x": 0, "y": 0}, "radius": 100, "direction": "cw"},
            {"id": "b", "center": {"x": 50, "y": 0}, "radius": 100, "direction": "ccw"},
        ], "pathOrder": ["a", "b"]}))
        assert main([str(src), "-o", str(tmp_path / "bad.svg")]) == 1
        assert "TangentInfeasible" in capsys.readouterr().err
        assert not (tmp_path / "bad.svg").exists()

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.json")]) == 1
        assert "error:" in capsys.readouterr().err


class TestLogging:
    @pytest.mark.parametrize("verbose,quiet,level", [
        (0, False, logging.WARNING), (1, False, logging.INFO),
        (2, False, logging.DEBUG), (5, False, logging.DEBUG), (0, True, logging.ERROR),
    ])
    def test_verbosity_level(self, verbose, quiet, level):
        assert verbosity_level(verbose, quiet) == level

    def test_file_records_debug_under_quiet_console(self, tmp_path, capsys):
        log = tmp_path / "hull.log"
        setup_logging(logging.ERROR, str(log))
        logging.getLogger("hull.test").debug("hello from test")
        for h in logging.getLogger("hull").handlers:
            h.flush()
        assert "hull.test - DEBUG - hello from test" in log.read_text()
        assert "hello from test" not in capsys.readouterr().err

    def test_console_goes_to_stderr(self, capsys):
        setup_logging(logging.INFO)
        logging.getLogger("hull.test").info("progress")
        captured = capsys.readouterr()
        assert "INFO hull.test: progress" in captured.err
        assert captured.out == ""

    def test_replaces_handlers(self):
        setup_logging(logging.INFO)
        setup_logging(logging.INFO)
        assert len(logging.getLogger("hull").handlers) == 1

    def test_cli_log_file(self, designs_dir, tmp_path, capsys):
        log = tmp_path / "run.log"
        rc = main([os.path.join(designs_dir, "racetrack.json"), "-o", str(tmp_path / "t.svg"),
                   "-q", "--log-file", str(log)])
        assert rc == 0
        for h in logging.getLogger("hull").handlers:
            h.flush()
        text = log.read_text()
        assert "hull.path - DEBUG - Hull total length" in text
        assert "hull.cli - INFO - Wrote" in text
        assert capsys.readouterr().err == ""
