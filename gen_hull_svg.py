"""Render a serpentine document's tangent hull to SVG.

    python gen_hull_svg.py designs/racetrack.json -o racetrack.svg --show-circles
"""
import argparse
import logging
import os
import sys
from collections import Counter

from hull import (
    GeometryFault, DocumentError, load_document, document_hull, expand_mirrored, render_svg,
)
from hull.constants import SVG_PADDING
from hull.logging_config import setup_logging, verbosity_level

logger = logging.getLogger("hull.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the tangent hull of a serpentine document and write it as SVG.")
    parser.add_argument("document", help="serpentine document (.json)")
    parser.add_argument("-o", "--output", default=None,
                        help="output SVG path (default: document name with .svg)")
    parser.add_argument("--padding", type=float, default=SVG_PADDING,
                        help=f"viewBox padding in world units (default: {SVG_PADDING})")
    parser.add_argument("--show-circles", action="store_true",
                        help="draw dashed circle guides and center marks")
    noise = parser.add_mutually_exclusive_group()
    noise.add_argument("-v", "--verbose", action="count", default=0,
                       help="more log output (-v progress, -vv debug)")
    noise.add_argument("-q", "--quiet", action="store_true", help="log errors only")
    parser.add_argument("--log-file", default=None, help="also write a full debug log here")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbosity_level(args.verbose, args.quiet), args.log_file)

    try:
        doc = load_document(args.document)
        path = document_hull(doc)
    except (DocumentError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except GeometryFault as e:
        print(f"error: {e.kind}: {e}", file=sys.stderr)
        return 1

    logger.info("Hull of %r: %d segments", doc.name, len(path.segments))
    out = args.output or os.path.splitext(args.document)[0] + ".svg"
    guides = None
    if args.show_circles:
        guides, _ = expand_mirrored(doc.circles, doc.path_order, doc.settings.mirror_axis)
    svg = render_svg(path, doc.settings.closed_path,
                     circles=guides, padding=args.padding)
    with open(out, "w", encoding="utf-8") as f:
        f.write(svg)
    logger.info("Wrote %d bytes to %s", len(svg), out)

    counts = Counter(type(s).__name__ for s in path.segments)
    print(f"SVG written to {out}")
    print(f"Document: {doc.name}  ({len(doc.circles)} circles, "
          f"{'closed' if doc.settings.closed_path else 'open'} path)")
    for kind in ("LineSeg", "BezierSeg", "ArcSeg", "EllipseArcSeg"):
        if counts[kind]:
            print(f"  {kind:<14} {counts[kind]}")
    print(f"Total length: {path.total_length:.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
