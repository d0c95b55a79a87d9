"""Serpentine document files: JSON load/save with legacy field migration.

File layout (version 1)::

    {"version": 1, "name": "...",
     "settings": {"globalStretch": 0, "closedPath": true, "useStartPoint": true,
                  "useEndPoint": true, "mirrorAxis": "vertical"},
     "shapes": [{"id": "a", "type": "circle", "name": "A",
                 "center": {"x": 0, "y": 0}, "radius": 50, "direction": "cw", ...}],
     "pathOrder": ["a", ...]}

Older files used ``wrapSide`` (left = ccw), ``fling`` and ``tension``
(stretch = 1 - tension); these are migrated on load and never written.
"""
import json
import logging
import os
from typing import Any, NamedTuple

from .types import Circle, HullSettings, PathData
from .path import compute_tangent_hull
from .constants import DEFAULT_DIRECTION, DEFAULT_MIRROR_AXIS, DEFAULT_TANGENT_LENGTH

logger = logging.getLogger(__name__)

DOCUMENT_VERSION = 1


class DocumentError(ValueError):
    """A document file is malformed."""


class Document(NamedTuple):
    name: str
    circles: tuple[Circle, ...]
    path_order: tuple[str, ...]
    settings: HullSettings = HullSettings()
    version: int = DOCUMENT_VERSION
    shape_names: dict[str, str] | None = None   # display names by circle id


# ============================================================
# Parsing
# ============================================================
def _legacy_stretch(obj: dict, key: str, fling: str, tension: str) -> float | None:
    if obj.get(key) is not None:
        return float(obj[key])
    if obj.get(fling) is not None:
        return float(obj[fling])
    if obj.get(tension) is not None:
        return 1.0 - float(obj[tension])
    return None

def _parse_circle(shape: dict) -> Circle:
    try:
        center = shape["center"]
        direction = shape.get("direction")
        if direction is None:
            direction = "ccw" if shape.get("wrapSide") == "left" else DEFAULT_DIRECTION
        return Circle(
            id=str(shape["id"]),
            center=(float(center["x"]), float(center["y"])),
            radius=float(shape["radius"]),
            direction=direction,
            stretch=_legacy_stretch(shape, "stretch", "fling", "tension"),
            entry_offset=float(shape.get("entryOffset", 0.0)),
            exit_offset=float(shape.get("exitOffset", 0.0)),
            entry_tangent_length=float(shape.get("entryTangentLength", DEFAULT_TANGENT_LENGTH)),
            exit_tangent_length=float(shape.get("exitTangentLength", DEFAULT_TANGENT_LENGTH)),
            mirrored=bool(shape.get("mirrored", False)),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DocumentError(f"Bad shape {shape.get('id', '?')!r}: {e}") from e

def parse_document(data: dict[str, Any]) -> Document:
    """Build a Document from decoded JSON, migrating legacy fields."""
    if not isinstance(data, dict):
        raise DocumentError(f"Document must be a JSON object, got {type(data).__name__}")
    for key in ("shapes", "pathOrder"):
        if not isinstance(data.get(key), list):
            raise DocumentError(f"Document is missing {key!r}")

    circles = []; names = {}
    for shape in data["shapes"]:
        if not isinstance(shape, dict):
            raise DocumentError(f"Shape entries must be objects, got {shape!r}")
        kind = shape.get("type", "circle")
        if kind != "circle":
            logger.warning("Skipping shape %r of unsupported type %r", shape.get("id"), kind)
            continue
        c = _parse_circle(shape)
        circles.append(c)
        if shape.get("name"):
            names[c.id] = str(shape["name"])

    s = data.get("settings") or {}
    settings = HullSettings(
        global_stretch=_legacy_stretch(s, "globalStretch", "globalFling", "globalTension") or 0.0,
        closed_path=bool(s.get("closedPath", True)),
        use_start_point=bool(s.get("useStartPoint", True)),
        use_end_point=bool(s.get("useEndPoint", True)),
        mirror_axis=s.get("mirrorAxis", DEFAULT_MIRROR_AXIS),
    )
    doc = Document(
        name=str(data.get("name", "Untitled")),
        circles=tuple(circles),
        path_order=tuple(str(i) for i in data["pathOrder"]),
        settings=settings,
        version=int(data.get("version", DOCUMENT_VERSION)),
        shape_names=names,
    )
    logger.debug("Parsed document %r: %d circles, order of %d",
                 doc.name, len(doc.circles), len(doc.path_order))
    return doc

def load_document(path: str | os.PathLike) -> Document:
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DocumentError(f"{path}: not valid JSON ({e})") from e
    return parse_document(data)

# ============================================================
# Writing
# ============================================================
def _circle_to_dict(c: Circle, name: str) -> dict[str, Any]:
    out = {"id": c.id, "type": "circle", "name": name,
           "center": {"x": c.center[0], "y": c.center[1]},
           "radius": c.radius, "direction": c.direction}
    if c.stretch is not None: out["stretch"] = c.stretch
    if c.entry_offset: out["entryOffset"] = c.entry_offset
    if c.exit_offset: out["exitOffset"] = c.exit_offset
    if c.entry_tangent_length != DEFAULT_TANGENT_LENGTH: out["entryTangentLength"] = c.entry_tangent_length
    if c.exit_tangent_length != DEFAULT_TANGENT_LENGTH: out["exitTangentLength"] = c.exit_tangent_length
    if c.mirrored: out["mirrored"] = True
    return out

def document_to_dict(doc: Document) -> dict[str, Any]:
    names = doc.shape_names or {}
    s = doc.settings
    return {
        "version": doc.version,
        "name": doc.name,
        "settings": {
            "globalStretch": s.global_stretch,
            "closedPath": s.closed_path,
            "useStartPoint": s.use_start_point,
            "useEndPoint": s.use_end_point,
            "mirrorAxis": s.mirror_axis,
        },
        "shapes": [_circle_to_dict(c, names.get(c.id, c.id)) for c in doc.circles],
        "pathOrder": list(doc.path_order),
    }

def save_document(doc: Document, path: str | os.PathLike) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document_to_dict(doc), f, indent=2)
        f.write("\n")
    logger.info("Saved document %r to %s", doc.name, path)

def document_hull(doc: Document) -> PathData:
    """Run compute_tangent_hull with the document's own settings."""
    return compute_tangent_hull(doc.circles, doc.path_order, **doc.settings._asdict())
