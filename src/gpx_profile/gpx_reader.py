"""GPX reader: extracts route and track points from GPX 1.0/1.1 documents.

Route points (``<rte>/<rtept>``) come first, followed by track points
(``<trk>/<trkseg>/<trkpt>``), each in document order. A missing ``<ele>``
becomes 0.0 so the analysis never sees an absent elevation.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from pathlib import Path
from typing import BinaryIO

from pydantic import ValidationError

from .errors import GPXParseError, InputReadError
from .models import TrackPoint

logger = logging.getLogger(__name__)


def read_gpx(file: str | Path | bytes | BinaryIO) -> list[TrackPoint]:
    """Read a GPX document and return its points as a flat ordered list.

    Args:
        file: Path to a .gpx file, the raw document bytes, or a binary file-like object.
    """
    data = _read_bytes(file)

    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise GPXParseError(f"Malformed GPX XML: {e}") from e

    if _local_name(root.tag) != "gpx":
        raise GPXParseError(f"Expected <gpx> root element, found <{_local_name(root.tag)}>")

    points: list[TrackPoint] = []
    for rte in _children(root, "rte"):
        for rtept in _children(rte, "rtept"):
            points.append(_parse_point(rtept, with_name=True))

    # Track point names are not carried over
    for trk in _children(root, "trk"):
        for trkseg in _children(trk, "trkseg"):
            for trkpt in _children(trkseg, "trkpt"):
                points.append(_parse_point(trkpt, with_name=False))

    logger.debug("Read %d points from GPX", len(points))
    return points


def _read_bytes(file: str | Path | bytes | BinaryIO) -> bytes:
    if isinstance(file, bytes):
        return file
    try:
        if isinstance(file, (str, Path)):
            with open(file, "rb") as f:
                return f.read()
        return file.read()
    except OSError as e:
        raise InputReadError(f"Failed to read {file}: {e}") from e


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix so GPX 1.0, 1.1 and un-namespaced files all match."""
    return tag.rsplit("}", 1)[-1]


def _children(elem: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in elem if _local_name(child.tag) == name]


def _child_text(elem: ET.Element, name: str) -> str | None:
    for child in elem:
        if _local_name(child.tag) == name and child.text is not None:
            return child.text.strip()
    return None


def _parse_point(elem: ET.Element, with_name: bool) -> TrackPoint:
    tag = _local_name(elem.tag)
    lat = elem.get("lat")
    lon = elem.get("lon")
    if lat is None or lon is None:
        raise GPXParseError(f"<{tag}> is missing lat/lon attributes")

    ele_text = _child_text(elem, "ele")
    try:
        elevation = float(ele_text) if ele_text else 0.0
        return TrackPoint(
            lat=float(lat),
            lon=float(lon),
            elevation=elevation,
            time=_parse_time(_child_text(elem, "time")),
            name=_child_text(elem, "name") if with_name else None,
        )
    except (ValueError, ValidationError) as e:
        raise GPXParseError(f"Invalid <{tag}> lat={lat!r} lon={lon!r}: {e}") from e


def _parse_time(text: str | None) -> datetime | None:
    if not text:
        return None
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 onwards
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Ignoring unparsable <time> value %r", text)
        return None
