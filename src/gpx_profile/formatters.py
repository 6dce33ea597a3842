"""Render an analysis result as JSON, CSV or a plain-text summary."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Iterable, Iterator

from .config import OutputFormat
from .errors import UnsupportedFormatError
from .models import AnalysisResult, Segment

CSV_FIELDNAMES = [
    "segment", "start_km", "end_km", "distance_km",
    "elevation_gain_m", "elevation_loss_m", "net_elevation_m",
    "start_elevation_m", "end_elevation_m", "point_count",
]


def format_result(result: AnalysisResult, fmt: OutputFormat | str) -> str:
    """Render ``result`` in the requested format."""
    try:
        fmt = OutputFormat(fmt)
    except ValueError:
        raise UnsupportedFormatError(f"Unsupported output format: {fmt}") from None

    if fmt is OutputFormat.JSON:
        return format_json(result)
    if fmt is OutputFormat.COMPACT_JSON:
        return format_json(result, compact=True)
    if fmt is OutputFormat.CSV:
        return format_csv(result)
    return format_text(result)


def format_json(result: AnalysisResult, compact: bool = False) -> str:
    data = result.model_dump()
    if compact:
        return json.dumps(data, separators=(",", ":")) + "\n"
    return json.dumps(data, indent=2) + "\n"


def segment_row(seg: Segment) -> list[str]:
    """One CSV row: distances to 3 decimals, elevations to 1."""
    return [
        str(seg.segment),
        f"{seg.start_km:.3f}",
        f"{seg.end_km:.3f}",
        f"{seg.distance_km:.3f}",
        f"{seg.elevation_gain_m:.1f}",
        f"{seg.elevation_loss_m:.1f}",
        f"{seg.net_elevation_m:.1f}",
        f"{seg.start_elevation_m:.1f}",
        f"{seg.end_elevation_m:.1f}",
        str(seg.point_count),
    ]


def iter_csv_lines(segments: Iterable[Segment]) -> Iterator[str]:
    """Yield the CSV header and then one line per segment."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")

    writer.writerow(CSV_FIELDNAMES)
    yield buf.getvalue()
    buf.seek(0)
    buf.truncate(0)

    for seg in segments:
        writer.writerow(segment_row(seg))
        yield buf.getvalue()
        buf.seek(0)
        buf.truncate(0)


def format_csv(result: AnalysisResult) -> str:
    return "".join(iter_csv_lines(result.segments))


def format_text(result: AnalysisResult) -> str:
    meta = result.metadata
    return (
        f"Total Distance: {meta.total_distance_km:.2f} km\n"
        f"Total Points: {meta.total_points}\n"
        f"Segment Distance: {meta.segment_distance_km:.1f} km\n"
        f"Total Elevation Gain: {meta.total_elevation_gain_m:.1f} m\n"
        f"Total Elevation Loss: {meta.total_elevation_loss_m:.1f} m\n"
        f"Elevation Range: {meta.min_elevation_m:.1f} - {meta.max_elevation_m:.1f} m\n"
    )
