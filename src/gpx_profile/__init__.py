"""GPX elevation profile library: fixed-distance segments with elevation gain/loss."""

from .geo import cumulative_distances, haversine
from .gpx_reader import read_gpx
from .models import AnalysisResult, BoundaryPoints, Metadata, Segment, TrackPoint
from .segments import analyze_elevation, interpolate_at, interpolate_segment_boundaries

__all__ = [
    "AnalysisResult",
    "BoundaryPoints",
    "Metadata",
    "Segment",
    "TrackPoint",
    "analyze_elevation",
    "cumulative_distances",
    "haversine",
    "interpolate_at",
    "interpolate_segment_boundaries",
    "read_gpx",
]
