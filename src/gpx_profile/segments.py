"""Fixed-distance segmentation and elevation analysis of a GPX trip."""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Sequence

from .errors import InvalidSegmentDistanceError
from .geo import cumulative_distances
from .models import AnalysisResult, BoundaryPoints, Metadata, Segment, TrackPoint

logger = logging.getLogger(__name__)


def analyze_elevation(points: Sequence[TrackPoint], segment_distance_km: float) -> AnalysisResult:
    """Split the trip into ``segment_distance_km`` wide segments and report elevation changes.

    Fewer than two points is not an error: the result carries only the
    configured segment width and an empty segment list.
    """
    if not math.isfinite(segment_distance_km) or segment_distance_km <= 0:
        raise InvalidSegmentDistanceError(
            f"Segment distance must be a positive finite number, got {segment_distance_km}"
        )

    if len(points) < 2:
        logger.info("Need at least 2 points to analyse, got %d", len(points))
        return AnalysisResult(
            metadata=Metadata(segment_distance_km=segment_distance_km),
            segments=[],
        )

    distances = cumulative_distances(points)
    total_distance = distances[-1]

    metadata = calculate_metadata(points, total_distance, segment_distance_km)
    segments = divide_into_segments(points, distances, segment_distance_km)

    logger.debug(
        "Analysed %d points over %.3f km into %d segments",
        len(points), total_distance, len(segments),
    )
    return AnalysisResult(metadata=metadata, segments=segments)


def elevation_changes(points: Sequence[TrackPoint]) -> tuple[float, float]:
    """Return (gain, loss) summed over consecutive elevation deltas. Loss is positive."""
    gain = 0.0
    loss = 0.0
    for i in range(1, len(points)):
        diff = points[i].elevation - points[i - 1].elevation
        if diff > 0:
            gain += diff
        else:
            loss -= diff
    return gain, loss


def calculate_metadata(
    points: Sequence[TrackPoint], total_distance: float, segment_distance_km: float
) -> Metadata:
    """Trip-wide distance, gain/loss and elevation range."""
    if not points:
        return Metadata(total_distance_km=total_distance, segment_distance_km=segment_distance_km)

    gain, loss = elevation_changes(points)
    elevations = [p.elevation for p in points]

    return Metadata(
        total_distance_km=total_distance,
        total_points=len(points),
        segment_distance_km=segment_distance_km,
        total_elevation_gain_m=gain,
        total_elevation_loss_m=loss,
        min_elevation_m=min(elevations),
        max_elevation_m=max(elevations),
    )


def divide_into_segments(
    points: Sequence[TrackPoint], distances: Sequence[float], segment_distance_km: float
) -> list[Segment]:
    """Sweep the trip in fixed-width steps and collect the non-empty segments.

    Segment numbers are assigned before empty candidates are dropped, so the
    emitted numbering can skip values. Boundaries are computed as multiples
    of the width so the sweep always advances.
    """
    if len(points) < 2:
        return []

    total_distance = distances[-1]
    if segment_distance_km <= total_distance * sys.float_info.epsilon:
        raise InvalidSegmentDistanceError(
            f"Segment distance {segment_distance_km} km is too small for a {total_distance:.3f} km trip"
        )

    segments: list[Segment] = []
    segment_num = 1
    start_km = 0.0
    end_km = segment_distance_km

    while start_km < total_distance:
        seg = calculate_segment(points, distances, start_km, end_km, segment_num)
        if seg.point_count > 0:
            segments.append(seg)
        else:
            logger.debug("Dropping empty segment %d (%.3f-%.3f km)", segment_num, start_km, end_km)

        segment_num += 1
        start_km = end_km
        end_km = segment_num * segment_distance_km

    return segments


def calculate_segment(
    points: Sequence[TrackPoint],
    distances: Sequence[float],
    start_km: float,
    end_km: float,
    segment_num: int,
) -> Segment:
    """Build one segment from the points whose distance lies in ``[start_km, end_km]``."""
    segment_points = [p for p, d in zip(points, distances) if start_km <= d <= end_km]

    if not segment_points:
        boundaries = interpolate_segment_boundaries(points, distances, start_km, end_km)
        if boundaries.found:
            segment_points = [boundaries.start, boundaries.end]

    # Never extend past the last recorded point
    actual_end_km = min(end_km, distances[-1])

    if len(segment_points) < 2:
        return Segment(
            segment=segment_num,
            start_km=start_km,
            end_km=actual_end_km,
            distance_km=actual_end_km - start_km,
            point_count=len(segment_points),
        )

    gain, loss = elevation_changes(segment_points)
    return Segment(
        segment=segment_num,
        start_km=start_km,
        end_km=actual_end_km,
        distance_km=actual_end_km - start_km,
        elevation_gain_m=gain,
        elevation_loss_m=loss,
        net_elevation_m=gain - loss,
        start_elevation_m=segment_points[0].elevation,
        end_elevation_m=segment_points[-1].elevation,
        point_count=len(segment_points),
    )


def interpolate_segment_boundaries(
    points: Sequence[TrackPoint], distances: Sequence[float], start_km: float, end_km: float
) -> BoundaryPoints:
    """Resolve the points at both edges of a segment."""
    if len(points) < 2:
        return BoundaryPoints()
    return BoundaryPoints(
        start=interpolate_at(points, distances, start_km),
        end=interpolate_at(points, distances, end_km),
    )


def interpolate_at(
    points: Sequence[TrackPoint], distances: Sequence[float], target_km: float
) -> TrackPoint | None:
    """Return the point located ``target_km`` along the path, or None outside the path.

    A raw point sitting exactly at ``target_km`` is returned unchanged.
    Otherwise lat, lon and elevation are linearly interpolated between the
    first bracketing pair; the new point has no time or name.
    """
    for i in range(1, len(distances)):
        d0, d1 = distances[i - 1], distances[i]
        if not d0 <= target_km <= d1:
            continue

        if d0 == target_km:
            return points[i - 1]
        if d1 == target_km:
            return points[i]

        p0, p1 = points[i - 1], points[i]
        ratio = (target_km - d0) / (d1 - d0)
        return TrackPoint(
            lat=p0.lat + ratio * (p1.lat - p0.lat),
            lon=p0.lon + ratio * (p1.lon - p0.lon),
            elevation=p0.elevation + ratio * (p1.elevation - p0.elevation),
        )

    return None
