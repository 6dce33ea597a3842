"""Pydantic data models for the elevation profile."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TrackPoint(BaseModel):
    """A single route or track point extracted from a GPX file."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    elevation: float = 0.0
    time: datetime | None = None
    name: str | None = None


class BoundaryPoints(BaseModel):
    """Start and end points resolved for a segment with no raw points in it."""

    start: TrackPoint | None = None
    end: TrackPoint | None = None

    @property
    def found(self) -> bool:
        return self.start is not None and self.end is not None


class Segment(BaseModel):
    """A fixed-width distance slice of the trip."""

    segment: int
    start_km: float
    end_km: float
    distance_km: float
    elevation_gain_m: float = 0.0
    elevation_loss_m: float = 0.0
    net_elevation_m: float = 0.0
    start_elevation_m: float = 0.0
    end_elevation_m: float = 0.0
    point_count: int = 0


class Metadata(BaseModel):
    """Trip-wide totals."""

    total_distance_km: float = 0.0
    total_points: int = 0
    segment_distance_km: float
    total_elevation_gain_m: float = 0.0
    total_elevation_loss_m: float = 0.0
    min_elevation_m: float = 0.0
    max_elevation_m: float = 0.0


class AnalysisResult(BaseModel):
    """Complete result of analysing a GPX trip."""

    metadata: Metadata
    segments: list[Segment]
