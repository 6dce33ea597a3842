"""FastAPI server for GPX elevation profiles."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse

from .config import get_settings
from .errors import GpxProfileError, InvalidSegmentDistanceError, NoPointsError
from .formatters import iter_csv_lines
from .gpx_reader import read_gpx
from .models import AnalysisResult, Segment
from .segments import analyze_elevation

logger = logging.getLogger(__name__)

app = FastAPI(title="GPX Elevation Profile", version="0.1.0")


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/analyze", response_model=AnalysisResult)
async def analyze_gpx(
    file: UploadFile,
    format: str = Query("json", pattern="^(csv|json)$"),
    distance: float | None = Query(None, gt=0, allow_inf_nan=False, description="Segment distance in km"),
):
    """Analyse an uploaded GPX file and return its segmented elevation profile."""
    segment_distance_km = distance if distance is not None else get_settings().segment_distance_km
    content = await file.read()

    try:
        points = read_gpx(content)
        if not points:
            raise NoPointsError("No points found in GPX file")
    except GpxProfileError as e:
        logger.warning("Rejected upload %s: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    try:
        result = analyze_elevation(points, segment_distance_km)
    except InvalidSegmentDistanceError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    if format == "json":
        return result

    return _segments_to_csv_response(result.segments)


def _segments_to_csv_response(segments: list[Segment]) -> StreamingResponse:
    """Convert segments to a streaming CSV response."""
    return StreamingResponse(
        iter_csv_lines(segments),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=gpx_profile.csv"},
    )
