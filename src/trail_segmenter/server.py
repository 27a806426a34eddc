"""FastAPI server for trail segmentation."""

from __future__ import annotations

import csv
import io
import logging
import zipfile
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse

from . import config
from .kml_reader import read_kml
from .models import Coordinate, SegmentationResult, TrailPayload
from .segments import segment_trail
from .shared import group_shared_trails

# Configured here so the reloader's worker process picks it up too
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logging.getLogger("trail_segmenter").setLevel(config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Trail Segmenter", version="0.1.0")

KML_EXTS = {".kml", ".kmz"}
CSV_FIELDS = ["segment", "point", "lat", "lng"]


@app.get("/health")
async def health():
    return {"status": "ok", "threshold_m": config.DEFAULT_THRESHOLD_M}


@app.post("/segment")
async def segment_points(
    payload: TrailPayload,
    format: str = Query("json", pattern="^(csv|json)$"),
):
    """Segment a JSON trail of ``{"lat", "lng"}`` points."""
    threshold_m = _threshold(payload.threshold_m)
    result = segment_trail(payload.points, threshold_m)

    if format == "csv":
        return _result_to_csv_response(result)
    return result


@app.post("/segment/kml")
async def segment_kml(
    file: UploadFile,
    threshold_m: float | None = Query(None, ge=0),
    format: str = Query("json", pattern="^(csv|json)$"),
):
    """Segment the coordinates of an uploaded .kml or .kmz file."""
    ext = Path(file.filename or "").suffix.lower()
    if ext not in KML_EXTS:
        raise HTTPException(status_code=400, detail=f"Unsupported file type: {ext or 'none'}")

    content = await file.read()
    try:
        trail = read_kml(content)
    except (ValueError, zipfile.BadZipFile) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.info("Segmenting %s: %d points", file.filename, len(trail))

    result = segment_trail(trail, _threshold(threshold_m))

    if format == "csv":
        return _result_to_csv_response(result, filename=f"{Path(file.filename).stem}_segments.csv")
    return result


@app.post("/segment/shared")
async def segment_shared(
    data: dict[str, dict[str, list[Coordinate | None]]],
    threshold_m: float | None = Query(None, ge=0),
) -> dict[str, SegmentationResult]:
    """Segment every trail in a ``{name: {date: [point | null]}}`` payload, keyed ``date-name``."""
    threshold = _threshold(threshold_m)
    trails = group_shared_trails(data)
    return {key: segment_trail(trail, threshold) for key, trail in trails.items()}


def _threshold(value: float | None) -> float:
    return config.DEFAULT_THRESHOLD_M if value is None else value


def _result_to_csv_response(
    result: SegmentationResult,
    filename: str = "trail_segments.csv",
) -> StreamingResponse:
    """Stream one CSV row per rendered point, numbered by segment and position."""

    def generate():
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=CSV_FIELDS)
        writer.writeheader()
        yield buf.getvalue()
        buf.seek(0)
        buf.truncate(0)

        for seg_idx, seg in enumerate(result.segments, start=1):
            for pt_idx, point in enumerate(seg.points, start=1):
                writer.writerow({"segment": seg_idx, "point": pt_idx, **point.model_dump()})
                yield buf.getvalue()
                buf.seek(0)
                buf.truncate(0)

    return StreamingResponse(
        generate(),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
