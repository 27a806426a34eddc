"""Pydantic data models for trail segmentation."""

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """A single GPS fix in degrees.

    Latitude is expected in [-90, 90] and longitude in [-180, 180], but values
    are stored as received from the sensor.
    """

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class PathSegment(BaseModel):
    """A continuously drawable run of at least two consecutive fixes."""

    points: list[Coordinate]
    length_m: float = 0.0


class SegmentationResult(BaseModel):
    """Segments of one trail together with the numbers needed for reporting."""

    threshold_m: float
    num_points: int
    num_rendered_points: int
    segments: list[PathSegment]


class TrailPayload(BaseModel):
    """Request body for segmenting a single trail."""

    points: list[Coordinate]
    threshold_m: float | None = Field(default=None, ge=0)
