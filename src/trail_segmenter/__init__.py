"""GPS trail segmentation library."""

from .geo import EARTH_RADIUS_M, distance
from .kml_reader import read_kml
from .models import Coordinate, PathSegment, SegmentationResult
from .recorder import record_fix
from .segments import PathSegmenter, segment, segment_trail, unconnected_points
from .shared import group_shared_trails

__all__ = [
    "Coordinate",
    "EARTH_RADIUS_M",
    "PathSegment",
    "PathSegmenter",
    "SegmentationResult",
    "distance",
    "group_shared_trails",
    "read_kml",
    "record_fix",
    "segment",
    "segment_trail",
    "unconnected_points",
]
