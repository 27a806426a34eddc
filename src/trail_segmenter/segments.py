"""Split a trail into drawable segments wherever consecutive fixes jump too far."""

import logging
from collections.abc import Sequence

from .geo import distance
from .models import Coordinate, PathSegment, SegmentationResult

logger = logging.getLogger(__name__)


def segment(points: Sequence[Coordinate], threshold_m: float) -> list[PathSegment]:
    """Partition ``points`` into runs whose step distances stay within ``threshold_m``.

    A step exactly at the threshold stays connected. The fix after a jump seeds
    the next run; runs that end up with a single fix are dropped because they
    cannot be drawn as a line. ``points`` is not modified.
    """
    if len(points) <= 1:
        return []

    segments: list[PathSegment] = []
    run = [points[0]]
    run_length = 0.0

    for i in range(1, len(points)):
        step = distance(points[i - 1], points[i])
        if step <= threshold_m:
            run.append(points[i])
            run_length += step
            continue

        logger.debug("Breaking trail at point %d: %.1f m > %.1f m", i, step, threshold_m)
        if len(run) > 1:
            segments.append(PathSegment(points=run, length_m=run_length))
        run = [points[i]]
        run_length = 0.0

    if len(run) > 1:
        segments.append(PathSegment(points=run, length_m=run_length))

    return segments


def segment_trail(points: Sequence[Coordinate], threshold_m: float) -> SegmentationResult:
    """Segment a trail and report how many of its fixes end up drawn."""
    segments = segment(points, threshold_m)
    rendered = sum(len(s.points) for s in segments)
    if rendered < len(points):
        logger.info("%d of %d points left out of line segments", len(points) - rendered, len(points))
    return SegmentationResult(
        threshold_m=threshold_m,
        num_points=len(points),
        num_rendered_points=rendered,
        segments=segments,
    )


def unconnected_points(points: Sequence[Coordinate], segments: Sequence[PathSegment]) -> list[Coordinate]:
    """Fixes of ``points`` left out of every segment.

    Matched by identity, since a dropped fix can repeat the coordinates of a drawn one.
    """
    rendered = {id(p) for s in segments for p in s.points}
    return [p for p in points if id(p) not in rendered]

class PathSegmenter:
    """Distance and segmentation bound to one threshold."""

    def __init__(self, threshold_m: float):
        self.threshold_m = threshold_m

    def distance(self, a: Coordinate, b: Coordinate) -> float:
        """Haversine distance in meters; the threshold plays no part."""
        return distance(a, b)

    def segment(self, points: Sequence[Coordinate]) -> list[PathSegment]:
        """Split ``points`` at steps longer than this segmenter's threshold."""
        return segment(points, self.threshold_m)

    def segment_trail(self, points: Sequence[Coordinate]) -> SegmentationResult:
        """Segment ``points`` and report rendered counts."""
        return segment_trail(points, self.threshold_m)

    def __repr__(self) -> str:
        return f"PathSegmenter(threshold_m={self.threshold_m!r})"
