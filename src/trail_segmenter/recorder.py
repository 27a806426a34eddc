"""Acceptance rules for appending live GPS fixes to a trail."""

from __future__ import annotations

import logging

from . import config
from .geo import distance
from .models import Coordinate

logger = logging.getLogger(__name__)


def record_fix(
    trail: list[Coordinate],
    fix: Coordinate,
    accuracy_m: float | None = None,
    *,
    threshold_m: float | None = None,
    max_accuracy_m: float | None = None,
) -> bool:
    """Append ``fix`` to ``trail`` unless it repeats the last fix or is too inaccurate.

    A fix far from the previous one is still recorded; it is only logged, and
    segmentation keeps it off the line later. Returns True when appended.
    """
    if threshold_m is None:
        threshold_m = config.DEFAULT_THRESHOLD_M
    if max_accuracy_m is None:
        max_accuracy_m = config.MAX_ACCURACY_M

    last = trail[-1] if trail else None
    if last is not None and last.lat == fix.lat and last.lng == fix.lng:
        return False

    if accuracy_m is not None and accuracy_m > max_accuracy_m:
        logger.warning("Ignoring fix with low GPS accuracy: %sm", accuracy_m)
        return False

    if last is not None:
        step = distance(last, fix)
        if step > threshold_m:
            logger.warning(
                "Recording fix %dm from the previous one (threshold: %sm)",
                round(step),
                threshold_m,
            )

    trail.append(fix)
    return True
