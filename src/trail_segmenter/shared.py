"""Grouping of trails shared by several users."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .models import Coordinate


def group_shared_trails(
    data: Mapping[str, Mapping[str, Iterable[Any]]],
    into: dict[str, list[Coordinate]] | None = None,
) -> dict[str, list[Coordinate]]:
    """Flatten ``{name: {date: [point | None, ...]}}`` into ``{"date-name": [Coordinate, ...]}``.

    Null points and empty names or dates are skipped. When ``into`` is given,
    its trails are extended in place and it is returned.
    """
    trails = into if into is not None else {}
    for name, by_date in data.items():
        if not name:
            continue
        for date, points in by_date.items():
            if not date:
                continue
            key = f"{date}-{name}"
            trail = trails.setdefault(key, [])
            trail.extend(_to_coordinate(p) for p in points if p is not None)
    return trails


def _to_coordinate(point: Any) -> Coordinate:
    if isinstance(point, Coordinate):
        return point
    return Coordinate.model_validate(point)
