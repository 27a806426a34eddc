"""Plot a recorded trail as separate line segments and export the segmented points to CSV.

The trail is read from a KML/KMZ file or a JSON array of ``{"lat": .., "lng": ..}``
points. Fixes that end up outside every segment are drawn as markers only.
"""

import argparse
import csv
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from pydantic import TypeAdapter

from trail_segmenter import Coordinate, config, read_kml, segment_trail, unconnected_points
from trail_segmenter.models import SegmentationResult

_TRAIL_ADAPTER = TypeAdapter(list[Coordinate])


def load_trail(path: Path) -> list[Coordinate]:
    """Load a trail from .kml/.kmz or .json."""
    if path.suffix.lower() in (".kml", ".kmz"):
        return read_kml(path)
    return _TRAIL_ADAPTER.validate_json(path.read_bytes())


def export_csv(result: SegmentationResult, path: Path) -> None:
    """Write one row per rendered point to a CSV file."""
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["segment", "point", "lat", "lng"])
        writer.writeheader()
        for seg_idx, seg in enumerate(result.segments, start=1):
            for pt_idx, p in enumerate(seg.points, start=1):
                writer.writerow({"segment": seg_idx, "point": pt_idx, "lat": p.lat, "lng": p.lng})
    print(f"CSV exported: {path}")


def plot_segments(
    trail: list[Coordinate],
    result: SegmentationResult,
    path: Path,
    title: str = "Recorded trail",
) -> None:
    """Draw every segment as its own polyline; unconnected fixes as crosses."""
    fig, ax = plt.subplots(figsize=(10, 10))

    for i, seg in enumerate(result.segments, start=1):
        ax.plot(
            [p.lng for p in seg.points],
            [p.lat for p in seg.points],
            linewidth=1.5,
            label=f"Segment {i} ({seg.length_m / 1000:.2f} km)",
        )

    dropped = unconnected_points(trail, result.segments)
    if dropped:
        ax.scatter([p.lng for p in dropped], [p.lat for p in dropped], marker="x", color="grey", label="Unconnected fixes")

    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    ax.set_title(title)
    ax.set_aspect("equal", adjustable="datalim")
    ax.grid(True, alpha=0.3)
    if result.segments or dropped:
        ax.legend()
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Plot saved: {path}")


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("trail", type=Path, help="Trail file (.kml, .kmz or .json)")
    parser.add_argument("--threshold", type=float, default=config.DEFAULT_THRESHOLD_M, help="Break distance in meters")
    args = parser.parse_args()

    print(f"Reading trail: {args.trail}\n")
    trail = load_trail(args.trail)
    result = segment_trail(trail, args.threshold)

    total_length_m = sum(s.length_m for s in result.segments)
    print(f"Point count:   {result.num_points:,}")
    print(f"Drawn points:  {result.num_rendered_points:,}")
    print(f"Segments:      {len(result.segments):,}  (threshold {args.threshold:g} m)")
    print(f"Drawn length:  {total_length_m:,.1f} m  ({total_length_m / 1000:.2f} km)")
    print()

    stem = args.trail.with_suffix("")
    export_csv(result, stem.with_name(stem.name + "_segments.csv"))
    plot_segments(trail, result, stem.with_name(stem.name + "_segments.png"), title=f"{args.trail.name}")


if __name__ == "__main__":
    main()
