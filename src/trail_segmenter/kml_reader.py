"""KMZ/KML reader: turns KML geometry into a trail of coordinates.

KMZ is a ZIP archive containing KML. KML coordinates are always WGS84 in
``longitude,latitude[,altitude]`` order.
"""

from __future__ import annotations

import io
import logging
import zipfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO

from .models import Coordinate

logger = logging.getLogger(__name__)

KML_NS = "{http://www.opengis.net/kml/2.2}"
GEOMETRY_TAGS = ("LineString", "LinearRing", "Point")


def read_kml(file: str | Path | bytes | BinaryIO) -> list[Coordinate]:
    """Read a KMZ (or plain KML) document and return its coordinates in document order.

    Args:
        file: Path to a .kmz/.kml file, raw bytes, or a binary file-like object.
    """
    data = _read_bytes(file)

    # KMZ is a ZIP; plain KML is XML text
    if _is_zip(data):
        kml_text = _extract_kml_from_kmz(data)
    else:
        kml_text = data.decode("utf-8", errors="replace")

    try:
        root = ET.fromstring(kml_text)
    except ET.ParseError as exc:
        raise ValueError(f"Invalid KML document: {exc}") from exc

    trail = _extract_coordinates(root)
    logger.debug("Read %d coordinates from KML", len(trail))
    return trail


def _read_bytes(file: str | Path | bytes | BinaryIO) -> bytes:
    if isinstance(file, bytes):
        return file
    if isinstance(file, (str, Path)):
        return Path(file).read_bytes()
    return file.read()


def _is_zip(data: bytes) -> bool:
    return data[:4] == b"PK\x03\x04"


def _extract_kml_from_kmz(data: bytes) -> str:
    """Extract doc.kml, or failing that the first .kml file, from a KMZ archive."""
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        names = zf.namelist()
        kml_name = next((n for n in names if n.lower() == "doc.kml"), None)
        if kml_name is None:
            kml_name = next((n for n in names if n.lower().endswith(".kml")), None)
        if kml_name is None:
            raise ValueError("No .kml file found in KMZ archive")
        return zf.read(kml_name).decode("utf-8", errors="replace")


def _extract_coordinates(root: ET.Element) -> list[Coordinate]:
    trail: list[Coordinate] = []
    for elem in root.iter():
        if elem.tag.replace(KML_NS, "") not in GEOMETRY_TAGS:
            continue
        coords_elem = elem.find(f"{KML_NS}coordinates")
        if coords_elem is not None and coords_elem.text:
            trail.extend(_parse_coordinates_text(coords_elem.text))
    return trail


def _parse_coordinates_text(text: str) -> list[Coordinate]:
    """Parse a KML ``<coordinates>`` block of whitespace-separated ``lon,lat[,alt]`` tuples."""
    coords: list[Coordinate] = []
    for token in text.strip().split():
        parts = token.split(",")
        if len(parts) < 2:
            continue
        try:
            lng = float(parts[0])
            lat = float(parts[1])
        except ValueError as exc:
            raise ValueError(f"Invalid KML coordinate tuple: {token!r}") from exc
        coords.append(Coordinate(lat=lat, lng=lng))
    return coords
