"""Tests for the KMZ/KML trail reader."""

import io
import zipfile

import pytest

from trail_segmenter import Coordinate, read_kml, segment

KML_LINESTRING = """\
<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2">
  <Document>
    <Placemark>
      <LineString>
        <coordinates>139.767125,35.681236,10 139.767200,35.681300,12 139.767250,35.681350,11</coordinates>
      </LineString>
    </Placemark>
  </Document>
</kml>"""

KML_POINTS = """\
<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2">
  <Document>
    <Placemark><Point><coordinates>1.0,2.0,100</coordinates></Point></Placemark>
    <Placemark><Point><coordinates>3.0,4.0</coordinates></Point></Placemark>
  </Document>
</kml>"""

KML_POLYGON = """\
<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2">
  <Placemark>
    <Polygon><outerBoundaryIs><LinearRing>
      <coordinates>0,0 0,1 1,1 0,0</coordinates>
    </LinearRing></outerBoundaryIs></Polygon>
  </Placemark>
</kml>"""


def _kmz(entries: dict[str, str]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, text in entries.items():
            zf.writestr(name, text)
    return buf.getvalue()


class TestKml:
    def test_linestring(self):
        trail = read_kml(io.BytesIO(KML_LINESTRING.encode()))
        assert len(trail) == 3
        assert trail[0] == Coordinate(lat=35.681236, lng=139.767125)

    def test_points_swap_lon_lat(self):
        trail = read_kml(KML_POINTS.encode())
        assert trail == [Coordinate(lat=2.0, lng=1.0), Coordinate(lat=4.0, lng=3.0)]

    def test_linear_ring(self):
        trail = read_kml(KML_POLYGON.encode())
        assert len(trail) == 4
        assert trail[0] == trail[-1]

    def test_reads_from_path(self, tmp_path):
        path = tmp_path / "walk.kml"
        path.write_text(KML_LINESTRING)
        assert len(read_kml(path)) == 3
        assert len(read_kml(str(path))) == 3

    def test_trail_segments(self):
        trail = read_kml(KML_LINESTRING.encode())
        segments = segment(trail, 100)
        assert len(segments) == 1
        assert segments[0].points == trail

    def test_invalid_xml(self):
        with pytest.raises(ValueError, match="Invalid KML"):
            read_kml(b"<kml><Document>")

    def test_invalid_coordinate(self):
        bad = KML_POINTS.replace("1.0,2.0,100", "east,2.0")
        with pytest.raises(ValueError, match="Invalid KML coordinate"):
            read_kml(bad.encode())


class TestKmz:
    def test_prefers_doc_kml(self):
        data = _kmz({"a.kml": KML_POINTS, "doc.kml": KML_LINESTRING})
        assert len(read_kml(io.BytesIO(data))) == 3

    def test_falls_back_to_any_kml(self):
        data = _kmz({"files/points.KML": KML_POINTS})
        assert len(read_kml(data)) == 2

    def test_no_kml_in_archive(self):
        data = _kmz({"readme.txt": "nothing here"})
        with pytest.raises(ValueError, match="No .kml file"):
            read_kml(data)
