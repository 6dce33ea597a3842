import pytest

from gpx_profile import TrackPoint

ROUTE_AND_TRACK_GPX = """\
<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <name>Afternoon climb</name>
    <trkseg>
      <trkpt lat="0.0" lon="0.010"><ele>120</ele><time>2024-05-01T08:10:00Z</time></trkpt>
      <trkpt lat="0.0" lon="0.015"><ele>90</ele></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="0.0" lon="0.020"><ele>110</ele></trkpt>
    </trkseg>
  </trk>
  <rte>
    <name>Approach</name>
    <rtept lat="0.0" lon="0.000"><ele>100</ele><time>2024-05-01T08:00:00Z</time><name>Trailhead</name></rtept>
    <rtept lat="0.0" lon="0.005"></rtept>
  </rte>
</gpx>
"""

SIMPLE_TRACK_GPX = """\
<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <trkseg>
      <trkpt lat="0.0" lon="0.000"><ele>100</ele></trkpt>
      <trkpt lat="0.0" lon="0.005"><ele>130</ele></trkpt>
      <trkpt lat="0.0" lon="0.010"><ele>120</ele></trkpt>
      <trkpt lat="0.0" lon="0.015"><ele>150</ele></trkpt>
      <trkpt lat="0.0" lon="0.020"><ele>140</ele></trkpt>
    </trkseg>
  </trk>
</gpx>
"""

EMPTY_GPX = """\
<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
</gpx>
"""


@pytest.fixture
def simple_track_path(tmp_path):
    path = tmp_path / "track.gpx"
    path.write_text(SIMPLE_TRACK_GPX)
    return path


@pytest.fixture
def empty_gpx_path(tmp_path):
    path = tmp_path / "empty.gpx"
    path.write_text(EMPTY_GPX)
    return path


@pytest.fixture
def equator_points():
    """Five points ~0.556 km apart along the equator (~2.224 km in total)."""
    elevations = [100, 130, 120, 150, 140]
    return [
        TrackPoint(lat=0.0, lon=i * 0.005, elevation=ele)
        for i, ele in enumerate(elevations)
    ]


@pytest.fixture
def sparse_points():
    """Two points ~3.336 km apart climbing 300 m, with nothing in between."""
    return [
        TrackPoint(lat=0.0, lon=0.0, elevation=0.0),
        TrackPoint(lat=0.0, lon=0.03, elevation=300.0),
    ]


@pytest.fixture
def simple_track_gpx():
    return SIMPLE_TRACK_GPX.encode()


@pytest.fixture
def route_and_track_gpx():
    return ROUTE_AND_TRACK_GPX.encode()


@pytest.fixture
def empty_gpx():
    return EMPTY_GPX.encode()
