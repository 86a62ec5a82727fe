"""Shared GPX fixtures."""
import pytest

SAMPLE_GPX = b"""<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <metadata>
    <name>Bay Loop</name>
    <desc>Sunday ride</desc>
    <time>2024-05-01T08:00:00Z</time>
  </metadata>
  <wpt lat="37.7800" lon="-122.4200">
    <ele>12.5</ele>
    <time>2024-05-01T08:00:00Z</time>
    <name>Start</name>
  </wpt>
  <wpt lat="37.7900" lon="-122.4100">
    <name>Cafe</name>
  </wpt>
  <rte>
    <name>Planned</name>
    <rtept lat="37.7000" lon="-122.5000"/>
    <rtept lat="37.7100" lon="-122.5100"><ele>20</ele></rtept>
  </rte>
  <trk>
    <name>Morning Ride</name>
    <desc>Out and back</desc>
    <trkseg>
      <trkpt lat="37.7749" lon="-122.4194"><ele>50</ele><time>2024-05-01T08:00:00Z</time></trkpt>
      <trkpt lat="37.7750" lon="-122.4193"><ele>51</ele><time>2024-05-01T08:01:00Z</time></trkpt>
      <trkpt lat="37.7760" lon="-122.4180"><ele>49.5</ele><time>2024-05-01T08:02:00Z</time></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="37.7770" lon="-122.4170"></trkpt>
      <trkpt lat="37.7780" lon="-122.4160"><ele>55</ele></trkpt>
    </trkseg>
  </trk>
  <trk>
    <name>Afternoon</name>
    <trkseg>
      <trkpt lat="37.8000" lon="-122.4000"><time>2024-05-01T14:00:00Z</time></trkpt>
    </trkseg>
  </trk>
</gpx>
"""

TRACK_AND_ROUTE_GPX = b"""<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <rte>
    <name>Route first in file</name>
    <rtept lat="10.0" lon="20.0"/>
    <rtept lat="10.5" lon="20.5"/>
  </rte>
  <trk>
    <name>Track</name>
    <trkseg>
      <trkpt lat="37.7749" lon="-122.4194"><ele>50</ele></trkpt>
      <trkpt lat="37.775" lon="-122.4193"><ele>51</ele></trkpt>
    </trkseg>
  </trk>
</gpx>
"""


def make_trajectory(*tracks):
    """Build a Trajectory from nested segment sizes, e.g. make_trajectory([3, 4], [3]).

    Points are numbered in document order: the k-th point has lat=k / 100.
    """
    from gpxbase.models import Segment, Track, TrackPoint, Trajectory

    k = 0
    built = []
    for sizes in tracks:
        segments = []
        for size in sizes:
            points = []
            for _ in range(size):
                points.append(TrackPoint(lat=k / 100, lon=k / 100))
                k += 1
            segments.append(Segment(points=points))
        built.append(Track(name=f"T{len(built)}", segments=segments))
    return Trajectory(tracks=built)


@pytest.fixture
def sample_gpx() -> bytes:
    return SAMPLE_GPX


@pytest.fixture
def sample(sample_gpx):
    from gpxbase.core.gpx import parse_gpx
    return parse_gpx(sample_gpx)


@pytest.fixture
def track_and_route_gpx() -> bytes:
    return TRACK_AND_ROUTE_GPX


@pytest.fixture
def build_trajectory():
    return make_trajectory


@pytest.fixture
def anyio_backend():
    return "asyncio"
