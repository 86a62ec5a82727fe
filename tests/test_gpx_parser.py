"""Tests for GPX parsing."""
from datetime import datetime, timezone

import pytest


def _wrap(body: str) -> bytes:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<gpx version="1.1" creator="t" xmlns="http://www.topografix.com/GPX/1/1">'
        f"{body}</gpx>"
    ).encode()


class TestParseSample:
    def test_counts(self, sample):
        assert len(sample.tracks) == 2
        assert [len(s.points) for s in sample.tracks[0].segments] == [3, 2]
        assert len(sample.routes) == 1
        assert len(sample.waypoints) == 2

    def test_metadata(self, sample):
        assert sample.metadata.name == "Bay Loop"
        assert sample.metadata.description == "Sunday ride"
        assert sample.metadata.time == datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)

    def test_track_fields(self, sample):
        track = sample.tracks[0]
        assert track.name == "Morning Ride"
        assert track.description == "Out and back"
        p = track.segments[0].points[0]
        assert p.lat == pytest.approx(37.7749)
        assert p.lon == pytest.approx(-122.4194)
        assert p.elevation == pytest.approx(50.0)
        assert p.time == datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)

    def test_missing_optional_fields_are_none(self, sample):
        p = sample.tracks[0].segments[1].points[0]
        assert p.elevation is None
        assert p.time is None
        assert sample.tracks[0].segments[1].points[1].elevation == pytest.approx(55.0)

    def test_point_order_preserved(self, sample):
        lats = [p.lat for p in sample.iter_track_points()]
        assert lats == pytest.approx([37.7749, 37.775, 37.776, 37.777, 37.778, 37.8])

    def test_route_kept_distinct(self, sample):
        route = sample.routes[0]
        assert route.name == "Planned"
        assert len(route.points) == 2
        assert route.points[0].elevation is None
        assert route.points[1].elevation == pytest.approx(20.0)

    def test_waypoints(self, sample):
        start, cafe = sample.waypoints
        assert start.name == "Start"
        assert start.elevation == pytest.approx(12.5)
        assert start.time is not None
        assert cafe.name == "Cafe"
        assert cafe.time is None
        assert cafe.elevation is None


class TestTolerance:
    def test_waypoints_only(self):
        from gpxbase.core.gpx import parse_gpx
        t = parse_gpx(_wrap('<wpt lat="1.5" lon="2.5"/>'))
        assert t.tracks == []
        assert t.waypoints[0].lat == pytest.approx(1.5)

    def test_text_input(self):
        from gpxbase.core.gpx import parse_gpx
        t = parse_gpx(_wrap('<wpt lat="1.5" lon="2.5"/>').decode())
        assert len(t.waypoints) == 1

    def test_utf8_bom(self):
        from gpxbase.core.gpx import parse_gpx
        t = parse_gpx(b"\xef\xbb\xbf" + _wrap('<wpt lat="1" lon="2"/>'))
        assert len(t.waypoints) == 1

    def test_gpx_10_namespace(self):
        from gpxbase.core.gpx import parse_gpx
        content = b"""<?xml version="1.0"?>
<gpx version="1.0" creator="old" xmlns="http://www.topografix.com/GPX/1/0">
  <trk><trkseg>
    <trkpt lat="45.0" lon="7.0"><ele>300</ele><time>2020-06-01T10:00:00Z</time></trkpt>
  </trkseg></trk>
</gpx>"""
        t = parse_gpx(content)
        p = t.tracks[0].segments[0].points[0]
        assert p.elevation == pytest.approx(300.0)
        assert p.time == datetime(2020, 6, 1, 10, 0, tzinfo=timezone.utc)

    def test_time_offset_normalized_to_utc(self):
        from gpxbase.core.gpx import parse_gpx
        t = parse_gpx(_wrap(
            '<trk><trkseg><trkpt lat="1" lon="2"><time>2024-05-01T10:00:00+02:00</time>'
            "</trkpt></trkseg></trk>"
        ))
        assert t.tracks[0].segments[0].points[0].time == datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)

    def test_unparseable_time_read_as_absent(self):
        from gpxbase.core.gpx import parse_gpx
        t = parse_gpx(_wrap(
            '<trk><trkseg><trkpt lat="1" lon="2"><ele>5</ele><time>not-a-time</time></trkpt>'
            '<trkpt lat="1.1" lon="2"><time>2024-05-01T08:00:00Z</time></trkpt></trkseg></trk>'
        ))
        first, second = t.tracks[0].segments[0].points
        assert first.time is None
        assert first.elevation == 5.0
        assert second.time == datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)

    def test_empty_segments_dropped(self):
        from gpxbase.core.gpx import parse_gpx
        t = parse_gpx(_wrap(
            "<trk><trkseg></trkseg>"
            '<trkseg><trkpt lat="1" lon="2"/></trkseg>'
            "<trkseg></trkseg></trk>"
        ))
        assert len(t.tracks) == 1
        assert len(t.tracks[0].segments) == 1

    def test_dropping_and_skipping_is_silent(self, caplog):
        import logging
        from gpxbase.core.geojson import extract_dominant_linestring, to_geojson
        from gpxbase.core.gpx import parse_gpx
        caplog.set_level(logging.DEBUG)
        t = parse_gpx(_wrap(
            '<rte></rte><trk><trkseg></trkseg><trkseg><trkpt lat="1" lon="2"/></trkseg></trk>'
        ))
        extract_dominant_linestring(to_geojson(t))
        extract_dominant_linestring({"features": [
            {"geometry": {"type": "LineString", "coordinates": [["x"], [1.0, 2.0]]}},
        ]})
        assert [r for r in caplog.records if r.name.startswith("gpxbase")] == []

    def test_track_without_points_dropped(self):
        from gpxbase.core.gpx import parse_gpx
        t = parse_gpx(_wrap("<trk><name>Nothing</name><trkseg></trkseg></trk>"))
        assert t.tracks == []
        assert t.is_empty

    def test_empty_route_dropped(self):
        from gpxbase.core.gpx import parse_gpx
        t = parse_gpx(_wrap('<rte><name>Empty</name></rte><wpt lat="1" lon="2"/>'))
        assert t.routes == []

    def test_no_metadata(self):
        from gpxbase.core.gpx import parse_gpx
        t = parse_gpx(_wrap('<wpt lat="1" lon="2"/>'))
        assert t.metadata is None


class TestParseErrors:
    def test_not_well_formed(self):
        from gpxbase.core.gpx import parse_gpx
        from gpxbase.errors import ParseError
        with pytest.raises(ParseError):
            parse_gpx(b"<gpx><trk><trkseg>")

    def test_missing_lat(self):
        from gpxbase.core.gpx import parse_gpx
        from gpxbase.errors import ParseError
        with pytest.raises(ParseError):
            parse_gpx(_wrap('<wpt lon="2.0"/>'))

    def test_non_numeric_lon(self):
        from gpxbase.core.gpx import parse_gpx
        from gpxbase.errors import ParseError
        with pytest.raises(ParseError):
            parse_gpx(_wrap('<trk><trkseg><trkpt lat="1.0" lon="east"/></trkseg></trk>'))

    def test_out_of_range_latitude(self):
        from gpxbase.core.gpx import parse_gpx
        from gpxbase.errors import ParseError
        with pytest.raises(ParseError):
            parse_gpx(_wrap('<wpt lat="95.0" lon="2.0"/>'))

    def test_invalid_utf8(self):
        from gpxbase.core.gpx import parse_gpx
        from gpxbase.errors import ParseError
        with pytest.raises(ParseError):
            parse_gpx(b"\xff\xfe\x00<gpx/>")

    def test_no_gps_elements(self):
        from gpxbase.core.gpx import parse_gpx
        from gpxbase.errors import ParseError
        with pytest.raises(ParseError, match="no tracks"):
            parse_gpx(b"<gpx></gpx>")

    def test_no_gps_elements_allowed_when_not_required(self):
        from gpxbase.core.gpx import parse_gpx
        t = parse_gpx(b"<gpx></gpx>", require_data=False)
        assert t.is_empty

    def test_parse_error_is_value_error(self):
        from gpxbase.errors import ParseError
        assert issubclass(ParseError, ValueError)


class TestParseFile:
    def test_reads_file(self, tmp_path, sample_gpx):
        from gpxbase.core.gpx import parse_gpx_file
        path = tmp_path / "ride.gpx"
        path.write_bytes(sample_gpx)
        t = parse_gpx_file(str(path))
        assert len(t.tracks) == 2

    def test_missing_file(self, tmp_path):
        from gpxbase.core.gpx import parse_gpx_file
        with pytest.raises(FileNotFoundError):
            parse_gpx_file(str(tmp_path / "nope.gpx"))
