"""GPX file parsing."""

from typing import Optional, Union

import gpxpy
import gpxpy.gpx
from pydantic import ValidationError

from ..errors import ParseError
from ..models import Metadata, Route, Segment, Track, TrackPoint, Trajectory, Waypoint


def _point(p) -> TrackPoint:
    # gpxpy reads an unparseable <time> as None
    return TrackPoint(lat=p.latitude, lon=p.longitude, elevation=p.elevation, time=p.time)


def _text(value: Optional[str]) -> Optional[str]:
    # gpxpy gives "" for some empty elements; treat it as absent
    return value if value else None


def _convert(gpx: gpxpy.gpx.GPX) -> Trajectory:
    # Segments, tracks and routes without points are dropped
    tracks = []
    for trk in gpx.tracks:
        segments = []
        for seg in trk.segments:
            if not seg.points:
                continue
            segments.append(Segment(points=[_point(p) for p in seg.points]))
        if not segments:
            continue
        tracks.append(Track(
            name=_text(trk.name),
            description=_text(trk.description),
            segments=segments,
        ))

    routes = []
    for rte in gpx.routes:
        if not rte.points:
            continue
        routes.append(Route(
            name=_text(rte.name),
            description=_text(rte.description),
            points=[_point(p) for p in rte.points],
        ))

    waypoints = [
        Waypoint(
            lat=wp.latitude,
            lon=wp.longitude,
            elevation=wp.elevation,
            time=wp.time,
            name=_text(wp.name),
            description=_text(wp.description),
        )
        for wp in gpx.waypoints
    ]

    metadata = Metadata(name=_text(gpx.name), description=_text(gpx.description), time=gpx.time)

    return Trajectory(
        tracks=tracks,
        routes=routes,
        waypoints=waypoints,
        metadata=None if metadata.is_empty else metadata,
    )


def parse_gpx(content: Union[bytes, str], require_data: bool = True) -> Trajectory:
    """Parse GPX content into a Trajectory.

    Args:
        content: GPX document as bytes (UTF-8) or text.
        require_data: Reject documents with no <trk>, <rte> or <wpt> element.

    Raises:
        ParseError: If the document is unreadable, malformed, has invalid
            coordinates, or (with require_data) carries no GPS elements.
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"GPX content is not valid UTF-8: {e}") from e

    try:
        gpx = gpxpy.parse(content)
    except (gpxpy.gpx.GPXException, ValueError) as e:
        raise ParseError(f"Invalid GPX: {e}") from e

    if require_data and not (gpx.tracks or gpx.routes or gpx.waypoints):
        raise ParseError("GPX contains no tracks, routes or waypoints")

    try:
        return _convert(gpx)
    except ValidationError as e:
        raise ParseError(f"Invalid GPX coordinates: {e}") from e


def parse_gpx_file(filepath: str, require_data: bool = True) -> Trajectory:
    """Parse a GPX file from disk."""
    with open(filepath, "rb") as f:
        return parse_gpx(f.read(), require_data=require_data)
