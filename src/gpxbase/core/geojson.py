"""GeoJSON conversion and WKT LineString extraction."""

import json
from numbers import Real
from typing import Any, Union

from ..errors import ConversionError, ExtractionError
from ..models import Trajectory
from .coords import format_time, position, wkt_linestring
from .gpx import parse_gpx
from .models import Feature, FeatureCollection, LineStringGeometry, PointGeometry



def to_geojson(trajectory: Trajectory) -> FeatureCollection:
    """Convert a trajectory to a GeoJSON FeatureCollection.

    Track segments come first, then routes, then waypoints. Positions are
    [lon, lat] with elevation appended per point when it is known, so a
    single LineString may mix 2D and 3D positions.

    Raises:
        ConversionError: If the trajectory yields no features.
    """
    features: list[Feature] = []

    for ti, track in enumerate(trajectory.tracks):
        for si, segment in enumerate(track.segments):
            if not segment.points:
                continue
            features.append(Feature(
                properties={
                    "name": track.name or "",
                    "type": "track",
                    "track_index": ti,
                    "segment_index": si,
                },
                geometry=LineStringGeometry(coordinates=[position(p) for p in segment.points]),
            ))

    for ri, route in enumerate(trajectory.routes):
        if not route.points:
            continue
        features.append(Feature(
            properties={"name": route.name or "", "type": "route", "route_index": ri},
            geometry=LineStringGeometry(coordinates=[position(p) for p in route.points]),
        ))

    for wi, wp in enumerate(trajectory.waypoints):
        properties: dict[str, Any] = {"type": "waypoint", "waypoint_index": wi}
        if wp.name is not None:
            properties["name"] = wp.name
        if wp.time is not None:
            properties["time"] = format_time(wp.time)
        features.append(Feature(properties=properties, geometry=PointGeometry(coordinates=position(wp))))

    if not features:
        raise ConversionError("no valid GPS data found")

    return FeatureCollection(features=features)


def gpx_to_geojson(content: Union[bytes, str]) -> FeatureCollection:
    """Parse GPX content and convert it in one step.

    An empty but well-formed document surfaces as ConversionError rather
    than ParseError.
    """
    return to_geojson(parse_gpx(content, require_data=False))


def _is_number(v: Any) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool)


def _valid_pairs(coordinates: Any) -> list[tuple[float, float]]:
    if not isinstance(coordinates, list):
        return []
    pairs = []
    for coord in coordinates:
        if not isinstance(coord, (list, tuple)) or len(coord) < 2:
            continue
        lon, lat = coord[0], coord[1]
        if not (_is_number(lon) and _is_number(lat)):
            continue
        pairs.append((float(lon), float(lat)))
    return pairs


def extract_dominant_linestring(geojson: Union[FeatureCollection, dict, str]) -> str:
    """Return the first usable LineString feature as a 2D WKT LINESTRING.

    Features are scanned in order, so a track wins over a route. Malformed
    coordinate entries are skipped; a LineString with none left is passed
    over. Elevation is dropped.

    Raises:
        ExtractionError: If the input is not decodable or holds no usable LineString.
    """
    if isinstance(geojson, FeatureCollection):
        data = geojson.model_dump()
    elif isinstance(geojson, str):
        try:
            data = json.loads(geojson)
        except json.JSONDecodeError as e:
            raise ExtractionError(f"failed to parse GeoJSON: {e}") from e
    else:
        data = geojson

    features = data.get("features") if isinstance(data, dict) else None
    for feature in features or []:
        geometry = feature.get("geometry") if isinstance(feature, dict) else None
        if not isinstance(geometry, dict) or geometry.get("type") != "LineString":
            continue
        pairs = _valid_pairs(geometry.get("coordinates"))
        if pairs:
            return wkt_linestring(pairs)

    raise ExtractionError("no LineString geometry found in GeoJSON")
