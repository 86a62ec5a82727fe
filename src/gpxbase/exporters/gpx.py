"""GPX 1.1 export using custom XML."""

from typing import Optional
from xml.sax.saxutils import quoteattr

from ..core.coords import format_time
from ..models import TrackPoint, Trajectory

DEFAULT_CREATOR = "GPXBase Editor"

_GPX_OPEN = (
    'xmlns="http://www.topografix.com/GPX/1/1" '
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xsi:schemaLocation="http://www.topografix.com/GPX/1/1 '
    'http://www.topografix.com/GPX/1/1/gpx.xsd">'
)


def _cdata(text: str) -> str:
    # "]]>" cannot appear inside a CDATA section; split it across two
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def _num(value: float, digits: int) -> str:
    # adding 0.0 turns a rounded -0.0 into 0.0
    return f"{round(value, digits) + 0.0:.{digits}f}"


def _text_elements(
    parts: list[str], indent: str, name: Optional[str], description: Optional[str]
) -> None:
    if name is not None:
        parts.append(f"{indent}<name>{_cdata(name)}</name>")
    if description is not None:
        parts.append(f"{indent}<desc>{_cdata(description)}</desc>")


def _point(
    parts: list[str], tag: str, indent: str, p: TrackPoint,
    name: Optional[str] = None, description: Optional[str] = None,
) -> None:
    parts.append(f'{indent}<{tag} lat="{_num(p.lat, 6)}" lon="{_num(p.lon, 6)}">')
    inner = indent + "  "
    if p.elevation is not None:
        parts.append(f"{inner}<ele>{_num(p.elevation, 2)}</ele>")
    if p.time is not None:
        parts.append(f"{inner}<time>{format_time(p.time)}</time>")
    _text_elements(parts, inner, name, description)
    parts.append(f"{indent}</{tag}>")


def to_xml(trajectory: Trajectory, creator: str = DEFAULT_CREATOR) -> str:
    """Serialize a trajectory as a GPX 1.1 document.

    Elements follow the GPX 1.1 schema order (metadata, wpt, rte, trk).
    Coordinates use six decimals and elevation two; free text is wrapped in
    CDATA; absent optional fields are left out.
    """
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<gpx version="1.1" creator={quoteattr(creator)} {_GPX_OPEN}',
    ]

    meta = trajectory.metadata
    if meta is not None and not meta.is_empty:
        parts.append("  <metadata>")
        _text_elements(parts, "    ", meta.name, meta.description)
        if meta.time is not None:
            parts.append(f"    <time>{format_time(meta.time)}</time>")
        parts.append("  </metadata>")

    for wp in trajectory.waypoints:
        _point(parts, "wpt", "  ", wp, wp.name, wp.description)

    for route in trajectory.routes:
        parts.append("  <rte>")
        _text_elements(parts, "    ", route.name, route.description)
        for p in route.points:
            _point(parts, "rtept", "    ", p)
        parts.append("  </rte>")

    for track in trajectory.tracks:
        parts.append("  <trk>")
        _text_elements(parts, "    ", track.name, track.description)
        for segment in track.segments:
            parts.append("    <trkseg>")
            for p in segment.points:
                _point(parts, "trkpt", "      ", p)
            parts.append("    </trkseg>")
        parts.append("  </trk>")

    parts.append("</gpx>")
    return "\n".join(parts) + "\n"


def export_gpx(trajectory: Trajectory, output_path: str, creator: str = DEFAULT_CREATOR) -> dict:
    """Write a trajectory to a .gpx file."""
    xml = to_xml(trajectory, creator=creator)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(xml)
    return {
        "success": True,
        "filepath": output_path,
        "tracks": len(trajectory.tracks),
        "routes": len(trajectory.routes),
        "waypoints": len(trajectory.waypoints),
    }
