"""Conversion tools: get_geojson, get_wkt."""

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..core.geojson import extract_dominant_linestring, to_geojson
from ._prereqs import require_state


def register_convert_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_geojson() -> str:
        """Return the current trajectory as a GeoJSON FeatureCollection.

        One LineString per track segment and per route, one Point per waypoint.
        Positions are [lon, lat] or [lon, lat, elevation].
        **Requires:** load_gpx first.
        """
        try:
            require_state(state, loaded=True)
            return to_geojson(state.current).model_dump_json()
        except ValueError as e:
            # ConversionError included: nothing left to draw
            return f"Error: {e}"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_wkt() -> str:
        """Return the dominant path of the current trajectory as a WKT LINESTRING.

        The first track segment is used; a route only when there are no tracks.
        Elevation is dropped.
        **Requires:** load_gpx first.
        """
        try:
            require_state(state, loaded=True)
            return extract_dominant_linestring(to_geojson(state.current))
        except ValueError as e:
            return f"Error: {e}"
