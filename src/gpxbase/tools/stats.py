"""Statistics tool: get_stats."""

import json

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..core.analytics import analyze_timing, elevation_stats, summarize
from ._prereqs import require_state


def register_stats_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_stats() -> str:
        """Return distance, counts, timing and elevation statistics for the current trajectory.

        Distance is the haversine length within each segment. Duration and
        average speed are only present when the track carries timestamps.
        **Requires:** load_gpx first.
        """
        try:
            require_state(state, loaded=True)
        except ValueError as e:
            return f"Error: {e}"

        trajectory = state.current
        return json.dumps({
            "summary": summarize(trajectory).model_dump(),
            "timing": analyze_timing(trajectory).model_dump(mode="json"),
            "elevation": elevation_stats(trajectory).model_dump(),
        }, indent=2)
