"""Loading tools: load_gpx."""

import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..core.analytics import summarize
from ..core.gpx import parse_gpx_file
from ..errors import ParseError

logger = logging.getLogger(__name__)


def register_load_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_gpx(file_path: str) -> str:
        """Load a GPX file and make it the trajectory being edited.

        Replaces any previously loaded trajectory and clears the edit history.
        **Next:** get_stats, get_geojson, list_segments, or an edit tool
        (trim_track, remove_track_segments).

        Args:
            file_path: Absolute path to a .gpx file.
        """
        try:
            trajectory = parse_gpx_file(file_path)
        except FileNotFoundError:
            return f"Error: GPX file not found at {file_path}"
        except ParseError as e:
            logger.warning("Rejected GPX %s: %s", file_path, e)
            return f"Error: {e}"

        state.load(file_path, trajectory)
        stats = summarize(trajectory)
        logger.info("Loaded %s (%d track points)", file_path, stats.point_count)

        return (
            f"Loaded {file_path}: {stats.track_count} track(s), "
            f"{stats.segment_count} segment(s), {stats.point_count} point(s), "
            f"{len(trajectory.routes)} route(s), {len(trajectory.waypoints)} waypoint(s), "
            f"{stats.total_distance_km:.2f} km"
        )
