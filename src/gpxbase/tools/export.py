"""Export tools: export_gpx, export_geojson."""

import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..core.filenames import gpx_filename
from ..exporters.geojson import export_geojson as do_export_geojson
from ..exporters.gpx import export_gpx as do_export_gpx
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def _validate_output_path(output_path: str) -> None:
    """Raise ValueError if output_path resolves outside the user's home directory."""
    resolved = Path(output_path).resolve()
    home = Path.home().resolve()
    try:
        resolved.relative_to(home)
    except ValueError:
        raise ValueError(
            f"Output path {output_path!r} is outside the home directory. "
            "Use a path within your home directory."
        )


def _default_gpx_path() -> Path:
    """Export directory plus a file name derived from the track or file name."""
    trajectory = state.current
    name = ""
    if trajectory.metadata and trajectory.metadata.name:
        name = trajectory.metadata.name
    elif trajectory.tracks and trajectory.tracks[0].name:
        name = trajectory.tracks[0].name
    fallback = Path(state.source_path).stem if state.source_path else "edited_track"
    return state.export_settings.resolved_export_dir() / gpx_filename(name, fallback)


def register_export_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def export_gpx(output_path: str | None = None) -> str:
        """Write the current (edited) trajectory as a GPX 1.1 file.

        **Requires:** load_gpx first.

        Args:
            output_path: Where to write. Default: ~/.cache/gpxbase/exports/<track name>.gpx
        """
        try:
            require_state(state, loaded=True)
            path = Path(output_path) if output_path else _default_gpx_path()
            _validate_output_path(str(path))
        except ValueError as e:
            return f"Error: {e}"

        path.parent.mkdir(parents=True, exist_ok=True)
        result = do_export_gpx(state.current, str(path), creator=state.export_settings.creator)
        logger.info("Exported GPX to %s", path)
        return (
            f"Exported GPX to {result['filepath']} ({result['tracks']} track(s), "
            f"{result['routes']} route(s), {result['waypoints']} waypoint(s))"
        )

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def export_geojson(output_path: str) -> str:
        """Write the current trajectory as a GeoJSON FeatureCollection file.

        **Requires:** load_gpx first.

        Args:
            output_path: Path for the .geojson file.
        """
        try:
            require_state(state, loaded=True)
            _validate_output_path(output_path)
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            result = do_export_geojson(state.current, output_path)
        except ValueError as e:
            return f"Error: {e}"

        logger.info("Exported GeoJSON to %s", output_path)
        return f"Exported {result['features']} feature(s) to {result['filepath']}"
