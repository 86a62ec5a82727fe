"""Editing tools: list_segments, trim_track, remove_track_segments, reset_edits."""

import json
import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..core.analytics import summarize
from ..core.editor import remove_segments, trim_by_percentage
from ..errors import InvalidRangeError, InvalidSegmentIdError
from ..models import segment_ids as all_segment_ids
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def register_edit_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def list_segments() -> str:
        """List every track segment of the current trajectory with its identifier.

        Identifiers have the form "<track>-<segment>" and are positional:
        call this again after every edit instead of reusing old identifiers.
        **Requires:** load_gpx first.
        """
        try:
            require_state(state, loaded=True)
        except ValueError as e:
            return f"Error: {e}"

        tracks = state.current.tracks
        rows = [
            {
                "id": str(sid),
                "track_name": tracks[sid.track_index].name or "",
                "points": len(tracks[sid.track_index].segments[sid.segment_index].points),
            }
            for sid in all_segment_ids(state.current)
        ]
        return json.dumps(rows, indent=2)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def trim_track(start_percent: float, end_percent: float) -> str:
        """Keep only the part of the track between two percentages of its points.

        Points are counted across all tracks and segments in order. Routes and
        waypoints are kept as they are. The loaded file is not modified; use
        reset_edits to undo.
        **Requires:** load_gpx first.
        **Next:** get_stats or export_gpx.

        Args:
            start_percent: Start of the kept range, 0-100.
            end_percent: End of the kept range, 0-100, greater than start_percent.
        """
        try:
            require_state(state, loaded=True, has_tracks=True)
            before = summarize(state.current).point_count
            trimmed = trim_by_percentage(state.current, start_percent, end_percent)
        except InvalidRangeError as e:
            logger.warning("Rejected trim %s-%s: %s", start_percent, end_percent, e)
            return f"Error: {e}"
        except ValueError as e:
            return f"Error: {e}"

        state.apply_edit(f"trim {start_percent:g}%-{end_percent:g}%", trimmed)
        after = summarize(trimmed).point_count
        logger.info("Trimmed %d -> %d points", before, after)
        return f"Trimmed to {start_percent:g}%-{end_percent:g}%: {before} -> {after} points"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def remove_track_segments(segment_ids: list[str]) -> str:
        """Remove track segments by identifier ("<track>-<segment>", see list_segments).

        Tracks left without segments are removed. Unknown identifiers are ignored.
        **Requires:** load_gpx first.
        **Next:** list_segments (identifiers shift after removal), export_gpx.

        Args:
            segment_ids: Identifiers such as ["0-1", "1-0"].
        """
        try:
            require_state(state, loaded=True)
            before = summarize(state.current)
            edited = remove_segments(state.current, segment_ids)
        except InvalidSegmentIdError as e:
            logger.warning("Rejected segment ids %s: %s", segment_ids, e)
            return f"Error: {e}"
        except ValueError as e:
            return f"Error: {e}"

        after = summarize(edited)
        removed = before.segment_count - after.segment_count
        state.apply_edit(f"remove segments {', '.join(segment_ids)}", edited)
        logger.info("Removed %d segment(s)", removed)
        return (
            f"Removed {removed} segment(s): {after.track_count} track(s), "
            f"{after.segment_count} segment(s), {after.point_count} point(s) remain"
        )

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def reset_edits() -> str:
        """Discard all edits and return to the trajectory as it was loaded.

        **Requires:** load_gpx first.
        """
        try:
            require_state(state, loaded=True)
        except ValueError as e:
            return f"Error: {e}"

        discarded = len(state.edit_history)
        state.reset()
        return f"Discarded {discarded} edit(s); back to {state.source_path}"
