"""Prerequisite checking helpers for MCP tools."""


def require_state(state, *, loaded: bool = False, has_tracks: bool = False) -> None:
    """Raise ValueError with a descriptive message if required state is not set.

    Usage in a tool:
        try:
            require_state(state, loaded=True)
        except ValueError as e:
            return f"Error: {e}"
    """
    if loaded and not state.is_loaded:
        raise ValueError("Load a GPX file first with load_gpx.")
    if has_tracks and (state.current is None or not state.current.tracks):
        raise ValueError(
            "The current trajectory has no tracks left to edit. Use reset_edits to start over."
        )
