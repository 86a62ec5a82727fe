"""Non-destructive trajectory edits: percentage trim and segment removal.

Both operations return a new Trajectory built from copies of the input's
points; the input is never modified.
"""

import math
from itertools import accumulate
from typing import Iterable, Union

from ..errors import InvalidRangeError, InvalidSegmentIdError
from ..models import Segment, SegmentId, Trajectory

SegmentIdLike = Union[SegmentId, tuple[int, int], str]


def _copy_segment(points) -> Segment:
    return Segment(points=[p.model_copy() for p in points])


def trim_by_percentage(trajectory: Trajectory, start_pct: float, end_pct: float) -> Trajectory:
    """Keep the [start_pct, end_pct) share of all track points.

    Track points are numbered across every track and segment in document
    order. With N points, indices from floor(start_pct * N / 100) up to (not
    including) ceil(end_pct * N / 100) survive. Segments and tracks left
    without points are dropped; surviving segments are never merged.
    Routes, waypoints and metadata are carried over unchanged.

    Raises:
        InvalidRangeError: If the range is empty, not finite, outside
            [0, 100], or the trajectory has no tracks.
    """
    if not (math.isfinite(start_pct) and math.isfinite(end_pct)):
        raise InvalidRangeError(f"range {start_pct}-{end_pct} must be finite")
    if start_pct >= end_pct:
        raise InvalidRangeError(f"start ({start_pct}) must be less than end ({end_pct})")
    if start_pct < 0 or end_pct > 100:
        raise InvalidRangeError(f"range {start_pct}-{end_pct} must lie within 0-100")
    if not trajectory.tracks:
        raise InvalidRangeError("trajectory has no tracks to trim")

    sizes = [len(seg.points) for track in trajectory.tracks for seg in track.segments]
    # offsets[k] is the virtual index of the first point of segment k
    offsets = [0, *accumulate(sizes)]
    total = offsets[-1]

    start_index = math.floor(start_pct * total / 100)
    end_index = math.ceil(end_pct * total / 100)

    tracks = []
    k = 0
    for track in trajectory.tracks:
        segments = []
        for seg in track.segments:
            seg_start, seg_end = offsets[k], offsets[k + 1]
            k += 1
            if seg_end <= start_index or seg_start >= end_index:
                continue
            lo = max(0, start_index - seg_start)
            hi = min(len(seg.points), end_index - seg_start)
            segments.append(_copy_segment(seg.points[lo:hi]))
        if segments:
            tracks.append(track.model_copy(update={"segments": segments}))

    return trajectory.model_copy(update={"tracks": tracks}, deep=True)


def parse_segment_id(value: SegmentIdLike) -> SegmentId:
    """Coerce a SegmentId, (track, segment) pair or "track-segment" string."""
    if isinstance(value, str):
        track, sep, segment = value.strip().partition("-")
        if sep and track.isdigit() and segment.isdigit():
            return SegmentId(int(track), int(segment))
        raise InvalidSegmentIdError(f"Invalid segment id {value!r}; expected '<track>-<segment>'")
    try:
        track, segment = value
        return SegmentId(int(track), int(segment))
    except (TypeError, ValueError) as e:
        raise InvalidSegmentIdError(f"Invalid segment id {value!r}") from e


def remove_segments(trajectory: Trajectory, segment_ids: Iterable[SegmentIdLike]) -> Trajectory:
    """Drop the addressed track segments, and any track left empty.

    Identifiers that match no segment are ignored, so repeating a removal
    is a no-op.
    """
    doomed = {parse_segment_id(s) for s in segment_ids}

    tracks = []
    for ti, track in enumerate(trajectory.tracks):
        segments = [
            _copy_segment(seg.points)
            for si, seg in enumerate(track.segments)
            if SegmentId(ti, si) not in doomed
        ]
        if segments:
            tracks.append(track.model_copy(update={"segments": segments}))

    return trajectory.model_copy(update={"tracks": tracks}, deep=True)
