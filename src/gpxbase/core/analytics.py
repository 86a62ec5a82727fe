"""Trajectory statistics: distance, counts, timing and elevation profile."""

from ..models import TrackPoint, Trajectory
from .coords import path_distance_m
from .models import ElevationStats, TimingStats, TrajectorySummary


def summarize(trajectory: Trajectory) -> TrajectorySummary:
    """Count tracks, segments and points and total the haversine distance.

    Distance is accumulated within each segment only; gaps between segments
    and tracks are not bridged. An empty trajectory gives an all-zero summary.
    """
    point_count = 0
    segment_count = 0
    distance_m = 0.0
    has_time = False
    has_elevation = False

    for track in trajectory.tracks:
        segment_count += len(track.segments)
        for segment in track.segments:
            point_count += len(segment.points)
            distance_m += path_distance_m(segment.points)
            for p in segment.points:
                has_time = has_time or p.time is not None
                has_elevation = has_elevation or p.elevation is not None

    return TrajectorySummary(
        point_count=point_count,
        segment_count=segment_count,
        track_count=len(trajectory.tracks),
        total_distance_km=distance_m / 1000,
        has_time_data=has_time,
        has_elevation_data=has_elevation,
    )


def _timing_sequences(trajectory: Trajectory) -> list[list[TrackPoint]]:
    sequences = [seg.points for track in trajectory.tracks for seg in track.segments]
    if not sequences:
        sequences = [route.points for route in trajectory.routes]
    return sequences


def analyze_timing(trajectory: Trajectory) -> TimingStats:
    """Start/end time, duration, average speed and elevation span.

    Uses track points, or route points when there are no tracks. Timing
    needs at least two timestamps; average speed needs a duration of at
    least one whole minute.
    """
    sequences = _timing_sequences(trajectory)
    points = [p for seq in sequences for p in seq]
    if not points:
        return TimingStats()

    distance_km = sum(path_distance_m(seq) for seq in sequences) / 1000
    stats = TimingStats(distance_km=distance_km)

    times = [p.time for p in points if p.time is not None]
    if len(times) >= 2:
        stats.start_time = min(times)
        stats.end_time = max(times)
        duration = int((stats.end_time - stats.start_time).total_seconds() // 60)
        if duration > 0:
            stats.duration_minutes = duration
            stats.average_speed_kmh = distance_km / (duration / 60)

    elevations = [p.elevation for p in points if p.elevation is not None]
    if elevations:
        gain = max(elevations) - min(elevations)
        if gain > 0:
            stats.max_elevation_gain = gain

    return stats


def elevation_stats(trajectory: Trajectory) -> ElevationStats:
    """Min/max elevation and cumulative climb/descent over track points.

    Gain and loss are only counted between consecutive points of a segment
    that both carry an elevation.
    """
    elevations = [p.elevation for p in trajectory.iter_track_points() if p.elevation is not None]
    if not elevations:
        return ElevationStats()

    gain = 0.0
    loss = 0.0
    for track in trajectory.tracks:
        for segment in track.segments:
            pts = segment.points
            for prev, cur in zip(pts, pts[1:]):
                if prev.elevation is None or cur.elevation is None:
                    continue
                diff = cur.elevation - prev.elevation
                if diff > 0:
                    gain += diff
                else:
                    loss -= diff

    return ElevationStats(
        min_elevation=min(elevations),
        max_elevation=max(elevations),
        total_gain=gain,
        total_loss=loss,
    )
