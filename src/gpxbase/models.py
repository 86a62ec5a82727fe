"""Pydantic domain models for GPS trajectories."""

from datetime import datetime, timezone
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator


class TrackPoint(BaseModel):
    lat: float = Field(ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(ge=-180, le=180, allow_inf_nan=False)
    elevation: Optional[float] = Field(default=None, allow_inf_nan=False)
    time: Optional[datetime] = None

    @field_validator("time")
    @classmethod
    def time_must_be_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class Waypoint(TrackPoint):
    name: Optional[str] = None
    description: Optional[str] = None


class Segment(BaseModel):
    points: list[TrackPoint] = Field(min_length=1)


class Track(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    segments: list[Segment] = Field(min_length=1)

    @property
    def point_count(self) -> int:
        return sum(len(s.points) for s in self.segments)


class Route(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    points: list[TrackPoint] = Field(min_length=1)


class Metadata(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    time: Optional[datetime] = None

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.description is None and self.time is None


class Trajectory(BaseModel):
    """A parsed GPS recording: tracks, routes and standalone waypoints."""
    tracks: list[Track] = Field(default_factory=list)
    routes: list[Route] = Field(default_factory=list)
    waypoints: list[Waypoint] = Field(default_factory=list)
    metadata: Optional[Metadata] = None

    @property
    def is_empty(self) -> bool:
        return not (self.tracks or self.routes or self.waypoints)

    def iter_track_points(self):
        """Yield every track point in document order."""
        for track in self.tracks:
            for segment in track.segments:
                yield from segment.points


class SegmentId(NamedTuple):
    """Positional address of a track segment. Invalidated by any structural edit."""
    track_index: int
    segment_index: int

    def __str__(self) -> str:
        return f"{self.track_index}-{self.segment_index}"


def segment_ids(trajectory: Trajectory) -> list[SegmentId]:
    """List the identifier of every track segment in document order."""
    return [
        SegmentId(ti, si)
        for ti, track in enumerate(trajectory.tracks)
        for si in range(len(track.segments))
    ]
