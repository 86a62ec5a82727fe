"""Session state for the gpxbase MCP server.

Holds the trajectory loaded from disk, the current edited copy, and export
settings.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, ConfigDict

from gpxbase.core.analytics import summarize
from gpxbase.exporters.gpx import DEFAULT_CREATOR
from gpxbase.models import Trajectory


class ExportSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    creator: str = Field(default=DEFAULT_CREATOR, min_length=1)
    export_dir: Optional[Path] = None

    @field_validator("creator", mode="before")
    @classmethod
    def strip_creator(cls, v: str) -> str:
        if not isinstance(v, str):
            raise ValueError("creator must be a string")
        return v.strip()

    def resolved_export_dir(self) -> Path:
        if self.export_dir is not None:
            return self.export_dir
        return Path.home() / ".cache" / "gpxbase" / "exports"


class SessionState(BaseModel):
    source_path: Optional[str] = None
    original: Optional[Trajectory] = None
    current: Optional[Trajectory] = None
    edit_history: list[str] = []
    export_settings: ExportSettings = Field(default_factory=ExportSettings)

    @property
    def is_loaded(self) -> bool:
        return self.current is not None

    def load(self, source_path: str, trajectory: Trajectory) -> None:
        self.source_path = source_path
        self.original = trajectory
        self.current = trajectory.model_copy(deep=True)
        self.edit_history = []

    def apply_edit(self, description: str, trajectory: Trajectory) -> None:
        self.current = trajectory
        self.edit_history.append(description)

    def reset(self) -> None:
        if self.original is not None:
            self.current = self.original.model_copy(deep=True)
        self.edit_history = []

    def summary(self) -> dict:
        if self.current is None:
            return {"loaded": False, "export": {"creator": self.export_settings.creator}}
        stats = summarize(self.current)
        original_points = summarize(self.original).point_count if self.original else 0
        return {
            "loaded": True,
            "source_path": self.source_path,
            "trajectory": {
                "tracks": stats.track_count,
                "segments": stats.segment_count,
                "points": stats.point_count,
                "routes": len(self.current.routes),
                "waypoints": len(self.current.waypoints),
                "distance_km": round(stats.total_distance_km, 3),
                "has_time_data": stats.has_time_data,
                "has_elevation_data": stats.has_elevation_data,
            },
            "edits": {
                "applied": list(self.edit_history),
                "original_points": original_points,
            },
            "export": {
                "creator": self.export_settings.creator,
                "export_dir": str(self.export_settings.resolved_export_dir()),
            },
        }


# Global session state, one per MCP server process
state = SessionState()
