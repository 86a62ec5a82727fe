"""Pydantic return models for core computation functions."""

from datetime import datetime
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator


class PointGeometry(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: list[float] = Field(min_length=2, max_length=3)


class LineStringGeometry(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: list[list[float]] = Field(min_length=1)

    @field_validator("coordinates")
    @classmethod
    def positions_must_be_2d_or_3d(cls, v: list[list[float]]) -> list[list[float]]:
        for i, pos in enumerate(v):
            if len(pos) not in (2, 3):
                raise ValueError(f"Position {i} must have 2 or 3 components, got {len(pos)}")
        return v


Geometry = Annotated[Union[PointGeometry, LineStringGeometry], Field(discriminator="type")]


class Feature(BaseModel):
    type: Literal["Feature"] = "Feature"
    properties: dict[str, Any] = Field(default_factory=dict)
    geometry: Geometry


class FeatureCollection(BaseModel):
    """Return type for to_geojson."""
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Feature] = Field(default_factory=list)


class TrajectorySummary(BaseModel):
    """Return type for summarize."""
    point_count: int = Field(default=0, ge=0)
    segment_count: int = Field(default=0, ge=0)
    track_count: int = Field(default=0, ge=0)
    total_distance_km: float = Field(default=0.0, ge=0)
    has_time_data: bool = False
    has_elevation_data: bool = False


class TimingStats(BaseModel):
    """Return type for analyze_timing."""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0)
    distance_km: float = Field(default=0.0, ge=0)
    average_speed_kmh: Optional[float] = Field(default=None, ge=0)
    max_elevation_gain: Optional[float] = Field(default=None, gt=0)


class ElevationStats(BaseModel):
    """Return type for elevation_stats."""
    min_elevation: Optional[float] = None
    max_elevation: Optional[float] = None
    total_gain: float = Field(default=0.0, ge=0)
    total_loss: float = Field(default=0.0, ge=0)
