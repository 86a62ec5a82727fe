"""Convert, analyze and edit GPS trajectories from GPX files."""

from .core.analytics import analyze_timing, elevation_stats, summarize
from .core.editor import remove_segments, trim_by_percentage
from .core.geojson import extract_dominant_linestring, gpx_to_geojson, to_geojson
from .core.gpx import parse_gpx, parse_gpx_file
from .errors import (
    ConversionError,
    ExtractionError,
    GpxBaseError,
    InvalidRangeError,
    InvalidSegmentIdError,
    ParseError,
)
from .exporters.gpx import to_xml
from .models import (
    Metadata,
    Route,
    Segment,
    SegmentId,
    Track,
    TrackPoint,
    Trajectory,
    Waypoint,
    segment_ids,
)

__version__ = "0.1.0"
