"""GeoJSON file export for map display."""

from ..core.geojson import to_geojson
from ..models import Trajectory


def export_geojson(trajectory: Trajectory, output_path: str, indent: int | None = None) -> dict:
    """Write the trajectory's FeatureCollection to a .geojson file."""
    collection = to_geojson(trajectory)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(collection.model_dump_json(indent=indent))
    return {"success": True, "filepath": output_path, "features": len(collection.features)}
