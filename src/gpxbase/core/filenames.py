"""Download file names for edited GPX documents."""

import re

_SPACES = re.compile(r"[ 　]")
_DISALLOWED = re.compile(r"[^A-Za-z0-9_]")


def gpx_filename(name: str, fallback: str) -> str:
    """Slugify a route name into "<slug>.gpx", using fallback when nothing is left."""
    slug = _DISALLOWED.sub("", _SPACES.sub("_", name or "")).lower()
    return f"{slug or fallback}.gpx"
