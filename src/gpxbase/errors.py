"""Exceptions raised by the conversion, editing and analytics functions."""


class GpxBaseError(ValueError):
    """Base class for all gpxbase errors."""


class ParseError(GpxBaseError):
    """GPX content is unreadable, malformed, or carries no GPS data."""


class ConversionError(GpxBaseError):
    """A trajectory yielded no usable geographic features."""


class ExtractionError(GpxBaseError):
    """No LineString could be extracted for storage."""


class InvalidRangeError(GpxBaseError):
    """An edit was given a nonsensical percentage range or an empty input."""


class InvalidSegmentIdError(GpxBaseError):
    """A segment identifier could not be interpreted."""
