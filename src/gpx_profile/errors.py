"""Exceptions raised by the GPX profile tool."""


class GpxProfileError(Exception):
    """Base class for all errors that abort a run."""


class InputReadError(GpxProfileError):
    """The input file or stream could not be read."""


class GPXParseError(GpxProfileError):
    """The input is not well-formed GPX."""


class NoPointsError(GpxProfileError):
    """The GPX document contains no route or track points."""


class ConfigurationError(GpxProfileError, ValueError):
    """An option value was rejected before analysis."""


class InvalidSegmentDistanceError(ConfigurationError):
    pass


class UnsupportedFormatError(ConfigurationError):
    pass
