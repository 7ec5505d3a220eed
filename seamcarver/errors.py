"""
Exceptions raised by the carving core.

Everything derives from SeamCarvingError so callers can catch the whole
family at once. ConfigurationError and GeometryError also subclass
ValueError, which is what the rest of the code base raised for a bad
``direction`` before these types existed.
"""


class SeamCarvingError(Exception):
    """Base class for all seam carving failures."""


class ConfigurationError(SeamCarvingError, ValueError):
    """Unknown carving axis / energy strategy, or an unusable pixel grid."""


class GeometryError(SeamCarvingError, ValueError):
    """
    The grid cannot be shrunk as requested.

    Raised for zero-sized input, negative seam counts and for seam counts
    that would shrink the carving axis below one pixel. Seams removed before
    the failure stay removed; ``cycles_completed`` says how many.
    """

    def __init__(self, message: str, cycles_completed: int = 0):
        super().__init__(message)
        self.cycles_completed = cycles_completed


class InternalInvariantViolation(SeamCarvingError, AssertionError):
    """A traced seam is out of bounds or disconnected. Always a bug."""
