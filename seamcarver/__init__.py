"""
Content-aware image shrinking by seam carving.

Repeatedly finds the lowest-energy 8-connected path of pixels running
top-to-bottom (or left-to-right) and removes it, one seam per cycle.
"""

__version__ = "0.1.0"

from .config import Axis, EnergyStrategy, CarvingConfig
from .errors import (SeamCarvingError, ConfigurationError, GeometryError,
                     InternalInvariantViolation)
from .energy import (color_distance, gradient_energy, dual_gradient_energy,
                     sobel_energy, compute_energy)
from .cost import cumulative_cost
from .seam import find_seam, validate_seam, remove_seam
from .diagnostics import Reporter, LoggingReporter, RecordingReporter
from .carving import SeamCarver, as_pixel_grid, carve_image

__all__ = [
    'Axis',
    'EnergyStrategy',
    'CarvingConfig',
    'SeamCarvingError',
    'ConfigurationError',
    'GeometryError',
    'InternalInvariantViolation',
    'color_distance',
    'gradient_energy',
    'dual_gradient_energy',
    'sobel_energy',
    'compute_energy',
    'cumulative_cost',
    'find_seam',
    'validate_seam',
    'remove_seam',
    'Reporter',
    'LoggingReporter',
    'RecordingReporter',
    'SeamCarver',
    'as_pixel_grid',
    'carve_image',
]
