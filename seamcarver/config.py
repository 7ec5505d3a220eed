"""
Carving session configuration.

The axis and the energy strategy are closed choices, so both are plain
enums. String aliases are accepted wherever a config is built, matching
the 'vertical' / 'horizontal' arguments used throughout the package.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import ConfigurationError


class Axis(Enum):
    """Direction in which seams run.

    VERTICAL seams run top-to-bottom and removing one reduces the width.
    HORIZONTAL seams run left-to-right and removing one reduces the height.
    """
    VERTICAL = 'vertical'
    HORIZONTAL = 'horizontal'


class EnergyStrategy(Enum):
    GRADIENT = 'gradient'
    DUAL_GRADIENT = 'dualGradient'
    SOBEL = 'sobel'


_AXIS_ALIASES = {
    'vertical': Axis.VERTICAL,
    'v': Axis.VERTICAL,
    'horizontal': Axis.HORIZONTAL,
    'h': Axis.HORIZONTAL,
}

_ENERGY_ALIASES = {
    'gradient': EnergyStrategy.GRADIENT,
    'dualgradient': EnergyStrategy.DUAL_GRADIENT,
    'dual_gradient': EnergyStrategy.DUAL_GRADIENT,
    'sobel': EnergyStrategy.SOBEL,
    'sobel3': EnergyStrategy.SOBEL,
}


def parse_axis(value: Union[str, Axis]) -> Axis:
    """Resolve an Axis or one of its string aliases."""
    if isinstance(value, Axis):
        return value
    if isinstance(value, str) and value.lower() in _AXIS_ALIASES:
        return _AXIS_ALIASES[value.lower()]
    raise ConfigurationError(f"Invalid direction: {value!r}")


def parse_energy(value: Union[str, EnergyStrategy]) -> EnergyStrategy:
    """Resolve an EnergyStrategy or one of its string aliases."""
    if isinstance(value, EnergyStrategy):
        return value
    if isinstance(value, str) and value.lower() in _ENERGY_ALIASES:
        return _ENERGY_ALIASES[value.lower()]
    raise ConfigurationError(
        f"Unknown energy function: {value!r} "
        f"(expected one of {', '.join(e.value for e in EnergyStrategy)})")


@dataclass(frozen=True)
class CarvingConfig:
    """
    Immutable per-session settings.

    Args:
        axis: Axis or 'vertical' / 'horizontal'
        energy: EnergyStrategy or 'gradient' / 'dualGradient' / 'sobel'
    """
    axis: Axis = Axis.VERTICAL
    energy: EnergyStrategy = EnergyStrategy.GRADIENT

    def __post_init__(self):
        # frozen, so normalise through object.__setattr__
        object.__setattr__(self, 'axis', parse_axis(self.axis))
        object.__setattr__(self, 'energy', parse_energy(self.energy))
