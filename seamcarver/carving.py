"""
High-level carving: a session that repeatedly scores, sweeps, traces and
removes seams from one image.
"""

from typing import List, Optional

import torch

from .axis import cross_size
from .config import CarvingConfig
from .cost import cumulative_cost
from .diagnostics import Reporter
from .energy import compute_energy
from .errors import ConfigurationError, GeometryError
from .seam import find_seam, remove_seam, validate_seam


def as_pixel_grid(image: torch.Tensor) -> torch.Tensor:
    """
    Copy an image into the (3, H, W) uint8 layout the carver works on.

    Float images are taken to be in [0, 1] and are scaled to 0..255.
    Single-channel images (H, W) or (1, H, W) are repeated to three channels.

    Raises:
        ConfigurationError: not a tensor, or not a 2D / 3D image
        GeometryError: zero height or width
    """
    if not isinstance(image, torch.Tensor):
        raise ConfigurationError(
            f"Expected a torch.Tensor image, got {type(image).__name__}")

    if image.dim() == 2:
        image = image.unsqueeze(0)
    if image.dim() != 3 or image.shape[0] not in (1, 3):
        raise ConfigurationError(
            f"Expected an image of shape (3, H, W), (1, H, W) or (H, W), "
            f"got {tuple(image.shape)}")
    if image.shape[1] == 0 or image.shape[2] == 0:
        raise GeometryError(f"Image has a zero dimension: {tuple(image.shape)}")

    if image.shape[0] == 1:
        image = image.expand(3, -1, -1)

    if image.is_floating_point():
        image = (image * 255).round().clamp(0, 255)
    else:
        image = image.clamp(0, 255)

    return image.to(torch.uint8).clone()


class SeamCarver:
    """
    Carving session over one image.

    The session owns a private copy of the image and shrinks it one seam at
    a time. Energy and cost fields are rebuilt from the current image on
    every cycle; nothing is cached between cycles.

    Args:
        image: Image tensor (3, H, W); see as_pixel_grid for accepted forms
        config: CarvingConfig (defaults to vertical seams, gradient energy)
        reporter: Optional Reporter that receives progress events
    """

    def __init__(self, image: torch.Tensor, config: Optional[CarvingConfig] = None,
                 reporter: Optional[Reporter] = None):
        self.config = config if config is not None else CarvingConfig()
        if not isinstance(self.config, CarvingConfig):
            raise ConfigurationError(
                f"Expected a CarvingConfig, got {type(self.config).__name__}")
        self.reporter = reporter if reporter is not None else Reporter()
        self._image = as_pixel_grid(image)
        self.seams: List[torch.Tensor] = []

    @property
    def image(self) -> torch.Tensor:
        """Current (carved) image, (3, H, W) uint8."""
        return self._image

    @property
    def shape(self):
        return tuple(self._image.shape)

    @property
    def last_seam(self) -> Optional[torch.Tensor]:
        return self.seams[-1] if self.seams else None

    def remaining(self) -> int:
        """How many more seams can be removed along the configured axis."""
        return cross_size(self._image.shape, self.config.axis) - 1

    def energy_map(self) -> torch.Tensor:
        """Energy field of the current image."""
        return compute_energy(self._image, self.config.energy)

    def cost_map(self) -> torch.Tensor:
        """Cumulative cost field of the current image."""
        return cumulative_cost(self.energy_map(), self.config.axis)

    def _carve_once(self, index: int) -> torch.Tensor:
        axis = self.config.axis

        energy = compute_energy(self._image, self.config.energy)
        self.reporter.map_built('energy', energy.shape)

        cost = cumulative_cost(energy, axis)
        self.reporter.map_built('accumulative energy', cost.shape)

        seam = find_seam(cost, axis)
        validate_seam(seam, cost.shape, axis)
        self.reporter.seam_chosen(index, seam.tolist())

        self._image = remove_seam(self._image, seam, axis)
        self.seams.append(seam)
        self.reporter.seam_removed(index, self._image.shape)
        return seam

    def reduce(self, n: int) -> int:
        """
        Remove n seams, one full cycle at a time.

        Args:
            n: Number of seams to remove

        Returns:
            Number of cycles completed (always n on success)

        Raises:
            GeometryError: n is negative, or the carving axis reached size 1
                before n seams were removed. Seams removed up to that point
                stay removed and are counted in ``cycles_completed``.
        """
        if n < 0:
            raise GeometryError(f"Seam count must be non-negative, got {n}")

        for i in range(n):
            size = cross_size(self._image.shape, self.config.axis)
            if size <= 1:
                raise GeometryError(
                    f"Cannot remove seam {i + 1} of {n}: "
                    f"{self.config.axis.value} carving axis has size {size}",
                    cycles_completed=i)
            self.reporter.cycle_started(i, n)
            self._carve_once(i)

        return n


def carve_image(image: torch.Tensor, n_seams: int, direction: str = 'vertical',
                energy: str = 'gradient', reporter: Optional[Reporter] = None) -> torch.Tensor:
    """
    Seam carving in one call.

    Args:
        image: Image tensor (3, H, W)
        n_seams: Number of seams to remove
        direction: 'vertical' (narrower) or 'horizontal' (shorter)
        energy: 'gradient', 'dualGradient' or 'sobel'
        reporter: Optional progress Reporter

    Returns:
        Carved image, (3, H, W - n_seams) or (3, H - n_seams, W), uint8
    """
    carver = SeamCarver(image, CarvingConfig(direction, energy), reporter=reporter)
    carver.reduce(n_seams)
    return carver.image
