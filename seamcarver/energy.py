"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

Every strategy works on a uint8 RGB grid (3, H, W) and returns an int64
energy map (H, W) saturated to 0..255, so the cost sweep only ever adds
comparable integers.
"""

import torch
import torch.nn.functional as F

from .config import EnergyStrategy, parse_energy

MAX_ENERGY = 255


def _neighbors(grid: torch.Tensor):
    """Left, top, right and bottom neighbor images, edge pixel repeated."""
    left = torch.empty_like(grid)
    left[:, :, 1:] = grid[:, :, :-1]
    left[:, :, 0] = grid[:, :, 0]

    top = torch.empty_like(grid)
    top[:, 1:, :] = grid[:, :-1, :]
    top[:, 0, :] = grid[:, 0, :]

    right = torch.empty_like(grid)
    right[:, :, :-1] = grid[:, :, 1:]
    right[:, :, -1] = grid[:, :, -1]

    bottom = torch.empty_like(grid)
    bottom[:, :-1, :] = grid[:, 1:, :]
    bottom[:, -1, :] = grid[:, -1, :]

    return left, top, right, bottom


def color_distance(first: torch.Tensor, second: torch.Tensor) -> torch.Tensor:
    """
    Euclidean distance between colors, truncated to an integer.

    Args:
        first: Color grid (3, H, W), any integer dtype
        second: Color grid of the same shape

    Returns:
        int64 map (H, W) with floor(sqrt(dR^2 + dG^2 + dB^2))
    """
    diff = first.long() - second.long()
    squared = (diff * diff).sum(dim=0)
    # squared is at most 3 * 255^2, well inside float64's exact range
    return torch.sqrt(squared.double()).floor().long()


def gradient_energy(grid: torch.Tensor) -> torch.Tensor:
    """
    Half the distance to the left neighbor plus half the distance to the
    top neighbor. Edge pixels compare against themselves.

    Args:
        grid: RGB grid (3, H, W)

    Returns:
        Energy map (H, W), int64 in 0..255
    """
    grid = grid.long()
    left, top, _, _ = _neighbors(grid)
    energy = color_distance(grid, left) // 2 + color_distance(grid, top) // 2
    return energy.clamp(max=MAX_ENERGY)


def dual_gradient_energy(grid: torch.Tensor) -> torch.Tensor:
    """
    Gradient energy extended to all four neighbors: half the distance to
    each of left, top, right and bottom, edge-clamped.

    Args:
        grid: RGB grid (3, H, W)

    Returns:
        Energy map (H, W), int64 in 0..255
    """
    grid = grid.long()
    left, top, right, bottom = _neighbors(grid)
    energy = (color_distance(grid, left) // 2
              + color_distance(grid, top) // 2
              + color_distance(grid, right) // 2
              + color_distance(grid, bottom) // 2)
    return energy.clamp(max=MAX_ENERGY)


def luminance(grid: torch.Tensor) -> torch.Tensor:
    """Rec. 601 luma of an RGB grid, rounded to 0..255 (float64, (H, W))."""
    grid = grid.double()
    gray = 0.299 * grid[0] + 0.587 * grid[1] + 0.114 * grid[2]
    return torch.round(gray).clamp(0, MAX_ENERGY)


def _pad_reflect101(image: torch.Tensor) -> torch.Tensor:
    """
    Pad a (1, 1, H, W) image by one pixel on each side, mirroring around
    the edge pixel (gfedcb|abcdefgh|gfedcba). A dimension of size one has
    nothing to mirror, so it is replicated instead.
    """
    H, W = image.shape[-2:]
    image = F.pad(image, (1, 1, 0, 0), mode='reflect' if W > 1 else 'replicate')
    image = F.pad(image, (0, 0, 1, 1), mode='reflect' if H > 1 else 'replicate')
    return image


def sobel_energy(grid: torch.Tensor) -> torch.Tensor:
    """
    Sobel edge response on the luminance channel.

    The absolute x and y responses are each saturated to 0..255 and then
    blended 0.5 / 0.5 with round-half-to-even.

    Args:
        grid: RGB grid (3, H, W)

    Returns:
        Energy map (H, W), int64 in 0..255
    """
    gray = luminance(grid)

    sobel_x = torch.tensor([[-1, 0, 1],
                            [-2, 0, 2],
                            [-1, 0, 1]], dtype=gray.dtype, device=gray.device)
    sobel_x = sobel_x.view(1, 1, 3, 3)

    sobel_y = torch.tensor([[-1, -2, -1],
                            [ 0,  0,  0],
                            [ 1,  2,  1]], dtype=gray.dtype, device=gray.device)
    sobel_y = sobel_y.view(1, 1, 3, 3)

    padded = _pad_reflect101(gray.unsqueeze(0).unsqueeze(0))

    grad_x = F.conv2d(padded, sobel_x).squeeze(0).squeeze(0)
    grad_y = F.conv2d(padded, sobel_y).squeeze(0).squeeze(0)

    scaled_x = torch.abs(grad_x).clamp(max=MAX_ENERGY)
    scaled_y = torch.abs(grad_y).clamp(max=MAX_ENERGY)

    energy = torch.round(0.5 * scaled_x + 0.5 * scaled_y)
    return energy.clamp(0, MAX_ENERGY).long()


_STRATEGIES = {
    EnergyStrategy.GRADIENT: gradient_energy,
    EnergyStrategy.DUAL_GRADIENT: dual_gradient_energy,
    EnergyStrategy.SOBEL: sobel_energy,
}


def compute_energy(grid: torch.Tensor, strategy=EnergyStrategy.GRADIENT) -> torch.Tensor:
    """
    Energy map of a whole grid under the selected strategy.

    Args:
        grid: RGB grid (3, H, W)
        strategy: EnergyStrategy or its string alias

    Returns:
        Energy map (H, W), int64 in 0..255
    """
    return _STRATEGIES[parse_energy(strategy)](grid)
