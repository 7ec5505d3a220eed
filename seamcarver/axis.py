"""
Axis-generic views of grids and fields.

The cost sweep, the seam trace and the seam removal are written once, for
seams that run along dimension 0 of a field ("along-major" layout). For
vertical carving that is the natural (H, W) layout; for horizontal carving
the last two dimensions are swapped so columns become the along axis.
"""

import torch

from .config import Axis


def to_along_major(tensor: torch.Tensor, axis: Axis) -> torch.Tensor:
    """
    View a field (H, W) or grid (C, H, W) with the along axis first.

    Args:
        tensor: Field (H, W) or grid (C, H, W)
        axis: Carving axis

    Returns:
        (L, X) / (C, L, X) view where L is the along-axis size and X the
        cross-axis size. Shares storage with the input.
    """
    if axis is Axis.VERTICAL:
        return tensor
    return tensor.transpose(-2, -1)


def from_along_major(tensor: torch.Tensor, axis: Axis) -> torch.Tensor:
    """Inverse of to_along_major; the result is made contiguous."""
    if axis is Axis.VERTICAL:
        return tensor.contiguous()
    return tensor.transpose(-2, -1).contiguous()


def cross_size(shape, axis: Axis) -> int:
    """Size of the dimension a seam removal shrinks (width for vertical)."""
    return shape[-1] if axis is Axis.VERTICAL else shape[-2]


def along_size(shape, axis: Axis) -> int:
    """Length of a seam for this axis (height for vertical)."""
    return shape[-2] if axis is Axis.VERTICAL else shape[-1]
