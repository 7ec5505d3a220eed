"""
Seam tracing and removal.

A seam is traced backwards through a cumulative cost field (see cost.py)
and then cut out of the pixel grid, shrinking the cross axis by one.
"""

import torch

from .axis import along_size, cross_size, from_along_major, to_along_major
from .config import Axis, parse_axis
from .errors import GeometryError, InternalInvariantViolation


def _step(left: int, center: int, right: int) -> int:
    """
    Cross-axis move for one backward step.

    Only a strict minimum on the left or in the center is honoured; every
    other case, ties included, moves right. A left/center tie therefore
    resolves to +1, not -1.
    """
    if left < center and left < right:
        return -1
    if center < left and center < right:
        return 0
    return 1


def find_seam(cost: torch.Tensor, direction=Axis.VERTICAL) -> torch.Tensor:
    """
    Trace the minimum-cost seam through a cumulative cost field.

    Starts at the first minimum of the last row (vertical) or last column
    (horizontal), then walks back one slice at a time choosing among the
    three predecessors with _step, clamping into the field.

    Args:
        cost: Cumulative cost field (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    axis = parse_axis(direction)
    field = to_along_major(cost, axis)
    L, X = field.shape

    seam = torch.zeros(L, dtype=torch.long, device=cost.device)
    # torch.argmin returns the first index among equal minima
    current = torch.argmin(field[L - 1]).item()
    seam[L - 1] = current

    for i in range(L - 2, -1, -1):
        row = field[i]
        left = row[max(current - 1, 0)].item()
        center = row[current].item()
        right = row[min(current + 1, X - 1)].item()
        current += _step(left, center, right)
        current = max(min(current, X - 1), 0)
        seam[i] = current

    return seam


def validate_seam(seam: torch.Tensor, shape, direction=Axis.VERTICAL) -> None:
    """
    Check that a seam fits a field or grid of the given shape.

    Raises:
        InternalInvariantViolation: wrong length, out-of-range index, or
            adjacent indices more than one apart
    """
    axis = parse_axis(direction)
    along = along_size(shape, axis)
    cross = cross_size(shape, axis)

    if seam.dim() != 1 or seam.shape[0] != along:
        raise InternalInvariantViolation(
            f"Seam length {tuple(seam.shape)} does not match along-axis size {along}")
    if seam.numel() == 0:
        return
    if seam.min().item() < 0 or seam.max().item() > cross - 1:
        raise InternalInvariantViolation(
            f"Seam leaves the grid: range [{seam.min().item()}, {seam.max().item()}], "
            f"cross-axis size {cross}")
    if seam.numel() > 1 and torch.abs(seam[1:] - seam[:-1]).max().item() > 1:
        raise InternalInvariantViolation("Seam is not 8-connected")


def remove_seam(image: torch.Tensor, seam: torch.Tensor,
                direction=Axis.VERTICAL) -> torch.Tensor:
    """
    Remove a seam from an image.

    Every pixel after the seam in its row (vertical) or column (horizontal)
    moves one place towards the seam. No blending takes place.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices
        direction: 'vertical' or 'horizontal'

    Returns:
        Carved image with one column (vertical) or row (horizontal) removed
    """
    axis = parse_axis(direction)

    if image.dim() == 2:
        image = image.unsqueeze(0)
        squeeze_output = True
    else:
        squeeze_output = False

    grid = to_along_major(image, axis)
    C, L, X = grid.shape

    if X < 2:
        raise GeometryError(
            f"Cannot remove a seam from a grid whose cross-axis size is {X}")

    keep = torch.ones(L, X, dtype=torch.bool, device=image.device)
    keep[torch.arange(L, device=image.device), seam.long()] = False
    carved = grid[:, keep].view(C, L, X - 1)
    carved = from_along_major(carved, axis)

    if squeeze_output:
        carved = carved.squeeze(0)

    return carved
