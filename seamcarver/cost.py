"""
Cumulative minimum-cost field for seam search.

Standard forward dynamic programming: the first along-axis slice is the
energy itself, every later cell adds the cheapest of its three
predecessors (cross offsets -1, 0, +1, clamped at the edges).
"""

import torch

from .axis import from_along_major, to_along_major
from .config import Axis, parse_axis


def cumulative_cost(energy: torch.Tensor, direction=Axis.VERTICAL) -> torch.Tensor:
    """
    Build the cumulative cost field M from an energy map.

    For vertical seams, M[0] = E[0] and
      M[i, j] = E[i, j] + min(M[i-1, j-1], M[i-1, j], M[i-1, j+1])
    with j-1 / j+1 clamped into the row. Horizontal seams run the same
    recurrence over columns.

    Args:
        energy: Energy map (H, W), non-negative integers
        direction: 'vertical' or 'horizontal'

    Returns:
        int64 cost field (H, W)
    """
    axis = parse_axis(direction)
    field = to_along_major(energy.long(), axis)
    L = field.shape[0]

    cost = torch.empty_like(field)
    cost[0] = field[0]

    for i in range(1, L):
        prev = cost[i - 1]
        # predecessors at cross offsets -1 and +1, edge cell repeated
        prev_left = torch.cat([prev[:1], prev[:-1]])
        prev_right = torch.cat([prev[1:], prev[-1:]])
        cost[i] = field[i] + torch.minimum(torch.minimum(prev_left, prev), prev_right)

    return from_along_major(cost, axis)
