"""Shared test fixtures for the seamcarver test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)


def make_uniform_image(H, W, color=GRAY):
    """Every pixel the same color, (3, H, W) uint8."""
    return torch.tensor(color, dtype=torch.uint8).view(3, 1, 1).expand(3, H, W).clone()


def make_checkerboard(H, W):
    """White where (row + col) is even, black elsewhere."""
    rows = torch.arange(H).unsqueeze(1)
    cols = torch.arange(W).unsqueeze(0)
    white = ((rows + cols) % 2 == 0).to(torch.uint8) * 255
    return white.unsqueeze(0).expand(3, H, W).clone()


def make_valley_image(H=5, W=5, col=2):
    """
    Checkerboard with two identical gray columns at ``col - 1`` and ``col``.

    The gray column at ``col`` matches its left neighbor and itself
    vertically, so it is the only zero-gradient-energy column; everything
    else sits next to a black/white transition.
    """
    image = make_checkerboard(H, W)
    gray = torch.tensor(GRAY, dtype=torch.uint8).view(3, 1)
    image[:, :, col - 1] = gray
    image[:, :, col] = gray
    return image


@pytest.fixture
def valley_image():
    """5x5 image whose only zero-energy vertical path is column 2."""
    return make_valley_image()


@pytest.fixture
def random_image():
    torch.manual_seed(42)
    return torch.randint(0, 256, (3, 24, 32), dtype=torch.uint8)
