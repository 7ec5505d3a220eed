"""
Image file helpers: decode to / encode from the (3, H, W) uint8 tensors
used by the carver, and show a result on screen.
"""

import numpy as np
import torch
from PIL import Image


def load_image(path: str, device='cpu') -> torch.Tensor:
    """Load image and convert to a (3, H, W) uint8 RGB tensor."""
    img = Image.open(path).convert('RGB')
    img_array = np.array(img, dtype=np.uint8)
    return torch.from_numpy(img_array).permute(2, 0, 1).contiguous().to(device)


def to_pil(tensor: torch.Tensor) -> Image.Image:
    """Convert a (3, H, W) uint8 tensor into a PIL image."""
    img_array = tensor.permute(1, 2, 0).cpu().numpy()
    return Image.fromarray(np.ascontiguousarray(img_array, dtype=np.uint8))


def save_image(tensor: torch.Tensor, path: str):
    """Save a (3, H, W) uint8 tensor as an image file."""
    to_pil(tensor).save(path)


def output_path(path: str, n_seams: int) -> str:
    """Where the carved version of ``path`` is written: '<path>-out-<n>.png'."""
    return f"{path}-out-{n_seams}.png"


def show_image(tensor: torch.Tensor, title: str = 'image'):
    """Display an image in a matplotlib window and block until it is closed."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    ax.imshow(tensor.permute(1, 2, 0).cpu().numpy())
    ax.set_title(title)
    ax.axis('off')
    plt.show()
    plt.close(fig)
