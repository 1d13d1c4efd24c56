"""
Heightfield preview rendering.

Draws the grid as an image with a matplotlib colormap, greyscale by default,
and saves it as a PNG.
"""

from pathlib import Path
from typing import Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import structlog

from .core.heightfield import Heightfield

logger = structlog.get_logger()


def render_heightfield(
    field: Heightfield,
    output_path: Union[str, Path],
    cmap: str = "gray",
    colorbar: bool = False,
    dpi: int = 100,
) -> Path:
    """
    Save a preview image of a heightfield.

    Args:
        field: Populated heightfield
        output_path: Destination PNG
        cmap: Matplotlib colormap name, e.g. "gray" or "terrain"
        colorbar: Add a colorbar showing the height scale
        dpi: Output resolution

    Returns:
        Path to the written image
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(field.size / dpi + 1, field.size / dpi + 1))
    try:
        image = ax.imshow(field.data, cmap=cmap, origin="upper", interpolation="nearest")
        ax.set_title(f"Diamond-square heightfield ({field.size}x{field.size})")
        ax.set_axis_off()
        if colorbar:
            fig.colorbar(image, ax=ax, label="Height")
        fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)

    logger.info("Rendered heightfield preview", path=str(output_path), cmap=cmap)
    return output_path
