"""
Palette preview images

Renders a palette as a strip of grayscale swatches, one per value. The game's
actual colors are not known here, so each index is shown as a gray level.
"""
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from PIL import Image

from uni2skin.utils.constants import (
    GRAYSCALE_MAX_VALUE,
    MAX_PALETTE_VALUE,
    PREVIEW_CELL_SIZE,
)
from uni2skin.utils.logging_config import get_logger

logger = get_logger(__name__)


def grayscale_palette() -> list[int]:
    """Flat RGB palette mapping color index i to gray level i*255/39"""
    palette = []
    for i in range(256):
        gray = (i * GRAYSCALE_MAX_VALUE) // MAX_PALETTE_VALUE if i <= MAX_PALETTE_VALUE else 0
        palette.extend([gray, gray, gray])
    return palette


def render_swatch(palette: Sequence[int], cell_size: int = PREVIEW_CELL_SIZE) -> Image.Image:
    """Build an indexed image with one square cell per palette value"""
    width = cell_size * len(palette)
    img = Image.new("P", (width, cell_size))
    img.putpalette(grayscale_palette())

    pixels = []
    for _y in range(cell_size):
        for value in palette:
            pixels.extend([value] * cell_size)
    img.putdata(pixels)
    return img


def save_preview(palette: Sequence[int], output_png: str | Path) -> Path:
    """Write a swatch preview PNG and return its path"""
    output_png = Path(output_png)
    output_png.parent.mkdir(parents=True, exist_ok=True)
    render_swatch(palette).save(output_png)
    logger.info(f"Created preview: {output_png}")
    return output_png
