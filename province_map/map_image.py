"""
Region bitmap loading.

Loads the province region bitmap with Pillow and exposes it as a flat,
row-major RGB byte buffer (3 bytes per pixel). Only 8-bit RGB images are
accepted; anything else (palette, greyscale, RGBA, 16-bit...) is rejected
rather than converted, since a conversion would change province colors.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Tuple, Union

import numpy as np
from PIL import Image

from .constants import REGION_IMAGE_MODE, RGB_CHANNELS
from .errors import UnsupportedEncodingError

logger = logging.getLogger(__name__)

ColorKey = Tuple[int, int, int]


@dataclass(frozen=True)
class MapImage:
    """Decoded region bitmap."""
    width: int
    height: int
    pixels: bytes

    def as_array(self) -> np.ndarray:
        """Read-only (height, width, 3) uint8 view of the pixel buffer."""
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(
            (self.height, self.width, RGB_CHANNELS))

    def color_at(self, x: int, y: int) -> ColorKey:
        """Color of the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = (y * self.width + x) * RGB_CHANNELS
        r, g, b = self.pixels[offset:offset + RGB_CHANNELS]
        return (r, g, b)

    def province_pixel_counts(self, definitions: Mapping[ColorKey, int]) -> Dict[int, int]:
        """Count the pixels of each province present in the image.

        Args:
            definitions: Color -> province id mapping from the definition table

        Returns:
            Dict mapping province id to its number of pixels. Colors missing
            from the definition table are logged and left out.
        """
        flat = self.as_array().reshape(-1, RGB_CHANNELS)
        colors, counts = np.unique(flat, axis=0, return_counts=True)

        result = {}
        unknown = 0
        for color, count in zip(colors, counts):
            key = (int(color[0]), int(color[1]), int(color[2]))
            province_id = definitions.get(key)
            if province_id is None:
                unknown += 1
                logger.warning("Color %s (%d pixels) has no province definition", key, count)
                continue
            result[province_id] = result.get(province_id, 0) + int(count)

        logger.debug("Found %d province(s), %d unknown color(s)", len(result), unknown)
        return result


def load_region_image(path: Union[str, Path]) -> MapImage:
    """Load a region bitmap.

    Raises:
        OSError: If the file can't be opened or decoded
        UnsupportedEncodingError: If the pixels are not 8-bit RGB
    """
    with Image.open(path) as img:
        if img.mode != REGION_IMAGE_MODE:
            raise UnsupportedEncodingError(img.mode, path)
        width, height = img.size
        pixels = img.tobytes()

    logger.debug("Loaded %s: %dx%d", path, width, height)
    return MapImage(width=width, height=height, pixels=pixels)
