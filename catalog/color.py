"""
Background color selection from logo brightness.

The logo is flattened onto white, shrunk to a small square and averaged.
Bright logos get a dark teal page, dark logos a light grey one.
"""

import math
import numpy as np
from PIL import Image
from loguru import logger

from .models import Color, DARK_TEAL, LIGHT_GREY


class ColorSampler:
    """Picks a page background from the perceived brightness of a logo."""

    def __init__(self, sample_size: int = 40, threshold: float = 180.0):
        self.sample_size = sample_size
        self.threshold = threshold

    def _flatten(self, logo: Image.Image) -> Image.Image:
        """Composite over opaque white so transparent pixels count as white."""
        rgba = logo.convert('RGBA')
        canvas = Image.new('RGBA', rgba.size, (255, 255, 255, 255))
        canvas.alpha_composite(rgba)
        return canvas.convert('RGB')

    def mean_color(self, logo: Image.Image) -> Color:
        small = self._flatten(logo).resize(
            (self.sample_size, self.sample_size),
            Image.Resampling.BOX
        )
        pixels = np.asarray(small, dtype=np.float64).reshape(-1, 3)
        # halves round up
        r, g, b = (int(math.floor(v + 0.5)) for v in pixels.mean(axis=0))
        return Color(r, g, b)

    def brightness(self, logo: Image.Image) -> float:
        mean = self.mean_color(logo)
        return 0.299 * mean.r + 0.587 * mean.g + 0.114 * mean.b

    def sample(self, logo: Image.Image) -> Color:
        brightness = self.brightness(logo)
        color = DARK_TEAL if brightness > self.threshold else LIGHT_GREY
        logger.debug(f"Logo brightness {brightness:.1f} -> background {color.hex}")
        return color
