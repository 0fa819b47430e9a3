"""
Raster preview of catalog pages.

Draws one page's instructions onto a Pillow canvas so a page can be checked
without opening the PDF. Preview fonts differ from the PDF fonts, so each text
line is shrunk when needed to stay within the width the PDF metrics give it.
"""

from typing import Dict, Optional, Tuple
from PIL import Image, ImageDraw, ImageFont
from loguru import logger

from .models import DrawImage, DrawLine, DrawText, FillBackground, Page, PageSize
from .text import TextMeasurer

_ANCHORS = {"center": "ms", "left": "ls", "right": "rs"}


class PreviewRenderer:
    """Renders a single Page to an RGB image, `scale` pixels per point."""

    def __init__(self, scale: float = 1.0, font_path: str = "DejaVuSans.ttf", bold_font_path: str = "DejaVuSans-Bold.ttf",
                 measurer: Optional[TextMeasurer] = None):
        self.scale = scale
        self.measurer = measurer or TextMeasurer()
        self.font_path = font_path
        self.bold_font_path = bold_font_path
        self._fonts: Dict[Tuple[bool, int], ImageFont.FreeTypeFont] = {}

    def _font(self, size: float, bold: bool, px: Optional[int] = None):
        px = px or max(1, round(size * self.scale))
        key = (bold, px)
        if key not in self._fonts:
            try:
                self._fonts[key] = ImageFont.truetype(self.bold_font_path if bold else self.font_path, px)
            except OSError:
                self._fonts[key] = ImageFont.load_default(size=px)
        return self._fonts[key]

    def _text_font(self, text: str, size: float, bold: bool):
        """Preview font for a line, never wider than the line measures in the PDF."""
        font = self._font(size, bold)
        target = self.measurer.width(text, size, bold) * self.scale
        px = font.size
        while px > 1 and font.getlength(text) > target:
            px -= 1
            font = self._font(size, bold, px)
        return font

    def _px(self, value: float) -> int:
        return round(value * self.scale)

    def render(self, page: Page, page_size: PageSize) -> Image.Image:
        canvas_size = (self._px(page_size.width), self._px(page_size.height))
        canvas = Image.new('RGB', canvas_size, (255, 255, 255))
        draw = ImageDraw.Draw(canvas)

        for instruction in page.instructions:
            if isinstance(instruction, FillBackground):
                draw.rectangle([0, 0, canvas_size[0], canvas_size[1]], fill=instruction.color.rgb)

            elif isinstance(instruction, DrawLine):
                draw.line(
                    [self._px(instruction.x1), self._px(instruction.y1),
                     self._px(instruction.x2), self._px(instruction.y2)],
                    fill=instruction.color.rgb,
                    width=max(1, self._px(instruction.width)),
                )

            elif isinstance(instruction, DrawText):
                draw.text(
                    (self._px(instruction.x), self._px(instruction.y)),
                    instruction.text,
                    fill=instruction.color.rgb,
                    font=self._text_font(instruction.text, instruction.font_size, instruction.bold),
                    anchor=_ANCHORS.get(instruction.align, "ls"),
                )

            elif isinstance(instruction, DrawImage):
                size = (max(1, self._px(instruction.width)), max(1, self._px(instruction.height)))
                scaled = instruction.image.convert('RGBA').resize(size, Image.Resampling.LANCZOS)
                canvas.paste(scaled, (self._px(instruction.x), self._px(instruction.y)), scaled)

        logger.debug(f"Rendered {page.kind} page preview at {canvas_size}")
        return canvas
