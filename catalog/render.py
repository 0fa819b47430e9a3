"""
PDF rendering for Product Catalog Builder.

Replays each page's draw instructions on a ReportLab canvas. Layout coordinates
use a top-left origin, ReportLab a bottom-left one, so every y value is flipped
against the page height here.
"""

import io
from typing import Dict
from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas
from loguru import logger

from .errors import RenderError
from .models import Catalog, DrawImage, DrawLine, DrawText, FillBackground, Page


class PdfRenderer:
    """Writes a built catalog to PDF bytes, one physical page per Page."""

    def __init__(self, regular_font: str = "Helvetica", bold_font: str = "Helvetica-Bold"):
        self.regular_font = regular_font
        self.bold_font = bold_font

    def render(self, catalog: Catalog) -> bytes:
        buffer = io.BytesIO()
        width, height = catalog.page_size.width, catalog.page_size.height
        pdf = canvas.Canvas(buffer, pagesize=(width, height))
        pdf.setTitle(catalog.filename)

        # Same image object appears on the cover and may repeat across rows
        readers: Dict[int, ImageReader] = {}

        try:
            for page in catalog.pages:
                self._draw_page(pdf, page, width, height, readers)
                pdf.showPage()
            pdf.save()
        except (OSError, ValueError, KeyError) as e:
            raise RenderError(
                f"Failed to render catalog PDF: {e}",
                details={'page_count': catalog.page_count}
            ) from e

        data = buffer.getvalue()
        logger.info(f"Rendered {catalog.page_count} pages to PDF ({len(data)} bytes)")
        return data

    def _reader(self, image: Image.Image, readers: Dict[int, ImageReader]) -> ImageReader:
        key = id(image)
        if key not in readers:
            if image.mode not in ('RGB', 'RGBA', 'L'):
                image = image.convert('RGBA')
            readers[key] = ImageReader(image)
        return readers[key]

    def _draw_page(self, pdf, page: Page, width: float, height: float, readers: Dict[int, ImageReader]):
        for instruction in page.instructions:
            if isinstance(instruction, FillBackground):
                pdf.setFillColorRGB(*(c / 255 for c in instruction.color.rgb))
                pdf.rect(0, 0, width, height, stroke=0, fill=1)

            elif isinstance(instruction, DrawLine):
                pdf.setStrokeColorRGB(*(c / 255 for c in instruction.color.rgb))
                pdf.setLineWidth(instruction.width)
                pdf.line(instruction.x1, height - instruction.y1, instruction.x2, height - instruction.y2)

            elif isinstance(instruction, DrawText):
                font = self.bold_font if instruction.bold else self.regular_font
                pdf.setFont(font, instruction.font_size)
                pdf.setFillColorRGB(*(c / 255 for c in instruction.color.rgb))
                y = height - instruction.y
                if instruction.align == "center":
                    pdf.drawCentredString(instruction.x, y, instruction.text)
                elif instruction.align == "right":
                    pdf.drawRightString(instruction.x, y, instruction.text)
                else:
                    pdf.drawString(instruction.x, y, instruction.text)

            elif isinstance(instruction, DrawImage):
                pdf.drawImage(
                    self._reader(instruction.image, readers),
                    instruction.x,
                    height - instruction.y - instruction.height,
                    width=instruction.width,
                    height=instruction.height,
                    mask='auto',
                )

            else:
                raise RenderError(f"Unknown draw instruction: {type(instruction).__name__}")
