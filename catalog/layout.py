"""
Layout engine module for Product Catalog Builder.

This module handles:
- The cover page (centered square logo, company name underneath)
- The background fill and quadrant divider lines of each product page
- Placing the name, image, price and wrapped description inside a grid cell
"""

from typing import List, Optional
from PIL import Image
from loguru import logger

from .models import (
    CellBox, Color, DrawImage, DrawInstruction, DrawLine, DrawText,
    FillBackground, GridSpec, Page, PageSize, ProductRow,
)
from .text import TextMeasurer, wrap_text


# Cover page
COVER_LOGO_RATIO = 0.5
COVER_LOGO_LIFT = 60
COVER_TITLE_GAP = 60
COVER_TITLE_SIZE = 36

# Product cell
NAME_SIZE = 14
NAME_BASELINE = 14
IMAGE_RATIO = 0.55
IMAGE_TOP = 24
PRICE_SIZE = 12
PRICE_GAP = 50
DESCRIPTION_SIZE = 10
DESCRIPTION_GAP = 70
DESCRIPTION_PADDING = 20
LINE_HEIGHT_FACTOR = 1.15


class PageComposer:
    """Turns cover data and product rows into draw instructions."""

    def __init__(self, measurer: Optional[TextMeasurer] = None, currency_symbol: str = "₹"):
        self.measurer = measurer or TextMeasurer()
        self.currency_symbol = currency_symbol

    def cover(self, page: PageSize, logo: Image.Image, title: str, background: Color) -> Page:
        """
        Cover page: background, logo, title.

        The logo is always drawn into a square half the page width, so logos
        that are not square get stretched.
        """
        logo_size = page.width * COVER_LOGO_RATIO
        logo_x = (page.width - logo_size) / 2
        logo_y = (page.height - logo_size) / 2 - COVER_LOGO_LIFT

        instructions = (
            FillBackground(background),
            DrawImage(logo, logo_x, logo_y, logo_size, logo_size),
            DrawText(
                title,
                page.width / 2,
                logo_y + logo_size + COVER_TITLE_GAP,
                COVER_TITLE_SIZE,
                bold=True,
            ),
        )
        logger.debug(f"Cover layout: logo {logo_size:.2f}pt at ({logo_x:.2f}, {logo_y:.2f})")
        return Page(kind="cover", instructions=instructions)

    def page_frame(self, page: PageSize, grid: GridSpec, background: Color) -> List[DrawInstruction]:
        """Background fill followed by the quadrant divider lines."""
        return [
            FillBackground(background),
            DrawLine(page.width / 2, grid.margin, page.width / 2, page.height - grid.margin),
            DrawLine(grid.margin, page.height / 2, page.width - grid.margin, page.height / 2),
        ]

    def price_label(self, price: str) -> str:
        return f"Price: {self.currency_symbol}{price}"

    def description_lines(self, description: str, box: CellBox) -> List[str]:
        if not description.strip():
            return []
        return wrap_text(
            description.strip(),
            box.width - DESCRIPTION_PADDING,
            self.measurer.measure_for(DESCRIPTION_SIZE),
        )

    def cell(self, box: CellBox, row: ProductRow) -> List[DrawInstruction]:
        """Name on top, square image below it, then price and description."""
        img_size = box.width * IMAGE_RATIO

        instructions: List[DrawInstruction] = [
            DrawText(row.name, box.center_x, box.y + NAME_BASELINE, NAME_SIZE, bold=True),
            DrawImage(row.image, box.x + (box.width - img_size) / 2, box.y + IMAGE_TOP, img_size, img_size),
            DrawText(self.price_label(row.price), box.center_x, box.y + img_size + PRICE_GAP, PRICE_SIZE),
        ]

        line_height = DESCRIPTION_SIZE * LINE_HEIGHT_FACTOR
        first_baseline = box.y + img_size + DESCRIPTION_GAP
        for i, line in enumerate(self.description_lines(row.description, box)):
            if not line:
                continue
            instructions.append(
                DrawText(line, box.center_x, first_baseline + i * line_height, DESCRIPTION_SIZE)
            )

        return instructions
