"""
Catalog build pipeline.

Validate -> sample background -> cover -> flatten -> paginate -> compose.
Either every page is produced or an error is raised before any layout runs.
"""

from typing import List, Optional
from loguru import logger

from .color import ColorSampler
from .config import AppConfig, get_config
from .errors import MissingCompanyNameError, MissingLogoError
from .flatten import flatten, validate_products
from .grid import GridPaginator
from .layout import PageComposer
from .models import Catalog, CatalogRequest, DrawInstruction, Page
from .text import TextMeasurer


class CatalogBuilder:
    """Builds the ordered page list for one catalog request."""

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or get_config()
        self.page_size = self.config.page_size()
        self.grid = self.config.grid_spec()
        self.sampler = ColorSampler(self.config.SAMPLE_SIZE, self.config.BRIGHTNESS_THRESHOLD)
        self.paginator = GridPaginator(self.page_size, self.grid)
        self.composer = PageComposer(
            TextMeasurer(self.config.FONT_REGULAR, self.config.FONT_BOLD),
            currency_symbol=self.config.CURRENCY_SYMBOL,
        )

    def validate(self, request: CatalogRequest) -> None:
        if request.logo is None:
            raise MissingLogoError()
        if not (request.company_name or "").strip():
            raise MissingCompanyNameError()
        validate_products(request.products)

    def build(self, request: CatalogRequest) -> Catalog:
        self.validate(request)

        background = self.sampler.sample(request.logo)
        pages = [self.composer.cover(self.page_size, request.logo, request.company_name, background)]

        rows = flatten(request.products)
        current: List[DrawInstruction] = []
        for row, placement in zip(rows, self.paginator.paginate(rows)):
            if placement.cell_index == 0:
                if current:
                    pages.append(Page(kind="products", instructions=tuple(current)))
                current = self.composer.page_frame(self.page_size, self.grid, background)
            current.extend(self.composer.cell(placement.box, row))
        if current:
            pages.append(Page(kind="products", instructions=tuple(current)))

        logger.info(
            f"Built catalog for '{request.company_name}': {len(rows)} entries on "
            f"{len(pages)} pages, background {background.hex}"
        )
        return Catalog(
            background=background,
            page_size=self.page_size,
            pages=tuple(pages),
            filename=self.config.OUTPUT_FILENAME,
        )
