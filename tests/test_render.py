"""
Tests for PDF and raster preview rendering.
"""

import re
import pytest
from PIL import Image

from catalog.builder import CatalogBuilder
from catalog.errors import RenderError
from catalog.models import Catalog, DARK_TEAL, Page, PageSize, FillBackground, DrawImage
from catalog.preview import PreviewRenderer
from catalog.render import PdfRenderer
from catalog.text import TextMeasurer
from tests.conftest import make_image


def pdf_page_count(data: bytes) -> int:
    return len(re.findall(rb'/Type /Page[^s]', data))


@pytest.fixture
def catalog(test_config, sample_request):
    return CatalogBuilder(test_config).build(sample_request)


class TestPdfRenderer:

    def test_renders_pdf_bytes(self, catalog):
        data = PdfRenderer().render(catalog)
        assert data.startswith(b'%PDF')

    def test_one_pdf_page_per_catalog_page(self, catalog):
        data = PdfRenderer().render(catalog)
        assert pdf_page_count(data) == catalog.page_count == 3

    def test_transparent_and_palette_images(self, a4):
        logo = Image.new('RGBA', (60, 60), (255, 0, 0, 128))
        palette = make_image((0, 128, 0)).convert('P')
        page = Page(kind="cover", instructions=(
            FillBackground(DARK_TEAL),
            DrawImage(logo, 10, 10, 100, 100),
            DrawImage(palette, 200, 10, 50, 50),
        ))
        data = PdfRenderer().render(Catalog(DARK_TEAL, a4, (page,)))
        assert pdf_page_count(data) == 1

    def test_unknown_instruction(self, a4):
        page = Page(kind="cover", instructions=(FillBackground(DARK_TEAL), object()))
        with pytest.raises(RenderError):
            PdfRenderer().render(Catalog(DARK_TEAL, a4, (page,)))


class TestPreviewRenderer:

    def test_canvas_matches_page_size(self, catalog):
        image = PreviewRenderer().render(catalog.pages[0], PageSize(595, 842))
        assert image.size == (595, 842)
        assert image.mode == 'RGB'

    def test_scale(self, catalog):
        image = PreviewRenderer(scale=0.5).render(catalog.pages[1], catalog.page_size)
        assert image.size == (298, 421)

    def test_background_fill(self, catalog):
        image = PreviewRenderer().render(catalog.pages[1], catalog.page_size)
        assert image.getpixel((2, 2)) == DARK_TEAL.rgb

    def test_text_fits_pdf_width(self):
        renderer = PreviewRenderer(scale=2.0)
        measurer = TextMeasurer()
        text = "Wide Worldwide Wholesale Widgets MMMM WWWW"

        for bold in (False, True):
            font = renderer._text_font(text, 10, bold)
            assert font.getlength(text) <= measurer.width(text, 10, bold) * 2.0

    def test_images_are_pasted(self, a4):
        page = Page(kind="products", instructions=(
            FillBackground(DARK_TEAL),
            DrawImage(make_image((255, 0, 0), (10, 40)), 100, 100, 50, 50),
        ))
        image = PreviewRenderer().render(page, a4)
        assert image.getpixel((125, 125)) == (255, 0, 0)
        assert image.getpixel((90, 90)) == DARK_TEAL.rgb
