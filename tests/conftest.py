"""
Pytest configuration and fixtures for Product Catalog Builder tests.

Provides the Flask app and client, generated images, and sample
product inputs shared across the test modules.
"""

import io
import pytest
from PIL import Image, ImageDraw

from catalog import create_app
from catalog.config import AppConfig
from catalog.models import CatalogRequest, PageSize, GridSpec, ProductInput


@pytest.fixture(scope='session')
def app(tmp_path_factory):
    """Create and configure a test Flask application."""
    log_dir = tmp_path_factory.mktemp('logs')
    app = create_app('testing', overrides={
        'TESTING': True,
        'SECRET_KEY': 'test-key',
        'LOG_FILE': str(log_dir / 'test.log'),
        'LOG_LEVEL': 'DEBUG',
    })
    yield app


@pytest.fixture
def client(app):
    """Create a test client for the Flask application."""
    return app.test_client()


@pytest.fixture
def test_config():
    """Config with round A4 dimensions so geometry is easy to check."""
    return AppConfig(PAGE_WIDTH=595, PAGE_HEIGHT=842, GRID_ROWS=2, GRID_COLS=2, GRID_MARGIN=40)


@pytest.fixture
def a4():
    return PageSize(595, 842)


@pytest.fixture
def grid():
    return GridSpec(rows=2, cols=2, margin=40)


def make_image(color=(255, 255, 255), size=(80, 80), mode='RGB'):
    """Solid-color image helper."""
    return Image.new(mode, size, color)


def image_bytes(image, fmt='PNG'):
    buffer = io.BytesIO()
    image.save(buffer, fmt)
    return buffer.getvalue()


@pytest.fixture
def white_logo():
    return make_image((255, 255, 255), (120, 120))


@pytest.fixture
def black_logo():
    return make_image((0, 0, 0), (120, 120))


@pytest.fixture
def product_images():
    """Five distinguishable product photos."""
    images = []
    for i in range(5):
        img = make_image((40 * i, 100, 200 - 30 * i), (200, 300))
        draw = ImageDraw.Draw(img)
        draw.rectangle([20, 20, 60 + i * 10, 60], fill=(255, 255, 255))
        images.append(img)
    return images


@pytest.fixture
def sample_products(product_images):
    """Three products, five images in total."""
    return [
        ProductInput(
            name="Ceramic Mug",
            images=(product_images[0], product_images[1]),
            price="599",
            description="Hand glazed stoneware mug, dishwasher safe.",
        ),
        ProductInput(
            name="Linen Tote",
            images=(product_images[2],),
            price="1,299.00",
        ),
        ProductInput(
            name="Brass Lamp",
            images=(product_images[3], product_images[4]),
            price="4999",
            description="   ",
        ),
    ]


@pytest.fixture
def sample_request(white_logo, sample_products):
    return CatalogRequest(logo=white_logo, company_name="Acme Goods", products=tuple(sample_products))


@pytest.fixture
def upload_form():
    """Multipart form data for the upload endpoints."""
    def _build(**extra):
        data = {
            'logo': (io.BytesIO(image_bytes(make_image((250, 250, 250)))), 'logo.png'),
            'company_name': 'Acme Goods',
            'products-0-name': 'Ceramic Mug',
            'products-0-price': '599',
            'products-0-description': 'Hand glazed stoneware mug.',
            'products-0-images': [
                (io.BytesIO(image_bytes(make_image((200, 10, 10)))), 'mug-red.png'),
                (io.BytesIO(image_bytes(make_image((10, 10, 200)), 'JPEG')), 'mug-blue.jpg'),
            ],
            'products-1-name': 'Linen Tote',
            'products-1-price': '1299',
            'products-1-images': [
                (io.BytesIO(image_bytes(make_image((230, 220, 200)))), 'tote.png'),
            ],
        }
        data.update(extra)
        return data
    return _build
