"""
Product Catalog Builder - Flask Application Factory
Turns a company logo and product list into a downloadable catalog PDF
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional
from flask import Flask
from loguru import logger
from dotenv import load_dotenv

from .config import AppConfig, load_config
from .builder import CatalogBuilder
from .render import PdfRenderer
from .preview import PreviewRenderer
from .text import TextMeasurer


def create_app(config_name: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
    """Flask application factory"""

    load_dotenv()

    app = Flask(__name__)

    environment = config_name or os.getenv('FLASK_ENV', 'development')
    config = load_config(environment)
    if overrides:
        known = {k: v for k, v in overrides.items() if k in AppConfig.model_fields}
        config = AppConfig(**{**config.model_dump(), **known})

    app.config.update(config.model_dump())
    if overrides:
        app.config.update(overrides)

    setup_logging(app)

    app.extensions['catalog'] = {
        'config': config,
        'builder': CatalogBuilder(config),
        'renderer': PdfRenderer(config.FONT_REGULAR, config.FONT_BOLD),
        'preview': PreviewRenderer(
            config.PREVIEW_SCALE,
            measurer=TextMeasurer(config.FONT_REGULAR, config.FONT_BOLD),
        ),
    }

    from . import routes
    app.register_blueprint(routes.bp)

    logger.info(f"Product Catalog Builder initialized in {environment} mode")

    return app


def setup_logging(app):
    """Configure loguru logging"""
    log_level = app.config.get('LOG_LEVEL', 'INFO')
    log_file = app.config.get('LOG_FILE', 'logs/app.log')

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        rotation="1 day",
        retention="30 days",
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}"
    )
