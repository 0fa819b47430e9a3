"""
Configuration management for Product Catalog Builder
Loads settings from YAML files with environment variable overrides
"""

import os
import yaml
from pathlib import Path
from typing import Dict, List
from pydantic import BaseModel, Field
from loguru import logger

from .models import GridSpec, PageSize


class AppConfig(BaseModel):
    """Main application configuration"""

    # Flask settings
    SECRET_KEY: str = Field(default_factory=lambda: os.urandom(24).hex())
    FLASK_ENV: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"

    # Uploads
    MAX_UPLOAD_SIZE: int = 20 * 1024 * 1024  # 20MB per image
    ALLOWED_EXTENSIONS: List[str] = [".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp"]

    # Page geometry (points, A4)
    PAGE_WIDTH: float = 595.28
    PAGE_HEIGHT: float = 841.89
    GRID_ROWS: int = 2
    GRID_COLS: int = 2
    GRID_MARGIN: float = 40.0

    # Background color sampling
    SAMPLE_SIZE: int = 40
    BRIGHTNESS_THRESHOLD: float = 180.0

    # Text
    CURRENCY_SYMBOL: str = "₹"
    FONT_REGULAR: str = "Helvetica"
    FONT_BOLD: str = "Helvetica-Bold"

    # Output
    OUTPUT_FILENAME: str = "product-catalog.pdf"
    PREVIEW_SCALE: float = 1.0

    def page_size(self) -> PageSize:
        return PageSize(self.PAGE_WIDTH, self.PAGE_HEIGHT)

    def grid_spec(self) -> GridSpec:
        return GridSpec(rows=self.GRID_ROWS, cols=self.GRID_COLS, margin=self.GRID_MARGIN)


def load_yaml_config(file_path: str) -> Dict:
    """Load configuration from YAML file"""
    path = Path(file_path)
    if not path.exists():
        logger.warning(f"Config file not found: {file_path}")
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading config file {file_path}: {e}")
        return {}


def load_config(environment: str = "development", config_dir: str = "config") -> AppConfig:
    """Load configuration with environment-specific overrides"""

    base_config = load_yaml_config(f"{config_dir}/settings.yaml")
    env_config = load_yaml_config(f"{config_dir}/settings_{environment}.yaml")

    # env overrides base
    config_dict = {**base_config, **env_config}

    env_overrides = {
        'FLASK_ENV': os.getenv('FLASK_ENV', environment),
        'LOG_LEVEL': os.getenv('LOG_LEVEL'),
        'LOG_FILE': os.getenv('LOG_FILE'),
        'SECRET_KEY': os.getenv('SECRET_KEY'),
        'CURRENCY_SYMBOL': os.getenv('CURRENCY_SYMBOL'),
    }

    # Only include non-None values
    env_overrides = {k: v for k, v in env_overrides.items() if v is not None}
    config_dict.update(env_overrides)

    if 'FLASK_ENV' in config_dict:
        config_dict['DEBUG'] = config_dict['FLASK_ENV'] == 'development'

    try:
        return AppConfig(**config_dict)
    except ValueError as e:
        logger.error(f"Configuration validation error: {e}")
        return AppConfig()


_config_instance = None

def get_config() -> AppConfig:
    """Get the process-wide configuration instance"""
    global _config_instance
    if _config_instance is None:
        _config_instance = load_config(os.getenv('FLASK_ENV', 'development'))
    return _config_instance
