"""
Tests for configuration loading.
"""

import pytest
from pathlib import Path

from catalog.config import AppConfig, load_config, load_yaml_config
from catalog.models import GridSpec, PageSize


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('FLASK_ENV', 'LOG_LEVEL', 'LOG_FILE', 'SECRET_KEY', 'CURRENCY_SYMBOL'):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:

    def test_missing_yaml_file(self, tmp_path):
        assert load_yaml_config(str(tmp_path / 'nope.yaml')) == {}

    def test_defaults_without_files(self, tmp_path):
        config = load_config('development', config_dir=str(tmp_path))

        assert config.GRID_ROWS == 2
        assert config.GRID_COLS == 2
        assert config.GRID_MARGIN == 40
        assert config.CURRENCY_SYMBOL == "₹"
        assert config.OUTPUT_FILENAME == "product-catalog.pdf"
        assert config.DEBUG is True

    def test_environment_file_overrides_base(self, tmp_path):
        (tmp_path / 'settings.yaml').write_text("GRID_MARGIN: 30\nLOG_LEVEL: INFO\n", encoding='utf-8')
        (tmp_path / 'settings_production.yaml').write_text("LOG_LEVEL: WARNING\n", encoding='utf-8')

        config = load_config('production', config_dir=str(tmp_path))

        assert config.GRID_MARGIN == 30
        assert config.LOG_LEVEL == 'WARNING'
        assert config.DEBUG is False

    def test_environment_variables_win(self, tmp_path, monkeypatch):
        (tmp_path / 'settings.yaml').write_text("CURRENCY_SYMBOL: '€'\n", encoding='utf-8')
        monkeypatch.setenv('CURRENCY_SYMBOL', '$')

        assert load_config('development', config_dir=str(tmp_path)).CURRENCY_SYMBOL == '$'

    def test_invalid_values_fall_back_to_defaults(self, tmp_path):
        (tmp_path / 'settings.yaml').write_text("GRID_ROWS: lots\nGRID_MARGIN: 12\n", encoding='utf-8')

        config = load_config('development', config_dir=str(tmp_path))
        assert config.GRID_ROWS == 2
        assert config.GRID_MARGIN == 40

    def test_repository_settings_file(self):
        config = load_config('development', config_dir=str(Path(__file__).parent.parent / 'config'))
        assert config.PAGE_WIDTH == pytest.approx(595.28)
        assert config.SAMPLE_SIZE == 40


class TestAppConfig:

    def test_page_size_and_grid(self):
        config = AppConfig(PAGE_WIDTH=595, PAGE_HEIGHT=842, GRID_MARGIN=40)

        assert config.page_size() == PageSize(595, 842)
        assert config.grid_spec() == GridSpec(rows=2, cols=2, margin=40)
