import logging

from app import create_app
from config import TestConfig, _is_production, _normalize_database_url


def test_postgres_urls_use_psycopg2():
    assert _normalize_database_url('postgres://u:p@h/db') == 'postgresql+psycopg2://u:p@h/db'
    assert _normalize_database_url(' postgresql://u:p@h/db ') == 'postgresql+psycopg2://u:p@h/db'
    assert _normalize_database_url('sqlite:///x.db') == 'sqlite:///x.db'
    assert _normalize_database_url('  ') is None
    assert _normalize_database_url(None) is None


def test_production_detection():
    assert _is_production({'FLASK_ENV': 'production'})
    assert _is_production({'RENDER': 'true'})
    assert _is_production({'RAILWAY_ENVIRONMENT': 'production'})
    assert not _is_production({'RENDER': 'false'})
    assert not _is_production({})


def test_log_level_applies_to_app_logger():
    class QuietConfig(TestConfig):
        LOG_LEVEL = 'WARNING'

    app = create_app(QuietConfig)
    assert app.logger.level == logging.WARNING
