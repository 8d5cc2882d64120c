"""
Configuration for the MyVoice974 OTP Flask app.
Production (Railway/Render): uses DATABASE_URL only; fails if missing.
Local: DATABASE_URL, DB_* parts, or a SQLite file under instance/.
"""
import os
from pathlib import Path
from urllib.parse import quote_plus

BASE_DIR = Path(__file__).parent
INSTANCE_DIR = BASE_DIR / "instance"


def _is_production(env=None):
    """Hosted deploys (Render, Railway) or an explicit FLASK_ENV=production."""
    env = os.environ if env is None else env
    if env.get("FLASK_ENV") == "production":
        return True
    return env.get("RENDER") == "true" or "RAILWAY_ENVIRONMENT" in env


# Scheme aliases that must run on the psycopg2 driver
_PG_SCHEMES = ("postgres://", "postgresql://")


def _normalize_database_url(url):
    url = (url or "").strip()
    for scheme in _PG_SCHEMES:
        if url.startswith(scheme):
            return "postgresql+psycopg2://" + url[len(scheme):]
    return url or None


def _get_database_uri():
    """Database URI: production = DATABASE_URL only; local = DATABASE_URL, DB_* or SQLite."""
    url = _normalize_database_url(os.environ.get("DATABASE_URL"))
    if url:
        return url
    if _is_production():
        raise RuntimeError(
            "DATABASE_URL is required in production (Railway/Render). "
            "Set it in your service environment variables."
        )

    host = os.environ.get("DB_HOST")
    if host:
        port = os.environ.get("DB_PORT", "5432")
        name = os.environ.get("DB_NAME", "myvoice974")
        user = os.environ.get("DB_USER", "myvoice974")
        password = quote_plus(os.environ.get("DB_PASSWORD", ""))
        return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}"

    try:
        INSTANCE_DIR.mkdir(exist_ok=True)
    except OSError:
        pass
    return f"sqlite:///{INSTANCE_DIR / 'myvoice974.db'}"


def _env_flag(name, default):
    return os.environ.get(name, default).lower() in ("true", "on", "1")


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key-change-in-production"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    SQLALCHEMY_DATABASE_URI = _get_database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Gmail by default; EMAIL_USER/EMAIL_PASS kept for older deployments
    MAIL_SERVER = os.environ.get("MAIL_SERVER") or "smtp.gmail.com"
    MAIL_PORT = int(os.environ.get("MAIL_PORT") or 587)
    MAIL_USE_TLS = _env_flag("MAIL_USE_TLS", "true")
    MAIL_USE_SSL = _env_flag("MAIL_USE_SSL", "false")
    MAIL_USERNAME = os.environ.get("MAIL_USERNAME") or os.environ.get("EMAIL_USER")
    MAIL_PASSWORD = os.environ.get("MAIL_PASSWORD") or os.environ.get("EMAIL_PASS")
    MAIL_DEFAULT_SENDER = os.environ.get("MAIL_DEFAULT_SENDER") or MAIL_USERNAME or "noreply@myvoice974.re"


class TestConfig(Config):
    """In-memory SQLite, mail suppressed."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    MAIL_USERNAME = None
    MAIL_PASSWORD = None
    MAIL_DEFAULT_SENDER = "noreply@myvoice974.re"
    LOG_LEVEL = "DEBUG"
