"""Application configuration module."""

import os
from datetime import timedelta


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def normalize_database_url(url: str) -> str:
    """Rewrite legacy ``postgres://`` URLs to the SQLAlchemy dialect name."""

    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def database_url_from_env() -> str:
    """Build the database URL from ``DATABASE_URL`` or the libpq ``PG*`` variables."""

    url = os.getenv("DATABASE_URL")
    if url:
        return normalize_database_url(url)

    host = os.getenv("PGHOST")
    if not host:
        return "sqlite:///app.db"

    user = os.getenv("PGUSER", "")
    password = os.getenv("PGPASSWORD", "")
    credentials = user
    if password:
        credentials = f"{user}:{password}"
    if credentials:
        credentials += "@"
    port = os.getenv("PGPORT", "5432")
    database = os.getenv("PGDATABASE", "")
    return f"postgresql://{credentials}{host}:{port}/{database}"


def parse_origins(raw: str):
    if raw.strip() == "*":
        return "*"
    return [o.strip() for o in raw.split(",") if o.strip()]


class Config:
    """Base configuration for the Flask application."""

    # Core
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET") or os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=int(os.getenv("JWT_EXPIRES_DAYS", "7")))
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024

    # Database
    DATABASE_URL = database_url_from_env()
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
    DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
    DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))

    # CORS
    CORS_ORIGINS = parse_origins(
        os.getenv("FRONTEND_URL") or os.getenv("ORIGINS", "http://localhost:5173")
    )

    # Single-page frontend served for non-API paths
    STATIC_DIR = os.getenv("STATIC_DIR", "public")

    # Accounts
    DEFAULT_USER_ROLE = os.getenv("DEFAULT_USER_ROLE", "admin")

    # Logging / errors
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    EXPOSE_ERROR_DETAILS = _env_flag("EXPOSE_ERROR_DETAILS")
