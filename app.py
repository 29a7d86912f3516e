"""Application factory."""

import logging
import os
import time
import uuid
from pathlib import Path

from flask import Flask, g, jsonify, request, send_from_directory
from flask_cors import CORS
from flask_migrate import Migrate
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, NotFound

from config import Config
from models import db
from routes.auth import auth_bp
from routes.products import products_bp
from routes.users import users_bp
from utils.errors import error_code_for
from utils.responses import error_payload, utc_timestamp
from utils.tokens import jwt

migrate = Migrate()


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Core subsystems
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = _engine_options(app)
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # CORS
    CORS(
        app,
        resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
        supports_credentials=True,
    )

    # Blueprints
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(users_bp, url_prefix="/api/users")
    app.register_blueprint(products_bp, url_prefix="/api/products")

    # Health
    @app.route("/api/health", methods=["GET"])
    def health_check():
        try:
            db.session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            db.session.rollback()
            app.logger.warning("Health check failed: %s", exc)
            payload = {
                "status": "error",
                "timestamp": utc_timestamp(),
                "database": "disconnected",
                "error": str(exc.__cause__ or exc),
            }
            return jsonify(payload), 500
        return jsonify(
            {"status": "ok", "timestamp": utc_timestamp(), "database": "connected"}
        )

    _register_request_hooks(app)
    _register_error_handlers(app)
    _register_spa_fallback(app)

    return app


def _engine_options(app: Flask) -> dict:
    """Connection pool settings; SQLite keeps the driver defaults."""

    options = dict(app.config.get("SQLALCHEMY_ENGINE_OPTIONS") or {})
    options.setdefault("pool_pre_ping", True)
    uri = app.config.get("SQLALCHEMY_DATABASE_URI") or ""
    if not uri.startswith("sqlite"):
        options.setdefault("pool_size", app.config.get("DB_POOL_SIZE", 5))
        options.setdefault("max_overflow", app.config.get("DB_MAX_OVERFLOW", 10))
        options.setdefault("pool_timeout", app.config.get("DB_POOL_TIMEOUT", 30))
    return options


def _register_request_hooks(app: Flask) -> None:
    """Assign request IDs and log every completed request."""

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        request_id = g.get("request_id")
        if request_id:
            response.headers.setdefault("X-Request-ID", request_id)
        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        app.logger.info(
            "%s %s %s - %.1f ms [%s]",
            request.method,
            request.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response


def _register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers producing the error envelope."""

    @app.errorhandler(HTTPException)
    def _handle_http_exception(error: HTTPException):
        request_id = g.get("request_id") or str(uuid.uuid4())
        payload = error_payload(
            error.description or getattr(error, "name", "Error"),
            error_code_for(error),
            getattr(error, "details", None),
            request_id,
        )
        response = jsonify(payload)
        response.status_code = error.code or 500
        for header, value in error.get_headers():
            if header.lower() != "content-type":
                response.headers.setdefault(header, value)
        response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):
        request_id = g.get("request_id") or str(uuid.uuid4())
        if isinstance(error, SQLAlchemyError):
            db.session.rollback()
        app.logger.exception("Unhandled application error", exc_info=error)
        details = None
        if app.config.get("EXPOSE_ERROR_DETAILS"):
            details = {"name": type(error).__name__, "message": str(error)}
        payload = error_payload(
            "Internal server error",
            "INTERNAL_SERVER_ERROR",
            details,
            request_id,
        )
        response = jsonify(payload)
        response.status_code = 500
        response.headers.setdefault("X-Request-ID", request_id)
        return response


def _register_spa_fallback(app: Flask) -> None:
    """Serve the frontend bundle for every non-API GET path."""

    @app.route("/", defaults={"path": ""}, methods=["GET"])
    @app.route("/<path:path>", methods=["GET"])
    def spa_fallback(path: str):
        if path == "api" or path.startswith("api/"):
            raise NotFound("The requested API endpoint does not exist.")

        static_dir = app.config.get("STATIC_DIR")
        if not static_dir:
            raise NotFound()
        root = Path(static_dir).resolve()
        if path and (root / path).is_file():
            return send_from_directory(root, path)
        if (root / "index.html").is_file():
            return send_from_directory(root, "index.html")
        raise NotFound()


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    application = create_app()
    application.run(host="0.0.0.0", port=int(os.environ.get("PORT", 3000)))
