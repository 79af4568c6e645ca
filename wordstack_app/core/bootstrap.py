"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging

from flask import Flask

from .error_handlers import register_error_handlers
from .extensions import cors, db, migrate
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure the ``wordstack_app`` logger, which is also ``app.logger``."""

    logger = setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
    )
    if app.debug:
        logger.setLevel(logging.DEBUG)
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, origins=app.config.get("CORS_ORIGINS", "*"))


def register_services(app: Flask, ai_client=None) -> None:
    """Construct the process-wide generation client (or install the injected one)."""

    from ..modules.AI.services.ai_manager import init_ai_service

    init_ai_service(app, client=ai_client)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)
    register_error_handlers(app)


def initialize_database(app: Flask) -> None:
    """Create database tables that do not exist yet."""

    from .. import models  # noqa: F401 - registers the mapped tables

    db.create_all()
    app.logger.info("Database tables are ready.")
