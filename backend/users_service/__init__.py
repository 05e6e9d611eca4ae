"""Application factory and blueprint registration."""
from __future__ import annotations

import sys

from flask import Flask
from flask_cors import CORS
from loguru import logger

from .config import BaseConfig
from .db.session import db
from .api.health.routes import bp as health_bp
from .api.users.routes import bp as users_bp
from .docs.routes import bp as docs_bp
from .errors import register_error_handlers


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def create_app(config_class: type[BaseConfig] | BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application."""
    config = config_class() if isinstance(config_class, type) else (config_class or BaseConfig())

    app = Flask(__name__)
    app.config.from_object(config)
    _configure_logging(app.config["LOG_LEVEL"])
    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    # Init extensions
    db.init_app(app)

    # Register blueprints
    app.register_blueprint(health_bp, url_prefix="/api/health")
    app.register_blueprint(users_bp, url_prefix="/api/users")
    app.register_blueprint(docs_bp)

    # Global error handlers
    register_error_handlers(app)
    return app
