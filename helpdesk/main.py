# helpdesk/main.py
from __future__ import annotations

import logging

from flask import Flask
from flask_cors import CORS

from helpdesk.api.middlewares.error_handler import register_error_handlers
from helpdesk.api.routes import register_routes
from helpdesk.config.flask_config import configure_app
from helpdesk.config.logging_config import configure_logging
from helpdesk.config.settings import Settings, settings as default_settings
from helpdesk.infrastructure.database.base_model import BaseModel
from helpdesk.infrastructure.database.session import get_engine
from helpdesk.infrastructure.security.jwt_provider import JwtProvider

import helpdesk.infrastructure.database.models  # noqa: F401

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, *, jwt_provider: JwtProvider | None = None) -> Flask:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = Flask(__name__)

    CORS(
        app,
        resources={rf"{settings.api_prefix}/*": {"origins": settings.cors_origins}},
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    configure_app(app, settings)

    # the signing secret lives on this provider for the whole process
    app.extensions["settings"] = settings
    app.extensions["jwt_provider"] = jwt_provider or JwtProvider.from_settings(settings)

    register_routes(app, api_prefix=settings.api_prefix.rstrip("/"))
    register_error_handlers(app)

    @app.cli.command("init-db")
    def init_db():
        BaseModel.metadata.create_all(get_engine())
        logger.info("tables created")

    logger.info("helpdesk api ready env=%s prefix=%s", settings.environment, settings.api_prefix)
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000)
