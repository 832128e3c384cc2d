from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from .config import Settings
from .routes import api_bp, health_bp
from .services import MessageStore


def create_app(settings: Optional[Settings] = None, store: Optional[MessageStore] = None) -> Flask:
    """Build the Flask application.

    Args:
        settings: Server settings; read from the environment when omitted.
        store: Message store to serve; a fresh empty one when omitted.
    """
    settings = settings or Settings.from_env()

    app = Flask(__name__)
    app.config.from_mapping(settings.to_flask_config())
    level = logging.getLevelName(settings.log_level)
    app.logger.setLevel(level if isinstance(level, int) else logging.INFO)

    CORS(
        app,
        origins=[origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()],
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
        send_wildcard=True,
    )

    app.extensions["message_store"] = store if store is not None else MessageStore()

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(health_bp)

    return app


__all__ = ["create_app", "MessageStore", "Settings"]
