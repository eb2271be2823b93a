# rentportal/__init__.py
from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, Optional

from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix

from .cli import register_cli
from .errors import register_error_handlers
from .extensions import cors, db, migrate
from .utils.notifications import LoggingNotifier

DEFAULT_CONFIG = "rentportal.config.Config"


# --- Config ------------------------------------------------------------------
def _get_allowed_origins(app: Flask) -> list[str]:
    """Allowed CORS origins; local frontend defaults plus CORS_ALLOWED_ORIGINS."""
    default = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    extra = app.config.get("CORS_ALLOWED_ORIGINS") or ""
    extra_list = [o.strip() for o in extra.split(",") if o.strip()]
    return sorted(set(default + extra_list))


def _load_config(app: Flask, config_object: Optional[str | Any]) -> None:
    if config_object is None:
        config_object = os.getenv("CONFIG_CLASS", DEFAULT_CONFIG)

    if isinstance(config_object, str):
        module, _, cls = config_object.rpartition(".")
        config_object = getattr(__import__(module, fromlist=[cls]), cls)

    validate = getattr(config_object, "validate", None)
    if callable(validate):
        validate()
    app.config.from_object(config_object)

    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///" + os.path.join(app.instance_path, "rentportal.db")


def _configure_logging(app: Flask) -> None:
    """JSON logs to stdout."""
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    app.logger.setLevel(level)
    root = logging.getLogger()
    root.setLevel(level)

    # avoid duplicate handlers in reloaders
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='{"ts":"%(asctime)s","level":"%(levelname)s","msg":"%(message)s","name":"%(name)s"}',
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)


def _configure_proxy(app: Flask) -> None:
    """Respect X-Forwarded-* from the reverse proxy."""
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)  # type: ignore


def _init_extensions(app: Flask) -> None:
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={app.config["API_PREFIX"] + "/*": {"origins": _get_allowed_origins(app)}},
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
        max_age=86400,
    )
    app.extensions.setdefault("notifier", LoggingNotifier())


def _register_blueprints(app: Flask) -> None:
    """Register all API blueprints under API_PREFIX."""
    from .routes import applications_bp, auth_bp

    for bp in (auth_bp, applications_bp):
        app.register_blueprint(bp, url_prefix=app.config["API_PREFIX"])
        app.logger.debug("Registered blueprint %s at %s", bp.name, app.config["API_PREFIX"])


# --- Application Factory ------------------------------------------------------
def create_app(config_object: Optional[str | Any] = None, notifier=None) -> Flask:
    """
    Standard Flask application factory.

    `config_object` may be:
      - a config class
      - dotted path to a config class (e.g., "rentportal.config.ProductionConfig")
      - None (then CONFIG_CLASS env or rentportal.config.Config)

    `notifier` replaces the default logging-only ApplicationNotifier.
    """
    app = Flask(__name__, instance_relative_config=True)
    os.makedirs(app.instance_path, exist_ok=True)

    _load_config(app, config_object)
    app.json.sort_keys = False

    _configure_logging(app)
    _configure_proxy(app)

    if notifier is not None:
        app.extensions["notifier"] = notifier
    _init_extensions(app)
    _register_blueprints(app)
    register_cli(app)
    register_error_handlers(app)

    # Import models so metadata is complete for create_all/migrations
    from . import models  # noqa: F401

    @app.get(app.config["API_PREFIX"] + "/health")
    def health():
        return jsonify(
            {
                "success": True,
                "data": {
                    "status": "ok",
                    "time": datetime.utcnow().isoformat() + "Z",
                    "service": "rentportal-backend",
                },
            }
        ), 200

    return app
