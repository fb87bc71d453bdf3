"""Application factory for the livestock marketplace API."""

from __future__ import annotations

from flask import Flask

from market.core.config import BaseConfig, get_config
from market.core.logger import configure_logging


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build the marketplace application.

    Initialization order matters: extensions first (the signing-key check
    aborts startup before anything is served), then request logging, CORS,
    the versioned API, error handlers and finally the CLI commands.

    :param config: Config object/class, an import path, or ``None`` to pick
        one from ``APP_ENV``.
    :raises MissingSigningKeyError: When ``JWT_SECRET_KEY`` is absent.
    """
    app = Flask(__name__, instance_relative_config=instance_relative_config)
    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from market import cli
    from market.api import init_app as init_api
    from market.core import cors, errors, extensions
    from market.core.logger import init_app as init_logging

    for init in (
        extensions.init_app,
        init_logging,
        cors.init_app,
        init_api,
        errors.init_app,
        cli.init_app,
    ):
        init(app)

    return app
