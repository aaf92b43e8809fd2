"""Flask application factory for the paracase HTTP service."""

import logging
from typing import Optional

from flask import Flask

from ..core.config import ServerConfig
from .routes import transform_router

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServerConfig] = None) -> Flask:
    """
    Build the Flask app with the transform routes registered.

    Args:
        config: Server settings (defaults are used when omitted)

    Returns:
        The configured Flask application
    """
    config = config or ServerConfig()

    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = config.max_content_length
    app.config['SERVER_CONFIG'] = config

    app.register_blueprint(transform_router)

    logger.debug(f"Created app with routes: {', '.join(str(rule) for rule in app.url_map.iter_rules())}")
    return app


def run_server(config: ServerConfig) -> None:
    """Run the development server until interrupted."""
    app = create_app(config)
    logger.info(f"Serving on http://{config.host}:{config.port}")

    # use_reloader=False keeps the app from being created twice
    app.run(
        host=config.host,
        port=config.port,
        debug=config.debug,
        use_reloader=False,
    )
