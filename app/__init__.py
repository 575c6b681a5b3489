"""Flask application factory for the flight search and booking API."""
import logging
import sys
from flask import Flask, jsonify
from flask_cors import CORS

from app.config.settings import Config, get_config
from app.infrastructure.service_container import ServiceContainer
from app.middleware.rate_limiter import create_rate_limiter
from app.middleware.monitoring import register_metrics_middleware
from app.middleware.error_handler import init_error_handlers
from app.views import graphql_blueprint, health_blueprint


def create_app(config_class=None, container: ServiceContainer = None) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    Args:
        config_class: Optional configuration class (for testing)
        container: Optional pre-built service container (for testing)

    Returns:
        Configured Flask application
    """
    _logger = logging.getLogger(__name__)

    config = config_class or get_config()

    # Configure logging FIRST (needed for all subsequent operations)
    _configure_logging(config)

    try:
        app = Flask(__name__)
        app.config.from_object(config)

        app.register_blueprint(graphql_blueprint)
        app.register_blueprint(health_blueprint)

        @app.route("/", methods=["GET"])
        def root():
            """Root endpoint for testing."""
            return jsonify({
                "status": "ok",
                "service": "flight-search-api",
                "graphql": "/graphql"
            }), 200

        # Validate configuration (startup continues so health checks can report it)
        try:
            config.validate()
        except ValueError as e:
            _logger.warning(f"Configuration validation warning: {e}")

        _initialize_middleware(app, config)

        # Services hold the in-memory ledger and directory for the app's lifetime
        container = container or ServiceContainer(config)
        app.config['service_container'] = container
        try:
            container.initialize()
        except (OSError, ValueError) as e:
            _logger.critical(f"Service initialization failed: {e}", exc_info=True)
            _logger.warning("Catalog will be loaded again on first request")

        _logger.info(f"App routes registered: {[str(rule) for rule in app.url_map.iter_rules()]}")

    except Exception as e:
        _logger.critical(f"Failed to create Flask application: {e}", exc_info=True)
        raise

    _logger.info("=== Flask app factory completed successfully ===")
    return app


def _configure_logging(config: type[Config]) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )


def _initialize_middleware(app: Flask, config: type[Config]) -> None:
    """
    Initialize middleware (CORS, rate limiting, monitoring, error handling).

    Args:
        app: Flask application instance
        config: Configuration class
    """
    CORS(app, origins=config.CORS_ORIGINS, supports_credentials=True)

    limiter = create_rate_limiter(app)
    app.extensions['flightdesk_limiter'] = limiter

    register_metrics_middleware(app)

    init_error_handlers(app)
