"""Health check endpoints."""
import logging
from flask import Blueprint, current_app, jsonify

from app.infrastructure.redis_client import RedisClientFactory, is_redis_url

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)

SERVICE_NAME = "flight-search-api"


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """
    Basic health check endpoint.
    
    Returns:
        JSON response with health status
    """
    return jsonify({
        "status": "healthy",
        "service": SERVICE_NAME
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (checks dependencies).
    
    Returns:
        JSON response with readiness status
    """
    checks = {"catalog": False}
    
    container = current_app.config.get("service_container")
    if container is not None:
        try:
            container.get_flight_catalog()
            checks["catalog"] = True
        except (OSError, ValueError) as e:
            _logger.error(f"Catalog health check failed: {e}")
    
    storage_url = current_app.config.get("RATELIMIT_STORAGE_URL")
    if current_app.config.get("RATELIMIT_ENABLED") and is_redis_url(storage_url):
        checks["redis"] = RedisClientFactory.ping(storage_url)
    
    checks["overall"] = all(checks.values())
    status_code = 200 if checks["overall"] else 503
    
    return jsonify({
        "status": "ready" if checks["overall"] else "not_ready",
        "checks": checks
    }), status_code


@health_blueprint.route("/health/live", methods=["GET"])
def liveness_check():
    """
    Liveness check endpoint (for Kubernetes).
    
    Returns:
        JSON response with liveness status
    """
    return jsonify({
        "status": "alive",
        "service": SERVICE_NAME
    }), 200
