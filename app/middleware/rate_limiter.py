"""Rate limiting middleware using Flask-Limiter."""
import logging
from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

logger = logging.getLogger(__name__)


def _default_limits(app: Flask) -> list:
    raw = app.config.get("RATELIMIT_DEFAULT", "1000 per hour;100 per minute")
    return [limit.strip() for limit in raw.split(";") if limit.strip()]


def create_rate_limiter(app: Flask) -> Limiter:
    """
    Create and configure Flask-Limiter instance.
    
    Limits are keyed by client address. Storage is in-process unless
    ``RATELIMIT_STORAGE_URL`` points at Redis.
    
    Args:
        app: Flask application instance
        
    Returns:
        Configured Limiter instance
    """
    if not app.config.get("RATELIMIT_ENABLED", True):
        # No-op limiter if rate limiting is disabled
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=[],
            storage_uri="memory://",
            enabled=False,
        )
    
    storage_uri = app.config.get("RATELIMIT_STORAGE_URL", "memory://")
    try:
        limiter = Limiter(
            get_remote_address,
            app=app,
            default_limits=_default_limits(app),
            storage_uri=storage_uri,
            strategy="fixed-window",
            headers_enabled=True,
        )
        logger.info(f"Rate limiting enabled ({storage_uri.split('://', 1)[0]} storage)")
        return limiter
    except Exception as e:
        logger.warning(f"Failed to initialize rate limiter with {storage_uri}: {e}, using memory storage")
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=_default_limits(app),
            storage_uri="memory://",
        )
