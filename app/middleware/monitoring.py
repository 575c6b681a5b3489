"""Monitoring and metrics middleware using Prometheus."""
import logging
import time
from functools import wraps
from typing import Callable
from flask import Flask
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

logger = logging.getLogger(__name__)

# Prometheus metrics
graphql_requests_total = Counter(
    'flightdesk_graphql_requests_total',
    'Total number of GraphQL requests',
    ['operation', 'status']
)

graphql_request_duration = Histogram(
    'flightdesk_graphql_request_duration_seconds',
    'Time spent executing GraphQL requests',
    ['operation'],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)

bookings_created_total = Counter(
    'flightdesk_bookings_created_total',
    'Total number of bookings created'
)

bookings_cancelled_total = Counter(
    'flightdesk_bookings_cancelled_total',
    'Total number of bookings moved to CANCELLED'
)

accounts_registered_total = Counter(
    'flightdesk_accounts_registered_total',
    'Total number of accounts registered'
)


def register_metrics_middleware(app: Flask) -> None:
    """
    Register the Prometheus metrics endpoint.
    
    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS"):
        return
    
    @app.route('/metrics')
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}
    
    logger.info("Prometheus metrics enabled at /metrics")


def track_graphql_request(f: Callable) -> Callable:
    """
    Decorator to track GraphQL request metrics.
    
    The wrapped view must return ``(response, status_code, operation)``;
    the decorator strips the operation before returning to Flask.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        try:
            response, status_code, operation = f(*args, **kwargs)
        except Exception:
            graphql_requests_total.labels(operation="unknown", status=500).inc()
            raise
        
        graphql_requests_total.labels(operation=operation, status=status_code).inc()
        graphql_request_duration.labels(operation=operation).observe(time.time() - start_time)
        return response, status_code
    
    return wrapper


def track_booking_created(_booking) -> None:
    bookings_created_total.inc()


def track_booking_cancelled(_booking) -> None:
    bookings_cancelled_total.inc()


def track_account_registered(_account) -> None:
    accounts_registered_total.inc()
