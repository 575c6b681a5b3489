"""Tests for the plain HTTP endpoints: root, health checks and error handlers."""
from prometheus_client import REGISTRY

from app import create_app
from app.config.settings import DevelopmentConfig, ProductionConfig, TestingConfig
from app.infrastructure.service_container import ServiceContainer


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.get_json()["graphql"] == "/graphql"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "healthy", "service": "flight-search-api"}


def test_liveness(client):
    assert client.get("/health/live").get_json()["status"] == "alive"


def test_readiness_with_catalog(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.get_json()["checks"] == {"catalog": True, "overall": True}


def test_readiness_without_catalog(config_class, tmp_path):
    broken = type("BrokenCatalogConfig", (config_class,), {"FLIGHTS_DATA_PATH": str(tmp_path / "missing.json")})
    app = create_app(broken, container=ServiceContainer(broken))

    response = app.test_client().get("/health/ready")

    assert response.status_code == 503
    assert response.get_json()["status"] == "not_ready"


def test_unknown_route_is_json_404(client):
    response = client.get("/nowhere")

    assert response.status_code == 404
    assert response.get_json()["message"] == "Resource not found"


def test_metrics_disabled_in_testing(client):
    assert client.get("/metrics").status_code == 404


def test_metrics_endpoint_when_enabled(config_class):
    enabled = type("MetricsConfig", (config_class,), {"ENABLE_METRICS": True})
    client = create_app(enabled).test_client()

    client.post("/graphql", json={"query": "{ airlines { id } }"})
    response = client.get("/metrics")

    assert response.status_code == 200
    assert b"flightdesk_graphql_requests_total" in response.data


def test_sentry_reports_the_configured_environment(config_class, monkeypatch):
    calls = []
    monkeypatch.setattr("sentry_sdk.init", lambda **kwargs: calls.append(kwargs))
    with_sentry = type("SentryConfig", (config_class,), {
        "SENTRY_DSN": "https://public@sentry.example.com/1",
        "FLASK_ENV": "development",
    })

    create_app(with_sentry)

    assert len(calls) == 1
    assert calls[0]["environment"] == "development"
    assert calls[0]["dsn"] == "https://public@sentry.example.com/1"


def test_each_config_names_its_environment():
    assert DevelopmentConfig.FLASK_ENV == "development"
    assert ProductionConfig.FLASK_ENV == "production"
    assert TestingConfig.FLASK_ENV == "testing"


def test_registration_and_cancellation_metrics(graphql):
    def sample(name):
        return REGISTRY.get_sample_value(name) or 0.0

    registered = sample("flightdesk_accounts_registered_total")
    cancelled = sample("flightdesk_bookings_cancelled_total")

    graphql("""
      mutation { register(name: "Ada Lovelace", email: "ada@example.com", password: "secret1") { token } }
    """)
    graphql("""
      mutation { register(name: "Ada Again", email: "ada@example.com", password: "secret1") { token } }
    """)
    booking_id = graphql("""
      mutation { bookFlight(flightId: "1", userId: "u1", passengers: 1, class: "economy",
                            departureDate: "2024-06-01") { id } }
    """)["data"]["bookFlight"]["id"]
    for _ in range(2):
        graphql("mutation ($id: ID!) { cancelBooking(bookingId: $id) { status } }", id=booking_id)

    assert sample("flightdesk_accounts_registered_total") == registered + 1
    assert sample("flightdesk_bookings_cancelled_total") == cancelled + 1
