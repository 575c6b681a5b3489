"""Views module - exports all blueprints."""
from app.views.graphql import graphql_blueprint
from app.views.health import health_blueprint

__all__ = ["graphql_blueprint", "health_blueprint"]
