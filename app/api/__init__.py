"""GraphQL API definition: type definitions and resolvers."""
from app.api.schema import schema, format_error

__all__ = ["schema", "format_error"]
