"""GraphQL endpoint and explorer."""
import logging
import re
from typing import Any, Dict, Tuple

from ariadne import graphql_sync
from ariadne.explorer import ExplorerGraphiQL
from flask import Blueprint, current_app, jsonify, request

from app.api.schema import format_error, schema
from app.middleware.monitoring import track_graphql_request


graphql_blueprint = Blueprint("graphql", __name__)
_logger = logging.getLogger(__name__)

_explorer_html = ExplorerGraphiQL(title="Flight Search API").html(None)
_OPERATION_PATTERN = re.compile(r"^\s*(query|mutation|subscription)\b")


def _operation_type(payload: Dict[str, Any]) -> str:
    """Best-effort operation type for metrics labels."""
    document = payload.get("query") if isinstance(payload, dict) else None
    if not isinstance(document, str):
        return "invalid"
    match = _OPERATION_PATTERN.match(document)
    return match.group(1) if match else "query"


@graphql_blueprint.route("/graphql", methods=["GET"])
def graphql_explorer():
    """Serve the GraphiQL explorer."""
    return _explorer_html, 200


@graphql_blueprint.route("/graphql", methods=["POST"])
@track_graphql_request
def graphql_server() -> Tuple[Any, int, str]:
    """
    Execute a GraphQL query or mutation.
    
    Returns:
        Tuple of (response, status_code, operation type)
    """
    payload = request.get_json(silent=True)
    operation = _operation_type(payload)
    
    if payload is None:
        return jsonify({"errors": [{"message": "Request body must be a JSON object"}]}), 400, operation
    
    container = current_app.config.get("service_container")
    if not container:
        _logger.error("Service container not available in app.config")
        return jsonify({"errors": [{"message": "Service not available"}]}), 503, operation
    
    success, result = graphql_sync(
        schema,
        payload,
        context_value={"request": request, "container": container},
        debug=current_app.debug,
        error_formatter=format_error,
    )
    
    if result.get("errors"):
        _logger.info(f"GraphQL {operation} completed with {len(result['errors'])} error(s)")
    
    return jsonify(result), (200 if success else 400), operation
