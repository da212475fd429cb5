from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from design_copier import __version__
from design_copier.errors import ErrorCode, ToolError

api_bp = Blueprint("api", __name__)

_STATUS_BY_CODE = {
    ErrorCode.INVALID_PARAMS: 400,
    ErrorCode.METHOD_NOT_FOUND: 404,
    ErrorCode.INTERNAL_ERROR: 500,
}


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


def _error(code: ErrorCode, message: str):
    return jsonify({"error": {"code": code.value, "message": message}}), _STATUS_BY_CODE[code]


@api_bp.route("/health")
def health():
    return jsonify({"status": "ok", "version": __version__})


@api_bp.route("/tools")
def list_tools():
    """List the available tools with their input schemas."""
    registry = current_app.extensions["tool_registry"]
    return jsonify({"tools": [d.to_dict() for d in registry.definitions()]})


@api_bp.route("/tools/<name>", methods=["OPTIONS"])
def tool_preflight(name: str):
    """Handle CORS preflight for tool calls."""
    return "", 204


@api_bp.route("/tools/<name>", methods=["POST"])
def call_tool(name: str):
    """Invoke a tool with a JSON object of arguments."""
    arguments = request.get_json(silent=True)
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        return _error(ErrorCode.INVALID_PARAMS, "arguments must be a JSON object")

    registry = current_app.extensions["tool_registry"]
    try:
        text = registry.call(name, arguments)
    except ToolError as exc:
        return _error(exc.code, str(exc))
    return jsonify({"content": [{"type": "text", "text": text}]})
