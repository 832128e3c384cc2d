"""API routes for the Message Board application."""

from __future__ import annotations

from typing import Any, Dict, Tuple

from flask import Blueprint, current_app, jsonify, request

from ..services.messages import REQUIRED_FIELDS_MESSAGE, MessageStore, MissingFieldError

# Create API blueprint
api_bp = Blueprint("api", __name__)

# Constants
INVALID_JSON_MESSAGE = "Неверный JSON"
NOT_FOUND_MESSAGE = "Ресурс не найден"
METHOD_NOT_ALLOWED_MESSAGE = "Метод не поддерживается"
DEFAULT_ERROR_MESSAGE = "Внутренняя ошибка сервера"


def _get_message_store() -> MessageStore:
    """Get the message store from Flask app extensions.

    Raises:
        RuntimeError: If the store is not configured
    """
    store = current_app.extensions.get("message_store")
    if store is None:
        current_app.logger.error("Message store not found in app extensions")
        raise RuntimeError("Message store not configured")
    return store


def _create_error_response(message: str, status_code: int = 500) -> Tuple[Dict[str, str], int]:
    """Create standardized error response as (json_dict, status_code)."""
    return {"error": message}, status_code


def _validate_message_payload(payload: Dict[str, Any]) -> str | None:
    """Return an error message if ``text`` or ``senderName`` is missing or empty."""
    for field in ("text", "senderName"):
        value = payload.get(field)
        if not isinstance(value, str) or value == "":
            return REQUIRED_FIELDS_MESSAGE
    return None


@api_bp.route("/messages", methods=["GET"])
def list_messages():
    """List every stored message in insertion order.

    Returns:
        JSON array of messages (empty array for an empty store)
    """
    try:
        store = _get_message_store()
        return jsonify(store.list()), 200

    except RuntimeError as e:
        current_app.logger.error(f"Configuration error in list_messages: {e}")
        body, status = _create_error_response(DEFAULT_ERROR_MESSAGE)
        return jsonify(body), status


@api_bp.route("/messages", methods=["POST"])
def create_message():
    """Create a new message.

    Request Body:
        JSON object with 'text' and 'senderName' string fields

    Returns:
        201 with the created message, or 400 with an error message
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        current_app.logger.warning("Rejected message: body is not a JSON object")
        body, status = _create_error_response(INVALID_JSON_MESSAGE, 400)
        return jsonify(body), status

    error_msg = _validate_message_payload(payload)
    if error_msg:
        current_app.logger.warning(f"Rejected message: {error_msg}")
        body, status = _create_error_response(error_msg, 400)
        return jsonify(body), status

    try:
        store = _get_message_store()
        message = store.add(payload["text"], payload["senderName"])

    except MissingFieldError as e:
        body, status = _create_error_response(str(e), 400)
        return jsonify(body), status
    except RuntimeError as e:
        current_app.logger.error(f"Configuration error in create_message: {e}")
        body, status = _create_error_response(DEFAULT_ERROR_MESSAGE)
        return jsonify(body), status

    current_app.logger.info(f"Message {message['id']} created by {message['senderName']}")
    return jsonify(message), 201


@api_bp.app_errorhandler(404)
def api_not_found(error):
    """Handle 404 errors."""
    return jsonify({"error": NOT_FOUND_MESSAGE}), 404


@api_bp.app_errorhandler(405)
def method_not_allowed(error):
    """Handle 405 errors, keeping the Allow header."""
    headers = {}
    valid_methods = getattr(error, "valid_methods", None)
    if valid_methods:
        headers["Allow"] = ", ".join(valid_methods)
    return jsonify({"error": METHOD_NOT_ALLOWED_MESSAGE}), 405, headers


@api_bp.app_errorhandler(500)
def api_internal_error(error):
    """Handle 500 errors."""
    current_app.logger.error(f"API internal server error: {getattr(error, 'original_exception', error)}")
    return jsonify({"error": DEFAULT_ERROR_MESSAGE}), 500
