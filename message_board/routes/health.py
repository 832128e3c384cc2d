from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    store = current_app.extensions.get("message_store")
    return jsonify({
        "status": "healthy",
        "messages": len(store) if store is not None else 0,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })
