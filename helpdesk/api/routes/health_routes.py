# helpdesk/api/routes/health_routes.py
from flask import Blueprint, current_app, jsonify
from sqlalchemy import select

from helpdesk.infrastructure.database.session import db_session, get_engine

bp_health = Blueprint("health", __name__, url_prefix="/health")


@bp_health.get("")
def liveness():
    settings = current_app.extensions["settings"]
    return jsonify({"status": "ok", "environment": settings.environment}), 200


@bp_health.get("/db")
def store_readiness():
    # an unreachable store raises StoreUnavailableError, answered as 503 + retryable
    with db_session() as session:
        session.scalar(select(1))
    return jsonify({"db": "ok", "dialect": get_engine().dialect.name}), 200
