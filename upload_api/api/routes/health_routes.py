from flask import Blueprint, jsonify

from upload_api.api.schemas.health_schema import HealthResponse, PingResponse
from upload_api.services.health_service import HealthService

bp_health = Blueprint("health", __name__)


@bp_health.get("/")
def index():
    return "Backend is running successfully!", 200, {"Content-Type": "text/plain; charset=utf-8"}


@bp_health.get("/ping")
def ping():
    payload = PingResponse(**HealthService().ping()).model_dump()
    return jsonify(payload), 200


@bp_health.get("/health")
def health():
    payload = HealthResponse(**HealthService().report()).model_dump(by_alias=True)
    return jsonify(payload), 200
