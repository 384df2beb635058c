import re

import psutil

from upload_api.services import health_service

HEALTH_FIELDS = {
    "status",
    "uptime",
    "memory",
    "cpuLoad",
    "freeMemory",
    "totalMemory",
    "platform",
    "runtimeVersion",
    "timestamp",
}

ISO_Z = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def test_root_returns_plain_text(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.mimetype == "text/plain"
    assert resp.get_data(as_text=True) == "Backend is running successfully!"


def test_ping(client):
    body = client.get("/ping").get_json()

    assert body["message"] == "pong"
    assert body["server"] == "alive and well"
    assert ISO_Z.match(body["timestamp"])


def test_health_reports_all_fields(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.get_json()
    assert set(body) == HEALTH_FIELDS
    assert body["status"] == "healthy"
    assert body["uptime"].endswith("s")
    assert body["freeMemory"].endswith(" MB")
    assert len(body["cpuLoad"]) == 3
    assert ISO_Z.match(body["timestamp"])


def test_health_degrades_when_metrics_fail(client, monkeypatch):
    def boom(*args, **kwargs):
        raise OSError("metrics unavailable")

    def denied(*args, **kwargs):
        raise psutil.AccessDenied()

    monkeypatch.setattr(health_service.psutil, "getloadavg", boom)
    monkeypatch.setattr(health_service.psutil, "virtual_memory", boom)
    monkeypatch.setattr(health_service.psutil, "Process", denied)

    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.get_json()
    assert set(body) == HEALTH_FIELDS
    assert body["uptime"] == "0.00s"
    assert body["memory"] == {}
    assert body["cpuLoad"] == [0.0, 0.0, 0.0]
    assert body["freeMemory"] == "0.00 MB"
    assert body["totalMemory"] == "0.00 MB"


def test_cors_header_present(client):
    resp = client.get("/ping", headers={"Origin": "http://localhost:5173"})

    assert resp.headers.get("Access-Control-Allow-Origin") in ("*", "http://localhost:5173")


def test_health_survives_unexpected_metric_errors(client, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("sensor driver crashed")

    monkeypatch.delattr(health_service.psutil, "getloadavg")
    monkeypatch.setattr(health_service.psutil, "virtual_memory", broken)

    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.get_json()
    assert set(body) == HEALTH_FIELDS
    assert body["cpuLoad"] == [0.0, 0.0, 0.0]
    assert body["freeMemory"] == "0.00 MB"
    assert body["totalMemory"] == "0.00 MB"
