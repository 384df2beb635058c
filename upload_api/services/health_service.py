# upload_api/services/health_service.py
from __future__ import annotations

import logging
import platform
import sys
import time
from datetime import datetime, timezone
from typing import Any, Callable, TypeVar

import psutil

logger = logging.getLogger(__name__)

T = TypeVar("T")

MB = 1024 * 1024


def utc_timestamp() -> str:
    # mesmo formato do Date.toISOString(): milissegundos + "Z"
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _best_effort(metric: str, read: Callable[[], T], fallback: T) -> T:
    try:
        return read()
    except Exception as exc:  # qualquer falha vira placeholder
        logger.warning("Health metric '%s' unavailable: %s", metric, exc)
        return fallback


def _process_uptime() -> float:
    return time.time() - psutil.Process().create_time()


def _process_memory() -> dict[str, int]:
    info = psutil.Process().memory_info()
    return {"rss": info.rss, "vms": info.vms}


def _load_average() -> list[float]:
    return [round(v, 2) for v in psutil.getloadavg()]


def _format_mb(value: float) -> str:
    return f"{value / MB:.2f} MB"


class HealthService:
    def ping(self) -> dict[str, Any]:
        return {
            "message": "pong",
            "server": "alive and well",
            "timestamp": utc_timestamp(),
        }

    def report(self) -> dict[str, Any]:
        uptime = _best_effort("uptime", _process_uptime, 0.0)
        free = _best_effort("free_memory", lambda: psutil.virtual_memory().available, 0)
        total = _best_effort("total_memory", lambda: psutil.virtual_memory().total, 0)

        return {
            "status": "healthy",
            "uptime": f"{uptime:.2f}s",
            "memory": _best_effort("memory", _process_memory, {}),
            "cpu_load": _best_effort("cpu_load", _load_average, [0.0, 0.0, 0.0]),
            "free_memory": _format_mb(free),
            "total_memory": _format_mb(total),
            "platform": sys.platform,
            "runtime_version": platform.python_version(),
            "timestamp": utc_timestamp(),
        }
