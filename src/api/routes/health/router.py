"""Endpoints de health check.

- GET /health: liveness, sem chamadas externas
- GET /ready: Bot API acessível (getMe) e estado do webhook registrado
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.routes.bale.webhook_tasks import active_task_count
from app.bootstrap import SERVICE_NAME

logger = logging.getLogger(__name__)

router = APIRouter()

_CHECK_TIMEOUT_SECONDS = 5.0


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de uma checagem; só `failed` tira o serviço de ready."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "latency_ms": self.latency_ms, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: getMe com o token configurado.

    O webhook fora do lugar (URL diferente da configurada) só degrada o
    resultado; o /bale/execute continua utilizável.
    """
    state = request.app.state
    bale_check = await _check_bale_api(getattr(state, "bale_client", None))
    checks = {"bale_api": bale_check}

    registration = getattr(state, "webhook_registration", None)
    if registration is not None:
        checks["webhook"] = await _check_webhook(registration)

    ready = all(check.status != "failed" for check in checks.values())
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {name: check.as_dict() for name, check in checks.items()},
        "background_tasks": active_task_count(),
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_bale_api(bale_client: Any | None) -> DependencyCheck:
    if bale_client is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(bale_client.call("getMe"), timeout=_CHECK_TIMEOUT_SECONDS)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_bale_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    return DependencyCheck(status="ok", latency_ms=_elapsed_ms(started_at))


async def _check_webhook(registration: Any) -> DependencyCheck:
    started_at = time.perf_counter()
    try:
        registered = await asyncio.wait_for(
            registration.check_exists(), timeout=_CHECK_TIMEOUT_SECONDS
        )
    except TimeoutError:
        return DependencyCheck(status="degraded", error="timeout")
    except Exception as exc:
        logger.warning("readiness_webhook_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="degraded", error=type(exc).__name__)
    if not registered:
        return DependencyCheck(status="degraded", error="webhook_not_registered")
    return DependencyCheck(status="ok", latency_ms=_elapsed_ms(started_at))


def _elapsed_ms(started_at: float) -> float:
    return round((time.perf_counter() - started_at) * 1000, 2)
