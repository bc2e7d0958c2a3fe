"""System health endpoint — checks connectivity to the database."""

import logging
import time

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text

from app.api.deps import Session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/system", tags=["system"])


class ServiceHealth(BaseModel):
    status: str  # "ok" or "error"
    detail: str | None = None
    version: str | None = None
    latency_ms: int | None = None


class HealthResponse(BaseModel):
    status: str
    database: ServiceHealth


@router.get("/health", response_model=HealthResponse)
async def system_health(session: Session) -> HealthResponse:
    """Check connectivity to the database."""
    db = await _check_database(session)
    return HealthResponse(status="ok" if db.status == "ok" else "degraded", database=db)


async def _check_database(session) -> ServiceHealth:
    try:
        t0 = time.monotonic()
        await session.execute(text("SELECT 1"))
        latency = int((time.monotonic() - t0) * 1000)
    except Exception as exc:
        logger.warning("Database health check failed: %s", exc)
        return ServiceHealth(status="error", detail=str(exc)[:200])
    return ServiceHealth(status="ok", version=session.bind.dialect.name, latency_ms=latency)
