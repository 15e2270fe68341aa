"""Health check routes."""

from datetime import datetime, timezone
import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from thirdlogin.config import Settings
from thirdlogin.domain.error import StoreUnavailableError
from thirdlogin.domain.repository import KeyValueStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"], route_class=DishkaRoute)

# Never written; reading it only proves the cache answers
PROBE_KEY = "thirdlogin:health"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy", or "degraded" when handshakes cannot be stored
    timestamp: datetime
    version: str
    git_sha: str
    identity_provider: str
    handoff_store: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    store: FromDishka[KeyValueStore],
) -> HealthResponse:
    """Report liveness and whether the handshake store is reachable.

    Returns:
        Health status, "degraded" while logins cannot complete
    """
    try:
        await store.get(PROBE_KEY)
        store_ok = True
    except StoreUnavailableError as e:
        logger.warning(f"Health check: handoff store unavailable: {e}")
        store_ok = False

    return HealthResponse(
        status="healthy" if store_ok else "degraded",
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
        git_sha=settings.git_sha,
        identity_provider=settings.auth.provider,
        handoff_store=store_ok,
    )
