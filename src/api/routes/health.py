"""Health check endpoint.

Reports network reachability (as last seen by the session) and whether the
favorites storage backend answers. Any unhealthy component degrades the
whole check to 503.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_session
from services.dictionary_session import DictionarySession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


def _component(healthy: bool, message: str) -> dict[str, str]:
    return {"status": "healthy" if healthy else "unhealthy", "message": message}


async def _storage_component(session: DictionarySession) -> dict[str, str]:
    try:
        reachable = await session.favorites_store.store.ping()
    except Exception as e:
        logger.warning("Storage health check failed", extra={"error": str(e)[:200]})
        return _component(False, f"Storage error: {str(e)[:200]}")
    if reachable:
        return _component(True, "Storage reachable")
    return _component(False, "Storage not reachable or not configured")


@router.get("")
async def health(session: DictionarySession = Depends(get_session)):
    """Health check with per-component status."""
    components = {
        "network": _component(
            session.is_online,
            "Online" if session.is_online else "No Internet connection",
        ),
        "storage": await _storage_component(session),
    }
    healthy = all(c["status"] == "healthy" for c in components.values())

    return JSONResponse(
        content={
            "status": "healthy" if healthy else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "services": components,
        },
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
