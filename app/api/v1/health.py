from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {
        "status": "OK",
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "version": settings.VERSION,
    }
