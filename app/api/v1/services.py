from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_activity_log
from app.core.db import get_db
from app.core.errors import StoreError
from app.schemas.service import ServiceOut
from app.services import catalog
from app.services.activity_log import ActivityLog

router = APIRouter(prefix="/services", tags=["services"])

ORIGIN = "ServicesAPI"


@router.get("", response_model=list[ServiceOut])
async def list_services(
    db: AsyncSession = Depends(get_db),
    log: ActivityLog = Depends(get_activity_log),
):
    await log.append("Fetching all services", origin=(ORIGIN, "list_services"))
    try:
        return await catalog.list_services(db)
    except SQLAlchemyError as exc:
        raise StoreError("Failed to fetch services", cause=exc, origin=(ORIGIN, "list_services")) from exc
