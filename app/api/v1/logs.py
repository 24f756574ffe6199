import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_activity_log
from app.core.config import settings
from app.core.db import get_db
from app.core.errors import StoreError
from app.models.system_log import LogPriority, LogType
from app.schemas.log import LogEntryOut
from app.services.activity_log import ActivityLog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/logs", tags=["logs"])

ORIGIN = "LogsAPI"


@router.get("", response_model=list[LogEntryOut])
async def list_logs(
    type: LogType | None = Query(None),
    priority: LogPriority | None = Query(None),
    limit: int = Query(settings.LOG_LIST_DEFAULT_LIMIT, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
    log: ActivityLog = Depends(get_activity_log),
):
    try:
        return await log.list(db, type=type, priority=priority, limit=limit)
    except SQLAlchemyError as exc:
        raise StoreError("Failed to fetch logs", cause=exc, origin=(ORIGIN, "list_logs")) from exc


@router.delete("")
async def clear_logs(
    db: AsyncSession = Depends(get_db),
    log: ActivityLog = Depends(get_activity_log),
):
    try:
        removed = await log.clear(db)
    except SQLAlchemyError as exc:
        raise StoreError("Failed to clear logs", cause=exc, origin=(ORIGIN, "clear_logs")) from exc
    # solo al logger de Python: la tabla tiene que quedar vacía
    logger.info("cleared %d activity log entries", removed)
    return {"message": "Logs cleared successfully", "removed": removed}
