"""Append-only activity log backed by the ``system_logs`` table."""
import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import settings
from app.core.db import SessionLocal
from app.models.system_log import LogPriority, LogType, SystemLog

logger = logging.getLogger(__name__)

_LEVELS = {
    LogType.Info: logging.INFO,
    LogType.Warning: logging.WARNING,
    LogType.Error: logging.ERROR,
}


class ActivityLog:
    """Writes go through their own session, so an entry survives the rollback
    of the request it describes."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] = SessionLocal,
                 project: str | None = None):
        self.session_factory = session_factory
        self.project = project or settings.PROJECT_TAG

    async def append(
        self,
        message: str,
        priority: LogPriority = LogPriority.Low,
        type: LogType = LogType.Info,
        origin: tuple[str, str] = ("Server", "unknown"),
    ) -> None:
        class_name, method = origin
        logger.log(_LEVELS[type], "[%s] %s.%s: %s", type.value, class_name, method, message)

        try:
            async with self.session_factory() as db:
                db.add(SystemLog(
                    message=message,
                    priority=priority,
                    type=type,
                    project=self.project,
                    class_name=class_name,
                    method=method,
                ))
                await db.commit()
        except SQLAlchemyError as exc:
            # nunca propagar: loguear no puede romper la operación
            logger.warning("could not persist activity log entry: %s", exc)

    async def list(
        self,
        db: AsyncSession,
        type: Optional[LogType] = None,
        priority: Optional[LogPriority] = None,
        limit: int = 100,
    ) -> list[SystemLog]:
        q = select(SystemLog)
        if type is not None:
            q = q.where(SystemLog.type == type)
        if priority is not None:
            q = q.where(SystemLog.priority == priority)
        q = q.order_by(SystemLog.timestamp.desc()).limit(limit)
        return list((await db.execute(q)).scalars().all())

    async def clear(self, db: AsyncSession) -> int:
        res = await db.execute(delete(SystemLog))
        await db.commit()
        return res.rowcount or 0


activity_log = ActivityLog()
