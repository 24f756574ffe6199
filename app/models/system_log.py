import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Text, Enum, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from app.core.db import Base

class LogPriority(str, enum.Enum):
    Critical = "Critical"
    High = "High"
    Medium = "Medium"
    Low = "Low"

class LogType(str, enum.Enum):
    Info = "Info"
    Warning = "Warning"
    Error = "Error"

class SystemLog(Base):
    __tablename__ = "system_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    message: Mapped[str] = mapped_column(Text)
    priority: Mapped[LogPriority] = mapped_column(Enum(LogPriority, name="log_priority"), index=True)
    type: Mapped[LogType] = mapped_column(Enum(LogType, name="log_type"), index=True)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), index=True, default=lambda: datetime.now(tz=timezone.utc)
    )
    project: Mapped[str] = mapped_column(String(64))
    class_name: Mapped[str] = mapped_column(String(128))
    method: Mapped[str] = mapped_column(String(128))
