from datetime import datetime

from app.models.system_log import LogPriority, LogType
from app.schemas.common import CamelModel

class LogEntryOut(CamelModel):
    id: str
    message: str
    priority: LogPriority
    type: LogType
    timestamp: datetime
    project: str
    class_name: str
    method: str
