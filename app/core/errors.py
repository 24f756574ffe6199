"""Error taxonomy shared by the services and the HTTP layer.

Each error knows the status code it maps to and how it is tagged when it is
written to the activity log.
"""
from app.models.system_log import LogPriority, LogType


class DirectoryError(Exception):
    status_code = 500
    priority = LogPriority.High
    log_type = LogType.Error
    public_message = "Internal server error"

    def __init__(self, message: str, *, origin: tuple[str, str] = ("Server", "unknown")):
        super().__init__(message)
        self.message = message
        self.origin = origin

    @property
    def detail(self) -> str:
        return self.message


class ValidationError(DirectoryError):
    """Missing required field, empty service list, malformed postal code..."""

    status_code = 400
    priority = LogPriority.Medium
    log_type = LogType.Warning

    def __init__(self, message: str, *, errors: dict[str, str] | None = None,
                 origin: tuple[str, str] = ("Server", "unknown")):
        super().__init__(message, origin=origin)
        self.errors = errors or {}


class NotFoundError(DirectoryError):
    status_code = 404
    priority = LogPriority.Low
    log_type = LogType.Warning


class StoreError(DirectoryError):
    """Query or transaction failure. The message is never sent to the caller."""

    def __init__(self, public_message: str, *, cause: BaseException | None = None,
                 origin: tuple[str, str] = ("Server", "unknown")):
        internal = f"{public_message}: {cause}" if cause is not None else public_message
        super().__init__(internal, origin=origin)
        self.public_message = public_message

    @property
    def detail(self) -> str:
        return self.public_message
