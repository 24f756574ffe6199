from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.deps import get_activity_log
from app.core.errors import DirectoryError, StoreError, ValidationError
from app.services.activity_log import ActivityLog

_LOC_SOURCES = ("body", "query", "path")


def _activity_log(request: Request) -> ActivityLog:
    # respeta app.dependency_overrides para que los tests vean lo mismo
    provider = request.app.dependency_overrides.get(get_activity_log, get_activity_log)
    return provider()


async def _handle_directory_error(request: Request, exc: DirectoryError) -> JSONResponse:
    await _activity_log(request).append(exc.message, exc.priority, exc.log_type, origin=exc.origin)
    body: dict = {"detail": exc.detail}
    if isinstance(exc, ValidationError) and exc.errors:
        body["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=body)


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {
        ".".join(str(p) for p in err.get("loc", ()) if p not in _LOC_SOURCES) or "request": err.get("msg", "invalid")
        for err in exc.errors()
    }
    wrapped = ValidationError(
        f"Invalid request to {request.url.path}: {errors}",
        errors=errors,
        origin=("Server", f"{request.method} {request.url.path}"),
    )
    await _activity_log(request).append(wrapped.message, wrapped.priority, wrapped.log_type, origin=wrapped.origin)
    return JSONResponse(status_code=400, content={"detail": "Invalid request", "errors": errors})


async def _handle_sqlalchemy_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    wrapped = StoreError("Database error", cause=exc, origin=("Server", f"{request.method} {request.url.path}"))
    return await _handle_directory_error(request, wrapped)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DirectoryError, _handle_directory_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(SQLAlchemyError, _handle_sqlalchemy_error)
