from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.v1.clinics import router as clinics_router
from app.api.v1.health import router as health_router
from app.api.v1.logs import router as logs_router
from app.api.v1.services import router as services_router
from app.core.config import settings
from app.core.db import SessionLocal, create_schema
from app.core.logging import configure_logging
from app.models.system_log import LogPriority
from app.services.activity_log import activity_log
from app.services.catalog import seed_catalog


async def init_db() -> None:
    await create_schema()
    if settings.SEED_ON_STARTUP:
        async with SessionLocal() as db:
            await seed_catalog(db)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    await init_db()
    await activity_log.append(f"{settings.PROJECT_NAME} started", origin=("Server", "startup"))
    yield
    await activity_log.append("Server shutting down", LogPriority.Medium, origin=("Server", "shutdown"))


app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(services_router)
app.include_router(clinics_router)
app.include_router(logs_router)
app.include_router(health_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
